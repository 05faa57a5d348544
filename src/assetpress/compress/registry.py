"""Extension routing from candidate files to compressors and their settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from assetpress.compress.base import Compressor
from assetpress.compress.image import ImageCompressor, detect_image_block
from assetpress.compress.markup import HtmlCompressor
from assetpress.compress.script import ScriptCompressor
from assetpress.compress.style import StyleCompressor
from assetpress.compress.vector import VectorCompressor
from assetpress.config.model import AssetpressConfig
from assetpress.constants.formats import EXTENSION_OPTION_BLOCKS, FORMAT_IMAGE

COMPRESSORS: tuple[Compressor, ...] = (
    ImageCompressor(),
    HtmlCompressor(),
    ScriptCompressor(),
    StyleCompressor(),
    VectorCompressor(),
)


def compressor_for(path: Path) -> Compressor | None:
    """Return the compressor that handles ``path``, or None when unsupported."""
    for compressor in COMPRESSORS:
        if compressor.handles(path):
            return compressor
    return None


def option_block_for(compressor: Compressor, path: Path, data: bytes) -> str:
    """Resolve the config option block for a file.

    Images are keyed by their detected format so a mislabeled extension
    still gets the options of the codec that will actually run.
    """
    if compressor.format_id == FORMAT_IMAGE:
        detected = detect_image_block(data)
        if detected is not None:
            return detected
    return EXTENSION_OPTION_BLOCKS[path.suffix.lower()]


def settings_for(compressor: Compressor, path: Path, data: bytes, config: AssetpressConfig) -> dict[str, Any]:
    """Return the exact settings applied to a file; these key the cache entry."""
    block = option_block_for(compressor, path, data)
    return {
        "format": compressor.format_id,
        "block": block,
        "options": dict(config.format_options.get(block, {})),
    }
