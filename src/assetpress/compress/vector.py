"""SVG optimization via scour."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any
from xml.parsers.expat import ExpatError

from scour import scour

from assetpress.compress.base import Compressor
from assetpress.compress.text import decode_text
from assetpress.constants.formats import FORMAT_SVG, SVG_EXTENSIONS
from assetpress.exceptions import CompressionError


class VectorCompressor(Compressor):
    """Optimize SVG documents.

    Option keys map onto scour's option attributes (``strip_comments``,
    ``enable_viewboxing`` ...); unknown keys are rejected.
    """

    format_id = FORMAT_SVG
    extensions = SVG_EXTENSIONS

    def compress(self, data: bytes, *, path: Path, options: Mapping[str, Any]) -> bytes:
        source = decode_text(data, path)
        scour_options = scour.sanitizeOptions()
        for key, value in options.items():
            if not hasattr(scour_options, key):
                raise CompressionError(f"Unknown SVG option {key!r}")
            setattr(scour_options, key, value)
        try:
            optimized = scour.scourString(source, scour_options)
        except (ExpatError, ValueError) as exc:
            raise CompressionError(f"Failed to optimize SVG {path}: {exc}") from exc
        return optimized.encode("utf-8")
