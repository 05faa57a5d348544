"""Raster image recompression via Pillow."""

from __future__ import annotations

import io
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from PIL import Image, UnidentifiedImageError

from assetpress.compress.base import Compressor
from assetpress.constants.formats import FORMAT_IMAGE, IMAGE_EXTENSIONS, PILLOW_FORMAT_BLOCKS
from assetpress.exceptions import CompressionError


class ImageCompressor(Compressor):
    """Re-encode raster images in their own format with size-oriented options.

    ``options`` is the option block for the detected format (``png``,
    ``jpeg`` ...), passed straight to ``Image.save``.
    """

    format_id = FORMAT_IMAGE
    extensions = IMAGE_EXTENSIONS

    def compress(self, data: bytes, *, path: Path, options: Mapping[str, Any]) -> bytes:
        try:
            with Image.open(io.BytesIO(data)) as image:
                image_format = image.format or ""
                if image_format not in PILLOW_FORMAT_BLOCKS:
                    raise CompressionError(f"Unsupported image format {image_format!r} in {path}")
                save_kwargs = dict(options)
                if image_format == "GIF" and getattr(image, "n_frames", 1) > 1:
                    save_kwargs.setdefault("save_all", True)
                if image_format == "JPEG" and image.mode not in ("RGB", "L", "CMYK"):
                    image = image.convert("RGB")
                buffer = io.BytesIO()
                image.save(buffer, format=image_format, **save_kwargs)
        except (UnidentifiedImageError, OSError, ValueError) as exc:
            raise CompressionError(f"Failed to recompress image {path}: {exc}") from exc
        return buffer.getvalue()


def detect_image_block(data: bytes) -> str | None:
    """Return the option block name for the image format of ``data``, if recognized."""
    try:
        with Image.open(io.BytesIO(data)) as image:
            return PILLOW_FORMAT_BLOCKS.get(image.format or "")
    except (UnidentifiedImageError, OSError):
        return None
