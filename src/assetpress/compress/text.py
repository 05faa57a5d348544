"""Helpers shared by text-based compressors."""

from __future__ import annotations

from pathlib import Path

from assetpress.exceptions import CompressionError


def decode_text(data: bytes, path: Path) -> str:
    """Decode UTF-8 source text, raising CompressionError for binary input."""
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise CompressionError(f"{path} is not valid UTF-8: {exc}") from exc
