"""Codec-related exceptions."""

from __future__ import annotations

from assetpress.exceptions.base import AssetpressError


class CompressionError(AssetpressError):
    """Raised when a format compressor cannot process a file."""
