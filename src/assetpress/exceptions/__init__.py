"""Shared exception hierarchy for Assetpress."""

from __future__ import annotations

from .base import AssetpressError
from .cache import CacheError, CacheStateError, CacheStorageError
from .compression import CompressionError
from .config import ConfigError, InvalidationPatternError

__all__ = [
    "AssetpressError",
    "CacheError",
    "CacheStateError",
    "CacheStorageError",
    "CompressionError",
    "ConfigError",
    "InvalidationPatternError",
]
