"""Compression cache exceptions."""

from __future__ import annotations

from pathlib import Path

from assetpress.exceptions.base import AssetpressError


class CacheError(AssetpressError):
    """Base class for compression cache failures."""


class CacheStateError(CacheError, RuntimeError):
    """Raised when the cache manager is used before ``initialize()``."""


class CacheStorageError(CacheError):
    """Raised when the cache directory cannot be created, read or written."""

    def __init__(self, cache_dir: Path, operation: str, cause: OSError) -> None:
        self.cache_dir = cache_dir
        self.operation = operation
        super().__init__(f"Cache storage failure in {cache_dir} during {operation}: {cause}")
