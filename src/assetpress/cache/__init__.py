"""Content-addressed compression cache.

The manager owns ``manifest.json`` and the blob files inside one cache
directory; the fingerprint helpers derive the keys it validates against.
"""

from __future__ import annotations

from assetpress.cache.fingerprint import canonicalize_settings, content_hash, settings_fingerprint
from assetpress.cache.manager import CacheStats, CompressionCacheManager
from assetpress.cache.models import CacheEntry, EntrySize, Manifest

__all__ = [
    "CacheEntry",
    "CacheStats",
    "CompressionCacheManager",
    "EntrySize",
    "Manifest",
    "canonicalize_settings",
    "content_hash",
    "settings_fingerprint",
]
