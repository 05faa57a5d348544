"""Constants used by the compression cache and hashing."""

from __future__ import annotations

MANIFEST_VERSION: str = "1"
MANIFEST_FILENAME: str = "manifest.json"
MANIFEST_TEMP_PREFIX: str = ".manifest-"
MANIFEST_TEMP_SUFFIX: str = ".tmp"
BLOB_TEMP_PREFIX: str = ".blob-"
BLOB_TEMP_SUFFIX: str = ".tmp"

DEFAULT_CACHE_DIR: str = ".cache/assetpress"
