"""Typed manifest payload structures."""

from __future__ import annotations

from typing import TypedDict


class EntrySizePayload(TypedDict):
    """Original and compressed byte counts for one cached artifact."""

    original: int
    compressed: int


class CacheEntryPayload(TypedDict):
    """Persisted form of a single cache entry."""

    source_hash: str
    compressed_path: str
    settings_fingerprint: str
    size: EntrySizePayload
    timestamp: float


class ManifestPayload(TypedDict):
    """Top-level manifest payload persisted to ``manifest.json``."""

    version: str
    entries: dict[str, CacheEntryPayload]
