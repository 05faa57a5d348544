"""Manifest and cache entry data model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from assetpress.constants.cache import MANIFEST_VERSION
from assetpress.types.cache import CacheEntryPayload, ManifestPayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntrySize:
    """Original and compressed byte counts."""

    original: int
    compressed: int


@dataclass(frozen=True)
class CacheEntry:
    """One compressed artifact derived from one original file."""

    source_hash: str
    compressed_path: str
    settings_fingerprint: str
    size: EntrySize
    timestamp: float

    def matches(self, source_hash: str, fingerprint: str) -> bool:
        """Return True when both the source hash and settings fingerprint agree."""
        return self.source_hash == source_hash and self.settings_fingerprint == fingerprint

    def to_dict(self) -> CacheEntryPayload:
        """Serialize the entry to its persisted form."""
        return {
            "source_hash": self.source_hash,
            "compressed_path": self.compressed_path,
            "settings_fingerprint": self.settings_fingerprint,
            "size": {"original": self.size.original, "compressed": self.size.compressed},
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> CacheEntry:
        """Build an entry from its persisted form.

        Raises:
            ValueError: When ``raw`` does not have the persisted entry shape.
        """
        if not isinstance(raw, dict):
            raise ValueError("cache entry must be an object")
        size = raw.get("size")
        if not isinstance(size, dict):
            raise ValueError("cache entry size must be an object")

        source_hash = raw.get("source_hash")
        compressed_path = raw.get("compressed_path")
        fingerprint = raw.get("settings_fingerprint")
        timestamp = raw.get("timestamp")
        original = size.get("original")
        compressed = size.get("compressed")

        if not isinstance(source_hash, str) or not isinstance(fingerprint, str):
            raise ValueError("cache entry hashes must be strings")
        if not isinstance(compressed_path, str) or not compressed_path:
            raise ValueError("cache entry compressed_path must be a non-empty string")
        if isinstance(timestamp, bool) or not isinstance(timestamp, (int, float)):
            raise ValueError("cache entry timestamp must be a number")
        for value in (original, compressed):
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("cache entry sizes must be integers")

        return cls(
            source_hash=source_hash,
            compressed_path=compressed_path,
            settings_fingerprint=fingerprint,
            size=EntrySize(original=original, compressed=compressed),
            timestamp=float(timestamp),
        )


@dataclass
class Manifest:
    """Mapping of original file path to cache entry, plus schema version."""

    version: str = MANIFEST_VERSION
    entries: dict[str, CacheEntry] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Manifest:
        """Return a fresh manifest at the current schema version."""
        return cls(version=MANIFEST_VERSION, entries={})

    def to_dict(self) -> ManifestPayload:
        """Serialize the manifest to its persisted form."""
        return {
            "version": self.version,
            "entries": {path: entry.to_dict() for path, entry in self.entries.items()},
        }

    @classmethod
    def from_payload(cls, payload: object) -> Manifest:
        """Build a manifest from parsed JSON.

        Malformed entries are dropped since they could never validate.

        Raises:
            ValueError: When the payload is not an object, has a foreign
                version, or carries a non-object ``entries`` field.
        """
        if not isinstance(payload, dict):
            raise ValueError("manifest must be a JSON object")

        version = payload.get("version")
        if version != MANIFEST_VERSION:
            raise ValueError(f"unsupported manifest version {version!r} (expected {MANIFEST_VERSION!r})")

        raw_entries = payload.get("entries")
        if not isinstance(raw_entries, dict):
            raise ValueError("manifest entries must be an object")

        entries: dict[str, CacheEntry] = {}
        for key, value in raw_entries.items():
            try:
                entries[key] = CacheEntry.from_dict(value)
            except ValueError as exc:
                logger.debug("Dropping malformed cache entry %s: %s", key, exc)
        return cls(version=MANIFEST_VERSION, entries=entries)
