"""Compression cache manager owning one cache directory.

The manager is the only component that touches cache state on disk:

* ``manifest.json`` maps original file paths to :class:`CacheEntry` records.
* ``{source_hash}.{ext}`` blobs hold the compressed bytes, shared by every
  original path with the same content and extension.

Every manifest mutation runs under a per-instance lock and is flushed with an
atomic rename, so concurrent per-file tasks cannot drop each other's entries
and a crash never leaves a torn manifest behind. The in-memory manifest is
replaced only after the new one has been written, so a failed write leaves
memory and disk in agreement.
"""

from __future__ import annotations

import logging
import re
import threading
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from assetpress.cache.fingerprint import content_hash, settings_fingerprint
from assetpress.cache.models import CacheEntry, EntrySize, Manifest
from assetpress.constants.cache import (
    BLOB_TEMP_PREFIX,
    BLOB_TEMP_SUFFIX,
    MANIFEST_FILENAME,
    MANIFEST_TEMP_PREFIX,
    MANIFEST_TEMP_SUFFIX,
    MANIFEST_VERSION,
)
from assetpress.exceptions import CacheStateError, CacheStorageError, InvalidationPatternError
from assetpress.io import load_json_file, write_bytes_atomic, write_json_atomic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheStats:
    """Point-in-time summary of a cache directory."""

    cache_dir: Path
    entries: int
    blob_files: int
    blob_bytes: int
    original_bytes: int
    compressed_bytes: int

    def to_dict(self) -> dict[str, object]:
        """Serialize stats for JSON output."""
        return {
            "cache_dir": str(self.cache_dir),
            "entries": self.entries,
            "blob_files": self.blob_files,
            "blob_bytes": self.blob_bytes,
            "original_bytes": self.original_bytes,
            "compressed_bytes": self.compressed_bytes,
        }


class CompressionCacheManager:
    """Load, look up, store and invalidate compression results for one cache directory."""

    def __init__(self, cache_dir: Path) -> None:
        self.cache_dir = cache_dir.resolve()
        self._manifest = Manifest.empty()
        self._lock = threading.RLock()
        self._ready = False

    @property
    def manifest_path(self) -> Path:
        """Location of the persisted manifest."""
        return self.cache_dir / MANIFEST_FILENAME

    @property
    def entries(self) -> dict[str, CacheEntry]:
        """Snapshot of the current manifest entries."""
        self._require_ready("entries")
        with self._lock:
            return dict(self._manifest.entries)

    def initialize(self) -> None:
        """Create the cache directory and load the manifest, resetting it when unusable."""
        logger.debug("Initializing compression cache in %s", self.cache_dir)
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise CacheStorageError(self.cache_dir, "initialize", exc) from exc

        with self._lock:
            manifest, reason = self._read_manifest()
            if manifest is not None:
                self._manifest = manifest
                logger.debug("Loaded manifest with %d entries", len(manifest.entries))
            else:
                logger.debug("Starting with an empty cache manifest: %s", reason)
                self._commit({}, "initialize")
            self._ready = True

    def get_cached_file(self, original_path: str, source_hash: str, settings: Any) -> CacheEntry | None:
        """Return the valid cache entry for ``original_path`` or None on a miss.

        An entry whose blob has been deleted is removed from the manifest.
        """
        self._require_ready("get_cached_file")
        fingerprint = settings_fingerprint(settings)

        with self._lock:
            entry = self._manifest.entries.get(original_path)
            if entry is None:
                logger.debug("Cache miss for %s: no entry", original_path)
                return None
            if not entry.matches(source_hash, fingerprint):
                reason = "source hash changed" if entry.source_hash != source_hash else "settings changed"
                logger.debug("Cache miss for %s: %s", original_path, reason)
                return None

            if Path(entry.compressed_path).is_file():
                logger.debug("Cache hit for %s", original_path)
                return entry

            logger.debug("Cached blob %s is missing, removing entry for %s", entry.compressed_path, original_path)
            entries = dict(self._manifest.entries)
            del entries[original_path]
            self._commit(entries, "get_cached_file")
            return None

    def save_to_cache(
        self,
        original_path: str,
        original_content: bytes,
        compressed_content: bytes,
        settings: Any,
    ) -> CacheEntry:
        """Persist compressed bytes and upsert the manifest entry for ``original_path``."""
        self._require_ready("save_to_cache")
        source_hash = content_hash(original_content)
        blob_path = self.cache_dir / _blob_name(source_hash, original_path)

        # Blobs are content-addressed, so concurrent writers of the same name write identical bytes.
        try:
            write_bytes_atomic(
                path=blob_path,
                content=compressed_content,
                temp_prefix=BLOB_TEMP_PREFIX,
                temp_suffix=BLOB_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise CacheStorageError(self.cache_dir, "save_to_cache", exc) from exc
        logger.debug("Compressed blob saved: %s", blob_path)

        entry = CacheEntry(
            source_hash=source_hash,
            compressed_path=str(blob_path),
            settings_fingerprint=settings_fingerprint(settings),
            size=EntrySize(original=len(original_content), compressed=len(compressed_content)),
            timestamp=time.time(),
        )
        with self._lock:
            self._commit({**self._manifest.entries, original_path: entry}, "save_to_cache")
        logger.debug("Cache entry updated for %s", original_path)
        return entry

    def invalidate_cache(self, pattern: str | None = None) -> int:
        """Remove all entries, or those whose original path matches ``pattern``.

        Returns:
            Number of entries removed.
        """
        self._require_ready("invalidate_cache")
        regex: re.Pattern[str] | None = None
        if pattern:
            try:
                regex = re.compile(pattern)
            except re.error as exc:
                raise InvalidationPatternError(
                    f"Invalid cache invalidation pattern {pattern!r} for {self.cache_dir}: {exc}"
                ) from exc

        with self._lock:
            current = self._manifest.entries
            if regex is None:
                logger.debug("Invalidating entire cache")
                kept: dict[str, CacheEntry] = {}
            else:
                logger.debug("Invalidating cache entries matching %s", pattern)
                kept = {key: entry for key, entry in current.items() if not regex.search(key)}
                for key in current.keys() - kept.keys():
                    logger.debug("Cache entry invalidated: %s", key)
            self._commit(kept, "invalidate_cache")
            return len(current) - len(kept)

    def stats(self) -> CacheStats:
        """Summarize manifest entries and blob files on disk."""
        self._require_ready("stats")
        with self._lock:
            entries = list(self._manifest.entries.values())

        blob_files = 0
        blob_bytes = 0
        try:
            for path in self.cache_dir.iterdir():
                if path.name == MANIFEST_FILENAME or path.name.startswith((BLOB_TEMP_PREFIX, MANIFEST_TEMP_PREFIX)):
                    continue
                if path.is_file():
                    blob_files += 1
                    blob_bytes += path.stat().st_size
        except OSError as exc:
            raise CacheStorageError(self.cache_dir, "stats", exc) from exc

        return CacheStats(
            cache_dir=self.cache_dir,
            entries=len(entries),
            blob_files=blob_files,
            blob_bytes=blob_bytes,
            original_bytes=sum(entry.size.original for entry in entries),
            compressed_bytes=sum(entry.size.compressed for entry in entries),
        )

    def _read_manifest(self) -> tuple[Manifest | None, str]:
        """Return the parsed manifest, or None with the reason it is unusable."""
        path = self.manifest_path
        if not path.is_file():
            return None, f"no manifest at {path}"
        try:
            payload = load_json_file(path)
        except OSError as exc:
            return None, f"manifest unreadable ({exc})"
        except ValueError as exc:
            return None, f"manifest is not valid JSON ({exc})"
        try:
            return Manifest.from_payload(payload), ""
        except ValueError as exc:
            return None, f"manifest rejected ({exc})"

    def _commit(self, entries: dict[str, CacheEntry], operation: str) -> None:
        """Write ``entries`` as the new manifest, adopting it in memory only once it is on disk.

        Caller must hold ``self._lock``.
        """
        manifest = Manifest(version=MANIFEST_VERSION, entries=entries)
        try:
            write_json_atomic(
                path=self.manifest_path,
                payload=manifest.to_dict(),
                temp_prefix=MANIFEST_TEMP_PREFIX,
                temp_suffix=MANIFEST_TEMP_SUFFIX,
            )
        except OSError as exc:
            raise CacheStorageError(self.cache_dir, operation, exc) from exc
        self._manifest = manifest
        logger.debug("Manifest saved")

    def _require_ready(self, operation: str) -> None:
        if not self._ready:
            raise CacheStateError(f"{operation} called before initialize() for cache {self.cache_dir}")


def _blob_name(source_hash: str, original_path: str) -> str:
    """Content-addressed blob filename for an original path."""
    extension = Path(original_path).suffix.lstrip(".")
    return f"{source_hash}.{extension}" if extension else source_hash
