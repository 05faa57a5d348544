"""End-to-end optimization of a build output directory.

``optimize_directory`` is the primary entry point: it discovers candidate
files, consults the compression cache for each one, runs the matching
compressor on a miss and returns a :class:`BuildResult` for the run.
"""

from __future__ import annotations

import concurrent.futures
import logging
import time
from dataclasses import replace
from pathlib import Path

from assetpress.cache import CompressionCacheManager, content_hash
from assetpress.compress import compressor_for, settings_for
from assetpress.config import AssetpressConfig, load_config
from assetpress.exceptions import CompressionError, ConfigError
from assetpress.model import BuildResult, FileOutcome
from assetpress.optimizer.discovery import discover_assets

logger = logging.getLogger(__name__)


def optimize_directory(
    *,
    root: Path,
    config: AssetpressConfig | None = None,
    config_path: Path | None = None,
    cache_dir: Path | None = None,
    no_cache: bool = False,
    workers: int | None = None,
    max_file_mb: int | None = None,
) -> BuildResult:
    """Compress every supported file under ``root`` in place."""
    started_at = time.perf_counter()
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Build output root does not exist or is not a directory: {root}")

    if config is None:
        config = load_config(root, config_path)
    if workers is not None:
        if workers <= 0:
            raise ConfigError("workers must be a positive integer")
        config = replace(config, workers=workers)
    if max_file_mb is not None:
        if max_file_mb <= 0:
            raise ConfigError("max_file_mb must be a positive integer")
        config = replace(config, max_file_mb=max_file_mb)

    cache: CompressionCacheManager | None = None
    resolved_cache_dir = cache_dir.resolve() if cache_dir is not None else config.cache.resolve_dir()
    if not no_cache and config.cache.enabled:
        cache = CompressionCacheManager(resolved_cache_dir)
        cache.initialize()

    candidates = discover_assets(
        root,
        max_file_mb=config.max_file_mb,
        exclude_dirs=config.exclude_dirs,
        skip_paths=(resolved_cache_dir,),
    )
    logger.info("Optimizing %d candidate files under %s", len(candidates), root)

    outcomes: list[FileOutcome] = []
    warnings: list[str] = []
    with concurrent.futures.ThreadPoolExecutor(max_workers=config.workers) as executor:
        futures = [executor.submit(_process_file, path, root, config, cache) for path in candidates]
        try:
            for future in concurrent.futures.as_completed(futures):
                outcome = future.result()
                outcomes.append(outcome)
                if outcome.status == "failed":
                    warnings.append(f"{outcome.path}: {outcome.reason}")
        except BaseException:
            for pending in futures:
                pending.cancel()
            raise

    result = BuildResult.from_outcomes(
        outcomes,
        duration_seconds=time.perf_counter() - started_at,
        warnings=tuple(sorted(warnings)),
        cache_enabled=cache is not None,
    )
    logger.info(
        "Processed %d, cached %d, skipped %d, failed %d; %d -> %d bytes",
        result.processed,
        result.cache_hits,
        result.skipped,
        result.failed,
        result.original_bytes,
        result.compressed_bytes,
    )
    return result


def _process_file(
    path: Path,
    root: Path,
    config: AssetpressConfig,
    cache: CompressionCacheManager | None,
) -> FileOutcome:
    """Serve one candidate from the cache or compress it."""
    cache_key = path.relative_to(root).as_posix()

    compressor = compressor_for(path)
    if compressor is None:
        logger.debug("Skipping %s: unsupported file type", cache_key)
        return FileOutcome(cache_key, "skipped", 0, 0, "unsupported file type")

    try:
        original = path.read_bytes()
    except OSError as exc:
        logger.warning("Failed to read %s (%s)", path, exc)
        return FileOutcome(cache_key, "failed", 0, 0, f"read error: {exc}")

    settings = settings_for(compressor, path, original, config)

    if cache is not None:
        entry = cache.get_cached_file(cache_key, content_hash(original), settings)
        if entry is not None:
            try:
                cached = Path(entry.compressed_path).read_bytes()
            except OSError as exc:
                logger.warning("Cached blob for %s became unreadable (%s); recompressing", cache_key, exc)
            else:
                path.write_bytes(cached)
                logger.info("Using cached version for %s", cache_key)
                return FileOutcome(cache_key, "cached", entry.size.original, entry.size.compressed)

    try:
        compressed = compressor.compress(original, path=path, options=settings["options"])
    except CompressionError as exc:
        logger.warning("Failed to compress %s: %s", cache_key, exc)
        return FileOutcome(cache_key, "failed", len(original), len(original), str(exc))

    if len(compressed) >= len(original):
        reason = "compressed size is not smaller than original size"
        logger.info("Skipping %s - %s", cache_key, reason)
        return FileOutcome(cache_key, "skipped", len(original), len(original), reason)

    path.write_bytes(compressed)
    if cache is not None:
        cache.save_to_cache(cache_key, original, compressed, settings)
    logger.info(
        "Processed %s - Original size: %d bytes, New size: %d bytes",
        cache_key,
        len(original),
        len(compressed),
    )
    return FileOutcome(cache_key, "processed", len(original), len(compressed))
