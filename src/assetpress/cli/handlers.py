"""CLI subcommand handlers for cache maintenance and config validation."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from assetpress.cache import CacheStats, CompressionCacheManager
from assetpress.config import load_config
from assetpress.exceptions import AssetpressError, ConfigError
from assetpress.reporting import render_cache_stats


def handle_validate_config(args: argparse.Namespace) -> int:
    """Load the config and report whether it is valid."""
    try:
        load_config(args.root, args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_cache_clear(args: argparse.Namespace) -> int:
    """Run ``assetpress cache clear``."""
    try:
        manager = _open_cache(args)
        removed = manager.invalidate_cache(args.pattern)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except AssetpressError as exc:
        print(f"Cache error: {exc}", file=sys.stderr)
        return 1

    scope = f"matching {args.pattern!r}" if args.pattern else "in total"
    print(f"Removed {removed} cache entries {scope} from {manager.cache_dir}")
    return 0


def handle_cache_info(args: argparse.Namespace) -> int:
    """Run ``assetpress cache info`` without creating a missing cache."""
    try:
        manager = CompressionCacheManager(_resolve_cache_dir(args))
        if manager.manifest_path.is_file():
            manager.initialize()
            stats = manager.stats()
        else:
            stats = CacheStats(
                cache_dir=manager.cache_dir,
                entries=0,
                blob_files=0,
                blob_bytes=0,
                original_bytes=0,
                compressed_bytes=0,
            )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except AssetpressError as exc:
        print(f"Cache error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(stats.to_dict(), indent=2, sort_keys=True))
    else:
        print(render_cache_stats(stats))
    return 0


def _resolve_cache_dir(args: argparse.Namespace) -> Path:
    config = load_config(args.root, args.config)
    return args.cache_dir.resolve() if args.cache_dir is not None else config.cache.resolve_dir()


def _open_cache(args: argparse.Namespace) -> CompressionCacheManager:
    manager = CompressionCacheManager(_resolve_cache_dir(args))
    manager.initialize()
    return manager
