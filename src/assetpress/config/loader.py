"""Config loading and normalization for Assetpress builds."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from assetpress.config.model import AssetpressConfig, CacheConfig
from assetpress.constants.cache import DEFAULT_CACHE_DIR
from assetpress.constants.config import (
    ALLOWED_CACHE_KEYS,
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_EXCLUDE_DIRS,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_WORKERS,
)
from assetpress.constants.formats import DEFAULT_FORMAT_OPTIONS
from assetpress.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> AssetpressConfig:
    """Load and validate optimizer config from ``assetpress.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return AssetpressConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    _reject_unknown_keys(raw, ALLOWED_CONFIG_KEYS, context="config")

    cache_raw = raw.get("cache", {})
    if cache_raw is None:
        cache_raw = {}
    if not isinstance(cache_raw, dict):
        raise ConfigError("cache must be a mapping")
    _reject_unknown_keys(cache_raw, ALLOWED_CACHE_KEYS, context="cache")

    cache_enabled = cache_raw.get("enabled", True)
    if not isinstance(cache_enabled, bool):
        raise ConfigError("cache.enabled must be a boolean")
    cache_dir = cache_raw.get("dir", DEFAULT_CACHE_DIR)
    if not isinstance(cache_dir, str) or not cache_dir.strip():
        raise ConfigError("cache.dir must be a non-empty string")

    workers = _positive_int(raw.get("workers", DEFAULT_WORKERS), "workers")
    max_file_mb = _positive_int(raw.get("max_file_mb", DEFAULT_MAX_FILE_MB), "max_file_mb")

    return AssetpressConfig(
        cache=CacheConfig(enabled=cache_enabled, dir=cache_dir),
        workers=workers,
        max_file_mb=max_file_mb,
        exclude_dirs=tuple(_ensure_string_list(raw.get("exclude_dirs", list(DEFAULT_EXCLUDE_DIRS)), "exclude_dirs")),
        format_options=_merge_format_options(raw),
    )


def _positive_int(value: Any, key_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str]:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _merge_format_options(raw: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Overlay per-format option blocks from the config onto the defaults, key by key."""
    merged: dict[str, dict[str, Any]] = {}
    for block, defaults in DEFAULT_FORMAT_OPTIONS.items():
        options = dict(defaults)
        override = raw.get(block)
        if override is not None:
            if not isinstance(override, dict) or not all(isinstance(key, str) for key in override):
                raise ConfigError(f"{block} must be a mapping of option names to values")
            options.update(override)
        merged[block] = options
    return merged


def _reject_unknown_keys(raw: dict[Any, Any], allowed: frozenset[str], *, context: str) -> None:
    for key in raw:
        if key in allowed:
            continue
        suggestion = _suggest_key(str(key), allowed)
        hint = f" (did you mean '{suggestion}'?)" if suggestion else ""
        raise ConfigError(f"Unknown {context} key '{key}'{hint}")


def _suggest_key(key: str, allowed: frozenset[str]) -> str | None:
    """Return the closest allowed key for a typo, if any."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    return matches[0] if matches else None
