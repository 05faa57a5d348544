"""Configuration defaults and filenames."""

from __future__ import annotations

from assetpress.constants.formats import DEFAULT_FORMAT_OPTIONS

CONFIG_FILENAME: str = "assetpress.yaml"
DEFAULT_MAX_FILE_MB: int = 50
DEFAULT_WORKERS: int = 8
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (".git",)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {"cache", "workers", "max_file_mb", "exclude_dirs", *DEFAULT_FORMAT_OPTIONS}
)
ALLOWED_CACHE_KEYS: frozenset[str] = frozenset({"enabled", "dir"})
