"""Config data model for Assetpress builds."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from assetpress.constants.cache import DEFAULT_CACHE_DIR
from assetpress.constants.config import DEFAULT_EXCLUDE_DIRS, DEFAULT_MAX_FILE_MB, DEFAULT_WORKERS
from assetpress.constants.formats import DEFAULT_FORMAT_OPTIONS


def _default_format_options() -> dict[str, dict[str, Any]]:
    return {block: dict(options) for block, options in DEFAULT_FORMAT_OPTIONS.items()}


@dataclass(frozen=True)
class CacheConfig:
    """Compression cache toggles."""

    enabled: bool = True
    dir: str = DEFAULT_CACHE_DIR

    def resolve_dir(self, base: Path | None = None) -> Path:
        """Return the absolute cache directory, resolving relative paths against ``base``."""
        path = Path(self.dir).expanduser()
        if not path.is_absolute():
            path = (base or Path.cwd()) / path
        return path.resolve()


@dataclass(frozen=True)
class AssetpressConfig:
    """Resolved optimizer config."""

    cache: CacheConfig = CacheConfig()
    workers: int = DEFAULT_WORKERS
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    exclude_dirs: tuple[str, ...] = DEFAULT_EXCLUDE_DIRS
    format_options: dict[str, dict[str, Any]] = field(default_factory=_default_format_options)
