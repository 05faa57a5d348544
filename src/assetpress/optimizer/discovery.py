"""Candidate file discovery for build output directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def discover_assets(
    root: Path,
    *,
    max_file_mb: int,
    exclude_dirs: tuple[str, ...] = (),
    skip_paths: tuple[Path, ...] = (),
) -> list[Path]:
    """Walk ``root`` and return candidate files in stable relative-path order.

    Directories named in ``exclude_dirs`` and anything under ``skip_paths``
    (the cache directory, when it lives inside the build output) are pruned.
    Files above ``max_file_mb`` are left out.
    """
    resolved_root = root.resolve()
    size_limit_bytes = max_file_mb * 1024 * 1024
    excluded_names = set(exclude_dirs)
    skipped = {path.resolve() for path in skip_paths}
    discovered: list[Path] = []

    for dirpath, dirnames, filenames in os.walk(resolved_root):
        current = Path(dirpath)
        dirnames[:] = sorted(
            name for name in dirnames if name not in excluded_names and (current / name).resolve() not in skipped
        )
        for filename in filenames:
            path = current / filename
            if not path.is_file() or path.is_symlink():
                continue
            try:
                size = path.stat().st_size
            except OSError as exc:
                logger.warning("Failed to stat %s (%s)", path, exc)
                continue
            if size > size_limit_bytes:
                logger.info("Skipping %s: larger than %d MB", path, max_file_mb)
                continue
            discovered.append(path)

    return sorted(discovered, key=lambda path: path.relative_to(resolved_root).as_posix())
