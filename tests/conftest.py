"""Shared pytest fixtures for cache and optimizer tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetpress.cache import CompressionCacheManager

SAMPLE_CSS: str = """
/* layout */
.container {
  padding: 20px   20px   20px   20px;
  color: #ffffff;
  background-color: #000000;
}
"""

SAMPLE_JS: str = """
// This comment should be removed
function greet() {
    const message = "hello";
    console.log(message);
}
"""


@pytest.fixture()
def cache_dir(tmp_path: Path) -> Path:
    """Return a not-yet-created cache directory path."""
    return tmp_path / "cache"


@pytest.fixture()
def cache_manager(cache_dir: Path) -> CompressionCacheManager:
    """Return an initialized cache manager over an empty directory."""
    manager = CompressionCacheManager(cache_dir)
    manager.initialize()
    return manager


def write_assets(root: Path, files: dict[str, str | bytes]) -> dict[str, Path]:
    """Write a build output tree and return the created paths by relative name."""
    created: dict[str, Path] = {}
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        created[relative] = path
    return created
