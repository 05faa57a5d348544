"""Tests for candidate file discovery."""

from __future__ import annotations

from pathlib import Path

from assetpress.optimizer.discovery import discover_assets

from ..conftest import write_assets


def test_discover_assets_walks_recursively_in_stable_order(tmp_path: Path) -> None:
    write_assets(tmp_path, {"b.css": "b", "a/z.js": "z", "a/b/c.html": "c", "A.svg": "s"})

    found = discover_assets(tmp_path, max_file_mb=1)

    assert [path.relative_to(tmp_path.resolve()).as_posix() for path in found] == [
        "A.svg",
        "a/b/c.html",
        "a/z.js",
        "b.css",
    ]


def test_discover_assets_prunes_excluded_and_skipped_directories(tmp_path: Path) -> None:
    write_assets(
        tmp_path,
        {"keep.css": "k", ".git/config": "x", ".cache/assetpress/manifest.json": "{}", "js/app.js": "a"},
    )

    found = discover_assets(
        tmp_path,
        max_file_mb=1,
        exclude_dirs=(".git",),
        skip_paths=(tmp_path / ".cache" / "assetpress",),
    )

    assert sorted(path.name for path in found) == ["app.js", "keep.css"]


def test_discover_assets_skips_files_over_size_limit(tmp_path: Path) -> None:
    write_assets(tmp_path, {"small.css": "a", "big.js": b"x" * (1024 * 1024 + 1)})

    found = discover_assets(tmp_path, max_file_mb=1)

    assert [path.name for path in found] == ["small.css"]
