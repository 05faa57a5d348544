"""Extension routing tables and default codec options."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

FORMAT_IMAGE: str = "image"
FORMAT_HTML: str = "html"
FORMAT_JS: str = "js"
FORMAT_CSS: str = "css"
FORMAT_SVG: str = "svg"

IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {".png", ".jpg", ".jpeg", ".webp", ".avif", ".tif", ".tiff", ".gif"}
)
HTML_EXTENSIONS: frozenset[str] = frozenset({".html", ".htm"})
JS_EXTENSIONS: frozenset[str] = frozenset({".js", ".mjs"})
CSS_EXTENSIONS: frozenset[str] = frozenset({".css"})
SVG_EXTENSIONS: frozenset[str] = frozenset({".svg"})

# Pillow format name -> option block name in the config.
PILLOW_FORMAT_BLOCKS: dict[str, str] = {
    "PNG": "png",
    "JPEG": "jpeg",
    "WEBP": "webp",
    "AVIF": "avif",
    "TIFF": "tiff",
    "GIF": "gif",
}

# Option block used for each extension when building per-file settings.
EXTENSION_OPTION_BLOCKS: dict[str, str] = {
    ".png": "png",
    ".jpg": "jpeg",
    ".jpeg": "jpeg",
    ".webp": "webp",
    ".avif": "avif",
    ".tif": "tiff",
    ".tiff": "tiff",
    ".gif": "gif",
    ".html": "html",
    ".htm": "html",
    ".js": "js",
    ".mjs": "js",
    ".css": "css",
    ".svg": "svg",
}

DEFAULT_FORMAT_OPTIONS: MappingProxyType[str, dict[str, Any]] = MappingProxyType(
    {
        "png": {"compress_level": 9, "optimize": True},
        "jpeg": {"quality": 85, "optimize": True, "progressive": True},
        "webp": {"method": 6, "quality": 80, "lossless": False},
        "avif": {"quality": 100, "subsampling": "4:4:4", "speed": 0},
        "tiff": {"compression": "tiff_adobe_deflate"},
        "gif": {"optimize": True},
        "html": {"minify_css": True, "minify_js": True, "keep_comments": False},
        "js": {"keep_bang_comments": False},
        "css": {"keep_bang_comments": False},
        "svg": {
            "enable_viewboxing": True,
            "strip_comments": True,
            "remove_metadata": True,
            "shorten_ids": True,
        },
    }
)
