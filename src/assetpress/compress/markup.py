"""HTML minification via minify-html."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import minify_html

from assetpress.compress.base import Compressor
from assetpress.compress.text import decode_text
from assetpress.constants.formats import FORMAT_HTML, HTML_EXTENSIONS
from assetpress.exceptions import CompressionError


class HtmlCompressor(Compressor):
    """Minify HTML documents, including inline CSS and JS when enabled."""

    format_id = FORMAT_HTML
    extensions = HTML_EXTENSIONS

    def compress(self, data: bytes, *, path: Path, options: Mapping[str, Any]) -> bytes:
        source = decode_text(data, path)
        try:
            minified = minify_html.minify(source, **options)
        except (TypeError, ValueError, RuntimeError) as exc:
            raise CompressionError(f"Failed to minify HTML {path}: {exc}") from exc
        return minified.encode("utf-8")
