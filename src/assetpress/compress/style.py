"""CSS minification via rcssmin."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import rcssmin

from assetpress.compress.base import Compressor
from assetpress.compress.text import decode_text
from assetpress.constants.formats import CSS_EXTENSIONS, FORMAT_CSS


class StyleCompressor(Compressor):
    """Minify stylesheets."""

    format_id = FORMAT_CSS
    extensions = CSS_EXTENSIONS

    def compress(self, data: bytes, *, path: Path, options: Mapping[str, Any]) -> bytes:
        source = decode_text(data, path)
        keep_bang_comments = bool(options.get("keep_bang_comments", False))
        return rcssmin.cssmin(source, keep_bang_comments=keep_bang_comments).encode("utf-8")
