"""JavaScript minification via rjsmin."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import rjsmin

from assetpress.compress.base import Compressor
from assetpress.compress.text import decode_text
from assetpress.constants.formats import FORMAT_JS, JS_EXTENSIONS


class ScriptCompressor(Compressor):
    """Strip comments and whitespace from JavaScript."""

    format_id = FORMAT_JS
    extensions = JS_EXTENSIONS

    def compress(self, data: bytes, *, path: Path, options: Mapping[str, Any]) -> bytes:
        source = decode_text(data, path)
        keep_bang_comments = bool(options.get("keep_bang_comments", False))
        return rjsmin.jsmin(source, keep_bang_comments=keep_bang_comments).encode("utf-8")
