"""Tests for format compressors and extension routing."""

from __future__ import annotations

import io
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest
from PIL import Image, features

from assetpress.compress import Compressor, compressor_for, option_block_for, settings_for
from assetpress.compress.image import ImageCompressor
from assetpress.compress.markup import HtmlCompressor
from assetpress.compress.script import ScriptCompressor
from assetpress.compress.style import StyleCompressor
from assetpress.compress.vector import VectorCompressor
from assetpress.config import AssetpressConfig
from assetpress.constants.formats import DEFAULT_FORMAT_OPTIONS
from assetpress.exceptions import CompressionError

from ..conftest import SAMPLE_CSS, SAMPLE_JS

SAMPLE_HTML = """<!DOCTYPE html>
<html>
  <head>
    <title>  Demo  </title>
  </head>
  <body>
    <!-- navigation goes here -->
    <p>   Hello    world   </p>
  </body>
</html>
"""

SAMPLE_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <!-- exported by an editor -->
  <metadata>editor metadata that nobody needs</metadata>
  <rect   x="10"   y="10"   width="80"   height="80"   fill="#ff0000" />
</svg>
"""


def _png_bytes(size: int = 64) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (size, size), color=(200, 30, 30)).save(buffer, format="PNG", compress_level=0)
    return buffer.getvalue()


def _jpeg_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (64, 64), color=(10, 120, 200)).save(buffer, format="JPEG", quality=100)
    return buffer.getvalue()


requires_avif = pytest.mark.skipif(not features.check("avif"), reason="Pillow built without AVIF support")


def _avif_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (64, 64), color=(40, 160, 90)).save(buffer, format="AVIF", quality=50)
    return buffer.getvalue()


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("a.PNG", ImageCompressor),
        ("b.jpeg", ImageCompressor),
        ("photo.AVIF", ImageCompressor),
        ("index.htm", HtmlCompressor),
        ("app.mjs", ScriptCompressor),
        ("site.css", StyleCompressor),
        ("logo.svg", VectorCompressor),
    ],
    ids=["png_upper", "jpeg", "avif_upper", "htm", "mjs", "css", "svg"],
)
def test_compressor_for_routes_by_extension(filename: str, expected: type[Compressor]) -> None:
    assert isinstance(compressor_for(Path(filename)), expected)


@pytest.mark.parametrize("filename", ["font.woff2", "README", "data.json"])
def test_compressor_for_unsupported_returns_none(filename: str) -> None:
    assert compressor_for(Path(filename)) is None


def test_style_compressor_minifies_css() -> None:
    result = StyleCompressor().compress(SAMPLE_CSS.encode(), path=Path("s.css"), options=DEFAULT_FORMAT_OPTIONS["css"])

    assert len(result) < len(SAMPLE_CSS.encode())
    assert b"/* layout */" not in result
    assert b".container{" in result


def test_script_compressor_strips_comments() -> None:
    result = ScriptCompressor().compress(SAMPLE_JS.encode(), path=Path("a.js"), options=DEFAULT_FORMAT_OPTIONS["js"])

    assert len(result) < len(SAMPLE_JS.encode())
    assert b"This comment should be removed" not in result
    assert b"console.log(message)" in result


def test_html_compressor_removes_comments_and_whitespace() -> None:
    result = HtmlCompressor().compress(
        SAMPLE_HTML.encode(),
        path=Path("index.html"),
        options=DEFAULT_FORMAT_OPTIONS["html"],
    )

    assert len(result) < len(SAMPLE_HTML.encode())
    assert b"navigation goes here" not in result
    assert b"Hello" in result


def test_vector_compressor_strips_comments_and_metadata() -> None:
    result = VectorCompressor().compress(
        SAMPLE_SVG.encode(),
        path=Path("logo.svg"),
        options=DEFAULT_FORMAT_OPTIONS["svg"],
    )

    assert len(result) < len(SAMPLE_SVG.encode())
    assert b"exported by an editor" not in result
    assert b"<rect" in result


def test_vector_compressor_rejects_unknown_option() -> None:
    with pytest.raises(CompressionError, match="not_a_scour_option"):
        VectorCompressor().compress(SAMPLE_SVG.encode(), path=Path("a.svg"), options={"not_a_scour_option": True})


def test_image_compressor_recompresses_png() -> None:
    original = _png_bytes()

    result = ImageCompressor().compress(original, path=Path("a.png"), options=DEFAULT_FORMAT_OPTIONS["png"])

    assert len(result) < len(original)
    with Image.open(io.BytesIO(result)) as image:
        assert image.format == "PNG"
        assert image.size == (64, 64)


def test_image_compressor_keeps_jpeg_format() -> None:
    result = ImageCompressor().compress(_jpeg_bytes(), path=Path("a.jpg"), options=DEFAULT_FORMAT_OPTIONS["jpeg"])

    with Image.open(io.BytesIO(result)) as image:
        assert image.format == "JPEG"


@requires_avif
def test_image_compressor_keeps_avif_format() -> None:
    original = _avif_bytes()

    result = ImageCompressor().compress(original, path=Path("a.avif"), options=DEFAULT_FORMAT_OPTIONS["avif"])

    with Image.open(io.BytesIO(result)) as image:
        assert image.format == "AVIF"
        assert image.size == (64, 64)


def test_image_compressor_wraps_decode_errors() -> None:
    with pytest.raises(CompressionError, match="broken.png"):
        ImageCompressor().compress(b"definitely not an image", path=Path("broken.png"), options={})


def test_text_compressors_reject_binary_input() -> None:
    with pytest.raises(CompressionError, match="UTF-8"):
        StyleCompressor().compress(b"\xff\xfe\x00", path=Path("bad.css"), options={})


@requires_avif
def test_option_block_detects_avif() -> None:
    assert option_block_for(ImageCompressor(), Path("photo.png"), _avif_bytes()) == "avif"


def test_option_block_follows_detected_image_format() -> None:
    compressor = ImageCompressor()

    assert option_block_for(compressor, Path("mislabeled.jpg"), _png_bytes()) == "png"
    assert option_block_for(compressor, Path("unreadable.jpg"), b"garbage") == "jpeg"


def test_settings_for_uses_config_options() -> None:
    config = AssetpressConfig(format_options={"css": {"keep_bang_comments": True}})

    settings = settings_for(StyleCompressor(), Path("a.css"), b"", config)

    assert settings == {"format": "css", "block": "css", "options": {"keep_bang_comments": True}}


def test_compressor_subclass_requires_format_id() -> None:
    with pytest.raises(TypeError, match="format_id"):

        class _Nameless(Compressor):
            extensions = frozenset({".x"})

            def compress(self, data: bytes, *, path: Path, options: Mapping[str, Any]) -> bytes:
                return data
