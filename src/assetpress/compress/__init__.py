"""Format-specific compressors and extension routing."""

from __future__ import annotations

from assetpress.compress.base import Compressor
from assetpress.compress.registry import COMPRESSORS, compressor_for, option_block_for, settings_for

__all__ = ["COMPRESSORS", "Compressor", "compressor_for", "option_block_for", "settings_for"]
