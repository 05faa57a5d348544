"""Configuration loading and normalization for Assetpress builds."""

from __future__ import annotations

from assetpress.config.loader import load_config
from assetpress.config.model import AssetpressConfig, CacheConfig

__all__ = ["AssetpressConfig", "CacheConfig", "load_config"]
