"""Base exception for Assetpress."""

from __future__ import annotations


class AssetpressError(Exception):
    """Base class for all Assetpress errors."""
