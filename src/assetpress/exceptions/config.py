"""Configuration-related exceptions."""

from __future__ import annotations

from assetpress.exceptions.base import AssetpressError


class ConfigError(AssetpressError, ValueError):
    """Raised when optimizer configuration is invalid."""


class InvalidationPatternError(ConfigError):
    """Raised when a cache invalidation pattern is not a valid regular expression."""
