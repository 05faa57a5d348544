"""Shared type aliases for Assetpress."""

from .cache import CacheEntryPayload, EntrySizePayload, ManifestPayload
from .common import JsonObject, JsonScalar, JsonValue, OutcomeStatus

__all__ = [
    "CacheEntryPayload",
    "EntrySizePayload",
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "ManifestPayload",
    "OutcomeStatus",
]
