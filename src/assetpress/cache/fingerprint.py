"""Content hashing and settings fingerprinting for cache validation."""

from __future__ import annotations

import dataclasses
import hashlib
import json
from collections.abc import Mapping
from typing import Any

from assetpress.types.common import JsonValue


def content_hash(data: bytes) -> str:
    """Return SHA-256 hex digest for raw bytes."""
    return hashlib.sha256(data).hexdigest()


def canonicalize_settings(settings: Any) -> JsonValue:
    """Convert a settings value into an order-independent JSON-compatible form.

    Mapping keys must be strings and are sorted at serialization time, tuples
    become lists, sets become sorted lists and dataclasses become mappings.
    """
    if settings is None or isinstance(settings, (bool, int, str)):
        return settings
    if isinstance(settings, float):
        if settings.is_integer():
            return int(settings)
        return settings
    if dataclasses.is_dataclass(settings) and not isinstance(settings, type):
        return canonicalize_settings(
            {field.name: getattr(settings, field.name) for field in dataclasses.fields(settings)}
        )
    if isinstance(settings, Mapping):
        for key in settings:
            if not isinstance(key, str):
                raise TypeError(f"Settings keys must be strings, got {type(key).__name__} key {key!r}")
        return {key: canonicalize_settings(value) for key, value in settings.items()}
    if isinstance(settings, (list, tuple)):
        return [canonicalize_settings(item) for item in settings]
    if isinstance(settings, (set, frozenset)):
        items = [canonicalize_settings(item) for item in settings]
        return sorted(items, key=_sort_key)
    raise TypeError(f"Unsupported settings value of type {type(settings).__name__}")


def settings_fingerprint(settings: Any) -> str:
    """Return a stable hash fingerprint for a settings value."""
    canonical = canonicalize_settings(settings)
    blob = json.dumps(canonical, sort_keys=True, separators=(",", ":")).encode("utf-8")
    return hashlib.sha256(blob).hexdigest()


def _sort_key(value: JsonValue) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"))
