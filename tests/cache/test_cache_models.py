"""Tests for manifest and cache entry serialization."""

from __future__ import annotations

import pytest

from assetpress.cache import CacheEntry, EntrySize, Manifest
from assetpress.constants.cache import MANIFEST_VERSION

HASH_A = "a" * 64
HASH_B = "b" * 64


def _entry(**overrides: object) -> CacheEntry:
    values: dict[str, object] = {
        "source_hash": HASH_A,
        "compressed_path": f"/cache/{HASH_A}.png",
        "settings_fingerprint": HASH_B,
        "size": EntrySize(original=100, compressed=40),
        "timestamp": 1700000000.5,
    }
    values.update(overrides)
    return CacheEntry(**values)  # type: ignore[arg-type]


def test_cache_entry_roundtrip() -> None:
    entry = _entry()

    assert CacheEntry.from_dict(entry.to_dict()) == entry


def test_cache_entry_matches_requires_both_hashes() -> None:
    entry = _entry()

    assert entry.matches(HASH_A, HASH_B)
    assert not entry.matches(HASH_B, HASH_B)
    assert not entry.matches(HASH_A, HASH_A)


@pytest.mark.parametrize(
    ("mutation", "expected_match"),
    [
        ({"size": "big"}, "size must be an object"),
        ({"source_hash": 1}, "hashes"),
        ({"compressed_path": ""}, "compressed_path"),
        ({"timestamp": True}, "timestamp"),
        ({"size": {"original": 1.5, "compressed": 1}}, "sizes"),
    ],
    ids=["size_type", "hash_type", "empty_path", "bool_timestamp", "float_size"],
)
def test_cache_entry_from_dict_rejects_malformed_payloads(mutation: dict, expected_match: str) -> None:
    payload = dict(_entry().to_dict())
    payload.update(mutation)

    with pytest.raises(ValueError, match=expected_match):
        CacheEntry.from_dict(payload)


def test_manifest_empty_uses_current_version() -> None:
    manifest = Manifest.empty()

    assert manifest.to_dict() == {"version": MANIFEST_VERSION, "entries": {}}


def test_manifest_from_payload_rejects_foreign_version() -> None:
    with pytest.raises(ValueError, match="unsupported manifest version"):
        Manifest.from_payload({"version": "2", "entries": {}})


def test_manifest_from_payload_skips_bad_entries() -> None:
    payload = {"version": MANIFEST_VERSION, "entries": {"ok.png": _entry().to_dict(), "bad.png": []}}

    manifest = Manifest.from_payload(payload)

    assert list(manifest.entries) == ["ok.png"]
