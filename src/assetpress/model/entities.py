"""Build result entities returned by the optimizer."""

from __future__ import annotations

from dataclasses import dataclass

from assetpress.types import JsonObject, OutcomeStatus


@dataclass(frozen=True)
class FileOutcome:
    """What happened to one candidate file."""

    path: str
    status: OutcomeStatus
    original_size: int
    new_size: int
    reason: str = ""

    def to_dict(self) -> JsonObject:
        return {
            "path": self.path,
            "status": self.status,
            "original_size": self.original_size,
            "new_size": self.new_size,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class BuildResult:
    """Totals for one optimizer run, aggregated from per-file outcomes."""

    processed: int
    skipped: int
    cache_hits: int
    failed: int
    original_bytes: int
    compressed_bytes: int
    duration_seconds: float
    files: tuple[FileOutcome, ...] = ()
    warnings: tuple[str, ...] = ()
    cache_enabled: bool = True

    @property
    def saved_bytes(self) -> int:
        """Bytes removed across processed and cached files."""
        return self.original_bytes - self.compressed_bytes

    @property
    def compression_ratio(self) -> float:
        """Original over compressed size; 1.0 when nothing was written."""
        if self.compressed_bytes <= 0:
            return 1.0
        return self.original_bytes / self.compressed_bytes

    @classmethod
    def from_outcomes(
        cls,
        outcomes: list[FileOutcome],
        *,
        duration_seconds: float,
        warnings: tuple[str, ...] = (),
        cache_enabled: bool = True,
    ) -> BuildResult:
        """Aggregate per-file outcomes into build totals."""
        written = [outcome for outcome in outcomes if outcome.status in ("processed", "cached")]
        return cls(
            processed=sum(1 for outcome in outcomes if outcome.status == "processed"),
            skipped=sum(1 for outcome in outcomes if outcome.status == "skipped"),
            cache_hits=sum(1 for outcome in outcomes if outcome.status == "cached"),
            failed=sum(1 for outcome in outcomes if outcome.status == "failed"),
            original_bytes=sum(outcome.original_size for outcome in written),
            compressed_bytes=sum(outcome.new_size for outcome in written),
            duration_seconds=duration_seconds,
            files=tuple(sorted(outcomes, key=lambda outcome: outcome.path)),
            warnings=warnings,
            cache_enabled=cache_enabled,
        )

    def to_dict(self) -> JsonObject:
        return {
            "processed": self.processed,
            "skipped": self.skipped,
            "cache_hits": self.cache_hits,
            "failed": self.failed,
            "original_bytes": self.original_bytes,
            "compressed_bytes": self.compressed_bytes,
            "saved_bytes": self.saved_bytes,
            "compression_ratio": round(self.compression_ratio, 4),
            "duration_seconds": round(self.duration_seconds, 4),
            "cache_enabled": self.cache_enabled,
            "warnings": list(self.warnings),
            "files": [outcome.to_dict() for outcome in self.files],
        }
