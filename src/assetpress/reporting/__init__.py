"""Build result rendering."""

from __future__ import annotations

from assetpress.reporting.stdout import StdoutReporter, format_bytes, render_cache_stats

__all__ = ["StdoutReporter", "format_bytes", "render_cache_stats"]
