"""Human-readable stdout reporter for build results."""

from __future__ import annotations

from assetpress.cache import CacheStats
from assetpress.constants.branding import ASCII_LOGO_LINES, BUILD_SUMMARY_TITLE, CACHE_SUMMARY_TITLE
from assetpress.constants.reporting import ANSI_GREEN, ANSI_RESET, ANSI_YELLOW, STATUS_COLORS
from assetpress.model import BuildResult

_SEPARATOR = "  " + "─" * 38


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


def format_bytes(count: int) -> str:
    """Render a byte count with a binary unit suffix."""
    if abs(count) < 1024:
        return f"{count} B"
    value = count / 1024
    if abs(value) < 1024:
        return f"{value:.1f} KiB"
    return f"{value / 1024:.1f} MiB"


class StdoutReporter:
    """Formats build results as human-readable stdout output."""

    def __init__(self, result: BuildResult, *, color: bool = True, verbose: bool = False) -> None:
        self._result = result
        self._color = color
        self._verbose = verbose

    def render(self) -> str:
        """Render the full stdout report as a single string."""
        sections = [self._render_header()]
        if self._result.warnings:
            sections.append(self._render_warnings())
        if self._verbose:
            sections.append(self._render_files())
        return "\n".join(section for section in sections if section)

    def _render_header(self) -> str:
        r = self._result
        saved = format_bytes(r.saved_bytes)
        if self._color:
            saved = _colorize(saved, ANSI_GREEN if r.saved_bytes > 0 else ANSI_YELLOW)

        cache_line = f"{r.cache_hits} hits" if r.cache_enabled else "disabled"
        lines = [
            "",
            f"  {ASCII_LOGO_LINES[0]}",
            f"  {ASCII_LOGO_LINES[1]}",
            f"  {BUILD_SUMMARY_TITLE}",
            _SEPARATOR,
            "",
            (
                f"  Files       {r.processed} processed / {r.cache_hits} cached / "
                f"{r.skipped} skipped / {r.failed} failed"
            ),
            f"  Size        {format_bytes(r.original_bytes)} -> {format_bytes(r.compressed_bytes)}",
            f"  Saved       {saved} (ratio {r.compression_ratio:.2f})",
            f"  Cache       {cache_line}",
            f"  Duration    {r.duration_seconds:.3f}s",
            "",
        ]
        return "\n".join(lines)

    def _render_warnings(self) -> str:
        lines = ["  Warnings"]
        lines.extend(f"    {warning}" for warning in self._result.warnings)
        lines.append("")
        return "\n".join(lines)

    def _render_files(self) -> str:
        if not self._result.files:
            return ""
        lines = ["  Files"]
        for outcome in self._result.files:
            status = f"{outcome.status:<9}"
            if self._color:
                status = _colorize(status, STATUS_COLORS.get(outcome.status, ""))
            detail = outcome.reason or f"{outcome.original_size} -> {outcome.new_size}"
            lines.append(f"    {status} {outcome.path}  {detail}")
        return "\n".join(lines)


def render_cache_stats(stats: CacheStats) -> str:
    """Render ``assetpress cache info`` output."""
    lines = [
        f"  {CACHE_SUMMARY_TITLE}",
        _SEPARATOR,
        f"  Directory   {stats.cache_dir}",
        f"  Entries     {stats.entries}",
        f"  Blobs       {stats.blob_files} ({format_bytes(stats.blob_bytes)})",
        f"  Originals   {format_bytes(stats.original_bytes)}",
        f"  Compressed  {format_bytes(stats.compressed_bytes)}",
    ]
    return "\n".join(lines)
