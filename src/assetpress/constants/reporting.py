"""Constants for stdout formatting and JSON result output."""

from __future__ import annotations

ANSI_RED: str = "\033[31m"
ANSI_YELLOW: str = "\033[33m"
ANSI_GREEN: str = "\033[32m"
ANSI_DIM: str = "\033[2m"
ANSI_RESET: str = "\033[0m"

STATUS_COLORS: dict[str, str] = {
    "processed": ANSI_GREEN,
    "cached": ANSI_GREEN,
    "skipped": ANSI_DIM,
    "failed": ANSI_RED,
}

RESULT_TEMP_PREFIX: str = ".tmp-"
RESULT_TEMP_SUFFIX: str = ".json"
