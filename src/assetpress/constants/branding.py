"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "ASSETPRESS"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ ASSETPRESS",
    "     // build-time asset optimizer",
)
BUILD_SUMMARY_TITLE: str = "Build summary"
CACHE_SUMMARY_TITLE: str = "Cache summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} static asset optimizer"))
