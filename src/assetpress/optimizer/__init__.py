"""Optimizer orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["optimize_directory"]


def __getattr__(name: str) -> Any:
    """Lazily expose optimizer APIs so importing the package stays cheap."""
    if name == "optimize_directory":
        from .orchestrator import optimize_directory

        return optimize_directory
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
