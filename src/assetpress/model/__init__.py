"""Core data models for Assetpress."""

from .entities import BuildResult, FileOutcome

__all__ = ["BuildResult", "FileOutcome"]
