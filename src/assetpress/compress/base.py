"""Compressor interface for format codecs."""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from typing import Any, ClassVar


class Compressor(ABC):
    """Abstract base class for format compressors."""

    format_id: ClassVar[str]
    extensions: ClassVar[frozenset[str]]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate compressor subclasses define a non-empty `format_id` and extensions."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return

        format_id = getattr(cls, "format_id", None)
        if not isinstance(format_id, str) or not format_id.strip():
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `format_id`")
        if not getattr(cls, "extensions", None):
            raise TypeError(f"{cls.__name__} must define a non-empty class attribute `extensions`")

    def handles(self, path: Path) -> bool:
        """Return True when this compressor accepts the file extension of ``path``."""
        return path.suffix.lower() in self.extensions

    @abstractmethod
    def compress(self, data: bytes, *, path: Path, options: Mapping[str, Any]) -> bytes:
        """Return the compressed form of ``data``."""
