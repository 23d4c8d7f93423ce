"""Shared type aliases and protocols for converter modules."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import IO, Protocol

type OptionValue = str | int | float | bool | None
type OptionMap = Mapping[str, OptionValue]
type Locator = Callable[[str, Path], list[str]]


class RasterImage(Protocol):
    """Structural type for decoded in-memory images (``PIL.Image.Image``)."""

    mode: str

    def convert(self, mode: str) -> RasterImage:
        """Return a copy of the image in another pixel mode."""

    def save(self, fp: IO[bytes], format: str, **params: object) -> None:
        """Encode the image into ``fp``."""
