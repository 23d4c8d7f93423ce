"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from image_converter.types import RasterImage


class ImageCodec(Protocol):
    """Decode and encode raster images."""

    def decode(self, input_path: Path) -> RasterImage:
        """Read image from path; raise ``DecodeError`` on failure."""

    def encode(
        self,
        image: RasterImage,
        output_path: Path,
        codec_format: str,
        options: Mapping[str, object],
    ) -> None:
        """Write image to path; raise ``EncodeError`` on failure."""


class Notifier(Protocol):
    """Receive human-readable status lines."""

    def notify(self, message: str) -> None:
        """Publish one status line."""
