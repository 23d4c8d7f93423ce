"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from image_converter.types import OptionMap


@dataclass(frozen=True)
class BatchOptions:
    """Batch execution configuration.

    Attributes
    ----------
    base_dir : Path
        Directory patterns are expanded in and relative inputs resolve against.
    workers : int
        Number of files converted concurrently; ``1`` runs sequentially.
    jpeg_quality : int
        Encoder quality used by the JPEG strategy.
    """

    base_dir: Path = field(default_factory=Path.cwd)
    workers: int = 1
    jpeg_quality: int = 75

    def codec_options(self) -> OptionMap:
        """Options forwarded to strategies when building save parameters."""
        return {"jpeg_quality": self.jpeg_quality}
