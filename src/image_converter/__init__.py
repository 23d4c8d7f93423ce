"""Batch conversion of image files between raster formats."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from image_converter.application.ports import Notifier
from image_converter.application.results import BatchReport

__version__ = "0.1.0"


def convert_files(
    output_format: str,
    inputs: Iterable[str],
    *,
    base_dir: Path | None = None,
    workers: int = 1,
    jpeg_quality: int = 75,
    plugin_modules: Iterable[str] | None = None,
    notifier: Notifier | None = None,
) -> BatchReport:
    """Convert files and pattern matches into ``output_format``.

    Parameters
    ----------
    output_format : str
        Target format identifier, matched case-insensitively (``png``, ``jpg``).
    inputs : Iterable[str]
        Literal ``name.ext`` filenames and/or regular expressions matched
        against bare filenames under ``base_dir``.
    base_dir : Path | None, default=None
        Directory patterns are searched in; defaults to the working directory.
    workers : int, default=1
        Number of files converted concurrently.
    jpeg_quality : int, default=75
        JPEG encoder quality (1-95).
    plugin_modules : Iterable[str] | None, default=None
        Extra strategy modules (import paths or file paths) to load.
    notifier : Notifier | None, default=None
        Receives status lines; defaults to an in-memory recorder.

    Returns
    -------
    BatchReport
        Resolved file list and per-file outcomes.

    Raises
    ------
    UnsupportedFormatError
        If ``output_format`` has no registered strategy.
    """
    from .api import convert_files as _impl

    return _impl(
        output_format,
        inputs,
        base_dir=base_dir,
        workers=workers,
        jpeg_quality=jpeg_quality,
        plugin_modules=plugin_modules,
        notifier=notifier,
    )


__all__ = ["__version__", "convert_files"]
