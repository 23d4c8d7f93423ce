"""Public batch conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from image_converter.application.ports import Notifier
from image_converter.application.results import BatchReport
from image_converter.application.use_cases import build_batch_options
from image_converter.application.use_cases import build_request
from image_converter.application.use_cases import run_batch
from image_converter.notify import RecordingNotifier
from image_converter.strategies.registry import create_default_registry


def convert_files(
    output_format: str,
    inputs: Iterable[str],
    *,
    base_dir: Optional[Path] = None,
    workers: int = 1,
    jpeg_quality: int = 75,
    plugin_modules: Optional[Iterable[str]] = None,
    notifier: Optional[Notifier] = None,
) -> BatchReport:
    """Convert literal files and pattern matches under ``base_dir``."""
    request = build_request(output_format, inputs)
    options = build_batch_options(
        base_dir=base_dir,
        workers=workers,
        jpeg_quality=jpeg_quality,
    )
    return run_batch(
        request,
        notifier=notifier or RecordingNotifier(),
        options=options,
        registry=create_default_registry(extra_modules=plugin_modules),
    )

