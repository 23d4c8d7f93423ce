"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from image_converter.application.options import BatchOptions
from image_converter.application.ports import ImageCodec, Notifier
from image_converter.application.results import BatchReport, ConversionOutcome
from image_converter.schemas import ConversionRequestConfig
from image_converter.types import Locator

if TYPE_CHECKING:
    from image_converter.strategies.registry import StrategyRegistry


def build_request(
    output_format: str,
    input_arguments: Iterable[str],
) -> ConversionRequestConfig:
    """Validate a conversion request via lazy use-case import."""
    from image_converter.application.use_cases import build_request as _impl

    return _impl(output_format, input_arguments)


def build_batch_options(
    *,
    base_dir: Path | None = None,
    workers: int = 1,
    jpeg_quality: int = 75,
) -> BatchOptions:
    """Build typed batch options via lazy use-case import."""
    from image_converter.application.use_cases import build_batch_options as _impl

    return _impl(base_dir=base_dir, workers=workers, jpeg_quality=jpeg_quality)


def run_batch(
    request: ConversionRequestConfig,
    *,
    notifier: Notifier,
    options: BatchOptions | None = None,
    registry: StrategyRegistry | None = None,
    codec: ImageCodec | None = None,
    locator: Locator | None = None,
) -> BatchReport:
    """Run a batch conversion via lazy use-case import."""
    from image_converter.application.use_cases import run_batch as _impl
    from image_converter.locator import locate

    return _impl(
        request,
        notifier=notifier,
        options=options,
        registry=registry,
        codec=codec,
        locator=locator or locate,
    )


__all__ = [
    "BatchOptions",
    "BatchReport",
    "ConversionOutcome",
    "build_batch_options",
    "build_request",
    "run_batch",
]
