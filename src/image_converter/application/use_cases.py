"""Application use-cases orchestrating batch image conversion."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import ValidationError

from image_converter.adapters.codec import PillowCodec
from image_converter.application.options import BatchOptions
from image_converter.application.ports import ImageCodec, Notifier
from image_converter.application.results import BatchReport, ConversionOutcome
from image_converter.classifier import classify
from image_converter.errors import UsageError
from image_converter.executor import convert_safely, derive_output_path
from image_converter.locator import locate
from image_converter.schemas import BatchOptionsConfig, ConversionRequestConfig
from image_converter.strategies.base import ConverterStrategy
from image_converter.strategies.registry import (
    StrategyRegistry,
    create_default_registry,
)
from image_converter.types import Locator

logger = logging.getLogger(__name__)


def format_file_list(files: Sequence[str]) -> str:
    """Render the resolved input list, e.g. ``Files: [a.jpg, b.png]``."""
    return f"Files: [{', '.join(files)}]"


def build_request(
    output_format: str,
    input_arguments: Iterable[str],
) -> ConversionRequestConfig:
    """Validate raw CLI/API input into an immutable request.

    Raises
    ------
    UsageError
        If the format is blank or no input arguments are given.
    """
    try:
        return ConversionRequestConfig(
            output_format=output_format,
            input_arguments=tuple(input_arguments),
        )
    except ValidationError as exc:
        raise UsageError(f"Invalid conversion request: {exc}") from exc


def build_batch_options(
    *,
    base_dir: Path | None = None,
    workers: int = 1,
    jpeg_quality: int = 75,
) -> BatchOptions:
    """Build typed batch options from command/API params.

    Raises
    ------
    UsageError
        If ``workers`` or ``jpeg_quality`` are out of range.
    """
    try:
        config = BatchOptionsConfig(
            base_dir=base_dir or Path.cwd(),
            workers=workers,
            jpeg_quality=jpeg_quality,
        )
    except ValidationError as exc:
        raise UsageError(f"Invalid batch options: {exc}") from exc
    return BatchOptions(
        base_dir=config.base_dir,
        workers=config.workers,
        jpeg_quality=config.jpeg_quality,
    )


def _convert_and_notify(
    strategy: ConverterStrategy,
    input_path: str,
    *,
    codec: ImageCodec,
    options: BatchOptions,
    notifier: Notifier,
) -> ConversionOutcome:
    outcome = convert_safely(
        strategy,
        input_path,
        derive_output_path(input_path, strategy.extension),
        codec=codec,
        options=options.codec_options(),
        base_dir=options.base_dir,
    )
    notifier.notify(outcome.message)
    return outcome


def run_batch(
    request: ConversionRequestConfig,
    *,
    notifier: Notifier,
    options: BatchOptions | None = None,
    registry: StrategyRegistry | None = None,
    codec: ImageCodec | None = None,
    locator: Locator = locate,
) -> BatchReport:
    """Use-case: resolve inputs and convert each into the requested format.

    The strategy is resolved before any file is touched, so an unsupported
    format fails without I/O. Per-file failures are reported through
    ``notifier`` and never stop the batch.

    Parameters
    ----------
    request : ConversionRequestConfig
        Validated output format and input arguments.
    notifier : Notifier
        Sink receiving the file list line and one line per file.
    options : BatchOptions | None, default=None
        Execution options; defaults to the working directory, one worker.
    registry : StrategyRegistry | None, default=None
        Strategy lookup; defaults to the built-in PNG/JPEG registry.
    codec : ImageCodec | None, default=None
        Raster codec; defaults to :class:`PillowCodec`.
    locator : Callable[[str, Path], list[str]], default=locate
        Pattern expander used by the argument classifier.

    Returns
    -------
    BatchReport
        Resolved file list and outcomes in input order.

    Raises
    ------
    UnsupportedFormatError
        If no strategy is registered for ``request.output_format``.
    InvalidPatternError
        If a pattern argument is not a valid regular expression.
    """
    options = options or BatchOptions()
    registry = registry or create_default_registry()
    codec = codec or PillowCodec()

    strategy = registry.require(request.output_format)
    files = classify(request.input_arguments, options.base_dir, locator)
    notifier.notify(format_file_list(files))
    logger.debug(
        "converting %d file(s) to %s with %d worker(s)",
        len(files),
        strategy.name,
        options.workers,
    )

    def _run(input_path: str) -> ConversionOutcome:
        return _convert_and_notify(
            strategy,
            input_path,
            codec=codec,
            options=options,
            notifier=notifier,
        )

    if options.workers > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=options.workers) as pool:
            outcomes = tuple(pool.map(_run, files))
    else:
        outcomes = tuple(_run(input_path) for input_path in files)

    return BatchReport(
        output_format=strategy.name,
        files=tuple(files),
        outcomes=outcomes,
    )
