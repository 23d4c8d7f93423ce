"""Per-file conversion with outcome reporting."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from image_converter.adapters.codec import PillowCodec
from image_converter.application.ports import ImageCodec
from image_converter.application.results import ConversionOutcome
from image_converter.errors import ConversionError
from image_converter.strategies.base import ConverterStrategy
from image_converter.types import OptionMap

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Conversion successful: {input}"
FAILURE_MESSAGE = "Error converting file: {input} ({reason})"


def derive_output_path(input_path: str, extension: str) -> str:
    """Replace the last extension of ``input_path`` with ``extension``.

    Only the final path component is inspected, so dots in directory names
    are left alone. A name without a dot gets the extension appended.

    Examples
    --------
    >>> derive_output_path("photo.jpg", "png")
    'photo.png'
    >>> derive_output_path("archive.tar.gz", "png")
    'archive.tar.png'
    >>> derive_output_path("README", "jpg")
    'README.jpg'
    """
    head, name = os.path.split(input_path)
    stem, dot, _ = name.rpartition(".")
    if not dot:
        stem = name
    if not head:
        return f"{stem}.{extension}"
    return os.path.join(head, f"{stem}.{extension}")


def _resolve(path: str, base_dir: Path | None) -> Path:
    candidate = Path(path)
    if base_dir is None or candidate.is_absolute():
        return candidate
    return base_dir / candidate


def convert(
    strategy: ConverterStrategy,
    input_path: str,
    output_path: str,
    *,
    codec: ImageCodec | None = None,
    options: OptionMap | None = None,
    base_dir: Path | None = None,
) -> ConversionOutcome:
    """Convert one image and return a success outcome.

    Parameters
    ----------
    strategy : ConverterStrategy
        Target format strategy.
    input_path : str
        Source image, relative to ``base_dir`` unless absolute.
    output_path : str
        Destination image, relative to ``base_dir`` unless absolute. An
        existing file is overwritten.
    codec : ImageCodec | None, default=None
        Raster codec; defaults to :class:`PillowCodec`.
    options : Mapping[str, OptionValue] | None, default=None
        Batch options handed to ``strategy.save_options``.
    base_dir : Path | None, default=None
        Directory relative paths are resolved against.

    Returns
    -------
    ConversionOutcome
        Outcome with ``succeeded=True``.

    Raises
    ------
    DecodeError
        If the input cannot be read. No output is written.
    EncodeError
        If the output cannot be written. Existing output is left unchanged.
    """
    codec = codec or PillowCodec()
    image = codec.decode(_resolve(input_path, base_dir))
    prepared = strategy.prepare(image)
    codec.encode(
        prepared,
        _resolve(output_path, base_dir),
        strategy.codec_format,
        strategy.save_options(options or {}),
    )
    return ConversionOutcome(
        input_path=input_path,
        output_path=output_path,
        succeeded=True,
        message=SUCCESS_MESSAGE.format(input=input_path),
    )


def convert_safely(
    strategy: ConverterStrategy,
    input_path: str,
    output_path: str,
    *,
    codec: ImageCodec | None = None,
    options: OptionMap | None = None,
    base_dir: Path | None = None,
) -> ConversionOutcome:
    """Run :func:`convert`, turning any fault into a failure outcome.

    Codec errors are expected and logged at debug level; anything else is
    logged with its traceback. Neither propagates, so a batch always moves
    on to the next file.
    """
    try:
        return convert(
            strategy,
            input_path,
            output_path,
            codec=codec,
            options=options,
            base_dir=base_dir,
        )
    except ConversionError as exc:
        logger.debug("conversion of %s failed: %s", input_path, exc)
        reason = str(exc)
    except Exception as exc:
        logger.exception("unexpected error converting %s", input_path)
        reason = f"{type(exc).__name__}: {exc}"
    return ConversionOutcome(
        input_path=input_path,
        output_path=output_path,
        succeeded=False,
        message=FAILURE_MESSAGE.format(input=input_path, reason=reason),
    )
