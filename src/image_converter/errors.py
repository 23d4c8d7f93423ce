"""Exception hierarchy for batch image conversion."""

from __future__ import annotations


class ImageConverterError(Exception):
    """Base error for all image-converter failures.

    Attributes
    ----------
    exit_code : int
        Process exit code used by the CLI when the error aborts a run.
    """

    exit_code = 1


class UsageError(ImageConverterError):
    """Raised when the caller supplies too few or malformed arguments."""

    exit_code = 1


class UnsupportedFormatError(ImageConverterError):
    """Raised when no strategy is registered for the requested format."""

    exit_code = 2


class InvalidPatternError(ImageConverterError):
    """Raised when a filename pattern cannot be compiled."""

    exit_code = 2


class StrategyError(ImageConverterError):
    """Raised for invalid strategy registration or plugin loading."""

    exit_code = 2


class TraversalError(ImageConverterError):
    """Raised when a directory tree cannot be walked."""


class ConversionError(ImageConverterError):
    """Raised when a single file cannot be converted."""


class DecodeError(ConversionError):
    """Raised when the codec cannot read the input image."""


class EncodeError(ConversionError):
    """Raised when the codec cannot write the output image."""
