"""Strategy protocol for output image formats."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from image_converter.types import OptionMap, RasterImage


@runtime_checkable
class ConverterStrategy(Protocol):
    """Protocol implemented by output-format strategies.

    Strategies are stateless and may be shared across files and threads.
    """

    name: str
    extension: str
    codec_format: str
    aliases: tuple[str, ...]

    def prepare(self, image: RasterImage) -> RasterImage:
        """Return an image the codec can encode in this format.

        Parameters
        ----------
        image : RasterImage
            Decoded source image.

        Returns
        -------
        RasterImage
            The same image, or a copy in a pixel mode the format supports.
        """

    def save_options(self, options: OptionMap) -> dict[str, object]:
        """Build codec save parameters for this format.

        Parameters
        ----------
        options : Mapping[str, OptionValue]
            Batch-level options such as ``jpeg_quality``.

        Returns
        -------
        dict[str, object]
            Keyword arguments forwarded to the codec encoder.
        """
