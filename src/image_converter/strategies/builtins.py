"""Built-in PNG and JPEG strategies."""

from __future__ import annotations

from dataclasses import dataclass

from image_converter.types import OptionMap, RasterImage

_JPEG_MODES = frozenset({"1", "L", "RGB", "CMYK"})


@dataclass(frozen=True)
class PngStrategy:
    """Encode images as PNG."""

    name: str = "png"
    extension: str = "png"
    codec_format: str = "PNG"
    aliases: tuple[str, ...] = ()

    def prepare(self, image: RasterImage) -> RasterImage:
        return image

    def save_options(self, options: OptionMap) -> dict[str, object]:
        del options
        return {}


@dataclass(frozen=True)
class JpgStrategy:
    """Encode images as baseline JPEG.

    JPEG has no alpha channel or palette, so such images are flattened to RGB
    before encoding.
    """

    name: str = "jpg"
    extension: str = "jpg"
    codec_format: str = "JPEG"
    aliases: tuple[str, ...] = ("jpeg",)

    def prepare(self, image: RasterImage) -> RasterImage:
        if image.mode in _JPEG_MODES:
            return image
        return image.convert("RGB")

    def save_options(self, options: OptionMap) -> dict[str, object]:
        quality = options.get("jpeg_quality")
        if isinstance(quality, int) and not isinstance(quality, bool):
            return {"quality": quality}
        return {}


BUILTIN_STRATEGIES = (PngStrategy(), JpgStrategy())
