"""Unit tests for the built-in PNG and JPEG strategies."""

from __future__ import annotations

import pytest
from PIL import Image

from image_converter.strategies.base import ConverterStrategy
from image_converter.strategies.builtins import (
    BUILTIN_STRATEGIES,
    JpgStrategy,
    PngStrategy,
)


def test_builtins_satisfy_protocol() -> None:
    """Expose the attributes and methods of the strategy protocol."""
    for strategy in BUILTIN_STRATEGIES:
        assert isinstance(strategy, ConverterStrategy)


def test_png_strategy_passes_image_through() -> None:
    """Encode any mode as PNG without preparation."""
    image = Image.new("RGBA", (2, 2))
    strategy = PngStrategy()
    assert strategy.prepare(image) is image
    assert strategy.save_options({"jpeg_quality": 90}) == {}
    assert (strategy.extension, strategy.codec_format) == ("png", "PNG")


@pytest.mark.parametrize("mode", ["RGB", "L", "CMYK", "1"])
def test_jpg_strategy_keeps_supported_modes(mode: str) -> None:
    """Leave JPEG-compatible images untouched."""
    image = Image.new(mode, (2, 2))
    assert JpgStrategy().prepare(image) is image


@pytest.mark.parametrize("mode", ["RGBA", "P", "LA"])
def test_jpg_strategy_flattens_other_modes(mode: str) -> None:
    """Convert alpha and palette images to RGB."""
    prepared = JpgStrategy().prepare(Image.new(mode, (2, 2)))
    assert prepared.mode == "RGB"


@pytest.mark.parametrize(
    ("options", "expected"),
    [
        ({"jpeg_quality": 90}, {"quality": 90}),
        ({}, {}),
        ({"jpeg_quality": True}, {}),
        ({"jpeg_quality": "high"}, {}),
    ],
)
def test_jpg_save_options(
    options: dict[str, object], expected: dict[str, object]
) -> None:
    """Forward only integer quality settings to the encoder."""
    assert JpgStrategy().save_options(options) == expected


def test_strategies_are_immutable() -> None:
    """Reject attribute mutation on shared strategy instances."""
    with pytest.raises(AttributeError):
        JpgStrategy().extension = "jpeg"  # type: ignore[misc]
