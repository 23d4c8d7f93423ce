"""Example strategy plugin adding WebP output.

Usage:
    convert-images --plugin-module examples/webp_plugin.py webp '.*\\.png'
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WebpStrategy:
    """Encode images as lossless WebP."""

    name: str = "webp"
    extension: str = "webp"
    codec_format: str = "WEBP"
    aliases: tuple[str, ...] = ()

    def prepare(self, image):
        return image

    def save_options(self, options):
        del options
        return {"lossless": True}


def register_strategies(registry) -> None:
    """Register the WebP strategy."""
    registry.register(WebpStrategy())
