#!/usr/bin/env python3
"""Convert a folder of generated PNGs to JPEG through the Python API."""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from PIL import Image

from image_converter import convert_files
from image_converter.notify import LoggingNotifier


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        for index, color in enumerate(("red", "green", "blue")):
            Image.new("RGBA", (32, 32), color).save(root / f"tile{index}.png")
        (root / "broken.png").write_bytes(b"not an image")

        report = convert_files(
            "jpg",
            [r".*\.png"],
            base_dir=root,
            workers=2,
            notifier=LoggingNotifier(),
        )
        print(f"converted {report.succeeded}, failed {report.failed}")
        print(sorted(path.name for path in root.glob("*.jpg")))


if __name__ == "__main__":
    main()
