"""Pillow-backed raster codec implementing the application codec port."""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from collections.abc import Mapping
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from image_converter.errors import DecodeError, EncodeError
from image_converter.types import RasterImage

logger = logging.getLogger(__name__)

_UMASK_LOCK = threading.Lock()


class PillowCodec:
    """Decode and encode images with Pillow."""

    def decode(self, input_path: Path) -> RasterImage:
        """Read an image fully into memory.

        Parameters
        ----------
        input_path : Path
            Source image file.

        Returns
        -------
        RasterImage
            Decoded image; the source file is closed on return.

        Raises
        ------
        DecodeError
            If the file is missing, unreadable, or not a recognised image.
        """
        try:
            with Image.open(input_path) as image:
                image.load()
                return image.copy()
        except FileNotFoundError as exc:
            raise DecodeError(f"file not found: {input_path}") from exc
        except UnidentifiedImageError as exc:
            raise DecodeError(f"not a recognised image: {input_path}") from exc
        except (OSError, SyntaxError, ValueError) as exc:
            raise DecodeError(f"cannot decode {input_path}: {exc}") from exc

    def encode(
        self,
        image: RasterImage,
        output_path: Path,
        codec_format: str,
        options: Mapping[str, object],
    ) -> None:
        """Write ``image`` to ``output_path`` without leaving partial output.

        The image is encoded into a temporary file next to ``output_path``
        which then replaces the target in a single rename. On failure the
        temporary file is removed and any existing target is left as it was.

        Raises
        ------
        EncodeError
            If the codec or the filesystem rejects the write.
        """
        directory = output_path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{output_path.name}.", suffix=".tmp", dir=directory
            )
        except OSError as exc:
            raise EncodeError(f"cannot write to {directory}: {exc}") from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as handle:
                image.save(handle, format=codec_format, **options)
            os.chmod(tmp_path, _new_file_mode())
            os.replace(tmp_path, output_path)
        except (OSError, ValueError, KeyError) as exc:
            _discard(tmp_path)
            raise EncodeError(
                f"cannot encode {output_path} as {codec_format}: {exc}"
            ) from exc
        except BaseException:
            _discard(tmp_path)
            raise


def _new_file_mode() -> int:
    """Return the mode ``open()`` would give a new file under the current umask."""
    with _UMASK_LOCK:
        umask = os.umask(0)
        os.umask(umask)
    return 0o666 & ~umask


def _discard(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError:
        logger.warning("could not remove temporary file %s", path)
