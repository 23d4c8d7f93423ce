"""Classify CLI arguments as literal filenames or patterns."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from image_converter.locator import locate
from image_converter.types import Locator

LITERAL_FILENAME = re.compile(r"[A-Za-z0-9]+\.[A-Za-z0-9]+")


def is_literal_filename(argument: str) -> bool:
    """Return ``True`` for plain ``stem.ext`` names made of letters and digits."""
    return LITERAL_FILENAME.fullmatch(argument) is not None


def classify(
    arguments: Iterable[str],
    base_dir: Path | None = None,
    locator: Locator = locate,
) -> list[str]:
    """Resolve arguments into a flat, ordered list of input files.

    Parameters
    ----------
    arguments : Iterable[str]
        Literal filenames and/or filename patterns, in CLI order.
    base_dir : Path | None, default=None
        Directory patterns are expanded in. Defaults to the working directory.
    locator : Callable[[str, Path], list[str]], default=locate
        Pattern expander.

    Returns
    -------
    list[str]
        Literal names unchanged and pattern matches in traversal order, each
        at the position of the argument that produced it. Duplicates are kept
        and literal names are not checked for existence.
    """
    root = base_dir or Path.cwd()
    files: list[str] = []
    for argument in arguments:
        if is_literal_filename(argument):
            files.append(argument)
        else:
            files.extend(locator(argument, root))
    return files
