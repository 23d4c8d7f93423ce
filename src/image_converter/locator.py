"""Recursive filename-pattern file discovery."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path

from image_converter.errors import InvalidPatternError, TraversalError

logger = logging.getLogger(__name__)


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a filename pattern.

    Parameters
    ----------
    pattern : str
        Regular expression matched against bare file names.

    Returns
    -------
    re.Pattern[str]
        Compiled pattern.

    Raises
    ------
    InvalidPatternError
        If the expression is not a valid regular expression.
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidPatternError(f"Invalid file pattern '{pattern}': {exc}") from exc


def _log_walk_error(exc: OSError) -> None:
    logger.warning(
        "skipping unreadable path %s: %s", exc.filename, exc.strerror or exc
    )


def _check_root(base_dir: Path) -> None:
    if not base_dir.exists():
        raise TraversalError(f"Base directory does not exist: {base_dir}")
    if not base_dir.is_dir():
        raise TraversalError(f"Base directory is not a directory: {base_dir}")


def locate(pattern: str, base_dir: Path) -> list[str]:
    """Find regular files under ``base_dir`` whose name fully matches ``pattern``.

    The tree is walked recursively. Entries within each directory are visited
    in sorted order, files before subdirectories. Errors on individual nodes
    are logged and the walk continues with their siblings; if the root itself
    cannot be walked, the error is logged and an empty list is returned.

    Parameters
    ----------
    pattern : str
        Regular expression matched against the whole bare file name.
    base_dir : Path
        Directory the search starts from.

    Returns
    -------
    list[str]
        Matching paths relative to ``base_dir``. Files directly under
        ``base_dir`` are returned as bare file names.

    Raises
    ------
    InvalidPatternError
        If ``pattern`` cannot be compiled.
    """
    compiled = compile_pattern(pattern)
    try:
        _check_root(base_dir)
    except TraversalError as exc:
        logger.warning("%s", exc)
        return []

    matches: list[str] = []
    for dirpath, dirnames, filenames in os.walk(base_dir, onerror=_log_walk_error):
        dirnames.sort()
        relative_dir = os.path.relpath(dirpath, base_dir)
        for name in sorted(filenames):
            if compiled.fullmatch(name) is None:
                continue
            if not os.path.isfile(os.path.join(dirpath, name)):
                continue
            if relative_dir == os.curdir:
                matches.append(name)
            else:
                matches.append(os.path.join(relative_dir, name))
    logger.debug(
        "pattern %r matched %d file(s) under %s", pattern, len(matches), base_dir
    )
    return matches
