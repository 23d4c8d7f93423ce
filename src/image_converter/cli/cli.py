#!/usr/bin/env python3
"""
image_converter.cli.cli

Typer-based CLI for batch conversion of images between raster formats.

Examples
--------
Convert one file to PNG:

    convert-images png photo.jpg

Convert every PNG under the working directory to JPEG:

    convert-images jpg '.*\\.png'

Mix literal names and patterns, four files at a time:

    convert-images --workers 4 png cover.jpg 'IMG_[0-9]+\\.jpe?g'
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from image_converter.errors import ImageConverterError

APP_HELP = "Convert image files (PNG / JPEG) named literally or by pattern."

app = typer.Typer(
    name="convert-images",
    help=APP_HELP,
    add_completion=False,
)

USAGE = "Usage: convert-images <outputFormat> <file1> [<file2> ...]"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    """Send diagnostics to stderr; status lines stay on stdout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised while setting up or running the batch.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo(
            "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
            err=True,
        )
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


@app.command(help=APP_HELP)
def convert_cmd(
    output_format: str | None = typer.Argument(
        None,
        metavar="OUTPUT_FORMAT",
        help="Target format, case-insensitive (png, jpg).",
        show_default=False,
    ),
    inputs: list[str] | None = typer.Argument(
        None,
        metavar="FILE_OR_PATTERN...",
        help=(
            "Literal name.ext filenames, or regular expressions matched "
            "against whole file names under the base directory."
        ),
        show_default=False,
    ),
    base_dir: Path | None = typer.Option(
        None,
        "--base-dir",
        exists=True,
        file_okay=False,
        dir_okay=True,
        help="Directory to search and resolve inputs in. Defaults to the CWD.",
    ),
    workers: int = typer.Option(
        1, "--workers", min=1, help="Number of files converted concurrently."
    ),
    jpeg_quality: int = typer.Option(
        75, "--jpeg-quality", min=1, max=95, help="JPEG encoder quality."
    ),
    plugin_module: list[str] | None = typer.Option(
        None,
        "--plugin-module",
        help="Strategy plugin module import path or file path (repeatable).",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Exit with code 1 if any file fails to convert."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log diagnostics to stderr."
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert files and pattern matches into OUTPUT_FORMAT.

    Parameters
    ----------
    output_format : str | None
        Requested output format identifier.
    inputs : list[str] | None
        Literal filenames and/or filename patterns.
    base_dir : Path | None
        Directory patterns are expanded in.
    workers : int, default=1
        Worker pool size.
    strict : bool, default=False
        Whether per-file failures change the exit code.

    Notes
    -----
    - Fewer than two positional arguments print the usage line and exit 1.
    - An unsupported format is reported before any file is read or written.
    """
    if output_format is None or not inputs:
        typer.echo(USAGE)
        raise typer.Exit(code=1)

    _configure_logging(verbose)

    try:
        from image_converter.api import convert_files
        from image_converter.notify import ConsoleNotifier

        report = convert_files(
            output_format,
            inputs,
            base_dir=base_dir,
            workers=workers,
            jpeg_quality=jpeg_quality,
            plugin_modules=plugin_module,
            notifier=ConsoleNotifier(),
        )
    except ImageConverterError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))

    if strict and report.failed:
        raise typer.Exit(code=1)


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
