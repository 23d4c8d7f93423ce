"""Unit tests for notification sinks."""

from __future__ import annotations

import io
import logging
import threading

import pytest

from image_converter.notify import ConsoleNotifier, LoggingNotifier, RecordingNotifier


def test_console_notifier_writes_one_line_per_message() -> None:
    """Terminate every message with a newline."""
    stream = io.StringIO()
    notifier = ConsoleNotifier(stream)
    notifier.notify("Files: [a.jpg]")
    notifier.notify("Conversion successful: a.jpg")
    assert stream.getvalue() == "Files: [a.jpg]\nConversion successful: a.jpg\n"


def test_console_notifier_defaults_to_stdout(
    capsys: pytest.CaptureFixture[str],
) -> None:
    """Write to standard output when no stream is given."""
    ConsoleNotifier().notify("hello")
    captured = capsys.readouterr()
    assert captured.out == "hello\n"
    assert captured.err == ""


def test_console_notifier_lines_do_not_interleave() -> None:
    """Keep each line intact when written from several threads."""
    stream = io.StringIO()
    notifier = ConsoleNotifier(stream)
    threads = [
        threading.Thread(target=notifier.notify, args=(f"line-{index}" * 20,))
        for index in range(16)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    lines = stream.getvalue().splitlines()
    assert sorted(lines) == sorted(f"line-{index}" * 20 for index in range(16))


def test_logging_notifier_relays_messages(caplog: pytest.LogCaptureFixture) -> None:
    """Log each message at the configured level."""
    logger = logging.getLogger("test.notify")
    with caplog.at_level(logging.INFO, logger="test.notify"):
        LoggingNotifier(logger).notify("Conversion successful: a.jpg")
    assert caplog.records[0].getMessage() == "Conversion successful: a.jpg"
    assert caplog.records[0].levelno == logging.INFO


def test_recording_notifier_keeps_order() -> None:
    """Store messages in arrival order."""
    notifier = RecordingNotifier()
    notifier.notify("a")
    notifier.notify("b")
    assert notifier.messages == ["a", "b"]


def test_console_notifier_escapes_undecodable_names() -> None:
    """Write surrogate-escaped file names to a strict UTF-8 stream."""
    buffer = io.BytesIO()
    stream = io.TextIOWrapper(buffer, encoding="utf-8", errors="strict")
    notifier = ConsoleNotifier(stream)
    notifier.notify("Files: [good.png, \udcff.png]")
    notifier.notify("Conversion successful: café.png")
    stream.flush()
    assert buffer.getvalue().decode("utf-8").splitlines() == [
        "Files: [good.png, \\xff.png]",
        "Conversion successful: café.png",
    ]
