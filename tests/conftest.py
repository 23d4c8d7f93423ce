"""Shared pytest configuration, markers and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

_SUITES = {
    "e2e_tests": pytest.mark.e2e,
    "integration_tests": pytest.mark.integration,
    "unit_tests": pytest.mark.unit,
}


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        for directory, marker in _SUITES.items():
            if directory in parts:
                item.add_marker(marker)
                break


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test with ``tmp_path`` as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_image(tmp_path: Path) -> Callable[..., Path]:
    """Write a small real image under ``tmp_path`` and return its path."""
    from PIL import Image

    def _make(
        name: str,
        codec_format: str = "PNG",
        mode: str = "RGB",
        size: tuple[int, int] = (8, 6),
    ) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        color = (200, 30, 30, 128) if mode == "RGBA" else (200, 30, 30)
        Image.new(mode, size, color).save(path, format=codec_format)
        return path

    return _make
