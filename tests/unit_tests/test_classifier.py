"""Unit tests for literal-vs-pattern argument classification."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from image_converter.classifier import classify, is_literal_filename


def _no_traversal(pattern: str, base_dir: Path) -> list[str]:
    raise AssertionError(f"unexpected traversal for {pattern!r} in {base_dir}")


@pytest.mark.parametrize(
    ("argument", "expected"),
    [
        ("photo.jpg", True),
        ("IMG0042.JPG", True),
        ("a.b", True),
        ("my-photo.jpg", False),
        ("my_photo.jpg", False),
        ("archive.tar.gz", False),
        (".png", False),
        ("photo.", False),
        ("photo", False),
        ("dir/a.png", False),
        (r".*\.png", False),
        ("IMG[0-9]+.jpg", False),
    ],
)
def test_is_literal_filename(argument: str, expected: bool) -> None:
    """Recognise only alphanumeric ``stem.ext`` names as literals."""
    assert is_literal_filename(argument) is expected


def test_literals_are_appended_without_traversal(tmp_path: Path) -> None:
    """Append literal names unchanged, even if they do not exist."""
    files = classify(["photo.jpg", "missing.png"], tmp_path, _no_traversal)
    assert files == ["photo.jpg", "missing.png"]


def test_patterns_expand_in_argument_position(tmp_path: Path) -> None:
    """Insert pattern matches where the pattern argument appeared."""
    calls: list[tuple[str, Path]] = []

    def fake_locate(pattern: str, base_dir: Path) -> list[str]:
        calls.append((pattern, base_dir))
        return ["x.png", "y.png"]

    files = classify(["a.jpg", r".*\.png", "b.jpg"], tmp_path, fake_locate)
    assert files == ["a.jpg", "x.png", "y.png", "b.jpg"]
    assert calls == [(r".*\.png", tmp_path)]


def test_duplicates_are_preserved(tmp_path: Path) -> None:
    """Keep duplicates from overlapping literals and patterns."""
    files = classify(
        ["x.png", r"x\.png", "x.png"],
        tmp_path,
        lambda _pattern, _base: ["x.png"],
    )
    assert files == ["x.png", "x.png", "x.png"]


def test_empty_pattern_result_contributes_nothing(tmp_path: Path) -> None:
    """A pattern with no matches adds no entries."""
    assert classify([r"none\..*", "a.png"], tmp_path, lambda _p, _b: []) == ["a.png"]


def test_default_base_dir_is_working_directory(workdir: Path) -> None:
    """Expand patterns relative to the process working directory by default."""
    del workdir
    seen: list[Path] = []

    def fake_locate(pattern: str, base_dir: Path) -> list[str]:
        del pattern
        seen.append(base_dir)
        return []

    classify([r".*\.png"], locator=fake_locate)
    assert seen == [Path.cwd()]


def test_real_locator_used_by_default(workdir: Path) -> None:
    """Use the recursive file locator when no locator is supplied."""
    (workdir / "x.png").write_bytes(b"")
    (workdir / "y.png").write_bytes(b"")
    (workdir / "z.jpg").write_bytes(b"")
    assert classify([r".*\.png"]) == ["x.png", "y.png"]


_LITERAL_NAMES = st.from_regex(r"[A-Za-z0-9]+\.[A-Za-z0-9]+", fullmatch=True)


@pytest.mark.property
@given(names=st.lists(_LITERAL_NAMES, min_size=1, max_size=12))
def test_literal_names_pass_through_unchanged(names: list[str]) -> None:
    """Append every alphanumeric ``stem.ext`` name as-is, with no traversal."""
    assert all(is_literal_filename(name) for name in names)
    assert classify(names, Path("unused"), _no_traversal) == names


@pytest.mark.property
@given(
    names=st.lists(st.one_of(_LITERAL_NAMES, st.just("PATTERN")), max_size=12),
    matches=st.lists(_LITERAL_NAMES, max_size=4),
)
def test_pattern_results_replace_pattern_in_order(
    names: list[str], matches: list[str]
) -> None:
    """Expand each pattern in place and keep literals in argument order."""
    arguments = [r".*\.png" if name == "PATTERN" else name for name in names]
    expected: list[str] = []
    for argument in arguments:
        expected.extend(matches if argument == r".*\.png" else [argument])
    files = classify(arguments, Path("unused"), lambda _pattern, _base: list(matches))
    assert files == expected
