"""Unit tests for path resolution and line-range extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from notes_site.paths import PathResolver

LINES = "one\ntwo\nthree\nfour\nfive\nsix\n"


@pytest.fixture
def resolver(tmp_path: Path) -> PathResolver:
    """Return a resolver rooted at ``tmp_path/tool`` with two aliases."""
    base = tmp_path / "tool"
    base.mkdir()
    lib = tmp_path / "lib"
    lib.mkdir()
    (base / "file.md").write_text(LINES, encoding="utf-8")
    (lib / "util.py").write_text("print('hi')\n", encoding="utf-8")
    return PathResolver(base, {"@lib": "../lib", "@l": "../nowhere"})


def test_relative_path_resolves_against_base(resolver: PathResolver) -> None:
    """Relative paths ignore the working directory."""
    assert resolver.resolve(" file.md ") == (resolver.base_dir / "file.md").resolve()


def test_absolute_path_is_unchanged(resolver: PathResolver, tmp_path: Path) -> None:
    """Absolute paths are returned as given."""
    target = tmp_path / "elsewhere.txt"
    assert resolver.resolve(str(target)) == target


def test_first_registered_alias_wins(resolver: PathResolver) -> None:
    """``@lib`` is registered before ``@l`` so it is the one substituted."""
    resolved = resolver.resolve("@lib/util.py")
    assert resolved == (resolver.base_dir.parent / "lib" / "util.py").resolve()
    assert resolver.read("@lib/util.py") == "print('hi')\n"


def test_full_file_without_range(resolver: PathResolver) -> None:
    """Without a range suffix the file is returned unchanged."""
    assert resolver.read("file.md") == LINES


def test_inclusive_line_range(resolver: PathResolver) -> None:
    """``[3..5]`` yields lines three to five joined by newlines."""
    assert resolver.read("file.md[3..5]") == "three\nfour\nfive"


def test_single_line_range(resolver: PathResolver) -> None:
    """``[1..1]`` yields only the first line."""
    assert resolver.read("file.md[1..1]") == "one"


def test_range_past_end_is_clamped(resolver: PathResolver) -> None:
    """Out-of-range bounds clamp like a slice instead of failing."""
    assert resolver.read("file.md[5..99]") == "five\nsix\n"
    assert resolver.read("file.md[50..60]") == ""


def test_missing_file_raises(resolver: PathResolver) -> None:
    """Reading a missing file surfaces the failing path."""
    with pytest.raises(FileNotFoundError) as excinfo:
        resolver.read("absent.md[1..2]")
    assert "absent.md" in str(excinfo.value)
