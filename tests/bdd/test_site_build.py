"""Behaviour tests for building a notes site end to end.

These pytest-bdd scenarios drive ``features/site_build.feature`` against the
``site_config_path`` fixture. They check that hidden pages are named in plain
text and left off the index, and that a malformed ``id:rename`` argument
aborts the build before the offending page is written.

Usage
-----
Run ``pytest tests/bdd/test_site_build.py -v`` after installing the test
extra (``pip install -e '.[test]'``). Math is rendered by the ``fake_math``
fixture so no scenario depends on MathML output.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from notes_site.config import load_site_config
from notes_site.directives import DirectiveParseError
from notes_site.generator import SiteBuilder

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "site_build.feature"
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given("a notes site with a hidden drafts page")
def given_site(site_config_path: Path, scenario_state: dict[str, object]) -> None:
    """Record the sample site config for later steps."""
    scenario_state["config_path"] = site_config_path


@given(parsers.parse('the sorting note references "{argument}"'))
def given_bad_reference(argument: str, scenario_state: dict[str, object]) -> None:
    """Replace the sorting note with a single ``ref`` invocation."""
    config_path = typ.cast("Path", scenario_state["config_path"])
    note = config_path.parent / "notes" / "sorting.md"
    note.write_text(f"See @ref({argument}).\n", encoding="utf-8")


def _builder(
    scenario_state: dict[str, object], fake_math: typ.Callable[..., str]
) -> SiteBuilder:
    config = load_site_config(typ.cast("Path", scenario_state["config_path"]))
    scenario_state["output_dir"] = config.paths.output_dir
    return SiteBuilder(config, math=fake_math)


@when("I build the site")
def when_build(
    scenario_state: dict[str, object], fake_math: typ.Callable[..., str]
) -> None:
    """Build the site, letting any failure fail the scenario."""
    _builder(scenario_state, fake_math).run()


@when("I try to build the site")
def when_try_build(
    scenario_state: dict[str, object], fake_math: typ.Callable[..., str]
) -> None:
    """Build the site and keep the raised error for later assertions."""
    builder = _builder(scenario_state, fake_math)
    try:
        builder.run()
    except DirectiveParseError as exc:
        scenario_state["error"] = exc


@then("the recursion page names the drafts page without a link")
def then_hidden_page_unlinked(scenario_state: dict[str, object]) -> None:
    """The aside mentions the drafts page as plain lowercase text."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    html = (output_dir / "recursion" / "index.html").read_text(encoding="utf-8")
    aside = BeautifulSoup(html, "html.parser").select_one("aside")
    assert aside is not None, "expected an aside on the recursion page"
    assert "Remember draft ideas." in aside.get_text()
    assert aside.find("a") is None, "hidden pages must not be hyperlinked"


@then("the index does not list the drafts page")
def then_index_skips_hidden(scenario_state: dict[str, object]) -> None:
    """Only visible pages are linked from the index."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    soup = BeautifulSoup(
        (output_dir / "index.html").read_text(encoding="utf-8"), "html.parser"
    )
    labels = [a.get_text() for a in soup.select("ul.pages a")]
    assert "Draft Ideas" not in labels, f"unexpected hidden page in {labels!r}"
    assert labels, "expected visible pages in the index"


@then("the build fails with a parse error")
def then_parse_error(scenario_state: dict[str, object]) -> None:
    """The build raised DirectiveParseError naming the failing page."""
    error = scenario_state.get("error")
    assert isinstance(error, DirectiveParseError), "expected a DirectiveParseError"
    assert "while building page 'sorting.md'" in error.__notes__


@then("no sorting page is written")
def then_no_partial_page(scenario_state: dict[str, object]) -> None:
    """The failing page leaves no file behind."""
    output_dir = typ.cast("Path", scenario_state["output_dir"])
    assert not (output_dir / "sorting" / "index.html").exists()
