"""Behaviour tests for the section layout of ``llms.txt``.

These pytest-bdd scenarios are backed by ``features/llms_index_sections.feature``.
They build a small Docusaurus project with the ``docs_site`` fixture, run the
index builder, and check that pages nested in categories surface under their
top-level sidebar label while sections made only of missing pages disappear.

Usage
-----
Run ``pytest tests/bdd/test_llms_index_sections.py -v`` after installing the
test extra (``pip install -e '.[test]'``).
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from docs_llms.emitters import IndexResult, LlmsIndexBuilder

if typ.TYPE_CHECKING:
    from tests.conftest import DocsSite

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "llms_index_sections.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given('a docs site whose "Guides" sidebar nests "guides/setup" in a category')
def given_nested_guides(docs_site: DocsSite, scenario_state: dict[str, object]) -> None:
    """Write a sidebar with one category holding the setup guide."""
    docs_site.write_site_config()
    docs_site.write_sidebar(
        {
            "Guides": [
                {
                    "type": "category",
                    "label": "Getting started",
                    "items": [{"type": "category", "items": ["guides/setup"]}],
                }
            ]
        }
    )
    docs_site.write_doc(
        "guides/setup.md",
        "---\ntitle: Setup\ndescription: How to set up the SDK.\n---\n# Setup\n",
    )
    scenario_state["site"] = docs_site


@given('a docs site whose "Ghosts" sidebar only references missing pages')
def given_ghost_section(docs_site: DocsSite, scenario_state: dict[str, object]) -> None:
    """Write a sidebar whose second section points at files that do not exist."""
    docs_site.write_site_config()
    docs_site.write_sidebar(
        {
            "Guides": ["intro"],
            "Ghosts": ["ghost/one", {"type": "doc", "id": "ghost/two"}],
        }
    )
    docs_site.write_doc("intro.md", "Welcome to the Acme developer documentation.\n")
    scenario_state["site"] = docs_site


@when("the llms.txt index is generated")
def when_index_generated(scenario_state: dict[str, object]) -> None:
    """Run the index builder and keep the result and rendered text."""
    site = typ.cast("DocsSite", scenario_state["site"])
    result = LlmsIndexBuilder(site.context()).run()
    scenario_state["result"] = result
    scenario_state["text"] = result.path.read_text(encoding="utf-8")


@then('the index has a "Guides" section')
def then_has_guides(scenario_state: dict[str, object]) -> None:
    """Verify the top-level label became a second-level heading."""
    text = typ.cast("str", scenario_state["text"])
    assert "\n## Guides\n" in text, "expected a '## Guides' heading in llms.txt"


@then('the "Guides" section lists "Setup" with its description')
def then_lists_setup(scenario_state: dict[str, object]) -> None:
    """Verify the nested page is listed directly under the Guides heading."""
    text = typ.cast("str", scenario_state["text"])
    expected = (
        "## Guides\n"
        "- [Setup](https://docs.acme.dev/guides/setup): How to set up the SDK.\n"
    )
    assert expected in text, f"expected the setup entry under Guides, got:\n{text}"


@then('the index has no "Ghosts" section')
def then_no_ghosts(scenario_state: dict[str, object]) -> None:
    """Verify sections without listed pages are omitted."""
    text = typ.cast("str", scenario_state["text"])
    assert "## Ghosts" not in text, "empty sections must not be rendered"


@then("2 identifiers are reported as skipped")
def then_two_skipped(scenario_state: dict[str, object]) -> None:
    """Verify both missing identifiers were counted."""
    result = typ.cast("IndexResult", scenario_state["result"])
    assert result.skipped == 2, f"expected 2 skipped ids, got {result.skipped}"
