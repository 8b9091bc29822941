"""Unit tests for sidebar parsing and identifier collection.

These tests cover the typed node parsing in ``docs_llms.sidebar`` and the
recursive collector that flattens a sidebar tree into a set of document
identifiers, including category links, duplicate references, and the shapes
that carry no document at all.
"""

from __future__ import annotations

import typing as typ

import pytest

from docs_llms.config import SidebarConfigError
from docs_llms.sidebar import (
    CategoryNode,
    DocRef,
    collect_all_doc_ids,
    collect_doc_ids,
    load_sidebar,
    parse_sidebar_item,
    parse_sidebar_items,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .conftest import DocsSite


def test_parse_sidebar_item_variants() -> None:
    """Strings, doc items, id-bearing items, and categories map to nodes."""
    assert parse_sidebar_item("intro") == DocRef("intro")
    assert parse_sidebar_item({"type": "doc", "id": "guides/setup"}) == DocRef(
        "guides/setup"
    )
    assert parse_sidebar_item({"type": "ref", "id": "guides/ref"}) == DocRef(
        "guides/ref"
    )
    category = parse_sidebar_item(
        {
            "type": "category",
            "label": "SDKs",
            "link": {"type": "doc", "id": "sdk/overview"},
            "items": ["sdk/js"],
        }
    )
    assert category == CategoryNode(
        label="SDKs", link_id="sdk/overview", items=(DocRef("sdk/js"),)
    )


@pytest.mark.parametrize(
    "item",
    [
        {"type": "link", "label": "GitHub", "href": "https://github.com"},
        {"type": "html", "value": "<hr/>"},
        {"type": "doc"},
        42,
        None,
    ],
)
def test_parse_sidebar_item_ignores_documentless_items(item: object) -> None:
    """Items without a document identifier are dropped."""
    assert parse_sidebar_item(item) is None, f"expected {item!r} to be ignored"


def test_category_generated_index_link_is_ignored() -> None:
    """Only ``doc`` links contribute the category's own identifier."""
    node = parse_sidebar_item(
        {"type": "category", "link": {"type": "generated-index"}, "items": ["a"]}
    )
    assert isinstance(node, CategoryNode)
    assert node.link_id is None
    assert collect_doc_ids([node]) == {"a"}


def test_collect_doc_ids_includes_nested_items_and_links() -> None:
    """Nested categories and their linked docs are all collected."""
    nodes = parse_sidebar_items(
        [
            "intro",
            {
                "type": "category",
                "link": {"type": "doc", "id": "developers/overview"},
                "items": [
                    "developers/setup",
                    {
                        "type": "category",
                        "items": [{"type": "doc", "id": "developers/deep/dive"}],
                    },
                ],
            },
        ]
    )
    assert collect_doc_ids(nodes) == {
        "intro",
        "developers/overview",
        "developers/setup",
        "developers/deep/dive",
    }


def test_collect_doc_ids_deduplicates_repeated_references() -> None:
    """An identifier referenced by several categories appears once."""
    raw = [
        "shared/page",
        {"type": "category", "items": ["shared/page", "other"]},
        {"type": "category", "link": {"type": "doc", "id": "shared/page"}, "items": []},
    ]
    ids = collect_doc_ids(parse_sidebar_items(raw))
    assert ids == {"shared/page", "other"}


def test_collect_all_doc_ids_unions_sections() -> None:
    """Identifiers from every top-level section are combined."""
    sections = {
        "Guides": parse_sidebar_items(["guides/setup", "intro"]),
        "Reference": parse_sidebar_items(["intro", "reference/api"]),
    }
    assert collect_all_doc_ids(sections) == {
        "guides/setup",
        "intro",
        "reference/api",
    }


def test_load_sidebar_reads_categorized_sidebar(docs_site: DocsSite) -> None:
    """A mapping sidebar keeps its labels in file order."""
    path = docs_site.write_sidebar(
        {"Welcome": ["intro"], "Guides": [{"type": "category", "items": ["a"]}]}
    )
    sections = load_sidebar(path, name="docs", default_label="Docs")
    assert list(sections) == ["Welcome", "Guides"]
    assert sections["Welcome"] == (DocRef("intro"),)


def test_load_sidebar_wraps_flat_list(docs_site: DocsSite) -> None:
    """A flat item list becomes one section named after the site."""
    path = docs_site.write_sidebar(["intro", "guides/setup"])
    sections = load_sidebar(path, name="docs", default_label="Acme Docs")
    assert list(sections) == ["Acme Docs"]


def test_load_sidebar_accepts_yaml(tmp_path: Path) -> None:
    """YAML exports load the same way as JSON."""
    path = tmp_path / "sidebars.yaml"
    path.write_text("docs:\n  Guides:\n    - guides/setup\n", encoding="utf-8")
    sections = load_sidebar(path, name="docs", default_label="Docs")
    assert sections == {"Guides": (DocRef("guides/setup"),)}


def test_load_sidebar_missing_file(tmp_path: Path) -> None:
    """A missing sidebar file is a fatal configuration error."""
    with pytest.raises(SidebarConfigError, match="not found"):
        load_sidebar(tmp_path / "sidebars.json", name="docs", default_label="Docs")


def test_load_sidebar_missing_named_sidebar(docs_site: DocsSite) -> None:
    """The configured sidebar name must exist in the file."""
    path = docs_site.write_sidebar({"Guides": []}, name="api")
    with pytest.raises(SidebarConfigError, match="no 'docs' sidebar"):
        load_sidebar(path, name="docs", default_label="Docs")


def test_load_sidebar_rejects_invalid_json(tmp_path: Path) -> None:
    """Unparsable files raise SidebarConfigError."""
    path = tmp_path / "sidebars.json"
    path.write_text('{"docs": [', encoding="utf-8")
    with pytest.raises(SidebarConfigError):
        load_sidebar(path, name="docs", default_label="Docs")
