r"""Parse Docusaurus sidebar definitions and collect document identifiers.

A sidebar is a tree whose leaves are document identifiers. Items arrive as
bare strings, ``{"type": "doc", "id": ...}`` mappings, or
``{"type": "category", "items": [...], "link": {"type": "doc", "id": ...}}``
mappings that nest further items. Raw items are first parsed into the
:class:`DocRef` / :class:`CategoryNode` variants and then walked to build the
identifier set for a section.

Example
-------
>>> from docs_llms.sidebar import collect_doc_ids, parse_sidebar_items
>>> nodes = parse_sidebar_items(
...     ["intro", {"type": "category", "items": ["guides/setup", "intro"]}]
... )
>>> sorted(collect_doc_ids(nodes))
['guides/setup', 'intro']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from docs_llms.config import SidebarConfigError

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


@dc.dataclass(slots=True, frozen=True)
class DocRef:
    """Leaf item pointing at one document identifier."""

    doc_id: str


@dc.dataclass(slots=True, frozen=True)
class CategoryNode:
    """Category item with optional linked document and nested children.

    Attributes
    ----------
    label : str or None
        Display label of the category, when declared.
    link_id : str or None
        Identifier of the document the category itself links to.
    items : tuple[SidebarNode, ...]
        Parsed child nodes in sidebar order.
    """

    label: str | None
    link_id: str | None
    items: tuple[SidebarNode, ...]


SidebarNode = DocRef | CategoryNode
SidebarSections = dict[str, tuple[SidebarNode, ...]]


def parse_sidebar_item(item: object) -> SidebarNode | None:
    """Return the typed node for one raw sidebar item, or None when unsupported.

    Links, HTML snippets, autogenerated blocks, and mappings without an
    identifier carry no document and yield ``None``.
    """
    match item:
        case str():
            return DocRef(item)
        case {"type": "category", **rest}:
            link = rest.get("link")
            link_id = None
            if isinstance(link, dict) and link.get("type") == "doc" and link.get("id"):
                link_id = str(link["id"])
            label = rest.get("label")
            return CategoryNode(
                label=str(label) if label else None,
                link_id=link_id,
                items=parse_sidebar_items(rest.get("items")),
            )
        case {"type": "doc", "id": doc_id} if doc_id:
            return DocRef(str(doc_id))
        case {"id": doc_id} if doc_id:
            return DocRef(str(doc_id))
        case _:
            return None


def parse_sidebar_items(items: object) -> tuple[SidebarNode, ...]:
    """Parse a raw item list into typed nodes, dropping unsupported entries."""
    match items:
        case None:
            return ()
        case list() | tuple():
            raw_items: cabc.Iterable[object] = items
        case _:
            raw_items = [items]
    nodes = (parse_sidebar_item(item) for item in raw_items)
    return tuple(node for node in nodes if node is not None)


def collect_doc_ids(nodes: cabc.Iterable[SidebarNode]) -> set[str]:
    """Return every document identifier reachable from ``nodes``.

    A category contributes its linked document (when present) and the
    identifiers of all descendants. Identifiers referenced several times
    appear once.
    """
    collected: set[str] = set()
    for node in nodes:
        match node:
            case DocRef(doc_id=doc_id):
                collected.add(doc_id)
            case CategoryNode(link_id=link_id, items=children):
                if link_id:
                    collected.add(link_id)
                collected |= collect_doc_ids(children)
    return collected


def collect_all_doc_ids(sections: SidebarSections) -> set[str]:
    """Return the union of identifiers across every sidebar section."""
    collected: set[str] = set()
    for nodes in sections.values():
        collected |= collect_doc_ids(nodes)
    return collected


def load_sidebar(path: Path, *, name: str, default_label: str) -> SidebarSections:
    """Load the named sidebar from a JSON or YAML export of ``sidebars.js``.

    Parameters
    ----------
    path : Path
        File holding the exported sidebars object (for example the output of
        ``node -e "console.log(JSON.stringify(require('./sidebars.js')))"``).
    name : str
        Sidebar to read, typically ``"docs"``.
    default_label : str
        Section label used when the sidebar is a flat item list rather than a
        mapping of section labels to items.

    Returns
    -------
    SidebarSections
        Ordered mapping of top-level section label to parsed nodes.

    Raises
    ------
    SidebarConfigError
        If the file is missing, unreadable, not a mapping, or lacks the
        requested sidebar.
    """
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    except FileNotFoundError as exc:
        msg = f"Sidebar file '{path}' not found."
        raise SidebarConfigError(msg) from exc
    except (OSError, UnicodeDecodeError, YAMLError) as exc:
        msg = f"Could not load sidebar file '{path}': {exc}"
        raise SidebarConfigError(msg) from exc

    if not isinstance(loaded, dict):
        msg = f"Sidebar file '{path}' must contain a mapping of sidebars."
        raise SidebarConfigError(msg)
    sidebar = loaded.get(name)
    match sidebar:
        case dict():
            return {
                str(label): parse_sidebar_items(items)
                for label, items in sidebar.items()
            }
        case list():
            return {default_label: parse_sidebar_items(sidebar)}
        case _:
            msg = f"Sidebar file '{path}' has no '{name}' sidebar."
            raise SidebarConfigError(msg)


__all__ = [
    "CategoryNode",
    "DocRef",
    "SidebarNode",
    "SidebarSections",
    "collect_all_doc_ids",
    "collect_doc_ids",
    "load_sidebar",
    "parse_sidebar_item",
    "parse_sidebar_items",
]
