r"""Split and parse the frontmatter block at the top of a Markdown document.

Only the first block counts: the document must start with ``---`` and the
block ends at the next line beginning with ``---``. The block is parsed as
YAML with every scalar kept as text; when that fails (unquoted colons, tabs,
stray markup) the recognised keys are read line by line instead so a
malformed header still yields its title or slug.

Example
-------
>>> from docs_llms.frontmatter import parse_frontmatter
>>> meta = parse_frontmatter("---\ntitle: Setup\nslug: /setup\n---\nBody\n")
>>> meta.title, meta.slug, meta.body
('Setup', '/setup', '\nBody\n')
"""

from __future__ import annotations

import dataclasses as dc
import re

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

FRONTMATTER_DELIMITER = "---"
FRONTMATTER_KEYS = ("id", "title", "slug", "description")
LINE_PATTERNS = {
    key: re.compile(rf"^\s*{key}:\s*([\"']?)(.+?)\1\s*$", re.MULTILINE)
    for key in ("id", "title", "slug")
}
LINE_PATTERNS["description"] = re.compile(
    r"^\s*description:\s*([\"']?)([\s\S]*?)\1\s*$", re.MULTILINE
)

# Scalars stay as written: ``id: 007`` is "007", not 7.
_loader = YAML(typ="base")
_loader.version = (1, 2)


@dc.dataclass(slots=True, frozen=True)
class Frontmatter:
    """Recognised frontmatter fields and the document body that follows.

    Attributes
    ----------
    id : str or None
        Declared document id, used by the directory-scan resolver.
    title : str or None
        Page title.
    slug : str or None
        URL override; only values starting with ``/`` are honoured by the
        URL computer.
    description : str or None
        Page summary.
    body : str
        Document text after the closing delimiter (the whole text when no
        block exists).
    """

    id: str | None = None
    title: str | None = None
    slug: str | None = None
    description: str | None = None
    body: str = ""


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """Return ``(block, body)``; ``block`` is None when there is no frontmatter."""
    if not text.startswith(FRONTMATTER_DELIMITER):
        return None, text
    end = text.find(f"\n{FRONTMATTER_DELIMITER}", len(FRONTMATTER_DELIMITER))
    if end == -1:
        return None, text
    block = text[len(FRONTMATTER_DELIMITER) : end]
    body = text[end + len(FRONTMATTER_DELIMITER) + 1 :]
    return block, body


def strip_frontmatter(text: str) -> str:
    """Return ``text`` without its leading frontmatter block."""
    return split_frontmatter(text)[1]


def parse_frontmatter(text: str) -> Frontmatter:
    """Parse the recognised keys from the frontmatter of ``text``."""
    block, body = split_frontmatter(text)
    if block is None:
        return Frontmatter(body=body)
    fields = _parse_yaml_block(block)
    if fields is None:
        fields = _parse_block_lines(block)
    return Frontmatter(body=body, **fields)


def _parse_yaml_block(block: str) -> dict[str, str | None] | None:
    """Return recognised keys from a YAML block, or None if it is not YAML."""
    try:
        loaded = _loader.load(block)
    except YAMLError:
        return None
    if loaded is None:
        return dict.fromkeys(FRONTMATTER_KEYS)
    if not isinstance(loaded, dict):
        return None
    return {key: _scalar_text(loaded.get(key)) for key in FRONTMATTER_KEYS}


def _parse_block_lines(block: str) -> dict[str, str | None]:
    """Return recognised keys using one regular expression per key."""
    fields: dict[str, str | None] = {}
    for key, pattern in LINE_PATTERNS.items():
        match = pattern.search(block)
        fields[key] = (match.group(2).strip() or None) if match else None
    return fields


def _scalar_text(value: object) -> str | None:
    """Return a stripped string for scalar values; None for empty or nested ones."""
    if value is None or isinstance(value, dict | list):
        return None
    text = str(value).strip()
    return text or None


__all__ = [
    "Frontmatter",
    "parse_frontmatter",
    "split_frontmatter",
    "strip_frontmatter",
]
