"""Read site metadata (title, tagline, canonical URL) for a docs build.

Docusaurus keeps these values in ``docusaurus.config.js``, which cannot be
evaluated from Python, so the JavaScript source is scanned with a few
best-effort regular expressions. A YAML or JSON file carrying the same keys
is accepted as well. Values from the ``site`` section of ``llms.yaml`` always
win. Any failure to read the file falls back to defaults so the build keeps
going.
"""

from __future__ import annotations

import logging
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from docs_llms._constants import DEFAULT_SITE_TITLE

from .helpers import _optional_str, brand_from_title, build_site_url
from .models import SiteMetadata

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .models import BuildConfig

logger = logging.getLogger(__name__)

TITLE_PATTERN = re.compile(r"""\btitle:\s*["']([^"']+)["']""")
TAGLINE_PATTERN = re.compile(r"""\btagline:\s*["']([\s\S]*?)["']\s*,""")
URL_PATTERN = re.compile(r"""\burl:\s*["']([^"']+)["']""")
BASE_URL_PATTERN = re.compile(r"""\bbaseUrl:\s*["']([^"']+)["']""")
STRUCTURED_SUFFIXES = {".json", ".yaml", ".yml"}


def load_site_metadata(config: BuildConfig) -> SiteMetadata:
    """Return the site metadata for ``config`` with ``llms.yaml`` overrides applied.

    Parameters
    ----------
    config : BuildConfig
        Build configuration naming the site config file and overrides.

    Returns
    -------
    SiteMetadata
        Title, tagline, absolute site URL, and brand. Missing values fall
        back to ``"Documentation"`` for the title and empty strings otherwise.
    """
    raw: dict[str, str | None] = {}
    if config.site_config_path is not None:
        raw = _read_site_config(config.site_config_path)

    overrides = config.site
    title = overrides.title or raw.get("title") or DEFAULT_SITE_TITLE
    tagline = overrides.tagline or raw.get("tagline") or ""
    url = overrides.url or raw.get("url")
    base_url = overrides.base_url or raw.get("base_url")
    brand = overrides.brand or brand_from_title(title) or DEFAULT_SITE_TITLE
    return SiteMetadata(
        site_url=build_site_url(url, base_url),
        title=title,
        tagline=tagline,
        brand=brand,
    )


def _read_site_config(path: Path) -> dict[str, str | None]:
    """Return raw site keys from ``path`` or an empty mapping on failure."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        logger.debug("site config %s not found; using defaults", path)
        return {}
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("could not read site config %s: %s", path, exc)
        return {}

    if path.suffix.lower() in STRUCTURED_SUFFIXES:
        return _parse_structured_site_config(text, path)
    return parse_js_site_config(text)


def parse_js_site_config(text: str) -> dict[str, str | None]:
    """Extract ``title``, ``tagline``, ``url``, and ``baseUrl`` from JS source.

    Examples
    --------
    >>> source = "module.exports = {title: 'Acme Docs', url: 'https://acme.dev'};"
    >>> parse_js_site_config(source)["title"]
    'Acme Docs'
    """
    return {
        "title": _first_group(TITLE_PATTERN, text),
        "tagline": _first_group(TAGLINE_PATTERN, text),
        "url": _first_group(URL_PATTERN, text),
        "base_url": _first_group(BASE_URL_PATTERN, text),
    }


def _parse_structured_site_config(text: str, path: Path) -> dict[str, str | None]:
    """Read the same keys from a YAML or JSON document."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(text)
    except YAMLError as exc:
        logger.warning("could not parse site config %s: %s", path, exc)
        return {}
    if not isinstance(loaded, dict):
        logger.warning("site config %s is not a mapping; using defaults", path)
        return {}
    return {
        "title": _optional_str(loaded.get("title")),
        "tagline": _optional_str(loaded.get("tagline")),
        "url": _optional_str(loaded.get("url")),
        "base_url": _optional_str(loaded.get("baseUrl", loaded.get("base_url"))),
    }


def _first_group(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    if not match:
        return None
    return _optional_str(match.group(1))


__all__ = ["load_site_metadata", "parse_js_site_config"]
