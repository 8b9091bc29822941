"""Utility helpers shared by the docs_llms configuration loader."""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from .models import (
    DEFAULT_CONTEXT_PARENTS,
    DEFAULT_SPECIAL_SEGMENTS,
    BuildConfigError,
    SiteOverrides,
    TitleOptions,
)

BRAND_SUFFIX_PATTERN = re.compile(r"\s+(Docs|Documentation)$", re.IGNORECASE)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _resolve_path(root: Path, value: object | None, default: str) -> Path:
    """Return ``value`` as a path anchored at ``root`` unless already absolute."""
    path = Path(_optional_str(value) or default)
    if path.is_absolute():
        return path
    return root / path


def _string_tuple(value: object | None, *, key: str) -> tuple[str, ...] | None:
    """Normalize a YAML list (or single string) into a tuple of strings."""
    match value:
        case None:
            return None
        case str() as text:
            return (text.strip(),) if text.strip() else ()
        case list():
            return tuple(str(item).strip() for item in value if str(item).strip())
        case _:
            msg = f"'{key}' must be a string or a list of strings."
            raise BuildConfigError(msg)


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key`` or an empty mapping."""
    value = raw.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"Configuration section '{key}' must be a mapping."
        raise BuildConfigError(msg)
    return value


def _build_site_overrides(payload: typ.Mapping[str, typ.Any]) -> SiteOverrides:
    """Build a SiteOverrides instance from the ``site`` mapping."""
    return SiteOverrides(
        url=_optional_str(payload.get("url")),
        base_url=_optional_str(payload.get("base_url")),
        title=_optional_str(payload.get("title")),
        tagline=_optional_str(payload.get("tagline")),
        brand=_optional_str(payload.get("brand")),
    )


def _build_title_options(payload: typ.Mapping[str, typ.Any]) -> TitleOptions:
    """Build TitleOptions, merging configured segments over the defaults."""
    special = dict(DEFAULT_SPECIAL_SEGMENTS)
    configured = payload.get("special_segments")
    if configured is not None:
        if not isinstance(configured, dict):
            msg = "'titles.special_segments' must be a mapping."
            raise BuildConfigError(msg)
        special.update({str(k): str(v) for k, v in configured.items()})
    parents = _string_tuple(
        payload.get("context_parents"), key="titles.context_parents"
    )
    return TitleOptions(
        special_segments=special,
        context_parents=(
            DEFAULT_CONTEXT_PARENTS if parents is None else frozenset(parents)
        ),
    )


def build_site_url(url: str | None, base_url: str | None) -> str:
    """Join the site URL and base path, trimming trailing slashes.

    Examples
    --------
    >>> build_site_url("https://docs.example.com/", "/")
    'https://docs.example.com'
    >>> build_site_url("https://example.com", "docs/")
    'https://example.com/docs'
    >>> build_site_url(None, "/docs/")
    ''
    """
    if not url:
        return ""
    base = base_url or "/"
    if not base.startswith("/"):
        base = f"/{base}"
    return f"{url.rstrip('/')}{base}".rstrip("/")


def brand_from_title(title: str) -> str:
    """Return the site title without a trailing ``Docs``/``Documentation`` word.

    Examples
    --------
    >>> brand_from_title("Acme Docs")
    'Acme'
    >>> brand_from_title("Documentation")
    'Documentation'
    """
    return BRAND_SUFFIX_PATTERN.sub("", title).strip()


__all__ = [
    "_build_site_overrides",
    "_build_title_options",
    "_optional_str",
    "_resolve_path",
    "_section",
    "_string_tuple",
    "brand_from_title",
    "build_site_url",
]
