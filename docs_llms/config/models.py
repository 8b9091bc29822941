"""Typed dataclasses describing docs_llms build configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from docs_llms._constants import (
    DEFAULT_INTRO,
    DEFAULT_MIRROR_SUFFIX,
    DEFAULT_SIDEBAR_NAME,
    DEFAULT_SITE_TITLE,
    MAX_DESCRIPTION_LENGTH,
)


class BuildConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


class SidebarConfigError(ValueError):
    """Raised when the sidebar configuration cannot be loaded."""


DEFAULT_SPECIAL_SEGMENTS: dict[str, str] = {
    "rest-api": "Rest API",
    "sdk-and-tools": "SDK and Tools",
}
DEFAULT_CONTEXT_PARENTS: frozenset[str] = frozenset({"rest-api"})


@dc.dataclass(slots=True, frozen=True)
class SiteMetadata:
    """Site-wide values read once from the site configuration.

    Attributes
    ----------
    site_url : str
        Absolute site URL including the base path, without a trailing slash.
        Empty when the site URL is unknown.
    title : str
        Site title used for the index heading.
    tagline : str
        Optional tagline rendered as a blockquote under the heading.
    brand : str
        Name used in generated descriptions (``"Learn more about <brand>"``).
    """

    site_url: str = ""
    title: str = DEFAULT_SITE_TITLE
    tagline: str = ""
    brand: str = DEFAULT_SITE_TITLE


@dc.dataclass(slots=True)
class SiteOverrides:
    """Values from ``llms.yaml`` that take precedence over the site config."""

    url: str | None = None
    base_url: str | None = None
    title: str | None = None
    tagline: str | None = None
    brand: str | None = None


@dc.dataclass(slots=True)
class IndexOptions:
    """Settings for the ``llms.txt`` emitter."""

    output: Path
    intro: tuple[str, ...] = DEFAULT_INTRO
    max_description_length: int = MAX_DESCRIPTION_LENGTH
    include_unresolved: bool = False


@dc.dataclass(slots=True)
class TitleOptions:
    """Humanization rules applied when deriving document titles."""

    special_segments: dict[str, str] = dc.field(
        default_factory=lambda: dict(DEFAULT_SPECIAL_SEGMENTS)
    )
    context_parents: frozenset[str] = DEFAULT_CONTEXT_PARENTS


@dc.dataclass(slots=True)
class MirrorOptions:
    """Settings for the per-page Markdown mirror emitter."""

    output_dir: Path
    suffix: str = DEFAULT_MIRROR_SUFFIX


@dc.dataclass(slots=True)
class BuildConfig:
    """A fully resolved build definition sourced from ``llms.yaml``."""

    root: Path
    docs_dir: Path
    static_dir: Path
    sidebar_path: Path
    site_config_path: Path | None
    index: IndexOptions
    mirrors: MirrorOptions
    sidebar_name: str = DEFAULT_SIDEBAR_NAME
    site: SiteOverrides = dc.field(default_factory=SiteOverrides)
    titles: TitleOptions = dc.field(default_factory=TitleOptions)


__all__ = [
    "DEFAULT_CONTEXT_PARENTS",
    "DEFAULT_SPECIAL_SEGMENTS",
    "BuildConfig",
    "BuildConfigError",
    "IndexOptions",
    "MirrorOptions",
    "SidebarConfigError",
    "SiteMetadata",
    "SiteOverrides",
    "TitleOptions",
]
