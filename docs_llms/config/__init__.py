"""Load and validate build configuration for docs_llms runs.

This subpackage parses the project's ``llms.yaml`` file, anchors every input
and output path at the project root, reads site metadata from the Docusaurus
config, and produces typed dataclasses (:class:`BuildConfig`,
:class:`SiteMetadata`, etc.) that the emitters consume. The primary entry
points are :func:`load_build_config` and :func:`load_site_metadata`.

Examples
--------
>>> from pathlib import Path
>>> from docs_llms.config import load_build_config, load_site_metadata
>>> config = load_build_config(Path("llms.yaml"))  # doctest: +SKIP
>>> site = load_site_metadata(config)  # doctest: +SKIP
>>> site.site_url  # doctest: +SKIP
'https://docs.example.com'
"""

from .helpers import brand_from_title, build_site_url
from .loader import load_build_config
from .models import (
    BuildConfig,
    BuildConfigError,
    IndexOptions,
    MirrorOptions,
    SidebarConfigError,
    SiteMetadata,
    SiteOverrides,
    TitleOptions,
)
from .site import load_site_metadata, parse_js_site_config

__all__ = [
    "BuildConfig",
    "BuildConfigError",
    "IndexOptions",
    "MirrorOptions",
    "SidebarConfigError",
    "SiteMetadata",
    "SiteOverrides",
    "TitleOptions",
    "brand_from_title",
    "build_site_url",
    "load_build_config",
    "load_site_metadata",
    "parse_js_site_config",
]
