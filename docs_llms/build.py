"""Assemble the shared inputs of an ``llms.txt`` / page-mirror run.

Both emitters need the same four things: the build configuration, the site
metadata, the parsed sidebar, and a resolver bound to the docs root.
:func:`prepare_build` loads them once. Only a missing or unreadable sidebar
is fatal; everything else falls back to defaults.

Example
-------
>>> from pathlib import Path
>>> from docs_llms.build import prepare_build
>>> context = prepare_build(Path("llms.yaml"))  # doctest: +SKIP
>>> sorted(context.sections)  # doctest: +SKIP
['Developers', 'Guides']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from docs_llms.config import load_build_config, load_site_metadata
from docs_llms.metadata import MetadataExtractor
from docs_llms.resolver import DocumentResolver
from docs_llms.sidebar import collect_all_doc_ids, load_sidebar

if typ.TYPE_CHECKING:
    from pathlib import Path

    from docs_llms.config import BuildConfig, SiteMetadata
    from docs_llms.sidebar import SidebarSections

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class BuildContext:
    """Inputs shared by the index and mirror emitters."""

    config: BuildConfig
    site: SiteMetadata
    sections: SidebarSections
    resolver: DocumentResolver

    @property
    def doc_ids(self) -> set[str]:
        """Return every identifier referenced by any sidebar section."""
        return collect_all_doc_ids(self.sections)

    def metadata_extractor(self) -> MetadataExtractor:
        """Return an extractor configured with this build's site and titles."""
        return MetadataExtractor(self.resolver, self.site, titles=self.config.titles)


def prepare_build(
    config_path: Path | None, *, root: Path | None = None
) -> BuildContext:
    """Load configuration, site metadata, and the sidebar for one run.

    Parameters
    ----------
    config_path : Path or None
        Location of ``llms.yaml``; None uses defaults for every setting.
    root : Path, optional
        Project root override for resolving relative paths.

    Returns
    -------
    BuildContext
        Ready-to-use inputs for the emitters.

    Raises
    ------
    SidebarConfigError
        If the sidebar file cannot be loaded.
    BuildConfigError
        If ``llms.yaml`` exists but is malformed.
    """
    config = load_build_config(config_path, root=root)
    site = load_site_metadata(config)
    sections = load_sidebar(
        config.sidebar_path, name=config.sidebar_name, default_label=site.title
    )
    logger.info(
        "loaded %d sidebar sections from %s", len(sections), config.sidebar_path
    )
    return BuildContext(
        config=config,
        site=site,
        sections=sections,
        resolver=DocumentResolver(config.docs_dir),
    )


__all__ = ["BuildContext", "prepare_build"]
