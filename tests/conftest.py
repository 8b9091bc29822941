"""Shared fixtures that lay out a miniature Docusaurus project on disk.

The ``docs_site`` fixture returns a :class:`DocsSite` rooted in pytest's
``tmp_path`` with helpers to write pages, the exported sidebar, the site
config, and ``llms.yaml``. Tests then call :meth:`DocsSite.context` to obtain
the :class:`~docs_llms.build.BuildContext` used by the emitters.
"""

from __future__ import annotations

import json
import typing as typ
from textwrap import dedent

import pytest

from docs_llms.build import BuildContext, prepare_build

if typ.TYPE_CHECKING:
    from pathlib import Path


class DocsSite:
    """Helper for writing a throwaway documentation project."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.docs_dir = root / "docs"
        self.static_dir = root / "static"
        self.docs_dir.mkdir(parents=True, exist_ok=True)

    def write_doc(self, relative: str, text: str) -> Path:
        """Write a page below ``docs/`` and return its path."""
        path = self.docs_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(text).lstrip("\n"), encoding="utf-8")
        return path

    def write_sidebar(self, sidebar: object, *, name: str = "docs") -> Path:
        """Write ``sidebars.json`` holding ``sidebar`` under ``name``."""
        path = self.root / "sidebars.json"
        path.write_text(json.dumps({name: sidebar}, indent=2), encoding="utf-8")
        return path

    def write_site_config(
        self,
        *,
        title: str = "Acme Docs",
        tagline: str = "",
        url: str = "https://docs.acme.dev",
        base_url: str = "/",
    ) -> Path:
        """Write a minimal ``docusaurus.config.js``."""
        path = self.root / "docusaurus.config.js"
        path.write_text(
            dedent(
                f"""
                const config = {{
                  title: '{title}',
                  tagline:
                    '{tagline}',
                  url: '{url}',
                  baseUrl: '{base_url}',
                  themeConfig: {{
                    navbar: {{ title: 'Navbar title' }},
                  }},
                }};
                module.exports = config;
                """
            ),
            encoding="utf-8",
        )
        return path

    def write_config(self, text: str) -> Path:
        """Write ``llms.yaml`` with the given YAML body."""
        path = self.root / "llms.yaml"
        path.write_text(dedent(text).lstrip("\n"), encoding="utf-8")
        return path

    def context(self, config_path: Path | None = None) -> BuildContext:
        """Prepare a build context rooted at this project."""
        return prepare_build(config_path, root=self.root)


@pytest.fixture
def docs_site(tmp_path: Path) -> DocsSite:
    """Return an empty documentation project rooted in ``tmp_path``."""
    return DocsSite(tmp_path)
