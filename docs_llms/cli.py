"""Cyclopts CLI entrypoint for generating LLM-facing documentation artifacts.

The ``llms-docs`` console script defined here writes ``llms.txt`` (a
categorized index of the documentation site) and a clean Markdown mirror of
every sidebar page. Typical usage runs ``llms-docs generate`` in CI before the
Docusaurus build so both artifacts land in ``static/`` and ship with the
site.

Examples
--------
Generate both artifacts with the defaults from ``llms.yaml``:

>>> from docs_llms.cli import main
>>> main()  # doctest: +SKIP

Rebuild only the index for a checkout in another directory:

>>> from docs_llms.cli import app
>>> app(["index", "--root", "../docs-site"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILENAME
from .build import BuildContext, prepare_build
from .config import BuildConfigError, SidebarConfigError
from .emitters import LlmsIndexBuilder, PageMirrorGenerator

app = App(name="llms-docs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]

ConfigOption = typ.Annotated[
    Path | None,
    Parameter(help="Path to llms.yaml (defaults to <root>/llms.yaml when present)"),
]
RootOption = typ.Annotated[
    Path | None,
    Parameter(help="Project root that relative paths resolve against"),
]
VerboseOption = typ.Annotated[bool, Parameter(help="Log every resolution step")]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_context(config: Path | None, root: Path | None) -> BuildContext:
    """Prepare the build, exiting with status 1 when the inputs are unusable."""
    if config is None:
        candidate = (root or Path.cwd()) / DEFAULT_CONFIG_FILENAME
        config = candidate if candidate.exists() else None
    try:
        return prepare_build(config, root=root)
    except (SidebarConfigError, BuildConfigError, FileNotFoundError) as exc:
        print(f"llms-docs: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def _write_index(context: BuildContext) -> None:
    result = LlmsIndexBuilder(context).run()
    print(f"wrote {_format_path(result.path)}")
    print(
        f"llms.txt: listed {result.written} pages, "
        f"skipped {result.skipped} (unresolved)"
    )
    if result.failed:
        print(f"llms.txt: {result.failed} pages could not be processed")


def _write_mirrors(context: BuildContext) -> None:
    result = PageMirrorGenerator(context).run()
    print(
        f"page mirrors: wrote {len(result.written)} files, "
        f"skipped {result.skipped} (unresolved)"
    )
    if result.failed:
        print(f"page mirrors: {result.failed} pages could not be processed")
    if result.collisions:
        print(f"page mirrors: {result.collisions} pages shared a URL with another")


@app.command(help="Write the llms.txt index of the documentation site.")
def index(
    *,
    config: ConfigOption = None,
    root: RootOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Write ``llms.txt`` for the configured sidebar.

    Parameters
    ----------
    config : Path or None, optional
        Path to ``llms.yaml`` (overridable via ``INPUT_CONFIG``).
    root : Path or None, optional
        Project root; defaults to the directory holding ``config`` or the
        current directory.
    verbose : bool, optional
        Enable debug logging.

    Raises
    ------
    SystemExit
        With status 1 when the sidebar or configuration cannot be loaded.
    """
    _configure_logging(verbose=verbose)
    _write_index(_load_context(config, root))


@app.command(help="Write a clean Markdown mirror of every sidebar page.")
def mirrors(
    *,
    config: ConfigOption = None,
    root: RootOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Write one cleaned Markdown file per resolved sidebar document."""
    _configure_logging(verbose=verbose)
    _write_mirrors(_load_context(config, root))


@app.command(help="Write both llms.txt and the page mirrors.")
def generate(
    *,
    config: ConfigOption = None,
    root: RootOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Write the index and the page mirrors from a single loaded build."""
    _configure_logging(verbose=verbose)
    context = _load_context(config, root)
    _write_index(context)
    _write_mirrors(context)


def main() -> None:
    """Invoke the Cyclopts application that powers the ``llms-docs`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
