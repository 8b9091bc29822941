"""Load build configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from docs_llms._constants import (
    DEFAULT_INDEX_FILENAME,
    DEFAULT_INTRO,
    DEFAULT_MIRROR_SUFFIX,
    DEFAULT_SIDEBAR_NAME,
    MAX_DESCRIPTION_LENGTH,
)

from .helpers import (
    _build_site_overrides,
    _build_title_options,
    _optional_str,
    _resolve_path,
    _section,
    _string_tuple,
)
from .models import BuildConfig, BuildConfigError, IndexOptions, MirrorOptions

SITE_CONFIG_CANDIDATES = ("docusaurus.config.js", "docusaurus.config.ts")


def load_build_config(path: Path | None, *, root: Path | None = None) -> BuildConfig:
    """Load the YAML configuration describing inputs and outputs of a build.

    Parameters
    ----------
    path : Path or None
        Filesystem path to ``llms.yaml``. When ``None`` every setting takes
        its default value.
    root : Path, optional
        Project root against which relative paths resolve. Defaults to the
        directory holding ``path`` or the current working directory.

    Returns
    -------
    BuildConfig
        Resolved docs, static, sidebar, and site-config paths together with
        the index, title, and mirror options.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    BuildConfigError
        If the YAML cannot be parsed or a section has the wrong shape.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_build_config(None, root=Path("/srv/site"))
    >>> config.docs_dir
    PosixPath('/srv/site/docs')
    >>> config.index.output
    PosixPath('/srv/site/static/llms.txt')
    """
    raw: dict[str, typ.Any] = {}
    if path is not None:
        raw = _read_yaml_mapping(path)
        if root is None:
            root = path.parent
    root = root or Path.cwd()

    paths = _section(raw, "paths")
    index_raw = _section(raw, "index")
    mirrors_raw = _section(raw, "mirrors")

    docs_dir = _resolve_path(root, paths.get("docs_dir"), "docs")
    static_dir = _resolve_path(root, paths.get("static_dir"), "static")
    sidebar_path = _resolve_path(root, paths.get("sidebar"), "sidebars.json")
    site_config_path = _resolve_path(
        root, paths.get("site_config"), _default_site_config(root)
    )

    return BuildConfig(
        root=root,
        docs_dir=docs_dir,
        static_dir=static_dir,
        sidebar_path=sidebar_path,
        site_config_path=site_config_path,
        sidebar_name=_optional_str(paths.get("sidebar_name")) or DEFAULT_SIDEBAR_NAME,
        index=_build_index_options(index_raw, static_dir),
        mirrors=MirrorOptions(
            output_dir=_resolve_path(
                root, mirrors_raw.get("output_dir"), str(static_dir)
            ),
            suffix=_optional_str(mirrors_raw.get("suffix")) or DEFAULT_MIRROR_SUFFIX,
        ),
        site=_build_site_overrides(_section(raw, "site")),
        titles=_build_title_options(_section(raw, "titles")),
    )


def _default_site_config(root: Path) -> str:
    """Return ``docusaurus.config.ts`` when only the TypeScript config exists."""
    for name in SITE_CONFIG_CANDIDATES:
        if (root / name).exists():
            return name
    return SITE_CONFIG_CANDIDATES[0]


def _read_yaml_mapping(path: Path) -> dict[str, typ.Any]:
    """Return the top-level mapping stored in the YAML file at ``path``."""
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Configuration file '{path}' is not valid YAML: {exc}"
        raise BuildConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise BuildConfigError(msg)
    return dict(loaded)


def _build_index_options(
    payload: typ.Mapping[str, typ.Any], static_dir: Path
) -> IndexOptions:
    """Build IndexOptions, anchoring the output file inside ``static_dir``."""
    output = _resolve_path(static_dir, payload.get("output"), DEFAULT_INDEX_FILENAME)
    intro = _string_tuple(payload.get("intro"), key="index.intro")
    max_length = payload.get("max_description_length", MAX_DESCRIPTION_LENGTH)
    match max_length:
        case bool() | None:
            msg = "'index.max_description_length' must be an integer."
            raise BuildConfigError(msg)
        case int() if max_length > 3:
            pass
        case _:
            msg = "'index.max_description_length' must be an integer above 3."
            raise BuildConfigError(msg)
    return IndexOptions(
        output=output,
        intro=DEFAULT_INTRO if intro is None else intro,
        max_description_length=max_length,
        include_unresolved=bool(payload.get("include_unresolved", False)),
    )


__all__ = ["load_build_config"]
