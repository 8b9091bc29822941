"""Write a clean Markdown copy of every sidebar page at its URL path.

Each resolved page is written to ``<output_dir>/<url path><suffix>`` (for
example ``static/developers/overview.md``), so appending ``.md`` to a docs
URL serves the raw Markdown once the static folder is published. MDX-only
syntax is stripped by :func:`docs_llms.cleaner.clean_mdx_content` and the
frontmatter title and description are restated as a heading and blockquote.

Example
-------
>>> from pathlib import Path
>>> from docs_llms.build import prepare_build
>>> from docs_llms.emitters import PageMirrorGenerator
>>> context = prepare_build(Path("llms.yaml"))  # doctest: +SKIP
>>> PageMirrorGenerator(context).run().written  # doctest: +SKIP
[PosixPath('static/developers/overview.md'), ...]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from docs_llms.cleaner import clean_mdx_content
from docs_llms.frontmatter import parse_frontmatter
from docs_llms.urls import url_path_for

from .rendering import build_environment, finish_text

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docs_llms.build import BuildContext
    from docs_llms.resolver import ResolvedDocument

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class MirrorResult:
    """Outcome of a mirror run.

    Attributes
    ----------
    written : list[Path]
        Distinct files written, in identifier order.
    skipped : int
        Identifiers that did not resolve to a file.
    failed : int
        Resolved identifiers whose file could not be read, rendered, or
        written.
    collisions : int
        Identifiers whose output path was already claimed by another page;
        the later identifier's content is kept.
    """

    written: list[Path] = dc.field(default_factory=list)
    skipped: int = 0
    failed: int = 0
    collisions: int = 0


class PageMirrorGenerator:
    """Emit one cleaned Markdown file per resolved sidebar document."""

    def __init__(
        self, context: BuildContext, *, templates_dir: Path | None = None
    ) -> None:
        self.context = context
        self.options = context.config.mirrors
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("mirror_page.jinja")

    def run(self, doc_ids: cabc.Iterable[str] | None = None) -> MirrorResult:
        """Write mirrors for ``doc_ids`` (default: every sidebar identifier).

        Returns
        -------
        MirrorResult
            Written paths with the skip, failure and collision counts.
            Per-page failures are logged and counted; they never abort the
            run.
        """
        ids = sorted(self.context.doc_ids if doc_ids is None else set(doc_ids))
        result = MirrorResult()
        owners: dict[Path, str] = {}
        for doc_id in ids:
            document = self.context.resolver.load(doc_id)
            if not document.resolved:
                logger.warning("skipping unresolved document id %r", doc_id)
                result.skipped += 1
                continue
            try:
                output_path = self._write_page(document)
            except (OSError, UnicodeDecodeError, ValueError) as exc:
                logger.warning("could not mirror %r: %s", doc_id, exc)
                result.failed += 1
                continue
            previous = owners.get(output_path)
            if previous is not None:
                logger.warning(
                    "%r overwrote the mirror of %r at %s",
                    doc_id,
                    previous,
                    output_path,
                )
                result.collisions += 1
            else:
                result.written.append(output_path)
            owners[output_path] = doc_id
        logger.info(
            "mirrored %d pages, skipped %d, failed %d, %d slug collisions",
            len(result.written),
            result.skipped,
            result.failed,
            result.collisions,
        )
        return result

    def output_path_for(self, url_path: str) -> Path:
        """Return the mirror file for ``url_path`` inside the output directory.

        Raises
        ------
        ValueError
            If the URL path would place the file outside the output directory.
        """
        root = self.options.output_dir
        relative = url_path.strip("/") or "index"
        target = root / f"{relative}{self.options.suffix}"
        if not target.resolve().is_relative_to(root.resolve()):
            msg = f"URL path {url_path!r} escapes the output directory."
            raise ValueError(msg)
        return target

    def render_page(self, text: str) -> str:
        """Return the mirror Markdown for the raw page ``text``."""
        frontmatter = parse_frontmatter(text)
        rendered = self.template.render(
            title=frontmatter.title,
            description=frontmatter.description,
            body=clean_mdx_content(text),
        )
        return finish_text(rendered)

    def _write_page(self, document: ResolvedDocument) -> Path:
        if document.path is None or document.text is None:
            msg = f"{document.path} could not be read."
            raise ValueError(msg)
        frontmatter = parse_frontmatter(document.text)
        url_path = url_path_for(
            document.doc_id,
            self.context.resolver.relative_stem(document.path),
            slug=frontmatter.slug,
        )
        output_path = self.output_path_for(url_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_page(document.text), encoding="utf-8")
        logger.debug("mirrored %r to %s", document.doc_id, output_path)
        return output_path


__all__ = ["MirrorResult", "PageMirrorGenerator"]
