"""Build and render the ``llms.txt`` index of a documentation site.

The index follows the llmstxt.org layout: a heading with the site title, an
optional tagline blockquote, two introductory sentences, and one ``##``
section per top-level sidebar label listing its pages as
``- [Title](URL): Description`` bullets sorted by title. Sections without any
listed page are omitted.

Typical usage pairs the builder with a prepared build context:

>>> from pathlib import Path
>>> from docs_llms.build import prepare_build
>>> from docs_llms.emitters import LlmsIndexBuilder
>>> context = prepare_build(Path("llms.yaml"))  # doctest: +SKIP
>>> result = LlmsIndexBuilder(context).run()  # doctest: +SKIP
>>> print(result.path)  # doctest: +SKIP
static/llms.txt
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from docs_llms.metadata import index_description
from docs_llms.sidebar import collect_doc_ids

from .rendering import build_environment, finish_text

if typ.TYPE_CHECKING:
    from pathlib import Path

    from docs_llms.build import BuildContext
    from docs_llms.metadata import DocumentMetadata

logger = logging.getLogger(__name__)

ELLIPSIS = "..."


@dc.dataclass(slots=True, frozen=True)
class IndexEntry:
    """One bullet of the index."""

    title: str
    url: str
    description: str


@dc.dataclass(slots=True, frozen=True)
class IndexSection:
    """A ``##`` section and its sorted entries."""

    label: str
    entries: tuple[IndexEntry, ...]


@dc.dataclass(slots=True)
class IndexResult:
    """Outcome of an index build.

    Attributes
    ----------
    path : Path
        Location of the written ``llms.txt``.
    written : int
        Number of bullets emitted across all sections.
    skipped : int
        Number of distinct identifiers left out because they did not resolve.
    failed : int
        Number of distinct identifiers left out because processing them
        raised an error.
    """

    path: Path
    written: int
    skipped: int
    failed: int = 0


def clip_description(text: str, max_length: int) -> str:
    """Truncate ``text`` to ``max_length`` characters, ending with an ellipsis.

    Examples
    --------
    >>> clip_description("abcdefghij", 8)
    'abcde...'
    >>> clip_description("short", 8)
    'short'
    """
    if len(text) <= max_length:
        return text
    return f"{text[: max_length - len(ELLIPSIS)]}{ELLIPSIS}"


def sort_entries(entries: typ.Iterable[IndexEntry]) -> tuple[IndexEntry, ...]:
    """Return entries ordered by case-insensitive title, then exact title and URL."""
    return tuple(
        sorted(
            entries,
            key=lambda entry: (entry.title.casefold(), entry.title, entry.url),
        )
    )


class LlmsIndexBuilder:
    """Render ``llms.txt`` from the sidebar sections of a build."""

    def __init__(
        self, context: BuildContext, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the index builder.

        Parameters
        ----------
        context : BuildContext
            Prepared configuration, site metadata, sidebar, and resolver
            (see :func:`docs_llms.build.prepare_build`).
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``docs_llms/templates`` directory when ``None``.
        """
        self.context = context
        self.options = context.config.index
        self.extractor = context.metadata_extractor()
        self.env = build_environment(templates_dir)
        self.template = self.env.get_template("llms_txt.jinja")
        self._metadata: dict[str, DocumentMetadata | None] = {}
        self._failed: set[str] = set()

    def run(self) -> IndexResult:
        """Write the index file and return the written/skipped counts."""
        sections = self.gather_sections()
        output_path = self.options.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(sections), encoding="utf-8")
        failed = len(self._failed)
        skipped = sum(1 for meta in self._metadata.values() if meta is None) - failed
        written = sum(len(section.entries) for section in sections)
        logger.info(
            "index lists %d pages, skipped %d, failed %d", written, skipped, failed
        )
        return IndexResult(
            path=output_path, written=written, skipped=skipped, failed=failed
        )

    def render(self, sections: typ.Sequence[IndexSection]) -> str:
        """Return the index text for ``sections``."""
        site = self.context.site
        intro = [line.replace("{brand}", site.brand) for line in self.options.intro]
        rendered = self.template.render(site=site, intro=intro, sections=sections)
        return finish_text(rendered)

    def gather_sections(self) -> list[IndexSection]:
        """Collect the non-empty index sections in sidebar order."""
        sections: list[IndexSection] = []
        for label, nodes in self.context.sections.items():
            entries = [
                entry
                for doc_id in sorted(collect_doc_ids(nodes))
                if (entry := self._build_entry(doc_id)) is not None
            ]
            if not entries:
                logger.debug("omitting section %r with no listed pages", label)
                continue
            sections.append(IndexSection(label=label, entries=sort_entries(entries)))
        return sections

    def _build_entry(self, doc_id: str) -> IndexEntry | None:
        metadata = self._metadata_for(doc_id)
        if metadata is None:
            return None
        description = index_description(
            metadata,
            self.context.site.brand,
            self.context.config.titles.special_segments,
        )
        return IndexEntry(
            title=metadata.title,
            url=metadata.url,
            description=clip_description(
                description, self.options.max_description_length
            ),
        )

    def _metadata_for(self, doc_id: str) -> DocumentMetadata | None:
        """Return metadata for ``doc_id``, resolving each identifier once per run."""
        if doc_id in self._metadata:
            return self._metadata[doc_id]
        metadata: DocumentMetadata | None = None
        try:
            document = self.context.resolver.load(doc_id)
            if document.resolved or self.options.include_unresolved:
                metadata = self.extractor.extract(document)
            else:
                logger.warning("skipping unresolved document id %r", doc_id)
        except (OSError, UnicodeDecodeError, ValueError) as exc:
            logger.warning("could not index %r: %s", doc_id, exc)
            self._failed.add(doc_id)
        self._metadata[doc_id] = metadata
        return metadata


__all__ = [
    "IndexEntry",
    "IndexResult",
    "IndexSection",
    "LlmsIndexBuilder",
    "clip_description",
    "sort_entries",
]
