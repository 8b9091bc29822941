"""Map sidebar document identifiers to source files under the docs root.

Docusaurus identifiers usually mirror file paths, but not always: the last
segment may contain spaces where the file name uses hyphens, or the file may
declare a different ``id`` in its frontmatter. :class:`DocumentResolver`
tries each lookup strategy in order and stops at the first hit. An
identifier that matches nothing resolves to ``None``; callers count it as
skipped and move on.

Example
-------
>>> from pathlib import Path
>>> from docs_llms.resolver import DocumentResolver
>>> resolver = DocumentResolver(Path("docs"))  # doctest: +SKIP
>>> resolver.resolve("developers/overview")  # doctest: +SKIP
PosixPath('docs/developers/overview.md')
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import posixpath
import re
import typing as typ
from pathlib import Path

from docs_llms._constants import CONTENT_EXTENSIONS
from docs_llms.frontmatter import parse_frontmatter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

WHITESPACE_PATTERN = re.compile(r"\s+")

ResolveStrategy = typ.Callable[[Path, str], Path | None]


@dc.dataclass(slots=True, frozen=True)
class ResolvedDocument:
    """A document identifier paired with its source file and raw text.

    ``path`` is None when the identifier did not resolve; ``text`` is None
    when it did not resolve or the file could not be read.
    """

    doc_id: str
    path: Path | None
    text: str | None = None

    @property
    def resolved(self) -> bool:
        """Return True when a source file backs the identifier."""
        return self.path is not None


def _first_existing(directory: Path, stem: str) -> Path | None:
    """Return ``directory/stem`` with the first content extension that exists.

    Candidates the filesystem refuses to stat (over-long names, denied
    directories) count as missing.
    """
    for extension in CONTENT_EXTENSIONS:
        candidate = directory / f"{stem}{extension}"
        try:
            if candidate.is_file():
                return candidate
        except OSError as exc:
            logger.debug("cannot stat candidate %s: %s", candidate, exc)
    return None


def match_exact(directory: Path, base: str) -> Path | None:
    """Look for ``<base>.md`` or ``<base>.mdx`` as named."""
    return _first_existing(directory, base)


def match_kebab_case(directory: Path, base: str) -> Path | None:
    """Look for the file name with whitespace runs replaced by hyphens."""
    kebab = WHITESPACE_PATTERN.sub("-", base)
    if kebab == base:
        return None
    return _first_existing(directory, kebab)


def match_declared_id(directory: Path, base: str) -> Path | None:
    """Scan sibling content files for a frontmatter ``id`` equal to ``base``."""
    try:
        entries = sorted(directory.iterdir())
    except OSError:
        return None
    for entry in entries:
        if entry.suffix.lower() not in CONTENT_EXTENSIONS:
            continue
        try:
            if not entry.is_file():
                continue
            text = entry.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("skipping unreadable candidate %s: %s", entry, exc)
            continue
        if parse_frontmatter(text).id == base:
            return entry
    return None


DEFAULT_STRATEGIES: tuple[ResolveStrategy, ...] = (
    match_exact,
    match_kebab_case,
    match_declared_id,
)


class DocumentResolver:
    """Resolve document identifiers against a docs directory."""

    def __init__(
        self,
        docs_dir: Path,
        *,
        strategies: cabc.Sequence[ResolveStrategy] = DEFAULT_STRATEGIES,
    ) -> None:
        self.docs_dir = docs_dir
        self.strategies = tuple(strategies)

    def resolve(self, doc_id: str) -> Path | None:
        """Return the source file for ``doc_id`` or None when nothing matches.

        Parameters
        ----------
        doc_id : str
            Identifier as written in the sidebar, for example
            ``"developers/overview"``.

        Returns
        -------
        Path or None
            First path produced by the exact, kebab-case, and declared-id
            strategies, in that order.
        """
        directory = self.docs_dir / posixpath.dirname(doc_id)
        base = posixpath.basename(doc_id)
        if not base:
            return None
        candidates = (strategy(directory, base) for strategy in self.strategies)
        return next((path for path in candidates if path is not None), None)

    def load(self, doc_id: str) -> ResolvedDocument:
        """Resolve ``doc_id`` and read its text.

        Read failures are logged and leave ``text`` unset so a single bad
        file never stops the run.
        """
        path = self.resolve(doc_id)
        if path is None:
            logger.debug("unresolved document id %r", doc_id)
            return ResolvedDocument(doc_id=doc_id, path=None)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("could not read %s for %r: %s", path, doc_id, exc)
            return ResolvedDocument(doc_id=doc_id, path=path)
        return ResolvedDocument(doc_id=doc_id, path=path, text=text)

    def relative_stem(self, path: Path) -> str:
        """Return ``path`` relative to the docs root, POSIX style, suffix removed."""
        # ids such as "../shared/page" may point outside the docs root
        relative = Path(os.path.relpath(path, start=self.docs_dir))
        if relative.suffix.lower() in CONTENT_EXTENSIONS:
            relative = relative.with_suffix("")
        return relative.as_posix()


__all__ = [
    "DEFAULT_STRATEGIES",
    "DocumentResolver",
    "ResolveStrategy",
    "ResolvedDocument",
    "match_declared_id",
    "match_exact",
    "match_kebab_case",
]
