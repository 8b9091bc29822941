r"""Derive titles, descriptions, and URLs for resolved documentation pages.

Each page contributes a :class:`DocumentMetadata` record to the index. The
title comes from frontmatter or is humanized from the identifier, and the
description comes from frontmatter or from the first prose line of the body.
Descriptions that read poorly (too short, code fences, admonitions,
placeholder text) are replaced by a sentence generated from the page path,
unless the author wrote them in frontmatter.

Example
-------
>>> from docs_llms.metadata import generated_description, title_case_from_slug
>>> title_case_from_slug("guides/getting_started")
'Getting Started'
>>> generated_description("developers/overview", "Acme")
'Learn more about Acme developers'
"""

from __future__ import annotations

import dataclasses as dc
import enum
import logging
import re
import typing as typ

from docs_llms._constants import (
    GENERATED_DESCRIPTION_TEMPLATE,
    MIN_DESCRIPTION_LENGTH,
)
from docs_llms.config import TitleOptions
from docs_llms.frontmatter import parse_frontmatter, strip_frontmatter
from docs_llms.urls import absolute_url, url_path_for

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from docs_llms.config import SiteMetadata
    from docs_llms.resolver import DocumentResolver, ResolvedDocument

logger = logging.getLogger(__name__)

SEGMENT_SEPARATOR_PATTERN = re.compile(r"[-_]+")
WHITESPACE_PATTERN = re.compile(r"\s+")
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\([^)]+\)")
INLINE_CODE_PATTERN = re.compile(r"`([^`]+)`")
MDX_CODE_BLOCK_MARKER = re.compile(r"mdx-code-block", re.IGNORECASE)
ADMONITION_LINE_PATTERN = re.compile(r"^:::", re.MULTILINE)
PLACEHOLDER_PATTERN = re.compile(r"please\s+take\s+note", re.IGNORECASE)
LINE_BREAK_PATTERN = re.compile(r"\r?\n")


class DescriptionSource(enum.StrEnum):
    """Where a page description came from."""

    FRONTMATTER = "frontmatter"
    CONTENT = "content"
    NONE = "none"


@dc.dataclass(slots=True, frozen=True)
class DocumentMetadata:
    """Index-ready facts about one documentation page.

    Attributes
    ----------
    doc_id : str
        Sidebar identifier.
    title : str
        Frontmatter title or the humanized identifier.
    description : str
        Raw description before the quality gate; may be empty.
    url : str
        Absolute URL when the site URL is known, otherwise the URL path.
    description_source : DescriptionSource
        Origin of ``description``.
    relative_stem : str or None
        Docs-relative path of the source file without extension, or None
        when the identifier did not resolve.
    """

    doc_id: str
    title: str
    description: str
    url: str
    description_source: DescriptionSource
    relative_stem: str | None = None


def title_case_from_slug(doc_id: str) -> str:
    """Return the last identifier segment as capitalized words.

    Only the first letter of each word changes case, so ``"gRPC-api"``
    becomes ``"GRPC Api"``.
    """
    name = doc_id.rsplit("/", 1)[-1]
    name = SEGMENT_SEPARATOR_PATTERN.sub(" ", name).strip()
    return " ".join(_capitalize(word) for word in name.split(" ") if word)


def humanize_segment(
    segment: str, special_segments: cabc.Mapping[str, str] | None = None
) -> str:
    """Return a path segment as title words, honouring special spellings.

    Examples
    --------
    >>> humanize_segment("rest-api", {"rest-api": "Rest API"})
    'Rest API'
    >>> humanize_segment("smart_contracts")
    'Smart Contracts'
    """
    text = segment.strip()
    if special_segments and text in special_segments:
        return special_segments[text]
    return " ".join(
        _capitalize(word) for word in SEGMENT_SEPARATOR_PATTERN.split(text) if word
    )


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def contextualize_title(
    title: str, relative_stem: str, titles: TitleOptions
) -> str:
    """Prefix generic titles with their parent section when configured.

    A page ``rest-api/overview`` titled ``"Overview"`` becomes
    ``"Rest API Overview"`` when ``rest-api`` is a context parent, so many
    sections' overview pages stay distinguishable in the index.
    """
    parts = [part for part in relative_stem.split("/") if part]
    if len(parts) < 2:
        return title
    parent, last = parts[-2], parts[-1]
    if parent not in titles.context_parents:
        return title
    if title.strip() != humanize_segment(last, titles.special_segments):
        return title
    return f"{humanize_segment(parent, titles.special_segments)} {title}"


def extract_first_paragraph(text: str) -> str:
    """Return the first prose line of a page body, or an empty string.

    Frontmatter, blank lines, ``[comment]:`` directives, headings, raw markup
    lines and everything between ``:::`` admonition markers are skipped.
    Links collapse to their text, inline code loses its backticks, and
    whitespace is compacted.
    """
    body = strip_frontmatter(text)
    in_admonition = False
    for raw_line in LINE_BREAK_PATTERN.split(body):
        line = raw_line.strip()
        if not line or line.startswith("[comment]:"):
            continue
        if line.startswith(":::"):
            in_admonition = not in_admonition
            continue
        if in_admonition or line.startswith(("#", "<")):
            continue
        line = LINK_PATTERN.sub(r"\1", line)
        line = INLINE_CODE_PATTERN.sub(r"\1", line)
        line = WHITESPACE_PATTERN.sub(" ", line).strip()
        if line:
            return line
    return ""


def is_poor_description(description: str | None) -> bool:
    """Return True when a description is unfit for the index.

    Examples
    --------
    >>> is_poor_description("x" * 19)
    True
    >>> is_poor_description("x" * 20)
    False
    >>> is_poor_description("Please take note of the following steps.")
    True
    """
    text = (description or "").strip()
    return (
        not text
        or text.startswith("```")
        or MDX_CODE_BLOCK_MARKER.search(text) is not None
        or ADMONITION_LINE_PATTERN.search(text) is not None
        or PLACEHOLDER_PATTERN.search(text) is not None
        or len(text) < MIN_DESCRIPTION_LENGTH
    )


def generated_description(
    reference: str,
    brand: str,
    special_segments: cabc.Mapping[str, str] | None = None,
) -> str:
    """Return a ``"Learn more about <brand> ..."`` sentence for a page path.

    ``index`` segments are dropped, as is a trailing ``overview`` when at
    least two segments remain.

    Examples
    --------
    >>> generated_description("index", "Acme")
    'Learn more about Acme documentation'
    >>> generated_description("sdk-and-tools/rest-api/overview", "Acme")
    'Learn more about Acme sdk and tools rest api'
    """
    parts = [part for part in reference.split("/") if part and part != "index"]
    if len(parts) >= 2 and parts[-1].lower() == "overview":
        parts = parts[:-1]
    if not parts:
        phrase = "documentation"
    else:
        phrase = " ".join(
            humanize_segment(part, special_segments).lower() for part in parts
        )
    return GENERATED_DESCRIPTION_TEMPLATE.format(brand=brand, phrase=phrase).strip()


def index_description(
    metadata: DocumentMetadata,
    brand: str,
    special_segments: cabc.Mapping[str, str] | None = None,
) -> str:
    """Return the description shown in the index for ``metadata``.

    Frontmatter descriptions are kept as written (whitespace compacted);
    other descriptions that fail :func:`is_poor_description` are replaced by
    :func:`generated_description` of the page path.
    """
    description = WHITESPACE_PATTERN.sub(" ", metadata.description).strip()
    if metadata.description_source is DescriptionSource.FRONTMATTER:
        return description
    if not is_poor_description(description):
        return description
    reference = metadata.relative_stem or metadata.doc_id
    return generated_description(reference, brand, special_segments)


class MetadataExtractor:
    """Build :class:`DocumentMetadata` records for resolved documents."""

    def __init__(
        self,
        resolver: DocumentResolver,
        site: SiteMetadata,
        *,
        titles: TitleOptions | None = None,
    ) -> None:
        self.resolver = resolver
        self.site = site
        self.titles = titles or TitleOptions()

    def extract(self, document: ResolvedDocument) -> DocumentMetadata:
        """Return metadata for ``document``, degrading to defaults on bad input.

        Unresolved or unreadable documents keep the humanized title, an empty
        description, and the identifier-based URL.
        """
        default_title = title_case_from_slug(document.doc_id)
        relative_stem = self._relative_stem(document.path)
        fallback = DocumentMetadata(
            doc_id=document.doc_id,
            title=default_title,
            description="",
            url=self.url_for(document.doc_id, relative_stem),
            description_source=DescriptionSource.NONE,
            relative_stem=relative_stem,
        )
        if document.text is None or relative_stem is None:
            return fallback

        try:
            frontmatter = parse_frontmatter(document.text)
            description = frontmatter.description or extract_first_paragraph(
                document.text
            )
        except (ValueError, TypeError) as exc:
            logger.warning("could not parse %s: %s", document.path, exc)
            return fallback

        title = contextualize_title(
            frontmatter.title or default_title, relative_stem, self.titles
        )
        if frontmatter.description:
            source = DescriptionSource.FRONTMATTER
        elif description:
            source = DescriptionSource.CONTENT
        else:
            source = DescriptionSource.NONE
        return DocumentMetadata(
            doc_id=document.doc_id,
            title=title,
            description=description,
            url=self.url_for(document.doc_id, relative_stem, slug=frontmatter.slug),
            description_source=source,
            relative_stem=relative_stem,
        )

    def url_for(
        self, doc_id: str, relative_stem: str | None, *, slug: str | None = None
    ) -> str:
        """Return the absolute (or site-relative) URL of a document."""
        return absolute_url(
            self.site.site_url, url_path_for(doc_id, relative_stem, slug=slug)
        )

    def _relative_stem(self, path: Path | None) -> str | None:
        if path is None:
            return None
        return self.resolver.relative_stem(path)


__all__ = [
    "DescriptionSource",
    "DocumentMetadata",
    "MetadataExtractor",
    "contextualize_title",
    "extract_first_paragraph",
    "generated_description",
    "humanize_segment",
    "index_description",
    "is_poor_description",
    "title_case_from_slug",
]
