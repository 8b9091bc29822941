"""Emitters that turn a prepared build into ``llms.txt`` and page mirrors."""

from .llms_index import IndexEntry, IndexResult, IndexSection, LlmsIndexBuilder
from .page_mirrors import MirrorResult, PageMirrorGenerator

__all__ = [
    "IndexEntry",
    "IndexResult",
    "IndexSection",
    "LlmsIndexBuilder",
    "MirrorResult",
    "PageMirrorGenerator",
]
