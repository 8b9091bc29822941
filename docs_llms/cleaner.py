r"""Strip MDX-only syntax from documentation pages to leave portable Markdown.

This is a best-effort pass of regular expressions, not an MDX parser.
Frontmatter, ``mdx-code-block`` fences, ``import`` lines, ``[comment]: #``
directives and the wrapper tags of a few Docusaurus components are removed;
the text inside those wrappers is kept. Markup outside these patterns passes
through unchanged.

Example
-------
>>> from docs_llms.cleaner import clean_mdx_content
>>> clean_mdx_content('<Tabs defaultValue="a">\n<TabItem value="a">\nHello\n</TabItem>\n</Tabs>')
'Hello'
"""

from __future__ import annotations

import re

from docs_llms.frontmatter import strip_frontmatter

MDX_CODE_BLOCK_PATTERN = re.compile(r"```mdx-code-block\n[\s\S]*?```\n?")
IMPORT_LINE_PATTERN = re.compile(r"^import\s+.+$", re.MULTILINE)
COMMENT_LINE_PATTERN = re.compile(r"^\[comment\]:\s*#\s*\(.*\)\s*$", re.MULTILINE)
BLANK_RUN_PATTERN = re.compile(r"\n{3,}")

# Opening tags may span several lines (``<Tabs\n  defaultValue="a"\n>``).
WRAPPER_TAG_PATTERNS = (
    re.compile(r"<Tabs[\s\S]*?>"),
    re.compile(r"</Tabs>"),
    re.compile(r"<TabItem[\s\S]*?>"),
    re.compile(r"</TabItem>"),
    re.compile(r"<details[\s\S]*?>", re.IGNORECASE),
    re.compile(r"</details>", re.IGNORECASE),
    re.compile(r"<summary[\s\S]*?>", re.IGNORECASE),
    re.compile(r"</summary>", re.IGNORECASE),
)


def clean_mdx_content(text: str) -> str:
    """Return ``text`` as trimmed Markdown with MDX wrappers removed.

    Parameters
    ----------
    text : str
        Raw page source, frontmatter included.

    Returns
    -------
    str
        Cleaned Markdown with at most two consecutive newlines and no
        leading or trailing whitespace.
    """
    content = strip_frontmatter(text)
    content = MDX_CODE_BLOCK_PATTERN.sub("", content)
    content = IMPORT_LINE_PATTERN.sub("", content)
    content = COMMENT_LINE_PATTERN.sub("", content)
    for pattern in WRAPPER_TAG_PATTERNS:
        content = pattern.sub("", content)
    content = BLANK_RUN_PATTERN.sub("\n\n", content)
    return content.strip()


__all__ = ["clean_mdx_content"]
