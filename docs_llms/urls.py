"""Compute canonical URL paths for documentation pages.

The default path mirrors the file location under the docs root with the
content extension removed. A frontmatter ``slug`` that starts with ``/``
replaces it verbatim, matching how Docusaurus routes pages.

Examples
--------
>>> url_path_for("guides/setup", None)
'/guides/setup'
>>> url_path_for("guides/setup", "guides/setup-guide", slug="/start")
'/start'
>>> absolute_url("https://docs.example.com/", "/start")
'https://docs.example.com/start'
"""

from __future__ import annotations


def url_path_for(
    doc_id: str, relative_stem: str | None, *, slug: str | None = None
) -> str:
    """Return the URL path of a document.

    Parameters
    ----------
    doc_id : str
        Sidebar identifier, used verbatim when the document did not resolve.
    relative_stem : str or None
        POSIX path of the resolved file relative to the docs root, without
        its extension.
    slug : str, optional
        Frontmatter slug. Only absolute slugs (leading ``/``) override the
        default path; relative slugs are ignored.

    Returns
    -------
    str
        URL path starting with ``/``.
    """
    if slug and slug.startswith("/"):
        return slug
    if relative_stem is None:
        return f"/{doc_id}"
    return f"/{relative_stem}"


def absolute_url(site_url: str, path: str) -> str:
    """Prefix ``path`` with ``site_url`` (trailing slash trimmed) when one is known."""
    if not site_url:
        return path
    return f"{site_url.rstrip('/')}{path}"


__all__ = ["absolute_url", "url_path_for"]
