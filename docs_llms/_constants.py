"""Common literal values used across docs_llms.

These constants keep file extensions, output names, and default wording
centralized so the resolver, emitters, and tests can import the same values
without drifting. Intended for internal use within the docs_llms package.

Examples
--------
>>> from docs_llms import _constants
>>> _constants.CONTENT_EXTENSIONS
('.md', '.mdx')
>>> _constants.GENERATED_DESCRIPTION_TEMPLATE.format(brand="Acme", phrase="sdk")
'Learn more about Acme sdk'
"""

CONTENT_EXTENSIONS = (".md", ".mdx")
DEFAULT_CONFIG_FILENAME = "llms.yaml"
DEFAULT_INDEX_FILENAME = "llms.txt"
DEFAULT_MIRROR_SUFFIX = ".md"
DEFAULT_SIDEBAR_NAME = "docs"
DEFAULT_SITE_TITLE = "Documentation"
MAX_DESCRIPTION_LENGTH = 400
MIN_DESCRIPTION_LENGTH = 20
GENERATED_DESCRIPTION_TEMPLATE = "Learn more about {brand} {phrase}"
DEFAULT_INTRO = (
    "{brand} documentation, indexed for large language models. Each entry "
    "links to a page of the documentation site with a short summary.",
    "This documentation is organized into major sections. Each section "
    "includes tutorials, examples, and detailed technical references.",
)
