"""Generate ``llms.txt`` and clean Markdown page mirrors for a docs site.

This package exposes the CLI entry points used by ``llms-docs`` to index a
Docusaurus documentation tree for large language models.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docs_llms import main
>>> main()  # doctest: +SKIP
>>> from docs_llms import app
>>> app.name[0]
'llms-docs'
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
