"""Jinja environment shared by the text emitters."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


def build_environment(templates_dir: Path | None = None) -> Environment:
    """Return a Jinja environment reading templates from ``templates_dir``.

    The text templates end in ``.jinja`` and are therefore never
    autoescaped; HTML or XML templates placed in the same folder would be.
    """
    return Environment(
        loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )


def finish_text(rendered: str) -> str:
    """Return ``rendered`` terminated by exactly one newline."""
    return rendered.rstrip("\n") + "\n"


__all__ = ["DEFAULT_TEMPLATES_DIR", "build_environment", "finish_text"]
