"""Tests for the ``llms-docs`` command functions."""

from __future__ import annotations

import typing as typ

import pytest

from docs_llms import cli

if typ.TYPE_CHECKING:
    from .conftest import DocsSite


def _populate(docs_site: DocsSite) -> None:
    docs_site.write_site_config()
    docs_site.write_sidebar({"Guides": ["guides/setup", "guides/missing"]})
    docs_site.write_doc(
        "guides/setup.md",
        "---\ntitle: Setup\ndescription: How to set up the SDK.\n---\nBody\n",
    )


def test_index_command_reports_counts(
    docs_site: DocsSite,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``index`` writes llms.txt and prints listed/skipped counts."""
    _populate(docs_site)
    monkeypatch.chdir(docs_site.root)

    cli.index()

    out = capsys.readouterr().out
    assert "wrote static/llms.txt" in out
    assert "llms.txt: listed 1 pages, skipped 1 (unresolved)" in out
    assert (docs_site.root / "static" / "llms.txt").exists()


def test_mirrors_command_reports_counts(
    docs_site: DocsSite, capsys: pytest.CaptureFixture[str]
) -> None:
    """``mirrors`` writes pages under the given root."""
    _populate(docs_site)

    cli.mirrors(root=docs_site.root)

    out = capsys.readouterr().out
    assert "page mirrors: wrote 1 files, skipped 1 (unresolved)" in out
    assert (docs_site.root / "static" / "guides" / "setup.md").exists()
    assert not (docs_site.root / "static" / "llms.txt").exists()


def test_generate_command_uses_config_file(
    docs_site: DocsSite, capsys: pytest.CaptureFixture[str]
) -> None:
    """``generate`` honours an explicit config and writes both artifacts."""
    _populate(docs_site)
    config = docs_site.write_config(
        "index:\n  output: ai/llms.txt\nmirrors:\n  output_dir: build/md\n"
    )

    cli.generate(config=config, verbose=True)

    out = capsys.readouterr().out
    assert "llms.txt: listed 1 pages" in out
    assert "page mirrors: wrote 1 files" in out
    assert (docs_site.root / "static" / "ai" / "llms.txt").exists()
    assert (docs_site.root / "build" / "md" / "guides" / "setup.md").exists()


def test_generate_reports_collisions(
    docs_site: DocsSite, capsys: pytest.CaptureFixture[str]
) -> None:
    """Slug collisions are summarised on their own line."""
    docs_site.write_sidebar({"Guides": ["a", "b"]})
    docs_site.write_doc("a.md", "---\nslug: /same\n---\nA\n")
    docs_site.write_doc("b.md", "---\nslug: /same\n---\nB\n")

    cli.generate(root=docs_site.root)

    assert "page mirrors: 1 pages shared a URL with another" in capsys.readouterr().out


def test_missing_sidebar_exits_with_error(
    docs_site: DocsSite, capsys: pytest.CaptureFixture[str]
) -> None:
    """A missing sidebar file aborts with status 1 and no output files."""
    with pytest.raises(SystemExit) as excinfo:
        cli.index(root=docs_site.root)

    assert excinfo.value.code == 1
    assert "not found" in capsys.readouterr().err
    assert not (docs_site.root / "static").exists()


def test_malformed_config_exits_with_error(
    docs_site: DocsSite, capsys: pytest.CaptureFixture[str]
) -> None:
    """An invalid ``llms.yaml`` picked up from the root aborts the run."""
    docs_site.write_sidebar({"Guides": []})
    docs_site.write_config("index: [oops]\n")

    with pytest.raises(SystemExit):
        cli.generate(root=docs_site.root)

    assert "must be a mapping" in capsys.readouterr().err


def test_mirrors_report_read_failures_separately(
    docs_site: DocsSite, capsys: pytest.CaptureFixture[str]
) -> None:
    """Pages that resolve but cannot be read are not labelled unresolved."""
    docs_site.write_sidebar({"Guides": ["binary", "guides/missing"]})
    (docs_site.docs_dir / "binary.md").write_bytes(b"\xff\xfe\x00bad")

    cli.mirrors(root=docs_site.root)

    out = capsys.readouterr().out
    assert "page mirrors: wrote 0 files, skipped 1 (unresolved)" in out
    assert "page mirrors: 1 pages could not be processed" in out
