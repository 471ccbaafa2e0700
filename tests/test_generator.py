from __future__ import annotations

import os
from pathlib import Path

import pytest

from guidegen.config import GeneratorOptions
from guidegen.diagnostics import DiagnosticKind
from guidegen.generator import Generator

GUIDE = """\
# Getting Started

This guide covers the basics.

endprologue.

## Installation

Read the [configuration](#configuration) chapter next.

### Requirements

<shell>
## this is a shell comment
</shell>

## Configuration

Go back to [installing](#instalation).
"""


def _write(root: Path, name: str, text: str = GUIDE) -> Path:
    source = root / "source"
    source.mkdir(exist_ok=True)
    path = source / name
    path.write_text(text, encoding="utf-8")
    return path


def _generator(root: Path, **kwargs) -> Generator:
    return Generator(GeneratorOptions(guides_dir=root, **kwargs))


def test_generates_page_with_sidebar_and_ids(tmp_path: Path) -> None:
    _write(tmp_path, "getting_started.md")
    report = _generator(tmp_path).generate()

    assert list(report) == ["getting_started.html"]
    page = (tmp_path / "output" / "getting_started.html").read_text(encoding="utf-8")
    assert "<title>Guides: Getting Started</title>" in page
    assert '<h2 id="installation">Installation</h2>' in page
    assert '<h3 id="requirements">Requirements</h3>' in page
    assert '<a href="#requirements">Requirements</a>' in page
    assert "## this is a shell comment" in page
    assert "This guide covers the basics." in page


def test_warnings_report_broken_links(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write(tmp_path, "getting_started.md")
    report = _generator(tmp_path, warnings=True).generate()

    diagnostics = report["getting_started.html"]
    assert [str(d) for d in diagnostics] == [
        "BROKEN LINK: #instalation, perhaps you meant #installation."
    ]
    out = capsys.readouterr().out
    assert "Generating getting_started.html" in out
    assert "*** BROKEN LINK: #instalation, perhaps you meant #installation." in out


def test_no_checks_without_warnings(tmp_path: Path) -> None:
    _write(tmp_path, "getting_started.md")
    assert _generator(tmp_path).generate() == {"getting_started.html": []}


def test_duplicate_chapters_are_reported(tmp_path: Path) -> None:
    _write(tmp_path, "dup.md", "# Dup\n\nendprologue.\n\n## Setup\n\n## Setup\n")
    diagnostics = _generator(tmp_path, warnings=True).generate()["dup.html"]
    assert [(d.kind, d.subject) for d in diagnostics] == [(DiagnosticKind.DUPLICATE_ID, "setup")]


def test_blank_ids_are_reported(tmp_path: Path) -> None:
    _write(tmp_path, "blank.md", "# Blank\n\nendprologue.\n\n## ???\n")
    diagnostics = _generator(tmp_path, warnings=True).generate()["blank.html"]
    assert DiagnosticKind.BLANK_ID in [d.kind for d in diagnostics]


def test_up_to_date_guides_are_skipped(tmp_path: Path) -> None:
    source = _write(tmp_path, "getting_started.md")
    generator = _generator(tmp_path)
    assert generator.generate() != {}

    output = tmp_path / "output" / "getting_started.html"
    past = output.stat().st_mtime - 100
    os.utime(source, (past, past))
    assert generator.generate() == {}

    future = output.stat().st_mtime + 100
    os.utime(source, (future, future))
    assert list(generator.generate()) == ["getting_started.html"]


def test_all_regenerates_everything(tmp_path: Path) -> None:
    _write(tmp_path, "getting_started.md")
    _generator(tmp_path).generate()
    assert list(_generator(tmp_path, all=True).generate()) == ["getting_started.html"]


def test_only_prefixes_and_partials(tmp_path: Path) -> None:
    for name in ("associations.md", "migrations.md", "routing.md", "_license.md"):
        _write(tmp_path, name)

    generator = _generator(tmp_path)
    assert [p.name for p in generator.guides_to_generate()] == [
        "associations.md",
        "migrations.md",
        "routing.md",
    ]

    only = _generator(tmp_path, only=["assoc", "rout"])
    assert [p.name for p in only.guides_to_generate()] == ["associations.md", "routing.md"]


def test_assets_are_copied(tmp_path: Path) -> None:
    images = tmp_path / "assets" / "images"
    images.mkdir(parents=True)
    (images / "logo.png").write_bytes(b"png")
    (tmp_path / "source").mkdir()

    _generator(tmp_path).generate()
    assert (tmp_path / "output" / "images" / "logo.png").read_bytes() == b"png"


def test_edge_and_numbered(tmp_path: Path) -> None:
    _write(tmp_path, "getting_started.md")
    _generator(tmp_path, edge=True, numbered=True).generate()
    page = (tmp_path / "output" / "getting_started.html").read_text(encoding="utf-8")
    assert '<span class="edge-badge">Edge</span>' in page
    assert '<h2 id="installation">1 Installation</h2>' in page
    assert '<h3 id="requirements">1.1 Requirements</h3>' in page
    # the sidebar keeps the plain titles
    assert '<a href="#installation">Installation</a>' in page
