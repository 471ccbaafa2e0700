"""The site-wide checker script over a directory of generated pages."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SCRIPT = REPO_ROOT / "scripts" / "check_links.py"


def _run(html_dir: Path) -> subprocess.CompletedProcess:
    env = dict(os.environ, PYTHONPATH=str(REPO_ROOT))
    return subprocess.run(
        [sys.executable, str(SCRIPT), str(html_dir)],
        check=False,
        capture_output=True,
        text=True,
        env=env,
    )


def test_clean_site_passes(tmp_path: Path) -> None:
    (tmp_path / "a.html").write_text('<h2 id="intro">Intro</h2><a href="#intro">i</a>', encoding="utf-8")
    (tmp_path / "b.html").write_text('<a href="a.html#intro">see a</a>', encoding="utf-8")

    result = _run(tmp_path)
    assert result.returncode == 0, result.stdout + result.stderr
    assert "Pages checked: 2" in result.stdout
    assert "All anchors and links resolve correctly." in result.stdout


def test_broken_cross_page_link_fails(tmp_path: Path) -> None:
    (tmp_path / "a.html").write_text('<h2 id="intro">Intro</h2>', encoding="utf-8")
    (tmp_path / "b.html").write_text('<a href="a.html#intr">see a</a>', encoding="utf-8")

    result = _run(tmp_path)
    assert result.returncode == 1
    assert "[b.html] -> a.html#intr, perhaps you meant #intro" in result.stdout


def test_in_page_problems_fail(tmp_path: Path) -> None:
    (tmp_path / "a.html").write_text('<h2 id="x">X</h2><h2 id="x">X</h2>', encoding="utf-8")

    result = _run(tmp_path)
    assert result.returncode == 1
    assert "[a.html] DUPLICATE ID: x" in result.stdout


def test_missing_directory(tmp_path: Path) -> None:
    result = _run(tmp_path / "nope")
    assert result.returncode == 1
    assert "No such directory" in result.stdout
