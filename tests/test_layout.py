from __future__ import annotations

from guidegen.indexer import index_headings
from guidegen.layout import render_page, render_sidebar


def test_sidebar_lists_chapters_and_sections() -> None:
    tree = index_headings("## Overview\n### Setup\n### Usage\n## Next\n").tree
    sidebar = render_sidebar(tree)
    assert sidebar.startswith('<div id="subCol">')
    assert (
        '<li><a href="#overview">Overview</a><ul>'
        '<li><a href="#setup">Setup</a></li>'
        '<li><a href="#usage">Usage</a></li></ul></li>'
    ) in sidebar
    assert '<li><a href="#next">Next</a></li>' in sidebar


def test_sidebar_titles_render_inline_markup() -> None:
    tree = index_headings("## The `has_many` Association\n").tree
    assert "<code>has_many</code>" in render_sidebar(tree)


def test_empty_sidebar() -> None:
    sidebar = render_sidebar({})
    assert '<ol class="chapters">' in sidebar
    assert "<li>" not in sidebar


def test_page_structure() -> None:
    page = render_page("Guides: A & B", "<h1>A</h1>", "<div id=\"subCol\"></div>", "<p>body</p>")
    assert "<title>Guides: A &amp; B</title>" in page
    assert 'href="#mainCol"' in page
    assert '<div id="mainCol">\n<p>body</p>\n</div>' in page
    assert "edge-badge\">Edge" not in page


def test_edge_badge() -> None:
    page = render_page("t", "", "", "", edge=True)
    assert '<span class="edge-badge">Edge</span>' in page
