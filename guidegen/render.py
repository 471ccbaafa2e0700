"""
Markdown to HTML for guide bodies, headers and sidebar titles.

Code samples written as ``<ruby>...</ruby>`` (and the other tags in
CODE_SAMPLE_TAGS) are lifted out before Markdown runs and restored afterwards
as pre-highlighted containers, so the Markdown parser never touches them.
"""

import html
import re

import markdown
from markdown.extensions.toc import TocExtension

from .slug import slugify

CODE_SAMPLE_TAGS = ("ruby", "erb", "html", "sql", "javascript", "python", "yaml", "shell", "plain")
CODE_SAMPLE_RE = re.compile(r"<(%s)>(.*?)</\1>" % "|".join(CODE_SAMPLE_TAGS), re.DOTALL)

_PROLOGUE_END = re.compile(r"^endprologue\.[ \t]*$", re.MULTILINE)
_SINGLE_PARAGRAPH = re.compile(r"^<p>(.*)</p>$", re.DOTALL)


def extract_title(md_text: str) -> str:
    """Return the first H1 heading text, or "Document"."""
    m = re.search(r"^#\s+(.+)$", md_text, re.MULTILINE)
    return m.group(1).strip() if m else "Document"


def split_prologue(md_text: str) -> tuple[str, str]:
    """Split a guide into (header section, body) at the ``endprologue.`` line.

    Guides without the marker have an empty header.
    """
    m = _PROLOGUE_END.search(md_text)
    if m is None:
        return "", md_text.strip()
    return md_text[:m.start()].strip(), md_text[m.end():].strip()


def _brush(lang: str) -> str:
    if lang in ("ruby", "sql", "javascript", "python", "plain"):
        return lang
    if lang == "erb":
        return "ruby; html-script: true"
    if lang == "html":
        return "xml"  # html is understood, but the stylesheet has .xml rules
    return "plain"


def preprocess_code_samples(md_text: str) -> tuple[str, dict[str, str]]:
    """
    Replace code-sample tags with placeholders so the markdown parser leaves
    their content alone. Returns the processed text and the placeholder map.
    """
    counter = [0]
    placeholders: dict[str, str] = {}

    def replacer(match: re.Match) -> str:
        key = f"CODE_SAMPLE_PLACEHOLDER_{counter[0]}_END"
        counter[0] += 1
        code = html.escape(match.group(2).strip())
        placeholders[key] = (
            '<div class="code_container">\n'
            f'<pre class="brush: {_brush(match.group(1))}; gutter: false; toolbar: false">\n'
            f"{code}\n"
            "</pre>\n"
            "</div>"
        )
        return f"\n\n{key}\n\n"

    processed = CODE_SAMPLE_RE.sub(replacer, md_text)
    return processed, placeholders


def postprocess_placeholders(html_text: str, placeholders: dict[str, str]) -> str:
    """Substitute placeholders back with their HTML blocks."""
    for key, block in placeholders.items():
        # The markdown library wraps the key in a <p> tag
        html_text = html_text.replace(f"<p>{key}</p>", block)
        html_text = html_text.replace(key, block)
    return html_text


def _extensions() -> list:
    # toc shares slugify with the indexer; explicit {#id} ids from attr_list win
    return [
        "tables",
        "attr_list",
        "footnotes",
        "sane_lists",
        "pymdownx.superfences",
        TocExtension(slugify=slugify),
    ]


def md_to_html(md_text: str) -> str:
    """Convert a Markdown string to an HTML body fragment."""
    preprocessed, placeholders = preprocess_code_samples(md_text)
    body = markdown.markdown(preprocessed, extensions=_extensions())
    return postprocess_placeholders(body, placeholders)


def render_inline(text: str) -> str:
    """Render a heading title for use inside a link.

    Only inline markup survives: if Markdown turns the title into anything but
    a single paragraph, the escaped plain text is returned instead.
    """
    rendered = markdown.markdown(text.strip())
    m = _SINGLE_PARAGRAPH.match(rendered)
    if m is None:
        return html.escape(text.strip())
    return m.group(1)
