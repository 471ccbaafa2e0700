"""
Anchor and fragment checks for one rendered page.

Anchors are the ids of headings and footnotes; references are the fragments
of ``<a href="#...">`` links. Every reference that does not resolve is
reported together with the closest anchor by edit distance, and ids defined
more than once are reported as duplicates. Nothing here raises or prints:
the caller gets a list of diagnostics and decides what to do with them.
"""

from html.parser import HTMLParser

from . import levenshtein
from .diagnostics import Diagnostic, DiagnosticKind

HEADING_TAGS = frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})
FOOTNOTE_TAGS = frozenset({"p", "sup", "li"})

# Skip link in the layout, jumps to the content DIV
IGNORED_FRAGMENTS = frozenset({"mainCol"})


class PageScanner(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.anchors: dict[str, int] = {}
        self.duplicates: list[Diagnostic] = []
        self.references: list[tuple[str, int]] = []
        self._footnote_divs: list[bool] = []

    def handle_starttag(self, tag, attrs):
        attributes = dict(attrs)
        classes = (attributes.get("class") or "").split()
        line = self.getpos()[0]

        if tag == "div":
            self._footnote_divs.append("footnote" in classes)
        elif tag == "a":
            href = attributes.get("href") or ""
            if href.startswith("#") and len(href) > 1:
                self.references.append((href[1:], line))

        anchor = attributes.get("id")
        if anchor and self._is_anchor(tag, classes):
            if anchor in self.anchors:
                self.duplicates.append(Diagnostic(DiagnosticKind.DUPLICATE_ID, anchor, line=line))
            else:
                self.anchors[anchor] = line

    def handle_endtag(self, tag):
        if tag == "div" and self._footnote_divs:
            self._footnote_divs.pop()

    def _is_anchor(self, tag: str, classes: list[str]) -> bool:
        if tag in HEADING_TAGS:
            return True
        if tag not in FOOTNOTE_TAGS:
            return False
        # <sup id> is a footnote marker, <li id> only counts in a footnote list
        if "footnote" in classes or tag == "sup":
            return True
        return tag == "li" and any(self._footnote_divs)


def scan(html: str) -> PageScanner:
    scanner = PageScanner()
    scanner.feed(html)
    scanner.close()
    return scanner


def extract_anchors(html: str) -> tuple[dict[str, int], list[Diagnostic]]:
    """Return the page's anchors (id -> line of first definition, in page
    order) and one DUPLICATE ID diagnostic per repeated definition."""
    scanner = scan(html)
    return scanner.anchors, scanner.duplicates


def extract_references(html: str, ignore=IGNORED_FRAGMENTS) -> list[str]:
    return [fragment for fragment, _ in scan(html).references if fragment not in ignore]


def suggest(fragment: str, anchors) -> str | None:
    """Closest anchor to ``fragment``; ties go to the earliest anchor."""
    if not anchors:
        return None
    return min(anchors, key=lambda anchor: levenshtein.distance(fragment, anchor))


def diagnose(scanner: PageScanner, ignore=IGNORED_FRAGMENTS) -> list[Diagnostic]:
    """Duplicates and broken links of an already scanned page."""
    diagnostics = list(scanner.duplicates)
    for fragment, line in scanner.references:
        if fragment in ignore or fragment in scanner.anchors:
            continue
        diagnostics.append(
            Diagnostic(
                DiagnosticKind.BROKEN_LINK,
                fragment,
                suggestion=suggest(fragment, scanner.anchors),
                line=line,
            )
        )
    return diagnostics


def check(html: str, ignore=IGNORED_FRAGMENTS) -> list[Diagnostic]:
    return diagnose(scan(html), ignore)
