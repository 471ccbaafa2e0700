"""
Two-level heading index for guide bodies.

``## Title`` opens a chapter and ``### Title`` a section inside it. Every such
marker is rewritten as ``## Title {#id}`` so the renderer emits exactly the
id recorded here, and the chapters and sections are collected into an ordered
tree for the sidebar.
"""

import re
from dataclasses import dataclass, field

from .diagnostics import Diagnostic, DiagnosticKind
from .render import CODE_SAMPLE_RE
from .slug import slugify

HEADING_RE = re.compile(
    r"^(?P<marker>#{2,3})[ \t]+(?P<title>[^\n]*?)"
    r"(?:[ \t]*\{(?P<attrs>[^}\n]*)\})?"
    r"(?:[ \t]+#+)?[ \t]*(?P<eol>\r?)$",
    re.MULTILINE,
)
FENCED_BLOCK_RE = re.compile(r"^(`{3,}|~{3,})[^\n]*\n.*?^\1[ \t]*\r?$", re.MULTILINE | re.DOTALL)

_VALID_ID = re.compile(r"^[^\s#{}]+$")


@dataclass(frozen=True)
class Heading:
    text: str
    id: str
    level: int
    line: int = 0


@dataclass
class IndexResult:
    body: str
    tree: dict[Heading, list[Heading]]
    diagnostics: list[Diagnostic] = field(default_factory=list)


def _split_attrs(attrs: str) -> tuple[str | None, list[str]] | None:
    """Pull the ``#id`` token out of an attr_list body such as ``: #id .note``.

    Returns (id or None, remaining tokens), or None when the id token is unusable.
    """
    tokens = attrs.strip().lstrip(":").split()
    ids = [token[1:] for token in tokens if token.startswith("#")]
    rest = [token for token in tokens if not token.startswith("#")]
    if len(ids) > 1 or (ids and not _VALID_ID.match(ids[0])):
        return None
    return (ids[0] if ids else None), rest


def _protected_spans(body: str) -> list[tuple[int, int]]:
    spans = [m.span() for m in FENCED_BLOCK_RE.finditer(body)]
    spans.extend(m.span() for m in CODE_SAMPLE_RE.finditer(body))
    return spans


class Indexer:
    """Index the chapters of one guide body.

    With ``warnings`` on, titles that slug to nothing are reported as
    ``BLANK ID`` diagnostics. With ``numbered`` on, rewritten titles carry
    section numbers (``2``, ``2.1``...).
    """

    def __init__(self, body: str, warnings: bool = False, numbered: bool = False):
        self.body = body
        self.warnings = warnings
        self.numbered = numbered

    def index(self) -> IndexResult:
        protected = _protected_spans(self.body)
        tree: dict[Heading, list[Heading]] = {}
        diagnostics: list[Diagnostic] = []
        pieces: list[str] = []
        parent: Heading | None = None
        chapter = section = 0
        last = 0

        for m in HEADING_RE.finditer(self.body):
            if any(start <= m.start() < end for start, end in protected):
                continue

            title = m.group("title").strip()
            attrs = m.group("attrs")
            explicit, extra = None, []
            if attrs is not None:
                split = _split_attrs(attrs)
                if split is None:
                    # Malformed marker, leave it as content
                    continue
                explicit, extra = split

            marker = m.group("marker")
            level = len(marker) - 1
            if level == 1:
                expected = str(chapter + 1)
            elif parent is not None:
                expected = f"{chapter}.{section + 1}"
            else:
                expected = ""
            # Only a number this pass would write itself is dropped
            if self.numbered and expected and title.startswith(expected + " "):
                title = title[len(expected):].strip()
            if not title:
                continue

            line = self.body.count("\n", 0, m.start()) + 1
            anchor = explicit if explicit is not None else slugify(title)

            if not anchor:
                if self.warnings:
                    diagnostics.append(Diagnostic(DiagnosticKind.BLANK_ID, title, line=line))
                if level == 1:
                    parent = None
                continue

            heading = Heading(title, anchor, level, line)
            if level == 1:
                chapter += 1
                section = 0
                tree[heading] = []
                parent = heading
            elif parent is not None:
                section += 1
                tree[parent].append(heading)

            display = f"{expected} {title}" if self.numbered and expected else title
            attr_list = " ".join([f"#{anchor}"] + extra)
            pieces.append(self.body[last:m.start()])
            pieces.append(f"{marker} {display} {{{attr_list}}}{m.group('eol')}")
            last = m.end()

        pieces.append(self.body[last:])
        return IndexResult("".join(pieces), tree, diagnostics)


def index_headings(body: str, warnings: bool = False, numbered: bool = False) -> IndexResult:
    return Indexer(body, warnings, numbered).index()
