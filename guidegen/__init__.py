"""
guidegen - Markdown guides to linked HTML pages.

The pieces that matter most are the heading indexer, which gives every chapter
and section a stable anchor and builds the sidebar tree, and the link checker,
which verifies that every in-page fragment of a generated page resolves and
suggests the nearest anchor when it does not.
"""

__version__ = "0.1.0"

from .config import GeneratorOptions
from .diagnostics import Diagnostic, DiagnosticKind
from .generator import Generator
from .indexer import Heading, IndexResult, Indexer, index_headings
from .levenshtein import distance
from .link_checker import check, extract_anchors, extract_references, suggest
from .slug import slugify

__all__ = [
    "__version__",
    "Diagnostic",
    "DiagnosticKind",
    "Generator",
    "GeneratorOptions",
    "Heading",
    "IndexResult",
    "Indexer",
    "check",
    "distance",
    "extract_anchors",
    "extract_references",
    "index_headings",
    "slugify",
    "suggest",
]
