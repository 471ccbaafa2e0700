"""
Heading text to anchor id.

This is the one place the rule lives: the indexer calls it to write explicit
ids, and the Markdown renderer's ``toc`` extension is configured with it for
every heading the indexer does not touch.
"""

import re

from markdown.extensions.toc import slugify as _toc_slugify

_LEADING_DIGITS = re.compile(r"^[\d\-_]+")


def slugify(value: str, separator: str = "-") -> str:
    """Lower-case, drop punctuation, join words with ``separator``.

    Leading digits are removed so ids never start with a number
    ("2 Installing" -> "installing"). May return "" for punctuation-only titles.
    """
    slug = _toc_slugify(value, separator)
    return _LEADING_DIGITS.sub("", slug)
