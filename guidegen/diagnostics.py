"""Warning records produced by the indexer and the link checker."""

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(str, Enum):
    DUPLICATE_ID = "DUPLICATE ID"
    BROKEN_LINK = "BROKEN LINK"
    BLANK_ID = "BLANK ID"


@dataclass(frozen=True)
class Diagnostic:
    """One advisory finding about a page.

    ``subject`` is the anchor for duplicates, the fragment for broken links
    and the heading title for blank ids. ``line`` is the 1-based line in the
    scanned text when known; it is not part of the rendered message.
    """

    kind: DiagnosticKind
    subject: str
    suggestion: str | None = None
    line: int | None = None

    def __str__(self) -> str:
        if self.kind is DiagnosticKind.BROKEN_LINK:
            if self.suggestion is None:
                return f"{self.kind.value}: #{self.subject}."
            return f"{self.kind.value}: #{self.subject}, perhaps you meant #{self.suggestion}."
        return f"{self.kind.value}: {self.subject}"
