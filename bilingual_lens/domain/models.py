# bilingual_lens/domain/models.py

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Pane(str, Enum):
    """One side of a split-pane document view."""
    ORIGINAL = "original"
    TRANSLATED = "translated"

    @property
    def other(self) -> "Pane":
        return Pane.TRANSLATED if self is Pane.ORIGINAL else Pane.ORIGINAL


class SearchScope(str, Enum):
    """Which side(s) of a document pair a search scans."""
    BOTH = "both"
    ORIGINAL_ONLY = "original_only"
    TRANSLATED_ONLY = "translated_only"

    @property
    def includes_original(self) -> bool:
        return self is not SearchScope.TRANSLATED_ONLY

    @property
    def includes_translated(self) -> bool:
        return self is not SearchScope.ORIGINAL_ONLY


@dataclass(frozen=True)
class DocumentPair:
    """
    One processed document: the OCR'd original text and its English translation.
    Never mutated: a new translation replaces the whole record.
    """
    id: str
    filename: str
    original_text: str
    translated_text: str
    original_language: str = "en"

    def text_for(self, pane: Pane) -> str:
        return self.original_text if pane is Pane.ORIGINAL else self.translated_text

    def line_count(self, pane: Pane) -> int:
        return len(self.text_for(pane).split("\n"))


@dataclass(frozen=True)
class MatchCandidate:
    """
    A located query occurrence: the up-to-3-line window around the hit line,
    scored by occurrence density within the hit line only.
    """
    text: str
    score: float


@dataclass
class PinnedChunks:
    """Match windows carried from a search result into the viewer."""
    original: List[str] = field(default_factory=list)
    translated: List[str] = field(default_factory=list)

    def for_pane(self, pane: Pane) -> List[str]:
        return self.original if pane is Pane.ORIGINAL else self.translated


@dataclass
class SearchResult:
    """
    Candidates for one document against one query.
    Only built when at least one side produced matches.
    """
    document_id: str
    filename: str
    original_language: str
    original_matches: List[MatchCandidate] = field(default_factory=list)
    translated_matches: List[MatchCandidate] = field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return len(self.original_matches) + len(self.translated_matches)

    def pinned_chunks(self) -> PinnedChunks:
        return PinnedChunks(
            original=[m.text for m in self.original_matches],
            translated=[m.text for m in self.translated_matches],
        )

    def __repr__(self) -> str:
        return (
            f"SearchResult(document='{self.filename}', "
            f"original={len(self.original_matches)}, "
            f"translated={len(self.translated_matches)})"
        )


@dataclass
class SearchResultSet:
    """Results of one search invocation, tagged with the query that produced them."""
    query: str
    scope: SearchScope
    results: List[SearchResult] = field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return sum(r.total_matches for r in self.results)

    @property
    def document_count(self) -> int:
        return len(self.results)

    def find(self, document_id: str) -> Optional[SearchResult]:
        for result in self.results:
            if result.document_id == document_id:
                return result
        return None


@dataclass(frozen=True)
class HighlightSpan:
    """Half-open character range [start, end) to be marked in rendered text."""
    start: int
    end: int
    pinned: bool = False

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class TextSegment:
    """A slice of rendered text; `span` is None for plain segments."""
    text: str
    span: Optional[HighlightSpan] = None

    @property
    def is_highlight(self) -> bool:
        return self.span is not None


@dataclass
class ScrollState:
    offset: float = 0.0
    content_height: float = 0.0
    viewport_height: float = 0.0

    @property
    def max_offset(self) -> float:
        return max(0.0, self.content_height - self.viewport_height)
