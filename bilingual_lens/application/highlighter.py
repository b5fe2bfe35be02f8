# bilingual_lens/application/highlighter.py

import re
from typing import Iterable, List

from bilingual_lens.domain.models import HighlightSpan, TextSegment


def compute_spans(
    text: str,
    live_query: str,
    pinned_chunks: Iterable[str] = (),
) -> List[HighlightSpan]:
    """
    Build the highlight marks for one rendered pane.

    1. Every case-insensitive occurrence of `live_query` → live span.
    2. First exact occurrence of each pinned chunk → pinned span.
       Chunks no longer present in `text` are skipped.
    3. Stable sort by start offset. Overlapping spans are all kept.
    """
    spans: List[HighlightSpan] = []

    if live_query:
        pattern = re.compile(re.escape(live_query), re.IGNORECASE)
        for match in pattern.finditer(text):
            spans.append(HighlightSpan(start=match.start(), end=match.end(), pinned=False))

    for chunk in pinned_chunks:
        if not chunk:
            continue
        index = text.find(chunk)
        if index == -1:
            continue
        spans.append(HighlightSpan(start=index, end=index + len(chunk), pinned=True))

    spans.sort(key=lambda s: s.start)
    return spans


def segment_text(text: str, spans: Iterable[HighlightSpan]) -> List[TextSegment]:
    """
    Slice `text` into plain and highlighted segments, in order, with no gaps.

    Overlapping spans render as adjacent marks: a span's mark starts where
    the previous mark ended, and a span already fully covered emits nothing.
    Joining the segment texts always gives back `text`.
    """
    segments: List[TextSegment] = []
    cursor = 0

    for span in sorted(spans, key=lambda s: s.start):
        start = min(span.start, len(text))
        end = min(span.end, len(text))
        if start > cursor:
            segments.append(TextSegment(text=text[cursor:start]))
            cursor = start
        if end > cursor:
            segments.append(TextSegment(text=text[cursor:end], span=span))
            cursor = end

    if cursor < len(text):
        segments.append(TextSegment(text=text[cursor:]))

    return segments
