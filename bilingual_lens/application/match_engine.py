# bilingual_lens/application/match_engine.py

import re
from typing import List

from bilingual_lens.domain.models import MatchCandidate


# Lines of context kept on each side of the hit line.
CONTEXT_LINES = 1


def _literal_pattern(query: str) -> "re.Pattern[str]":
    # User text is matched literally, never as a regex.
    return re.compile(re.escape(query), re.IGNORECASE)


def count_occurrences(line: str, query: str) -> int:
    """Non-overlapping, case-insensitive occurrences of `query` in `line`."""
    if not query:
        return 0
    return len(_literal_pattern(query).findall(line))


def find_matches(text: str, query: str) -> List[MatchCandidate]:
    """
    Locate every line of `text` containing `query` (case-insensitive) and
    return context windows ranked by occurrence density in the hit line.

    Window:  hit line plus one line before and after, clipped at the edges.
    Score:   occurrences in the hit line / length of the hit line.
             Context lines do not contribute.
    Dedupe:  identical windows collapse to the first one (line order).
    Order:   score descending; ties keep line order.
    """
    if not text or not query:
        return []

    lines = text.split("\n")
    candidates: List[MatchCandidate] = []

    for i, line in enumerate(lines):
        occurrences = count_occurrences(line, query)
        if occurrences == 0:
            continue

        start = max(0, i - CONTEXT_LINES)
        end = min(len(lines), i + CONTEXT_LINES + 1)
        window = "\n".join(lines[start:end])

        candidates.append(MatchCandidate(text=window, score=occurrences / len(line)))

    seen: dict[str, MatchCandidate] = {}
    for candidate in candidates:
        seen.setdefault(candidate.text, candidate)

    # sorted() is stable, reverse=True included
    return sorted(seen.values(), key=lambda c: c.score, reverse=True)
