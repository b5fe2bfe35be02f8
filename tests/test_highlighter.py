# tests/test_highlighter.py

from bilingual_lens.application.highlighter import compute_spans, segment_text
from bilingual_lens.domain.models import HighlightSpan


def _join(segments) -> str:
    return "".join(s.text for s in segments)


def test_live_query_spans_are_case_insensitive():
    spans = compute_spans("Cat and cat and CAT", "cat", [])
    assert [(s.start, s.end, s.pinned) for s in spans] == [
        (0, 3, False), (8, 11, False), (16, 19, False),
    ]


def test_empty_query_and_no_chunks_give_no_spans():
    assert compute_spans("anything", "", []) == []


def test_pinned_chunk_uses_first_exact_occurrence():
    text = "alpha\nbeta\nalpha\nbeta"
    spans = compute_spans(text, "", ["alpha\nbeta"])
    assert spans == [HighlightSpan(0, 10, pinned=True)]


def test_pinned_chunk_is_case_sensitive():
    assert compute_spans("Alpha beta", "", ["alpha"]) == []


def test_stale_chunk_is_skipped_silently():
    spans = compute_spans("current text", "", ["old window", "current"])
    assert spans == [HighlightSpan(0, 7, pinned=True)]


def test_overlapping_live_and_pinned_spans_are_both_kept():
    text = "intro\nthe cat sat\noutro"
    spans = compute_spans(text, "cat", ["intro\nthe cat sat"])

    assert spans == [
        HighlightSpan(0, 17, pinned=True),
        HighlightSpan(10, 13, pinned=False),
    ]


def test_equal_start_keeps_emission_order():
    spans = compute_spans("cat nap", "cat", ["cat nap"])
    assert [s.pinned for s in spans] == [False, True]


def test_query_metacharacters_are_literal():
    spans = compute_spans("a+b and ab", "a+b", [])
    assert spans == [HighlightSpan(0, 3)]


def test_segments_alternate_plain_and_marked():
    text = "one cat two cat"
    segments = segment_text(text, compute_spans(text, "cat", []))

    assert [(s.text, s.is_highlight) for s in segments] == [
        ("one ", False), ("cat", True), (" two ", False), ("cat", True),
    ]


def test_segments_reconstruct_text_with_overlaps():
    text = "intro\nthe cat sat on the cat\noutro"
    spans = compute_spans(text, "cat", ["the cat sat on the cat\noutro", "intro\nthe cat"])
    segments = segment_text(text, spans)

    assert _join(segments) == text
    assert all(s.text for s in segments)


def test_nested_span_adds_no_segment():
    text = "abcdef"
    spans = [HighlightSpan(0, 6, pinned=True), HighlightSpan(2, 4)]
    segments = segment_text(text, spans)

    assert [(s.text, s.span) for s in segments] == [("abcdef", spans[0])]


def test_partial_overlap_continues_from_previous_mark():
    text = "abcdef"
    first, second = HighlightSpan(0, 4), HighlightSpan(2, 6, pinned=True)
    segments = segment_text(text, [first, second])

    assert [(s.text, s.span) for s in segments] == [("abcd", first), ("ef", second)]


def test_segments_without_spans_is_whole_text():
    segments = segment_text("plain", [])
    assert [(s.text, s.span) for s in segments] == [("plain", None)]


def test_segments_of_empty_text():
    assert segment_text("", []) == []
