# tests/test_cli.py

import pytest
from rich.console import Console
from rich.text import Text

from bilingual_lens.application.highlighter import compute_spans, segment_text
from bilingual_lens.application.viewer import DocumentView
from bilingual_lens.domain.models import (
    DocumentPair,
    MatchCandidate,
    Pane,
    PinnedChunks,
    SearchResult,
    SearchResultSet,
    SearchScope,
)
from bilingual_lens.interface import cli
from bilingual_lens.interface.cli import (
    LIVE_STYLE,
    PINNED_STYLE,
    ConsolePane,
    build_panes,
    highlight,
)


def _lines(n: int) -> str:
    return "\n".join(f"line {i}" for i in range(n))


def test_console_pane_geometry_is_in_lines():
    pane = ConsolePane(Text(_lines(30)), viewport_lines=10)

    assert pane.content_height == 30
    assert pane.viewport_height == 10
    assert pane.max_offset == 20


def test_console_pane_clamps_and_rounds_offsets():
    pane = ConsolePane(Text(_lines(30)), viewport_lines=10)

    pane.set_offset(7.6)
    assert pane.get_offset() == 8
    pane.set_offset(100)
    assert pane.get_offset() == 20
    pane.set_offset(-5)
    assert pane.get_offset() == 0


def test_console_pane_shows_viewport_slice():
    pane = ConsolePane(Text(_lines(30)), viewport_lines=3)
    pane.set_offset(5)
    assert pane.visible().plain == "line 5\nline 6\nline 7"


def test_console_pane_rejects_empty_viewport():
    with pytest.raises(ValueError):
        ConsolePane(Text("x"), viewport_lines=0)


def test_highlight_styles_live_and_pinned_marks():
    text = "a cat here"
    rendered = highlight(segment_text(text, compute_spans(text, "cat", ["here"])))

    assert rendered.plain == text
    styles = {(span.start, span.end): str(span.style) for span in rendered.spans}
    assert styles == {(2, 5): LIVE_STYLE, (6, 10): PINNED_STYLE}


def test_split_view_panes_scroll_together():
    document = DocumentPair("d", "d.pdf", _lines(50), _lines(25), "es")
    view = DocumentView(document, live_query="line", pinned=PinnedChunks())
    panes = build_panes(view, viewport_lines=10)

    panes[Pane.ORIGINAL].set_offset(20)
    view.scroll(Pane.ORIGINAL, panes[Pane.ORIGINAL].get_offset())

    # 20 / 40 of the original → 0.5 * 15 on the translation
    assert panes[Pane.TRANSLATED].get_offset() == 8
    view.close()


def test_result_panel_shows_markup_in_ids_literally(monkeypatch):
    recorder = Console(record=True, width=100)
    monkeypatch.setattr(cli, "console", recorder)
    result = SearchResult(
        document_id="[bold]memo[/bold]",
        filename="memo.ja.txt",
        original_language="ja",
        translated_matches=[MatchCandidate(text="the memo", score=0.125)],
    )

    cli.display_results(SearchResultSet("memo", SearchScope.BOTH, [result]))

    assert "id: [bold]memo[/bold]" in recorder.export_text()
