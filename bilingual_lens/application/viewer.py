# bilingual_lens/application/viewer.py

from typing import List, Optional

from bilingual_lens.application.highlighter import compute_spans, segment_text
from bilingual_lens.application.scroll_sync import DualViewSyncController
from bilingual_lens.domain.interfaces import ScrollPanePort
from bilingual_lens.domain.models import (
    DocumentPair,
    HighlightSpan,
    Pane,
    PinnedChunks,
    TextSegment,
)


class DocumentView:
    """
    Split-pane view of one document pair.

    Combines the pinned match windows from a search with the live query to
    produce the marks for each pane, and owns the scroll controller for
    this view only. Closing the view discards its scroll state.
    """

    def __init__(
        self,
        document: DocumentPair,
        live_query: str = "",
        pinned: Optional[PinnedChunks] = None,
        controller: Optional[DualViewSyncController] = None,
    ):
        self._document = document
        self._live_query = live_query
        self._pinned = pinned or PinnedChunks()
        self._controller = controller or DualViewSyncController()

    @property
    def document(self) -> DocumentPair:
        return self._document

    @property
    def live_query(self) -> str:
        return self._live_query

    @property
    def pinned(self) -> PinnedChunks:
        return self._pinned

    @property
    def controller(self) -> DualViewSyncController:
        return self._controller

    def set_live_query(self, query: str) -> None:
        self._live_query = query

    def spans(self, pane: Pane) -> List[HighlightSpan]:
        return compute_spans(
            self._document.text_for(pane),
            self._live_query,
            self._pinned.for_pane(pane),
        )

    def segments(self, pane: Pane) -> List[TextSegment]:
        return segment_text(self._document.text_for(pane), self.spans(pane))

    # ─── Scrolling ────────────────────────────────────────────────────────────

    def attach(self, pane: Pane, handle: ScrollPanePort) -> None:
        self._controller.attach(pane, handle)

    def scroll(self, pane: Pane, offset: float) -> Optional[float]:
        return self._controller.on_scroll(pane, offset)

    def set_sync_enabled(self, enabled: bool) -> None:
        self._controller.set_sync_enabled(enabled)

    def close(self) -> None:
        self._controller.close()
