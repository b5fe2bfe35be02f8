# bilingual_lens/application/scroll_sync.py

import time
from typing import Callable, Dict, Optional

from bilingual_lens.domain.interfaces import ScrollPanePort
from bilingual_lens.domain.models import Pane, ScrollState


DEFAULT_SUPPRESSION_SECONDS = 0.05


class DualViewSyncController:
    """
    Keeps the original and translated panes of one document view scrolled
    to the same relative position.

    A user scroll on one pane sets the other pane to the same fraction of
    its own scrollable range. The source pane then owns a short suppression
    window: scroll events coming back from the mirrored pane during that
    window are ignored, so the update never bounces back. Every genuine
    event from the owning pane restarts the window (debounce).

    Panes are plain ScrollPanePort handles, so no UI toolkit is required. The
    clock is injectable so the suppression window can be tested without
    sleeping.
    """

    def __init__(
        self,
        suppression_window: float = DEFAULT_SUPPRESSION_SECONDS,
        clock: Callable[[], float] = time.monotonic,
        sync_enabled: bool = True,
    ):
        if suppression_window < 0:
            raise ValueError("suppression_window cannot be negative.")

        self._suppression_window = suppression_window
        self._clock = clock
        self._sync_enabled = sync_enabled

        self._handles: Dict[Pane, ScrollPanePort] = {}
        self._states: Dict[Pane, ScrollState] = {pane: ScrollState() for pane in Pane}

        self._suppressing_pane: Optional[Pane] = None
        self._suppressed_until = 0.0
        # True only while writing to the mirrored pane's handle
        self._mirroring = False

    # ─── Lifecycle ────────────────────────────────────────────────────────────

    def attach(self, pane: Pane, handle: ScrollPanePort) -> None:
        self._handles[pane] = handle
        self._refresh_state(pane)

    def detach(self, pane: Pane) -> None:
        self._handles.pop(pane, None)
        self._states[pane] = ScrollState()
        if self._suppressing_pane is pane:
            self._clear_suppression()

    def close(self) -> None:
        """Drop both panes and all scroll state when the view closes."""
        for pane in Pane:
            self.detach(pane)
        self._clear_suppression()

    def is_attached(self, pane: Pane) -> bool:
        return pane in self._handles

    # ─── State ────────────────────────────────────────────────────────────────

    @property
    def sync_enabled(self) -> bool:
        return self._sync_enabled

    def set_sync_enabled(self, enabled: bool) -> None:
        self._sync_enabled = enabled
        if not enabled:
            self._clear_suppression()

    def update_geometry(self, pane: Pane, content_height: float, viewport_height: float) -> None:
        """Record geometry for a pane driven without a handle."""
        state = self._states[pane]
        state.content_height = content_height
        state.viewport_height = viewport_height

    def state(self, pane: Pane) -> ScrollState:
        self._refresh_state(pane)
        return self._states[pane]

    # ─── Events ───────────────────────────────────────────────────────────────

    def on_scroll(self, source: Pane, new_offset: float) -> Optional[float]:
        """
        Handle a scroll on `source`.

        Returns the offset written to the other pane, or None when nothing
        was mirrored (sync off, or the event is feedback from a mirror).
        """
        self._refresh_state(source)
        self._states[source].offset = new_offset

        if not self._sync_enabled:
            return None

        now = self._clock()
        if self._is_suppressed(source, now):
            return None

        # Claim the window before writing: the target handle may call back
        # into on_scroll synchronously.
        self._suppressing_pane = source
        self._suppressed_until = now + self._suppression_window

        target = source.other
        self._refresh_state(target)
        target_offset = self._mirrored_offset(self._states[source], self._states[target], new_offset)

        self._states[target].offset = target_offset
        handle = self._handles.get(target)
        if handle is not None:
            self._mirroring = True
            try:
                handle.set_offset(target_offset)
            finally:
                self._mirroring = False

        return target_offset

    # ─── Private ──────────────────────────────────────────────────────────────

    @staticmethod
    def _mirrored_offset(source: ScrollState, target: ScrollState, offset: float) -> float:
        if source.max_offset <= 0 or target.max_offset <= 0:
            return 0.0
        ratio = offset / max(1.0, source.max_offset)
        return ratio * target.max_offset

    def _is_suppressed(self, source: Pane, now: float) -> bool:
        if self._mirroring:
            return True
        if self._suppressing_pane is None or self._suppressing_pane is source:
            return False
        if now >= self._suppressed_until:
            self._clear_suppression()
            return False
        return True

    def _clear_suppression(self) -> None:
        self._suppressing_pane = None
        self._suppressed_until = 0.0

    def _refresh_state(self, pane: Pane) -> None:
        handle = self._handles.get(pane)
        if handle is None:
            return
        state = self._states[pane]
        state.content_height = handle.content_height
        state.viewport_height = handle.viewport_height
        state.offset = handle.get_offset()
