# main.py

import sys

from bilingual_lens.application.search_service import BilingualSearchService
from bilingual_lens.application.viewer import DocumentView
from bilingual_lens.domain.models import Pane
from bilingual_lens.infrastructure.corpus_loader import CorpusLoader
from bilingual_lens.infrastructure.in_memory_corpus import InMemoryCorpus
from bilingual_lens.interface.cli import (
    ask_continue,
    build_panes,
    display_corpus_status,
    display_error,
    display_results,
    display_split_view,
    display_welcome_banner,
    prompt_for_document,
    prompt_for_query,
    prompt_for_scope,
    prompt_view_action,
)


DATA_DIRECTORY = "data"
RESULT_PREVIEW_LIMIT = 3
SCROLL_SUPPRESSION_SECONDS = 0.05
CONSOLE_VIEWPORT_LINES = 20


def main() -> None:
    display_welcome_banner()

    # ── 1. Load the processed document pairs ─────────────────────────────────
    try:
        documents = CorpusLoader().load_directory(DATA_DIRECTORY)
    except FileNotFoundError as error:
        display_error(str(error))
        sys.exit(1)

    if not documents:
        display_error(f"No document pairs found in '{DATA_DIRECTORY}/'.")
        sys.exit(1)

    corpus = InMemoryCorpus(documents)
    search_service = BilingualSearchService(
        corpus=corpus,
        suppression_window=SCROLL_SUPPRESSION_SECONDS,
    )
    display_corpus_status(corpus.list_documents())

    # ── 2. Interactive search loop ────────────────────────────────────────────
    while True:
        query = prompt_for_query()
        scope = prompt_for_scope()

        result_set = search_service.search(query, scope)
        if not search_service.is_stale(result_set):
            display_results(result_set, preview_limit=RESULT_PREVIEW_LIMIT)

        if result_set.results:
            document_id = prompt_for_document(result_set)
            if document_id is not None:
                try:
                    view = search_service.open_document(document_id, result_set)
                except KeyError as error:
                    display_error(str(error))
                else:
                    _run_split_view(view)

        if not ask_continue():
            break


def _run_split_view(view: DocumentView) -> None:
    """Page through both versions of a document with mirrored scrolling."""
    panes = build_panes(view, CONSOLE_VIEWPORT_LINES)
    focus = Pane.ORIGINAL
    step = max(1, CONSOLE_VIEWPORT_LINES // 2)

    try:
        while True:
            display_split_view(view, panes, focus)
            action = prompt_view_action()

            if action == "c":
                break
            if action == "s":
                focus = focus.other
            elif action == "t":
                view.set_sync_enabled(not view.controller.sync_enabled)
            else:
                pane = panes[focus]
                delta = step if action == "d" else -step
                pane.set_offset(pane.get_offset() + delta)
                view.scroll(focus, pane.get_offset())
    finally:
        view.close()


if __name__ == "__main__":
    main()
