# bilingual_lens/application/search_service.py

from typing import List, Optional, Sequence

from bilingual_lens.application.match_engine import find_matches
from bilingual_lens.application.scroll_sync import (
    DEFAULT_SUPPRESSION_SECONDS,
    DualViewSyncController,
)
from bilingual_lens.application.viewer import DocumentView
from bilingual_lens.domain.interfaces import CorpusSourcePort
from bilingual_lens.domain.models import (
    DocumentPair,
    PinnedChunks,
    SearchResult,
    SearchResultSet,
    SearchScope,
)


def search_corpus(
    documents: Sequence[DocumentPair],
    query: str,
    scope: SearchScope = SearchScope.BOTH,
) -> List[SearchResult]:
    """
    Run the match engine over each document side selected by `scope`.

    Documents with no match on either side are dropped. The rest are ordered
    by total match count, descending; ties keep corpus order.
    """
    results: List[SearchResult] = []

    for document in documents:
        # Read each side once, then scan.
        original_text = document.original_text
        translated_text = document.translated_text

        original_matches = find_matches(original_text, query) if scope.includes_original else []
        translated_matches = find_matches(translated_text, query) if scope.includes_translated else []

        if original_matches or translated_matches:
            results.append(SearchResult(
                document_id=document.id,
                filename=document.filename,
                original_language=document.original_language,
                original_matches=original_matches,
                translated_matches=translated_matches,
            ))

    results.sort(key=lambda r: r.total_matches, reverse=True)
    return results


class BilingualSearchService:
    """
    Core use case: lexical search over both sides of every document pair,
    and opening a search hit in the split-pane viewer.

    The service only keeps the latest issued query, so callers can tell
    whether a result set they are about to render has been superseded.
    """

    def __init__(
        self,
        corpus: CorpusSourcePort,
        suppression_window: float = DEFAULT_SUPPRESSION_SECONDS,
    ):
        self._corpus = corpus
        self._suppression_window = suppression_window
        self._latest_query: Optional[str] = None

    @property
    def latest_query(self) -> Optional[str]:
        return self._latest_query

    def search(self, query: str, scope: SearchScope = SearchScope.BOTH) -> SearchResultSet:
        self._latest_query = query

        if not query.strip():
            return SearchResultSet(query=query, scope=scope)

        documents = self._corpus.list_documents()
        print(f"[SearchService] Searching {len(documents)} documents for '{query}' ({scope.value})")

        results = search_corpus(documents, query, scope)
        result_set = SearchResultSet(query=query, scope=scope, results=results)

        print(f"[SearchService] {result_set.total_matches} matches "
              f"in {result_set.document_count} documents.")
        return result_set

    def is_stale(self, result_set: SearchResultSet) -> bool:
        """True when a newer query has been issued since `result_set` was built."""
        return result_set.query != self._latest_query

    def open_document(
        self,
        document_id: str,
        result_set: Optional[SearchResultSet] = None,
    ) -> DocumentView:
        """
        Build the split-pane view for one document.
        When opened from a result set, the document's match windows are pinned
        and the set's query becomes the live query.
        """
        document = self._corpus.get_document(document_id)

        pinned = PinnedChunks()
        live_query = ""
        if result_set is not None:
            live_query = result_set.query
            result = result_set.find(document_id)
            if result is not None:
                pinned = result.pinned_chunks()

        controller = DualViewSyncController(suppression_window=self._suppression_window)
        return DocumentView(document, live_query=live_query, pinned=pinned, controller=controller)
