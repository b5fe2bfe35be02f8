# bilingual_lens/infrastructure/in_memory_corpus.py

from typing import Dict, Iterable, List

from bilingual_lens.domain.interfaces import CorpusSourcePort
from bilingual_lens.domain.models import DocumentPair


class InMemoryCorpus(CorpusSourcePort):
    """
    Session-scoped store of processed document pairs, in insertion order.

    Records are immutable; re-adding an existing id swaps in the new record
    at the same position (a fresh translation replaces the whole pair).
    """

    def __init__(self, documents: Iterable[DocumentPair] = ()):
        self._documents: Dict[str, DocumentPair] = {}
        self.add_many(documents)

    def add(self, document: DocumentPair) -> None:
        self._documents[document.id] = document

    def add_many(self, documents: Iterable[DocumentPair]) -> None:
        for document in documents:
            self.add(document)

    def remove(self, document_id: str) -> None:
        if document_id not in self._documents:
            raise KeyError(f"Unknown document id: {document_id}")
        del self._documents[document_id]

    def clear(self) -> None:
        self._documents.clear()

    def replace_all(self, documents: Iterable[DocumentPair]) -> None:
        """Swap in a new corpus in one assignment; readers see old or new, never a mix."""
        self._documents = {document.id: document for document in documents}

    def list_documents(self) -> List[DocumentPair]:
        return list(self._documents.values())

    def get_document(self, document_id: str) -> DocumentPair:
        try:
            return self._documents[document_id]
        except KeyError:
            raise KeyError(f"Unknown document id: {document_id}") from None

    def count(self) -> int:
        return len(self._documents)
