# tests/test_in_memory_corpus.py

import pytest

from bilingual_lens.domain.models import DocumentPair
from bilingual_lens.infrastructure.in_memory_corpus import InMemoryCorpus


def _doc(doc_id: str, translated: str = "text") -> DocumentPair:
    return DocumentPair(doc_id, f"{doc_id}.pdf", "原文", translated, "ja")


def test_documents_listed_in_insertion_order():
    corpus = InMemoryCorpus([_doc("a"), _doc("b"), _doc("c")])
    assert [d.id for d in corpus.list_documents()] == ["a", "b", "c"]
    assert corpus.count() == 3


def test_readding_an_id_replaces_whole_record_in_place():
    corpus = InMemoryCorpus([_doc("a"), _doc("b"), _doc("c")])
    corpus.add(_doc("b", translated="new translation"))

    assert [d.id for d in corpus.list_documents()] == ["a", "b", "c"]
    assert corpus.get_document("b").translated_text == "new translation"


def test_listing_is_a_snapshot():
    corpus = InMemoryCorpus([_doc("a")])
    snapshot = corpus.list_documents()
    corpus.add(_doc("b"))

    assert [d.id for d in snapshot] == ["a"]


def test_unknown_id_raises_key_error():
    corpus = InMemoryCorpus()
    with pytest.raises(KeyError, match="missing"):
        corpus.get_document("missing")
    with pytest.raises(KeyError):
        corpus.remove("missing")


def test_remove_and_clear():
    corpus = InMemoryCorpus([_doc("a"), _doc("b")])
    corpus.remove("a")
    assert [d.id for d in corpus.list_documents()] == ["b"]

    corpus.clear()
    assert corpus.count() == 0


def test_replace_all_swaps_the_whole_corpus():
    corpus = InMemoryCorpus([_doc("a"), _doc("b")])
    before = corpus.list_documents()

    corpus.replace_all([_doc("c"), _doc("a", translated="fresh")])

    assert [d.id for d in corpus.list_documents()] == ["c", "a"]
    assert corpus.get_document("a").translated_text == "fresh"
    assert [d.id for d in before] == ["a", "b"]
