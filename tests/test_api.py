# tests/test_api.py

import pytest
from fastapi import HTTPException

import api
from bilingual_lens.application.search_service import BilingualSearchService
from bilingual_lens.domain.models import DocumentPair, SearchScope
from bilingual_lens.infrastructure.in_memory_corpus import InMemoryCorpus


@pytest.fixture
def corpus(monkeypatch) -> InMemoryCorpus:
    store = InMemoryCorpus([
        DocumentPair("ja-1", "keiyaku.pdf", "契約書\n甲と乙", "Contract\nbetween A and B", "ja"),
        DocumentPair("de-1", "vertrag.pdf", "Vertrag\nA und B", "Contract\nA and B\ncontract end", "de"),
    ])
    monkeypatch.setattr(api, "corpus", store)
    monkeypatch.setattr(api, "search_service", BilingualSearchService(store))
    return store


def test_search_returns_ranked_results(corpus):
    response = api.search(api.SearchRequest(query="contract"))

    assert response.total_matches == 3
    assert [r.document_id for r in response.results] == ["de-1", "ja-1"]
    assert response.results[0].language_name == "German"


def test_search_scope_is_respected(corpus):
    response = api.search(api.SearchRequest(query="contract", scope=SearchScope.ORIGINAL_ONLY))
    assert response.results == []


def test_documents_listing(corpus):
    documents = api.get_documents()["documents"]
    assert [d["id"] for d in documents] == ["ja-1", "de-1"]
    assert documents[0]["original_lines"] == 2


def test_highlights_for_both_panes(corpus):
    response = api.get_highlights(
        "de-1",
        api.HighlightRequest(query="and", translated_chunks=["Contract\nA and B"]),
    )

    assert [(s.start, s.end, s.pinned) for s in response.translated.spans] == [
        (0, 16, True), (11, 14, False),
    ]
    assert "".join(seg.text for seg in response.translated.segments) == corpus.get_document("de-1").translated_text
    assert response.original.spans == []


def test_unknown_document_is_404(corpus):
    with pytest.raises(HTTPException) as excinfo:
        api.get_document_text("missing")
    assert excinfo.value.status_code == 404
