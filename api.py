from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import List, Optional
import uvicorn

from bilingual_lens.application.highlighter import compute_spans, segment_text
from bilingual_lens.application.search_service import BilingualSearchService
from bilingual_lens.domain.languages import language_name
from bilingual_lens.domain.models import DocumentPair, Pane, SearchScope
from bilingual_lens.infrastructure.corpus_loader import CorpusLoader
from bilingual_lens.infrastructure.file_hasher import compute_directory_hashes, diff_hashes
from bilingual_lens.infrastructure.in_memory_corpus import InMemoryCorpus

# ── Configuration ────────────────────────────────────────────────────────────
DATA_DIRECTORY = "data"
CORS_ORIGINS = ["http://localhost:3000", "http://localhost:5173", "http://127.0.0.1:3000"]

# ── API Models ───────────────────────────────────────────────────────────────
class SearchRequest(BaseModel):
    query: str
    scope: SearchScope = SearchScope.BOTH

class MatchSchema(BaseModel):
    text: str
    score: float

class SearchResultSchema(BaseModel):
    document_id: str
    filename: str
    original_language: str
    language_name: str
    original_matches: List[MatchSchema]
    translated_matches: List[MatchSchema]
    total_matches: int

class SearchResponse(BaseModel):
    query: str
    scope: SearchScope
    total_matches: int
    results: List[SearchResultSchema]

class HighlightRequest(BaseModel):
    query: str = ""
    original_chunks: List[str] = Field(default_factory=list)
    translated_chunks: List[str] = Field(default_factory=list)

class SpanSchema(BaseModel):
    start: int
    end: int
    pinned: bool

class SegmentSchema(BaseModel):
    text: str
    highlight: Optional[str] = None  # "live" | "pinned"

class PaneHighlights(BaseModel):
    spans: List[SpanSchema]
    segments: List[SegmentSchema]

class HighlightResponse(BaseModel):
    document_id: str
    original: PaneHighlights
    translated: PaneHighlights

# ── App Initialization ───────────────────────────────────────────────────────
app = FastAPI(
    title="Bilingual Lens API",
    description="Lexical search and highlighting over original/English document pairs.",
    version="1.0.0"
)

# ── CORS Middleware ──────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _load_corpus() -> InMemoryCorpus:
    try:
        documents = CorpusLoader().load_directory(DATA_DIRECTORY)
    except FileNotFoundError as error:
        print(f"[API] WARNING: {error}. Starting with an empty corpus.")
        documents = []
    return InMemoryCorpus(documents)


# Initialize infrastructure (global scope for singleton behavior)
corpus = _load_corpus()
search_service = BilingualSearchService(corpus=corpus)
corpus_hashes = compute_directory_hashes(DATA_DIRECTORY)
print(f"[API] Corpus ready with {corpus.count()} documents.")

# ── Helpers ──────────────────────────────────────────────────────────────────
def _document_summary(document: DocumentPair) -> dict:
    return {
        "id": document.id,
        "filename": document.filename,
        "original_language": document.original_language,
        "language_name": language_name(document.original_language),
        "original_lines": document.line_count(Pane.ORIGINAL),
        "translated_lines": document.line_count(Pane.TRANSLATED),
    }

def _get_document_or_404(document_id: str) -> DocumentPair:
    try:
        return corpus.get_document(document_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Document '{document_id}' not found")

def _pane_highlights(text: str, query: str, chunks: List[str]) -> PaneHighlights:
    spans = compute_spans(text, query, chunks)
    return PaneHighlights(
        spans=[SpanSchema(start=s.start, end=s.end, pinned=s.pinned) for s in spans],
        segments=[
            SegmentSchema(
                text=seg.text,
                highlight=None if seg.span is None else ("pinned" if seg.span.pinned else "live"),
            )
            for seg in segment_text(text, spans)
        ],
    )

# ── Endpoints ────────────────────────────────────────────────────────────────
@app.get("/")
def read_root():
    return {
        "message": "Bilingual Lens API is running.",
        "status": "ready" if corpus.count() else "empty_corpus",
        "documents_loaded": corpus.count(),
    }

@app.get("/status")
def get_status():
    """Returns corpus size and the data directory being served."""
    return {
        "is_ready": corpus.count() > 0,
        "documents_loaded": corpus.count(),
        "data_directory": DATA_DIRECTORY,
        "files_tracked": len(corpus_hashes),
    }

@app.get("/documents")
def get_documents():
    """Returns the loaded document pairs (without their text)."""
    return {"documents": [_document_summary(d) for d in corpus.list_documents()]}

@app.get("/documents/{document_id:path}/text")
def get_document_text(document_id: str):
    """Full original and translated text of one document."""
    document = _get_document_or_404(document_id)
    return {
        **_document_summary(document),
        "original_text": document.original_text,
        "translated_text": document.translated_text,
    }

@app.post("/documents/{document_id:path}/highlights", response_model=HighlightResponse)
def get_highlights(document_id: str, request: HighlightRequest):
    """Highlight marks for both panes: live query occurrences plus pinned match windows."""
    document = _get_document_or_404(document_id)
    return HighlightResponse(
        document_id=document.id,
        original=_pane_highlights(document.original_text, request.query, request.original_chunks),
        translated=_pane_highlights(document.translated_text, request.query, request.translated_chunks),
    )

@app.post("/search", response_model=SearchResponse)
def search(request: SearchRequest):
    try:
        result_set = search_service.search(request.query, request.scope)
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    return SearchResponse(
        query=result_set.query,
        scope=result_set.scope,
        total_matches=result_set.total_matches,
        results=[
            SearchResultSchema(
                document_id=r.document_id,
                filename=r.filename,
                original_language=r.original_language,
                language_name=language_name(r.original_language),
                original_matches=[MatchSchema(text=m.text, score=m.score) for m in r.original_matches],
                translated_matches=[MatchSchema(text=m.text, score=m.score) for m in r.translated_matches],
                total_matches=r.total_matches,
            )
            for r in result_set.results
        ],
    )

@app.post("/reload")
def reload_corpus():
    """Reload the corpus from disk when any corpus file was added, changed or removed."""
    global corpus_hashes
    try:
        current_hashes = compute_directory_hashes(DATA_DIRECTORY)
        changes = diff_hashes(corpus_hashes, current_hashes)

        if any(changes.values()):
            documents = CorpusLoader().load_directory(DATA_DIRECTORY)
            corpus.replace_all(documents)
            corpus_hashes = current_hashes
            print(f"[API] Corpus reloaded: {corpus.count()} documents")

        return {
            "message": "Reload complete." if any(changes.values()) else "Corpus is up to date.",
            **changes,
            "documents_loaded": corpus.count(),
        }
    except Exception as e:
        print(f"[API] Reload failed: {e}")
        raise HTTPException(status_code=500, detail=f"Reload failed: {str(e)}")

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
