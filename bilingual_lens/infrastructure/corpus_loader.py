# bilingual_lens/infrastructure/corpus_loader.py

import json
import re
from pathlib import Path
from typing import Dict, List, Optional

import fitz  # PyMuPDF
import pdfplumber

from bilingual_lens.domain.languages import is_supported
from bilingual_lens.domain.models import DocumentPair


TRANSLATION_LANGUAGE = "en"
ORIGINAL_EXTENSIONS = {".txt", ".md", ".pdf"}
TRANSLATION_EXTENSIONS = {".txt", ".md"}

# "<stem>.<lang>.<ext>", where lang is a code such as "ja" or "zh-TW"
PAIR_FILENAME = re.compile(r"^(?P<stem>.+)\.(?P<lang>[A-Za-z]{2}(?:-[A-Za-z]{2})?)$")


class CorpusLoader:
    """
    Loads document pairs written to disk by the upstream OCR/translation
    pipeline.

    Two layouts are supported, side by side in the same directory:
    - JSON exports of processed documents (one record or a list), using the
      pipeline's camelCase keys.
    - Text pairs: "<stem>.<lang>.txt|md|pdf" for the original and
      "<stem>.en.txt|md" for its English translation.

    Text is kept verbatim apart from line-ending normalisation, so highlight
    offsets computed later line up with what the user sees.
    """

    def load_directory(self, directory_path: str) -> List[DocumentPair]:
        data_dir = Path(directory_path)
        if not data_dir.exists():
            raise FileNotFoundError(f"Data directory not found: {directory_path}")

        documents: List[DocumentPair] = []

        for file_path in sorted(data_dir.rglob("*.json")):
            loaded = self.load_json_file(file_path)
            if loaded:
                documents.extend(loaded)
                print(f"[CorpusLoader] Loaded {len(loaded)} document(s) from {file_path.name}")

        pairs = self.load_text_pairs(data_dir)
        documents.extend(pairs)

        print(f"[CorpusLoader] Total documents loaded: {len(documents)}")
        return documents

    # ─── JSON exports ─────────────────────────────────────────────────────────

    def load_json_file(self, file_path: Path) -> List[DocumentPair]:
        """
        Parse one JSON export. Returns an empty list when the file is not a
        valid export; incomplete records are skipped individually.
        """
        try:
            payload = json.loads(file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as error:
            print(f"[CorpusLoader] ⚠ Could not read '{file_path.name}': {error}")
            return []

        records = payload if isinstance(payload, list) else [payload]
        documents = []
        for index, record in enumerate(records):
            document = self._record_to_document(record, fallback_id=f"{file_path.stem}-{index}")
            if document is not None:
                documents.append(document)
        return documents

    def _record_to_document(self, record: object, fallback_id: str) -> Optional[DocumentPair]:
        if not isinstance(record, dict):
            return None

        status = record.get("status")
        if status is not None and status != "completed":
            print(f"[CorpusLoader] Skipping '{record.get('filename', fallback_id)}' (status: {status})")
            return None

        original_text = record.get("originalText")
        translated_text = record.get("translatedText")
        if not isinstance(original_text, str) or not isinstance(translated_text, str):
            print(f"[CorpusLoader] ⚠ Record '{fallback_id}' has no text pair, skipped")
            return None

        language = record.get("originalLanguage", TRANSLATION_LANGUAGE)
        if not is_supported(language):
            print(f"[CorpusLoader] ⚠ Unsupported language '{language}' in '{fallback_id}', skipped")
            return None

        return DocumentPair(
            id=str(record.get("id") or fallback_id),
            filename=str(record.get("filename") or fallback_id),
            original_text=self._normalize_newlines(original_text),
            translated_text=self._normalize_newlines(translated_text),
            original_language=language,
        )

    # ─── Text pairs ───────────────────────────────────────────────────────────

    def load_text_pairs(self, data_dir: Path) -> List[DocumentPair]:
        originals: Dict[str, tuple[str, Path]] = {}
        translations: Dict[str, Path] = {}

        for file_path in sorted(data_dir.rglob("*")):
            parsed = self._parse_pair_name(file_path, data_dir)
            if parsed is None:
                continue
            key, language = parsed

            if language == TRANSLATION_LANGUAGE:
                if file_path.suffix.lower() in TRANSLATION_EXTENSIONS:
                    translations[key] = file_path
            elif file_path.suffix.lower() in ORIGINAL_EXTENSIONS:
                if not is_supported(language):
                    print(f"[CorpusLoader] ⚠ Unsupported language '{language}' in '{file_path.name}', skipped")
                    continue
                originals[key] = (language, file_path)

        documents = []
        for key, (language, original_path) in originals.items():
            translation_path = translations.get(key)
            if translation_path is None:
                print(f"[CorpusLoader] ⚠ No English translation for '{original_path.name}', skipped")
                continue

            original_text = self._read_original(original_path)
            translated_text = self._read_text(translation_path)
            if original_text is None or translated_text is None:
                continue

            documents.append(DocumentPair(
                id=key,
                filename=original_path.name,
                original_text=original_text,
                translated_text=translated_text,
                original_language=language,
            ))
            print(f"[CorpusLoader] Paired '{original_path.name}' with '{translation_path.name}'")

        return documents

    @staticmethod
    def _parse_pair_name(file_path: Path, data_dir: Path) -> Optional[tuple[str, str]]:
        if not file_path.is_file():
            return None
        match = PAIR_FILENAME.match(file_path.stem)
        if match is None:
            return None
        # Key on the path without the language part so nested folders don't collide
        relative = file_path.relative_to(data_dir)
        key = relative.with_name(match.group("stem")).as_posix()
        return key, match.group("lang")

    def _read_original(self, file_path: Path) -> Optional[str]:
        if file_path.suffix.lower() == ".pdf":
            pages = self._extract_pdf_pages(file_path)
            if not pages:
                print(f"[CorpusLoader] ⚠ No text extracted from '{file_path.name}', skipped")
                return None
            return "\n".join(text for _, text in pages)
        return self._read_text(file_path)

    def _read_text(self, file_path: Path) -> Optional[str]:
        try:
            text = file_path.read_text(encoding="utf-8", errors="ignore")
        except OSError as error:
            print(f"[CorpusLoader] ⚠ Could not read '{file_path.name}': {error}, skipped")
            return None
        return self._normalize_newlines(text)

    # ─── PDF extraction ───────────────────────────────────────────────────────

    def _extract_pdf_pages(self, file_path: Path) -> List[tuple[int, str]]:
        """
        Extract text page-by-page from PDF.
        Returns a list of (page_number, text) tuples.
        """
        # Try pdfplumber first
        pages = self._extract_pages_pdfplumber(file_path)

        # Fallback to PyMuPDF
        if not pages:
            pages = self._extract_pages_pymupdf(file_path)

        return [(number, self._normalize_newlines(text)) for number, text in pages]

    def _extract_pages_pdfplumber(self, file_path: Path) -> List[tuple[int, str]]:
        try:
            pages = []
            with pdfplumber.open(str(file_path)) as pdf:
                for i, page in enumerate(pdf.pages):
                    text = page.extract_text(x_tolerance=2, y_tolerance=2)
                    if text:
                        pages.append((i + 1, text))
            return pages
        except Exception as error:
            print(f"[CorpusLoader] pdfplumber error on {file_path.name}: {error}")
            return []

    def _extract_pages_pymupdf(self, file_path: Path) -> List[tuple[int, str]]:
        try:
            pages = []
            with fitz.open(str(file_path)) as pdf:
                for i, page in enumerate(pdf):
                    text = page.get_text()
                    if text:
                        pages.append((i + 1, text))
            return pages
        except Exception as error:
            print(f"[CorpusLoader] PyMuPDF error on {file_path.name}: {error}")
            return []

    @staticmethod
    def _normalize_newlines(text: str) -> str:
        return text.replace("\r\n", "\n").replace("\r", "\n")
