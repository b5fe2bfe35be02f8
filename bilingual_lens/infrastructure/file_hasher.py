# bilingual_lens/infrastructure/file_hasher.py

import hashlib
from pathlib import Path


CORPUS_EXTENSIONS = {".json", ".txt", ".md", ".pdf"}


def compute_file_hash(file_path: str) -> str:
    """
    SHA-256 of a file's contents.
    Used to tell whether a corpus file changed since the corpus was loaded.
    """
    sha256 = hashlib.sha256()
    with open(file_path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            sha256.update(chunk)
    return sha256.hexdigest()


def compute_directory_hashes(directory_path: str) -> dict[str, str]:
    """
    Hash every corpus file under a directory.
    Returns: { path relative to the directory: hash_string }
    """
    data_dir = Path(directory_path)
    if not data_dir.exists():
        return {}

    return {
        file_path.relative_to(data_dir).as_posix(): compute_file_hash(str(file_path))
        for file_path in sorted(data_dir.rglob("*"))
        if file_path.is_file() and file_path.suffix.lower() in CORPUS_EXTENSIONS
    }


def diff_hashes(previous: dict[str, str], current: dict[str, str]) -> dict[str, list[str]]:
    """Classify files as added, changed or removed between two hash maps."""
    return {
        "added": sorted(name for name in current if name not in previous),
        "changed": sorted(
            name for name, h in current.items()
            if name in previous and previous[name] != h
        ),
        "removed": sorted(name for name in previous if name not in current),
    }
