"""Turn files on disk into Documents ready for analysis."""

import hashlib
import logging
from pathlib import Path
from typing import Iterable

from ..config import Settings
from ..models import Document
from .normalizer import normalize
from .parsers import PARSERS

logger = logging.getLogger(__name__)

ID_LENGTH = 9


def compute_id(file_path: Path) -> str:
    """Short stable id derived from the resolved file path."""
    digest = hashlib.sha256(str(file_path.resolve()).encode("utf-8")).hexdigest()
    return digest[:ID_LENGTH]


def is_supported(file_path: Path) -> bool:
    return file_path.suffix.lower() in PARSERS


def load_file(file_path: Path, normalize_text: bool = True) -> Document | None:
    """Parse a single file into a Document.

    Returns None if the file type is unsupported.
    """
    parser_cls = PARSERS.get(file_path.suffix.lower())
    if parser_cls is None:
        return None

    result = parser_cls().parse(file_path)
    content = result["content"]
    if normalize_text:
        content = normalize(content)

    return Document(id=compute_id(file_path), name=result.get("title", file_path.name), content=content)


def collect_files(paths: Iterable[Path]) -> list[Path]:
    """Expand directories and keep supported, non-hidden files, in order."""
    files = []
    seen = set()
    for path in paths:
        if path.is_dir():
            candidates = sorted(p for p in path.rglob("*") if p.is_file())
        elif path.is_file():
            candidates = [path]
        else:
            raise ValueError(f"Path not found: {path}")

        for p in candidates:
            if p.name.startswith(".") or not is_supported(p):
                continue
            key = p.resolve()
            if key not in seen:
                seen.add(key)
                files.append(p)
    return files


def load_documents(paths: Iterable[str | Path], settings: Settings | None = None) -> list[Document]:
    """Load up to `settings.max_files` supported documents from files or directories."""
    settings = settings or Settings()
    files = collect_files(Path(p) for p in paths)

    if len(files) > settings.max_files:
        logger.warning("Found %d files, only the first %d are analyzed", len(files), settings.max_files)
        files = files[:settings.max_files]

    docs = []
    for file_path in files:
        doc = load_file(file_path, normalize_text=settings.normalize)
        if doc is not None:
            logger.debug("Loaded %s as %s (%d chars)", file_path, doc.id, len(doc.content))
            docs.append(doc)
    return docs
