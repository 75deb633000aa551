"""PDF file parser."""

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class PdfParser:
    """Parse PDF files using pypdf, falling back to the raw bytes as text."""

    def parse(self, file_path: Path) -> dict[str, Any]:
        from pypdf import PdfReader

        try:
            reader = PdfReader(str(file_path))
            pages = [page.extract_text() or "" for page in reader.pages]
        except Exception as e:
            # Raw bytes still carry some text; the normalizer strips PDF noise.
            logger.warning("Could not extract text from %s (%s); using raw content", file_path.name, e)
            return {
                "content": file_path.read_bytes().decode("utf-8", errors="replace"),
                "metadata": {"source_type": "pdf", "extracted": False},
                "title": file_path.name,
            }

        return {
            "content": "".join("\n" + p for p in pages),
            "metadata": {"source_type": "pdf", "extracted": True, "page_count": len(pages)},
            "title": file_path.name,
        }
