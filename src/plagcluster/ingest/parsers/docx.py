"""DOCX file parser."""

import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class DocxParser:
    """Parse DOCX files using python-docx, falling back to the raw bytes as text."""

    def parse(self, file_path: Path) -> dict[str, Any]:
        from docx import Document

        try:
            doc = Document(str(file_path))
        except Exception as e:
            # Misnamed or corrupt files still get compared on whatever text they hold.
            logger.warning("Could not open %s as DOCX (%s); using raw content", file_path.name, e)
            return {
                "content": file_path.read_bytes().decode("utf-8", errors="replace"),
                "metadata": {"source_type": "docx", "extracted": False},
                "title": file_path.name,
            }

        blocks = [p.text for p in doc.paragraphs if p.text.strip()]
        # Answers are often typed into table cells.
        for table in doc.tables:
            for row in table.rows:
                cells = [c.text.strip() for c in row.cells if c.text.strip()]
                if cells:
                    blocks.append(" ".join(cells))

        metadata: dict[str, Any] = {"source_type": "docx", "extracted": True}
        if doc.core_properties.title:
            metadata["doc_title"] = doc.core_properties.title

        return {
            "content": "\n\n".join(blocks),
            "metadata": metadata,
            "title": file_path.name,
        }
