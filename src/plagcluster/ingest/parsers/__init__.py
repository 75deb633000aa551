"""Document parsers for supported assignment formats."""

from .docx import DocxParser
from .markdown import MarkdownParser
from .pdf import PdfParser
from .text import TextParser

PARSERS = {
    ".txt": TextParser,
    ".text": TextParser,
    ".md": MarkdownParser,
    ".markdown": MarkdownParser,
    ".pdf": PdfParser,
    ".docx": DocxParser,
}

__all__ = ["PARSERS", "TextParser", "MarkdownParser", "PdfParser", "DocxParser"]
