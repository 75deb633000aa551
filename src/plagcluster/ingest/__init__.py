"""Document loading and text normalization."""

from .loader import load_documents, load_file
from .normalizer import normalize, preprocess_text

__all__ = ["load_documents", "load_file", "normalize", "preprocess_text"]
