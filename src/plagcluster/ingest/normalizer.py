"""Text normalization: strip PDF artifacts, punctuation and stopwords."""

import re

STOPWORDS = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from",
    "has", "he", "in", "is", "it", "its", "of", "on", "that", "the",
    "to", "was", "will", "with", "this", "but", "they", "have", "had",
    "what", "when", "where", "who", "which", "why", "how",
})

# Structural tokens that show up in raw PDF bytes and would otherwise
# make unrelated PDFs look alike.
PDF_TOKENS = (
    "endobj", "obj", "stream", "endstream", "xref", "trailer", "flatedecode",
    "filter", "length", "id", "type", "subtype", "image", "colorspace", "bitspercomponent",
    "decode", "width", "height",
)

ALL_STOPWORDS = STOPWORDS | frozenset(PDF_TOKENS)

NON_PRINTABLE_THRESHOLD = 0.2

_PDF_SIGNATURE = re.compile(r"%PDF|endobj|stream|FlateDecode", re.IGNORECASE)
_PDF_TOKEN_RE = re.compile("|".join(PDF_TOKENS), re.IGNORECASE)
_NON_PRINTABLE_CHAR = re.compile(r"[^\x20-\x7E\s]")
_NON_PRINTABLE_RUN = re.compile(r"[^\x20-\x7E\s]+")
_PUNCTUATION = re.compile(r"[^a-z0-9_\s]")


def non_printable_ratio(text: str) -> float:
    """Fraction of characters outside printable ASCII and whitespace."""
    if not text:
        return 0.0
    return len(_NON_PRINTABLE_CHAR.findall(text)) / len(text)


def looks_binary(text: str) -> bool:
    """Heuristic: raw PDF bytes or mostly non-printable content."""
    return bool(_PDF_SIGNATURE.search(text)) or non_printable_ratio(text) > NON_PRINTABLE_THRESHOLD


def strip_pdf_artifacts(text: str) -> str:
    """Remove PDF structural tokens and collapse non-printable runs."""
    text = _PDF_TOKEN_RE.sub(" ", text)
    return _NON_PRINTABLE_RUN.sub(" ", text)


def normalize(text: str) -> str:
    """Clean raw document text for comparison.

    Binary-looking input is scrubbed of PDF tokens and non-printable
    bytes first. The result is lowercased, punctuation-free, with
    short words and stopwords removed, joined by single spaces.
    """
    if not text:
        return ""

    cleaned = strip_pdf_artifacts(text) if looks_binary(text) else text

    words = _PUNCTUATION.sub(" ", cleaned.lower()).split()
    return " ".join(w for w in words if len(w) > 2 and w not in ALL_STOPWORDS)


preprocess_text = normalize
