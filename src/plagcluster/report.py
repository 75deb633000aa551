"""Helpers for presenting and exporting analysis results."""

import json
from pathlib import Path
from typing import Sequence

from .config import Settings
from .models import AnalysisResult, SimilarityResult

HIGH = "high"
MEDIUM = "medium"
LOW = "low"


def severity(score: float, settings: Settings | None = None) -> str:
    """Bucket a primary similarity score for review."""
    settings = settings or Settings()
    if score >= settings.severity_high:
        return HIGH
    if score >= settings.severity_medium:
        return MEDIUM
    return LOW


def rank_similarities(similarities: Sequence[SimilarityResult]) -> list[SimilarityResult]:
    """Most similar pairs first; ties keep their original order."""
    return sorted(similarities, key=lambda s: s.similarity, reverse=True)


def to_json(result: AnalysisResult, indent: int | None = 2) -> str:
    return json.dumps(result.to_dict(), indent=indent, ensure_ascii=False)


def write_json(result: AnalysisResult, path: str | Path) -> Path:
    """Write the full result to `path` and return it."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(to_json(result), encoding="utf-8")
    return out
