"""Pairwise similarity scoring over a set of documents."""

import logging
from itertools import combinations
from typing import Sequence

from ..config import Settings
from ..models import Document, SimilarityResult
from .primitives import (
    jaccard_similarity,
    longest_common_substring,
    normalized_edit_similarity,
    shingles,
    word_count,
)

logger = logging.getLogger(__name__)


def _lcs_score(a: str, b: str, cap: int) -> float:
    denom = min(len(a), len(b), cap)
    if denom == 0:
        return 0.0
    return len(longest_common_substring(a, b, cap)) / denom


def _composite(a: str, b: str, jaccard: float, lcs_cap: int, settings: Settings) -> float:
    n = settings.edit_sample_chars
    edit_score = normalized_edit_similarity(a[:n], b[:n])
    lcs_score = _lcs_score(a, b, lcs_cap)
    return (
        jaccard * settings.jaccard_weight
        + edit_score * settings.edit_weight
        + lcs_score * settings.lcs_weight
    )


def compute_similarity(a: str, b: str, settings: Settings | None = None) -> float:
    """Weighted Jaccard / edit-distance / LCS score for one pair, in [0, 1].

    Unlike the matrix engine this is not gated on Jaccard and uses the
    standalone LCS cap.
    """
    settings = settings or Settings()
    k = settings.shingle_size
    jaccard = jaccard_similarity(shingles(a, k), shingles(b, k))
    return _composite(a, b, jaccard, settings.standalone_lcs_chars, settings)


def matched_excerpt(a: str, b: str, settings: Settings | None = None) -> str | None:
    """Shared passage worth showing to a reviewer, or None."""
    settings = settings or Settings()
    common = longest_common_substring(a, b, settings.excerpt_lcs_chars)
    if len(common) > settings.excerpt_min_chars:
        return common[:settings.excerpt_max_chars] + "..."
    return None


def compute_all_similarities(
    documents: Sequence[Document],
    settings: Settings | None = None,
) -> list[SimilarityResult]:
    """Score every unordered pair of documents.

    Results are ordered by (i, j) with i < j in input order. The
    primary `similarity` is the number of shared shingles relative to
    the pair's average word count, as a percentage. It is not capped
    at 100.
    """
    settings = settings or Settings()
    k = settings.shingle_size

    shingle_sets = [set(shingles(d.content, k)) for d in documents]
    word_counts = [word_count(d.content) for d in documents]
    logger.debug("Prepared shingles for %d documents (k=%d)", len(documents), k)

    results = []
    for i, j in combinations(range(len(documents)), 2):
        doc_a, doc_b = documents[i], documents[j]
        s1, s2 = shingle_sets[i], shingle_sets[j]

        common_count = len(s1 & s2)
        jaccard = jaccard_similarity(s1, s2)
        avg_words = max(1, (word_counts[i] + word_counts[j]) // 2)
        match_metric = common_count / avg_words * 100

        # Quadratic comparisons only for pairs that already overlap.
        composite = jaccard
        if jaccard > settings.composite_gate:
            composite = _composite(
                doc_a.content, doc_b.content, jaccard, settings.composite_lcs_chars, settings
            )

        matched_sections = []
        if match_metric >= settings.excerpt_min_metric:
            excerpt = matched_excerpt(doc_a.content, doc_b.content, settings)
            if excerpt is not None:
                matched_sections.append(excerpt)

        results.append(SimilarityResult(
            doc1_id=doc_a.id,
            doc2_id=doc_b.id,
            doc1_name=doc_a.name,
            doc2_name=doc_b.name,
            similarity=match_metric,
            matched_sections=matched_sections,
            raw_match_count=common_count,
            avg_words=avg_words,
            match_metric=match_metric,
            composite_score=composite * 100,
        ))

    return results
