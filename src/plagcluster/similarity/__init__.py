"""Similarity primitives and the pairwise scoring engine."""

from .engine import compute_all_similarities, compute_similarity, matched_excerpt
from .primitives import (
    edit_distance,
    jaccard_similarity,
    lcs,
    longest_common_substring,
    rabin_karp_hash,
    rabin_karp_search,
    shingles,
)

__all__ = [
    "compute_all_similarities",
    "compute_similarity",
    "matched_excerpt",
    "edit_distance",
    "jaccard_similarity",
    "lcs",
    "longest_common_substring",
    "rabin_karp_hash",
    "rabin_karp_search",
    "shingles",
]
