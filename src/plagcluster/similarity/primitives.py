"""String and set similarity primitives.

Everything here is pure and works on already-normalized text. The
dynamic-programming helpers are quadratic, so callers bound their cost
by truncating inputs (see `longest_common_substring`'s `max_chars`).
"""

from typing import Iterable

RABIN_KARP_BASE = 256
RABIN_KARP_PRIME = 101


def shingles(text: str, k: int = 3) -> list[str]:
    """Return every contiguous k-word window of `text`, left to right.

    Duplicates are kept. Fewer than k words gives an empty list.
    """
    if k < 1:
        raise ValueError(f"k must be >= 1, got {k}")
    words = text.split()
    return [" ".join(words[i:i + k]) for i in range(len(words) - k + 1)]


create_shingles = shingles


def word_count(text: str) -> int:
    return len(text.split())


def jaccard_similarity(a: Iterable[str], b: Iterable[str]) -> float:
    """|A ∩ B| / |A ∪ B| over the distinct elements of `a` and `b`."""
    set_a, set_b = set(a), set(b)
    union = len(set_a | set_b)
    if union == 0:
        return 0.0
    return len(set_a & set_b) / union


def rabin_karp_hash(text: str, prime: int = RABIN_KARP_PRIME, base: int = RABIN_KARP_BASE) -> int:
    """Polynomial hash of `text` modulo `prime`."""
    h = 0
    for ch in text:
        h = (h * base + ord(ch)) % prime
    return h


def rabin_karp_search(text: str, pattern: str) -> list[int]:
    """Return every start offset where `pattern` occurs in `text`.

    Uses a rolling hash with an O(1) update per shift; candidate
    positions are confirmed with a direct comparison so hash collisions
    never produce false matches.
    """
    n, m = len(text), len(pattern)
    if m > n:
        return []
    if m == 0:
        return list(range(n + 1))

    prime, base = RABIN_KARP_PRIME, RABIN_KARP_BASE
    pattern_hash = rabin_karp_hash(pattern, prime, base)
    window_hash = rabin_karp_hash(text[:m], prime, base)
    high = pow(base, m - 1, prime)

    matches = []
    for i in range(n - m + 1):
        if window_hash == pattern_hash and text[i:i + m] == pattern:
            matches.append(i)
        if i < n - m:
            window_hash = (base * (window_hash - ord(text[i]) * high) + ord(text[i + m])) % prime
    return matches


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit insert/delete/substitute costs."""
    m, n = len(a), len(b)
    dp = [[0] * (n + 1) for _ in range(m + 1)]
    for i in range(m + 1):
        dp[i][0] = i
    for j in range(n + 1):
        dp[0][j] = j

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if a[i - 1] == b[j - 1]:
                dp[i][j] = dp[i - 1][j - 1]
            else:
                dp[i][j] = 1 + min(
                    dp[i - 1][j],      # deletion
                    dp[i][j - 1],      # insertion
                    dp[i - 1][j - 1],  # substitution
                )
    return dp[m][n]


def normalized_edit_similarity(a: str, b: str) -> float:
    """1 - distance / longer length; 0 when both strings are empty."""
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 0.0
    return 1 - edit_distance(a, b) / max_len


def longest_common_substring(a: str, b: str, max_chars: int = 2000) -> str:
    """Longest contiguous run shared by the first `max_chars` of a and b.

    Matches beyond the prefix are not seen. Ties go to the match that
    ends first in `a`.
    """
    s1 = a[:max_chars]
    s2 = b[:max_chars]
    n = len(s2)

    best_len = 0
    best_end = 0
    prev = [0] * (n + 1)
    for i in range(1, len(s1) + 1):
        row = [0] * (n + 1)
        ch = s1[i - 1]
        for j in range(1, n + 1):
            if ch == s2[j - 1]:
                length = prev[j - 1] + 1
                row[j] = length
                if length > best_len:
                    best_len = length
                    best_end = i
        prev = row

    return s1[best_end - best_len:best_end]


lcs = longest_common_substring
