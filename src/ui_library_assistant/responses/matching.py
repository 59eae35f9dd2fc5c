"""Keyword matching with typo tolerance for query classification."""

import re
from collections.abc import Iterable

_WHITESPACE = re.compile(r"\s+")

# Fuzzy matching thresholds. Response selection depends on these exact values.
_FUZZY_MIN_KEYWORD_LENGTH = 4
_FUZZY_MAX_LENGTH_RATIO = 0.5
_FUZZY_MIN_MATCH_RATIO = 0.8
_FUZZY_MIN_CONSECUTIVE = 2


def normalize(query: str) -> str:
    """Lowercase, trim and collapse whitespace runs to a single space."""
    return _WHITESPACE.sub(" ", query.lower().strip())


def _word_match(query: str, keyword: str) -> bool:
    # Whole word, or keyword at the start or end of a longer word
    escaped = re.escape(keyword)
    return re.search(rf"\b{escaped}\w*|\w*{escaped}\b", query) is not None


def _subsequence_score(query: str, keyword: str) -> tuple[int, int]:
    """Return (matched characters, longest consecutive run).

    Walks the query once; a query character that does not match the current
    keyword character is skipped and the same keyword character is retried.
    """
    matched = 0
    run = 0
    longest = 0
    ki = 0
    for ch in query:
        if ki >= len(keyword):
            break
        if ch == keyword[ki]:
            matched += 1
            run += 1
            longest = max(longest, run)
            ki += 1
        else:
            run = 0
    return matched, longest


def fuzzy_match(query: str, keywords: Iterable[str]) -> bool:
    """True if the query looks like a misspelling of a keyword ("buttton")."""
    for keyword in keywords:
        if len(keyword) < _FUZZY_MIN_KEYWORD_LENGTH:
            continue
        # Only compare strings of similar length ("hi there" vs "item")
        if abs(len(query) - len(keyword)) > len(keyword) * _FUZZY_MAX_LENGTH_RATIO:
            continue
        matched, longest = _subsequence_score(query, keyword)
        if (
            matched / len(keyword) >= _FUZZY_MIN_MATCH_RATIO
            and longest >= _FUZZY_MIN_CONSECUTIVE
        ):
            return True

    return False


def contains_any(query: str, keywords: Iterable[str]) -> bool:
    """Check if a normalized query mentions any keyword, with typo tolerance."""
    keywords = list(keywords)
    return any(_word_match(query, k) for k in keywords) or fuzzy_match(query, keywords)


def has_word(query: str, word: str) -> bool:
    """True if ``word`` occurs in the query as a whole word."""
    return re.search(rf"\b{re.escape(word)}\b", query) is not None


def has_substring(query: str, needles: Iterable[str]) -> bool:
    """Plain substring test, used for the explicit-keyword guards."""
    return any(n in query for n in needles)
