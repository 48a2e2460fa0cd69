"""
"Did you mean" suggestions for benchmark names.

Only the first 20 characters of the input are compared, so this mostly
catches inputs that *start* with a misspelled benchmark name ("Fren").
"""

from typing import Iterable, List

from .matcher import levenshtein_distance

SUGGESTION_PREFIX_LEN = 20
MAX_SUGGESTION_DISTANCE = 3
MAX_SUGGESTIONS = 3


def suggest(raw_text: str, benchmark_names: Iterable[str]) -> List[str]:
    """Up to three benchmark names within edit distance 3 of the input prefix.

    Names are returned in catalogue order, not sorted by closeness.
    """
    prefix = (raw_text or "").lower()[:SUGGESTION_PREFIX_LEN]
    suggestions = []
    for name in benchmark_names:
        if levenshtein_distance(prefix, name.lower()) <= MAX_SUGGESTION_DISTANCE:
            suggestions.append(name)
            if len(suggestions) >= MAX_SUGGESTIONS:
                break
    return suggestions
