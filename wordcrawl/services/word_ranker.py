"""Deterministic ranking of word-frequency tables."""
import heapq
from typing import Dict, Mapping, Tuple


def _rank_key(entry: Tuple[str, int]) -> Tuple[int, int, str]:
    word, count = entry
    return (-count, -len(word), word)


def sort_word_counts(word_counts: Mapping[str, int], limit: int) -> Dict[str, int]:
    """Return the top `limit` entries of `word_counts` in rank order.

    Ranking is by descending count, then descending word length, then
    ascending word. The returned dict iterates in that order. A `limit`
    below 1 yields an empty dict. `word_counts` is not modified.
    """
    if limit < 1:
        return {}
    return dict(heapq.nsmallest(limit, word_counts.items(), key=_rank_key))
