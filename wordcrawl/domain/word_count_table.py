import threading
from typing import Dict, List, Mapping


class WordCountTable:
    """Word -> cumulative count, merged into concurrently by crawl units.

    Words are spread over `stripes` independent dicts, each guarded by its
    own lock, so merges from different pages rarely contend. A merge is a
    plain sum per word, so the final table does not depend on merge order.
    """

    def __init__(self, stripes: int = 16):
        if stripes < 1:
            raise ValueError("stripes must be >= 1")
        self._locks: List[threading.Lock] = [threading.Lock() for _ in range(stripes)]
        self._tables: List[Dict[str, int]] = [{} for _ in range(stripes)]

    def _stripe(self, word: str) -> int:
        return hash(word) % len(self._tables)

    def add(self, word: str, count: int) -> None:
        i = self._stripe(word)
        with self._locks[i]:
            table = self._tables[i]
            table[word] = table.get(word, 0) + count

    def merge(self, counts: Mapping[str, int]) -> None:
        """Sum every word->count pair of `counts` into the table."""
        for word, count in counts.items():
            self.add(word, count)

    def snapshot(self) -> Dict[str, int]:
        """Return a plain dict copy of the current counts."""
        result: Dict[str, int] = {}
        for lock, table in zip(self._locks, self._tables):
            with lock:
                result.update(table)
        return result

    def __len__(self) -> int:
        total = 0
        for lock, table in zip(self._locks, self._tables):
            with lock:
                total += len(table)
        return total
