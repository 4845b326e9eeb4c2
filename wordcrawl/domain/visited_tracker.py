import threading
from typing import Set


class VisitedTracker:
    """
    Tracks which URLs have been claimed during a crawl.

    Shared by every crawl unit, so the test-and-insert in `claim` is done
    under a lock: for any URL exactly one caller ever gets True. The set
    only grows; nothing is evicted during a crawl.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._visited: Set[str] = set()

    def claim(self, url: str) -> bool:
        """Mark `url` as visited. Returns False if it was already claimed."""
        with self._lock:
            if url in self._visited:
                return False
            self._visited.add(url)
            return True

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        with self._lock:
            return url in self._visited

    def __len__(self) -> int:
        with self._lock:
            return len(self._visited)
