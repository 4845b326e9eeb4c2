from typing import NamedTuple


class CrawlTask(NamedTuple):
    """One unit of crawl work: a URL at a given depth, bound to the crawl deadline."""
    url: str
    depth: int
    deadline: float

    def child(self, url: str) -> "CrawlTask":
        return CrawlTask(url=url, depth=self.depth + 1, deadline=self.deadline)
