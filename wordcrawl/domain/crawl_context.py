from wordcrawl.domain.crawl_request import CrawlRequest
from wordcrawl.domain.visited_tracker import VisitedTracker
from wordcrawl.domain.word_count_table import WordCountTable


class CrawlContext:
    """Shared state of one crawl invocation.

    Created empty when a crawl starts and dropped when it returns; every
    crawl unit of that invocation sees the same instance.
    """

    def __init__(self, request: CrawlRequest, visited: VisitedTracker = None, word_counts: WordCountTable = None):
        if request is None:
            raise ValueError("request is required")
        self.request = request
        self.visited = visited if visited is not None else VisitedTracker()
        self.word_counts = word_counts if word_counts is not None else WordCountTable()

    @property
    def max_depth(self) -> int:
        return self.request.max_depth
