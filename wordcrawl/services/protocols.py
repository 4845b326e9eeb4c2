"""Protocol (interface) definitions for services."""

from typing import Protocol

from wordcrawl.domain.crawl_request import CrawlRequest
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.profiler import profiled


class WebCrawler(Protocol):
    """Crawls from a set of seed URLs and reports the most popular words."""

    @profiled
    def crawl(self, request: CrawlRequest) -> CrawlResult:
        """Run one crawl and return its ranked result."""
        ...

    def get_max_parallelism(self) -> int:
        """Return the host's hardware concurrency; configured parallelism never exceeds it."""
        ...
