"""Domain objects for WordCrawl - explicit re-exports to satisfy linters."""
from .crawl_request import CrawlRequest as CrawlRequest
from .crawl_task import CrawlTask as CrawlTask
from .crawl_result import CrawlResult as CrawlResult
from .page_result import PageResult as PageResult
from .visited_tracker import VisitedTracker as VisitedTracker
from .word_count_table import WordCountTable as WordCountTable

__all__ = ["CrawlRequest", "CrawlTask", "CrawlResult", "PageResult", "VisitedTracker", "WordCountTable"]
