import logging
import time
from typing import Callable

from wordcrawl.domain.crawl_request import CrawlRequest
from wordcrawl.domain.crawl_task import CrawlTask

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Encapsulates crawl decision rules: depth limit, deadline and ignored URLs.

    Separates policy decisions from crawl orchestration logic.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock

    def should_skip_due_to_depth(self, task: CrawlTask, max_depth: int) -> bool:
        """Check if the task is at or beyond the configured max depth."""
        if task.depth >= max_depth:
            logger.debug("Skipping (max depth reached) %s at depth %s", task.url, task.depth)
            return True
        return False

    def should_skip_due_to_deadline(self, task: CrawlTask) -> bool:
        """Check if the crawl deadline has been reached."""
        if self.clock() >= task.deadline:
            logger.debug("Skipping (deadline passed) %s", task.url)
            return True
        return False

    def should_skip_due_to_ignored(self, url: str, request: CrawlRequest) -> bool:
        """Check if the whole URL matches one of the ignored patterns."""
        if request.is_ignored(url):
            logger.debug("Skipping (ignored) %s", url)
            return True
        return False
