import logging
import os
import threading
import time
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Dict, List, Mapping, Optional

from wordcrawl.domain.crawl_context import CrawlContext
from wordcrawl.domain.crawl_request import CrawlRequest
from wordcrawl.domain.crawl_result import CrawlResult
from wordcrawl.domain.crawl_task import CrawlTask
from wordcrawl.domain.page_result import PageResult
from wordcrawl.exceptions import FetchError
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.page_source import PageSource
from wordcrawl.services.word_ranker import sort_word_counts

logger = logging.getLogger(__name__)


class BoundedDispatcher:
    """Runs crawl units on a fixed-size pool.

    A unit is submitted only after taking one of `slots` permits, and
    `slots` equals the pool size, so every submitted unit always has a
    worker available and a parent blocked on its children's futures can
    never starve them. Callers outside the pool wait for a permit; a
    worker that finds the pool full runs the child on its own thread.
    """

    def __init__(self, pool: ThreadPoolExecutor, slots: int):
        self._pool = pool
        self._slots = threading.BoundedSemaphore(slots)

    def dispatch(self, fn: Callable[[CrawlTask], None], task: CrawlTask, wait_for_slot: bool = False) -> Future:
        if self._slots.acquire(blocking=wait_for_slot):
            try:
                return self._pool.submit(self._run_with_slot, fn, task)
            except BaseException:
                self._slots.release()
                raise

        future: Future = Future()
        try:
            future.set_result(fn(task))
        except BaseException as e:
            future.set_exception(e)
        return future

    def _run_with_slot(self, fn: Callable[[CrawlTask], None], task: CrawlTask) -> None:
        try:
            return fn(task)
        finally:
            self._slots.release()


class CrawlEngine:
    """Parallel crawler that counts words across linked pages.

    Each URL becomes a `CrawlTask`; a task fetches its page, merges the
    word counts into the shared table and dispatches one child task per
    link, then waits for all of them. Pages that fail to load are logged
    and only end their own branch.
    """

    def __init__(
        self,
        *,
        page_source: PageSource,
        clock: Callable[[], float] = time.monotonic,
        crawl_policy: Optional[CrawlPolicy] = None,
        ranker: Callable[[Mapping[str, int], int], Dict[str, int]] = sort_word_counts,
        cpu_count: Callable[[], Optional[int]] = os.cpu_count,
    ):
        if page_source is None:
            raise ValueError("page_source is required")
        self.page_source = page_source
        self.clock = clock
        self.crawl_policy = crawl_policy or CrawlPolicy(clock)
        self.ranker = ranker
        self._cpu_count = cpu_count

    def get_max_parallelism(self) -> int:
        return max(1, self._cpu_count() or 1)

    def crawl(self, request: CrawlRequest) -> CrawlResult:
        if request is None:
            raise ValueError("request is required for crawl")

        deadline = self.clock() + request.timeout_seconds
        parallelism = max(1, min(request.parallelism, self.get_max_parallelism()))
        context = CrawlContext(request)
        logger.info(
            "Starting crawl: %d root(s), max_depth=%s, timeout=%ss, parallelism=%d",
            len(request.starting_urls),
            request.max_depth,
            request.timeout_seconds,
            parallelism,
        )

        with ThreadPoolExecutor(max_workers=parallelism, thread_name_prefix="wordcrawl") as pool:
            dispatcher = BoundedDispatcher(pool, parallelism)
            roots = [CrawlTask(url=url, depth=0, deadline=deadline) for url in request.starting_urls]
            unit = self._unit(context, dispatcher)
            self._join([dispatcher.dispatch(unit, task, wait_for_slot=True) for task in roots])

        ranked = self.ranker(context.word_counts.snapshot(), request.popular_word_count)
        result = CrawlResult(word_counts=ranked, urls_visited=len(context.visited))
        logger.info("Crawl finished: %d url(s) visited, %d distinct word(s)", result.urls_visited, len(context.word_counts))
        return result

    def _unit(self, context: CrawlContext, dispatcher: BoundedDispatcher) -> Callable[[CrawlTask], None]:
        def run(task: CrawlTask) -> None:
            self.crawl_from(task, context, dispatcher)
        return run

    def crawl_from(self, task: CrawlTask, context: CrawlContext, dispatcher: BoundedDispatcher) -> None:
        """Process one task and, transitively, every task spawned from its links."""
        if self.crawl_policy.should_skip_due_to_depth(task, context.max_depth):
            return
        if self.crawl_policy.should_skip_due_to_deadline(task):
            return
        if self.crawl_policy.should_skip_due_to_ignored(task.url, context.request):
            return
        if not context.visited.claim(task.url):
            logger.debug("Skipping (visited) %s", task.url)
            return

        page = self.fetch(task.url)
        if page is None:
            return

        context.word_counts.merge(page.word_counts)
        logger.info("Fetched %s (depth %d): %d words, %d links", task.url, task.depth, sum(page.word_counts.values()), len(page.links))

        unit = self._unit(context, dispatcher)
        self._join([dispatcher.dispatch(unit, task.child(link)) for link in page.links])

    def fetch(self, url: str) -> Optional[PageResult]:
        """Fetch a page, returning None on any failure."""
        try:
            return self.page_source.fetch(url)
        except FetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e.original)
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
        return None

    @staticmethod
    def _join(futures: List[Future]) -> None:
        for future in futures:
            future.result()
