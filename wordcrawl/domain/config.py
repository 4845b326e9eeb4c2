from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from wordcrawl.domain.crawl_request import CrawlRequest


@dataclass(frozen=True)
class CrawlerConfiguration:
    """Everything a crawl run is configured with.

    Crawl-behavior fields feed the `CrawlRequest`; `ignored_words` goes to
    the page source; the two paths tell the entry point where to write
    output (None means stdout).
    """

    starting_urls: Tuple[str, ...]
    max_depth: int
    timeout_seconds: int
    popular_word_count: int
    parallelism: int
    ignored_urls: Tuple[str, ...] = field(default_factory=tuple)
    ignored_words: Tuple[str, ...] = field(default_factory=tuple)
    result_path: Optional[str] = None
    profile_output_path: Optional[str] = None

    def to_request(self) -> CrawlRequest:
        return CrawlRequest(
            starting_urls=self.starting_urls,
            max_depth=self.max_depth,
            timeout_seconds=self.timeout_seconds,
            popular_word_count=self.popular_word_count,
            ignored_urls=self.ignored_urls,
            parallelism=self.parallelism,
        )
