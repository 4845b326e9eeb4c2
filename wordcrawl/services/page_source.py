from __future__ import annotations

import logging
import re
from collections import Counter
from typing import Dict, Iterable, Optional, Protocol, Union
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

from wordcrawl.domain.crawl_request import compile_patterns
from wordcrawl.domain.page_result import PageResult
from wordcrawl.exceptions import FetchError
from wordcrawl.profiler import profiled
from wordcrawl.services.html_text_extractor import HtmlTextExtractor, TextExtractor
from wordcrawl.services.http_service import HttpService

logger = logging.getLogger(__name__)

# Runs of letters only; digits and punctuation split words.
_WORD_RE = re.compile(r"[^\W\d_]+")


class PageSource(Protocol):
    """Fetch a page and return its word counts and outbound links.

    Implementations raise FetchError (or anything else) when the page
    cannot be produced; the crawl engine treats every failure the same.
    """

    @profiled
    def fetch(self, url: str) -> PageResult: ...


def count_words(text: str, ignored_words: Iterable[re.Pattern[str]] = ()) -> Dict[str, int]:
    """Lower-case word counts of `text`, minus words fully matching an ignored pattern."""
    ignored = tuple(ignored_words)
    counts: Counter = Counter()
    for word in _WORD_RE.findall(text.lower()):
        if any(p.fullmatch(word) for p in ignored):
            continue
        counts[word] += 1
    return dict(counts)


class HttpPageSource:
    """PageSource backed by HTTP for http(s) URLs and the local disk for file: URLs."""

    def __init__(
        self,
        http_service: HttpService,
        text_extractor: Optional[TextExtractor] = None,
        ignored_words: Iterable[Union[str, re.Pattern[str]]] = (),
    ):
        self.http_service = http_service
        self.text_extractor = text_extractor or HtmlTextExtractor()
        self.ignored_words = compile_patterns(ignored_words or ())

    def fetch(self, url: str) -> PageResult:
        if urlparse(url).scheme == "file":
            body, base_url = self._read_file(url), url
        else:
            response = self.http_service.fetch(url)
            if not response.ok:
                raise FetchError(url, f"HTTP {response.status_code}")
            ct = (response.content_type or "").lower()
            if ct and "html" not in ct and not ct.startswith("text/"):
                raise FetchError(url, f"unsupported content type {response.content_type!r}")
            body, base_url = response.text, response.url or url

        text, links = self.text_extractor.extract(body, base_url)
        page = PageResult(word_counts=count_words(text, self.ignored_words), links=tuple(links))
        logger.debug("Parsed %s: %d distinct words, %d links", url, len(page.word_counts), len(page.links))
        return page

    def _read_file(self, url: str) -> str:
        path = url2pathname(unquote(urlparse(url).path))
        try:
            with open(path, "r", encoding="utf-8", errors="replace") as f:
                return f.read()
        except OSError as e:
            raise FetchError(url, e) from e
