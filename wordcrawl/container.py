"""Dependency injection container for the application."""
import time

from dependency_injector import containers, providers
import requests

from wordcrawl import config as env
from wordcrawl.profiler import Profiler
from wordcrawl.services.crawl_engine import CrawlEngine
from wordcrawl.services.crawl_policy import CrawlPolicy
from wordcrawl.services.html_text_extractor import HtmlTextExtractor
from wordcrawl.services.http_service import HttpService
from wordcrawl.services.page_source import HttpPageSource, PageSource
from wordcrawl.services.protocols import WebCrawler


# Environment variables used by the container (read once by `wordcrawl.config`).
#
# USER_AGENT (str, default: "WordCrawl/0.1")
#   User-Agent header for outbound HTTP requests.
#
# HTTP_TIMEOUT (int seconds, default: 10)
#   Timeout for a single outbound HTTP request. The crawl deadline does not
#   interrupt a request already in flight.
#
# IGNORED_WORDS (list of regex, default: empty)
#   Not an environment variable; set from the crawl configuration file by
#   `run.py` before the page source is first resolved.
ENV = {
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.HTTP_TIMEOUT,
    "IGNORED_WORDS": [],
}


def _profiled(profiler: Profiler, interface: type, delegate):
    return profiler.wrap(interface, delegate)


class Container(containers.DeclarativeContainer):
    """Dependency injection container for WordCrawl application."""

    # Configuration
    config = providers.Configuration(default=ENV)

    clock = providers.Object(time.monotonic)

    # One profiler per application so every wrapped component shares its state
    profiler = providers.Singleton(
        Profiler,
        clock=clock,
    )

    # Services - Singleton instances
    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=providers.Object(requests.get),
        timeout=config.HTTP_TIMEOUT.as_(int),
    )

    text_extractor = providers.Singleton(
        HtmlTextExtractor
    )

    page_source = providers.Singleton(
        HttpPageSource,
        http_service=http_service,
        text_extractor=text_extractor,
        ignored_words=config.IGNORED_WORDS,
    )

    profiled_page_source = providers.Singleton(
        _profiled,
        profiler,
        providers.Object(PageSource),
        page_source,
    )

    crawl_policy = providers.Singleton(
        CrawlPolicy,
        clock=clock,
    )

    crawler = providers.Singleton(
        CrawlEngine,
        page_source=profiled_page_source,
        clock=clock,
        crawl_policy=crawl_policy,
    )

    profiled_crawler = providers.Singleton(
        _profiled,
        profiler,
        providers.Object(WebCrawler),
        crawler,
    )
