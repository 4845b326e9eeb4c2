"""Crawl result data model."""
from typing import Dict, NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation."""

    word_counts: Dict[str, int]
    """Most popular words in rank order; iteration order is significant"""

    urls_visited: int
    """Number of distinct URLs claimed during the crawl"""
