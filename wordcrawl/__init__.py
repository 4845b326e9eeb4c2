"""WordCrawl - parallel, depth and time bounded word-frequency crawler with call profiling."""

__version__ = "0.1.0"
