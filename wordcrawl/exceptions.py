"""Custom exceptions for WordCrawl."""


class FetchError(Exception):
    """Raised when a page cannot be fetched or parsed."""

    def __init__(self, url: str, original: object):
        self.url = url
        self.original = original
        super().__init__(f"Fetch failed for {url}: {original}")


class InvalidTargetError(Exception):
    """Raised when an interface cannot be wrapped by the profiler."""

    def __init__(self, interface: type, reason: str = "does not have any profiled methods"):
        self.interface = interface
        self.reason = reason
        name = getattr(interface, "__qualname__", repr(interface))
        super().__init__(f"{name} {reason}")


class ConfigurationError(Exception):
    """Raised when a crawl configuration is unreadable or invalid."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Invalid configuration '{source}': {reason}")
