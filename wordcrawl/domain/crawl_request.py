from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Tuple, Union


def compile_patterns(patterns: Iterable[Union[str, re.Pattern[str]]]) -> Tuple[re.Pattern[str], ...]:
    """Compile regex strings, passing already-compiled patterns through."""
    return tuple(p if isinstance(p, re.Pattern) else re.compile(p) for p in patterns)


@dataclass(frozen=True)
class CrawlRequest:
    """Immutable parameters for a single crawl invocation.

    `ignored_urls` accepts regex strings or compiled patterns; they are
    compiled once here and always matched against the whole URL.
    """

    starting_urls: Tuple[str, ...]
    max_depth: int
    timeout_seconds: float
    popular_word_count: int
    ignored_urls: Tuple[re.Pattern[str], ...] = field(default_factory=tuple)
    parallelism: int = 1

    def __post_init__(self):
        object.__setattr__(self, "starting_urls", tuple(self.starting_urls))
        object.__setattr__(self, "ignored_urls", compile_patterns(self.ignored_urls))
        if self.max_depth is None or int(self.max_depth) < 0:
            raise ValueError("max_depth must be >= 0")
        if self.timeout_seconds is None or self.timeout_seconds < 0:
            raise ValueError("timeout_seconds must be >= 0")
        if self.parallelism is None or int(self.parallelism) < 1:
            raise ValueError("parallelism must be >= 1")

    def is_ignored(self, url: str) -> bool:
        return any(p.fullmatch(url) for p in self.ignored_urls)
