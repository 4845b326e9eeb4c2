import os
import re
from typing import Any, Optional

from wordcrawl import config as env
from wordcrawl.domain.config import CrawlerConfiguration
from wordcrawl.exceptions import ConfigurationError


class CrawlerConfigParser:
    """Parse a YAML/JSON dict into a CrawlerConfiguration.

    Responsibility: schema/validation for config documents.
    It does NOT perform filesystem IO.
    """

    def __init__(self, cpu_count=os.cpu_count):
        self._cpu_count = cpu_count

    def parse(self, *, source: str, data: Any) -> CrawlerConfiguration:
        if not isinstance(data, dict):
            raise ConfigurationError(source, "top level must be a mapping")

        starting_urls = data.get("starting_urls")
        if not isinstance(starting_urls, list) or not starting_urls:
            raise ConfigurationError(source, "starting_urls must be a non-empty list")
        if not all(isinstance(u, str) and u.strip() for u in starting_urls):
            raise ConfigurationError(source, "starting_urls must contain only non-empty strings")

        max_depth = self._int(source, data, "max_depth", env.DEFAULT_DEPTH, minimum=0, maximum=env.MAX_DEPTH_LIMIT)
        timeout_seconds = self._int(source, data, "timeout_seconds", env.DEFAULT_TIMEOUT_SECONDS, minimum=0)
        popular_word_count = self._int(source, data, "popular_word_count", env.DEFAULT_POPULAR_WORD_COUNT)
        parallelism = self._int(source, data, "parallelism", self._cpu_count() or 1, minimum=1)

        return CrawlerConfiguration(
            starting_urls=tuple(u.strip() for u in starting_urls),
            max_depth=max_depth,
            timeout_seconds=timeout_seconds,
            popular_word_count=popular_word_count,
            parallelism=parallelism,
            ignored_urls=self._patterns(source, data, "ignored_urls"),
            ignored_words=self._patterns(source, data, "ignored_words"),
            result_path=self._path(source, data, "result_path"),
            profile_output_path=self._path(source, data, "profile_output_path"),
        )

    def _int(
        self,
        source: str,
        data: dict,
        key: str,
        default: int,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
    ) -> int:
        raw = data.get(key)
        if raw is None:
            return default
        # bool is an int subclass; `max_depth: true` is a mistake, not 1
        if isinstance(raw, bool) or not isinstance(raw, int):
            raise ConfigurationError(source, f"{key} must be an integer")
        if minimum is not None and raw < minimum:
            raise ConfigurationError(source, f"{key} must be >= {minimum}")
        if maximum is not None and raw > maximum:
            raise ConfigurationError(source, f"{key} must be <= {maximum}")
        return raw

    def _patterns(self, source: str, data: dict, key: str) -> tuple:
        raw = data.get(key) or []
        if not isinstance(raw, list) or not all(isinstance(p, str) for p in raw):
            raise ConfigurationError(source, f"{key} must be a list of regular expressions")
        for pattern in raw:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ConfigurationError(source, f"{key} has invalid pattern {pattern!r}: {e}") from e
        return tuple(raw)

    def _path(self, source: str, data: dict, key: str) -> Optional[str]:
        raw = data.get(key)
        if raw is None or raw == "":
            return None
        if not isinstance(raw, str):
            raise ConfigurationError(source, f"{key} must be a string")
        return raw
