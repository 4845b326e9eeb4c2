from __future__ import annotations

import logging
import os
from typing import Optional, TextIO

import yaml

from wordcrawl.domain.config import CrawlerConfiguration
from wordcrawl.exceptions import ConfigurationError
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser

logger = logging.getLogger(__name__)


class ConfigFileStore:
    """Load crawl configuration documents from disk.

    Files are YAML; JSON documents load too since JSON is valid YAML.
    """

    def __init__(self, parser: Optional[CrawlerConfigParser] = None):
        self.parser = parser or CrawlerConfigParser()

    def load(self, path: str | os.PathLike) -> CrawlerConfiguration:
        source = os.fspath(path)
        try:
            with open(source, "r", encoding="utf-8") as f:
                return self.read(f, source=source)
        except OSError as e:
            raise ConfigurationError(source, f"cannot read file: {e}") from e

    def read(self, stream: TextIO, *, source: str = "<stream>") -> CrawlerConfiguration:
        try:
            data = yaml.safe_load(stream)
        except yaml.YAMLError as e:
            raise ConfigurationError(source, f"malformed document: {e}") from e
        cfg = self.parser.parse(source=source, data=data)
        logger.info("Loaded config %s: %d starting url(s)", source, len(cfg.starting_urls))
        return cfg
