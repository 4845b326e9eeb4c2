import json
import logging
import os
from typing import TextIO, Union

from wordcrawl.domain.crawl_result import CrawlResult

logger = logging.getLogger(__name__)


class CrawlResultWriter:
    """Serialize a CrawlResult as JSON, keeping the ranked word order."""

    def __init__(self, result: CrawlResult):
        if result is None:
            raise ValueError("result is required")
        self.result = result

    def to_dict(self) -> dict:
        return {
            "wordCounts": dict(self.result.word_counts),
            "urlsVisited": self.result.urls_visited,
        }

    def write(self, target: Union[str, "os.PathLike[str]", TextIO]) -> None:
        """Write to a path (overwritten) or to an open stream (left open)."""
        if isinstance(target, (str, os.PathLike)):
            with open(target, "w", encoding="utf-8") as f:
                self._write(f)
            logger.info("Crawl results written to %s", target)
            return
        self._write(target)

    def _write(self, writer: TextIO) -> None:
        json.dump(self.to_dict(), writer, indent=2, ensure_ascii=False)
        writer.write("\n")
        writer.flush()
