import logging
import os
import sys
import tempfile
from pathlib import Path

# Ensure repo root is on sys.path so `wordcrawl` package imports resolve when
# running the script directly.
ROOT = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, ROOT)

from wordcrawl.container import Container
from wordcrawl.domain import CrawlRequest
from wordcrawl.services.result_writer import CrawlResultWriter


logging.basicConfig(level=logging.INFO)

PAGES = {
    "index.html": '<p>the quick brown fox</p><a href="fox.html">fox</a> <a href="dog.html">dog</a>',
    "fox.html": '<p>the fox jumps over the lazy dog</p><a href="index.html">home</a>',
    "dog.html": '<p>the dog sleeps</p><a href="missing.html">gone</a>',
}


def main():
    with tempfile.TemporaryDirectory() as site:
        for name, body in PAGES.items():
            Path(site, name).write_text(f"<html><body>{body}</body></html>", encoding="utf-8")

        container = Container()
        container.config.IGNORED_WORDS.from_value(["the"])
        request = CrawlRequest(
            starting_urls=[Path(site, "index.html").as_uri()],
            max_depth=3,
            timeout_seconds=10,
            popular_word_count=5,
            parallelism=2,
        )
        result = container.profiled_crawler().crawl(request)

    CrawlResultWriter(result).write(sys.stdout)
    container.profiler().write_data(sys.stdout)


if __name__ == '__main__':
    main()
