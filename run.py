import argparse
import logging
import sys
from typing import Optional, Sequence

from wordcrawl import config
from wordcrawl.container import Container
from wordcrawl.exceptions import ConfigurationError
from wordcrawl.services.config_file_store import ConfigFileStore
from wordcrawl.services.result_writer import CrawlResultWriter

logger = logging.getLogger("wordcrawl.run")


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Crawl linked pages and report the most popular words.")
    parser.add_argument("config", help="Path to a YAML or JSON crawl configuration file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None, container: Optional[Container] = None, store: Optional[ConfigFileStore] = None) -> int:
    """Load the configuration, crawl, then write results and profile data.

    Returns the process exit status. `container` and `store` may be
    injected for testing.
    """
    args = _parse_args(argv)
    store = store or ConfigFileStore()
    try:
        cfg = store.load(args.config)
    except ConfigurationError as e:
        logger.error("%s", e)
        return 1

    container = container or Container()
    container.config.IGNORED_WORDS.from_value(list(cfg.ignored_words))

    crawler = container.profiled_crawler()
    profiler = container.profiler()

    result = crawler.crawl(cfg.to_request())

    writer = CrawlResultWriter(result)
    if cfg.result_path:
        writer.write(cfg.result_path)
        print(f"Crawl results written to: {cfg.result_path}")
    else:
        writer.write(sys.stdout)

    try:
        profiler.write_data(cfg.profile_output_path or sys.stdout)
    except OSError as e:
        logger.error("Failed to write profile data: %s", e)

    return 0


if __name__ == '__main__':
    logging.basicConfig(level=config.log_level(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    sys.exit(main())
