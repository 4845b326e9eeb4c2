from typing import Dict, NamedTuple, Tuple


class PageResult(NamedTuple):
    """Words and outbound links extracted from one page."""
    word_counts: Dict[str, int]
    links: Tuple[str, ...] = ()
