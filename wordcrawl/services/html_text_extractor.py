import logging
from typing import Callable, List, Optional, Protocol, Tuple
from urllib.parse import urldefrag, urljoin, urlparse

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

_FOLLOWED_SCHEMES = ("http", "https", "file")


class TextExtractor(Protocol):
    def extract(self, body: Optional[str], base_url: str) -> Tuple[str, List[str]]: ...


class HtmlTextExtractor:
    """Pull the visible text and outbound links out of an HTML document."""

    def __init__(
        self,
        soup_factory: Optional[Callable[[str], BeautifulSoup]] = None,
    ):
        self._soup_factory = soup_factory or (lambda html: BeautifulSoup(html, "html.parser"))

    def extract(self, body: Optional[str], base_url: str) -> Tuple[str, List[str]]:
        if not body:
            return "", []

        soup = self._soup_factory(body)
        links = self._extract_links(soup, base_url)

        # Code and styling never count as page words
        for tag in ("script", "style", "noscript", "template"):
            for element in soup.find_all(tag):
                element.decompose()

        return soup.get_text(separator=" ", strip=True), links

    def _extract_links(self, soup: BeautifulSoup, base_url: str) -> List[str]:
        seen = set()
        links = []
        for a in soup.find_all("a", href=True):
            href = a.get("href", "").strip()
            if not href:
                continue
            abs_url, _ = urldefrag(urljoin(base_url, href))
            if urlparse(abs_url).scheme not in _FOLLOWED_SCHEMES:
                logger.debug("Skipping (scheme) %s", abs_url)
                continue
            if abs_url in seen:
                continue
            seen.add(abs_url)
            links.append(abs_url)
        return links
