from unittest.mock import Mock

import pytest

from wordcrawl.domain.http_response import HttpResponse
from wordcrawl.exceptions import FetchError
from wordcrawl.services.page_source import HttpPageSource, count_words
from wordcrawl.domain.crawl_request import compile_patterns


def _source(response, **kwargs):
    http_service = Mock()
    http_service.fetch.return_value = response
    return HttpPageSource(http_service, **kwargs), http_service


def test_count_words_lowercases_and_splits_on_non_letters():
    assert count_words("The cat, the HAT; the-end 42x") == {"the": 3, "cat": 1, "hat": 1, "end": 1, "x": 1}


def test_count_words_drops_fully_matching_ignored_words():
    counts = count_words("a an the theory", compile_patterns([r"^.{1,3}$"]))
    assert counts == {"theory": 1}


def test_fetch_returns_counts_and_links():
    html = '<p>Hello hello world</p><a href="/next">next</a>'
    source, http_service = _source(HttpResponse(200, html, "text/html; charset=utf-8", "http://example.com/"))

    page = source.fetch("http://example.com")

    http_service.fetch.assert_called_once_with("http://example.com")
    assert page.word_counts == {"hello": 2, "world": 1, "next": 1}
    assert page.links == ("http://example.com/next",)


def test_links_resolve_against_redirected_url():
    html = '<a href="page">p</a>'
    source, _ = _source(HttpResponse(200, html, "text/html", "http://example.com/dir/"))
    assert source.fetch("http://example.com/old").links == ("http://example.com/dir/page",)


def test_ignored_words_are_applied():
    source, _ = _source(HttpResponse(200, "<p>the quick fox</p>", "text/html"), ignored_words=["the", "f.*"])
    assert source.fetch("http://example.com").word_counts == {"quick": 1}


def test_non_success_status_raises_fetch_error():
    source, _ = _source(HttpResponse(500, "oops", "text/html"))
    with pytest.raises(FetchError, match="HTTP 500"):
        source.fetch("http://example.com")


def test_binary_content_raises_fetch_error():
    source, _ = _source(HttpResponse(200, "%PDF", "application/pdf"))
    with pytest.raises(FetchError, match="unsupported content type"):
        source.fetch("http://example.com/doc.pdf")


def test_reads_file_urls_from_disk(tmp_path):
    page = tmp_path / "index.html"
    page.write_text('<p>Local words words</p><a href="other.html">o</a>', encoding="utf-8")
    http_service = Mock()
    source = HttpPageSource(http_service)

    result = source.fetch(page.as_uri())

    assert result.word_counts == {"local": 1, "words": 2, "o": 1}
    assert result.links == ((tmp_path / "other.html").as_uri(),)
    http_service.fetch.assert_not_called()


def test_missing_file_raises_fetch_error(tmp_path):
    source = HttpPageSource(Mock())
    with pytest.raises(FetchError):
        source.fetch((tmp_path / "missing.html").as_uri())
