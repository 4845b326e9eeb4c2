import pytest

from wordcrawl import config as env
from wordcrawl.exceptions import ConfigurationError
from wordcrawl.services.crawler_config_parser import CrawlerConfigParser


def _parse(data, cpus=4):
    return CrawlerConfigParser(cpu_count=lambda: cpus).parse(source="test.yml", data=data)


def test_parse_full_document():
    cfg = _parse({
        "starting_urls": ["http://example.com", " http://other.com "],
        "ignored_urls": [r".*\.pdf"],
        "ignored_words": ["^.{1,3}$"],
        "parallelism": 3,
        "max_depth": 4,
        "timeout_seconds": 7,
        "popular_word_count": 5,
        "result_path": "out.json",
        "profile_output_path": "profile.txt",
    })
    assert cfg.starting_urls == ("http://example.com", "http://other.com")
    assert cfg.ignored_urls == (r".*\.pdf",)
    assert cfg.ignored_words == ("^.{1,3}$",)
    assert (cfg.parallelism, cfg.max_depth, cfg.timeout_seconds, cfg.popular_word_count) == (3, 4, 7, 5)
    assert cfg.result_path == "out.json"
    assert cfg.profile_output_path == "profile.txt"


def test_parse_applies_defaults():
    cfg = _parse({"starting_urls": ["http://example.com"]}, cpus=6)
    assert cfg.parallelism == 6
    assert cfg.max_depth == env.DEFAULT_DEPTH
    assert cfg.timeout_seconds == env.DEFAULT_TIMEOUT_SECONDS
    assert cfg.popular_word_count == env.DEFAULT_POPULAR_WORD_COUNT
    assert cfg.ignored_urls == ()
    assert cfg.result_path is None
    assert cfg.profile_output_path is None


def test_empty_paths_mean_stdout():
    cfg = _parse({"starting_urls": ["http://example.com"], "result_path": "", "profile_output_path": ""})
    assert cfg.result_path is None
    assert cfg.profile_output_path is None


@pytest.mark.parametrize(
    "data,message",
    [
        (None, "mapping"),
        (["http://example.com"], "mapping"),
        ({}, "starting_urls"),
        ({"starting_urls": []}, "starting_urls"),
        ({"starting_urls": [""]}, "starting_urls"),
        ({"starting_urls": ["http://a"], "max_depth": -1}, "max_depth must be >= 0"),
        ({"starting_urls": ["http://a"], "max_depth": "2"}, "max_depth must be an integer"),
        ({"starting_urls": ["http://a"], "max_depth": True}, "max_depth must be an integer"),
        ({"starting_urls": ["http://a"], "max_depth": env.MAX_DEPTH_LIMIT + 1}, "max_depth must be <="),
        ({"starting_urls": ["http://a"], "timeout_seconds": -5}, "timeout_seconds"),
        ({"starting_urls": ["http://a"], "parallelism": 0}, "parallelism must be >= 1"),
        ({"starting_urls": ["http://a"], "ignored_urls": "x"}, "ignored_urls"),
        ({"starting_urls": ["http://a"], "ignored_words": ["("]}, "invalid pattern"),
        ({"starting_urls": ["http://a"], "result_path": 3}, "result_path"),
    ],
)
def test_parse_rejects_invalid_documents(data, message):
    with pytest.raises(ConfigurationError, match=message) as exc:
        _parse(data)
    assert exc.value.source == "test.yml"


def test_max_depth_at_limit_is_accepted():
    cfg = _parse({"starting_urls": ["http://a"], "max_depth": env.MAX_DEPTH_LIMIT})
    assert cfg.max_depth == env.MAX_DEPTH_LIMIT
