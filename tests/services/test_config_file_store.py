import io
import json

import pytest

from wordcrawl.exceptions import ConfigurationError
from wordcrawl.services.config_file_store import ConfigFileStore


def test_load_yaml_file(tmp_path):
    path = tmp_path / "crawl.yml"
    path.write_text(
        "starting_urls:\n"
        "  - http://example.com\n"
        "max_depth: 1\n"
        "timeout_seconds: 3\n"
        "popular_word_count: 2\n"
        "parallelism: 1\n",
        encoding="utf-8",
    )
    cfg = ConfigFileStore().load(path)
    assert cfg.starting_urls == ("http://example.com",)
    assert cfg.max_depth == 1


def test_load_json_file(tmp_path):
    path = tmp_path / "crawl.json"
    path.write_text(json.dumps({"starting_urls": ["http://example.com"], "ignored_urls": [".*/login"]}), encoding="utf-8")
    cfg = ConfigFileStore().load(str(path))
    assert cfg.to_request().is_ignored("http://example.com/login")


def test_read_from_stream():
    cfg = ConfigFileStore().read(io.StringIO('{"starting_urls": ["http://a"], "max_depth": 0}'))
    assert cfg.max_depth == 0


def test_missing_file_is_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError, match="cannot read file"):
        ConfigFileStore().load(tmp_path / "nope.yml")


def test_malformed_document_is_configuration_error(tmp_path):
    path = tmp_path / "bad.yml"
    path.write_text("starting_urls: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="malformed document"):
        ConfigFileStore().load(path)
