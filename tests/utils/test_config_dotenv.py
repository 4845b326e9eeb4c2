import importlib
import sys
import builtins
import types
import logging

import pytest

import wordcrawl


@pytest.fixture(autouse=True)
def restore_config_module():
    original = sys.modules.get("wordcrawl.config")
    yield
    if original is not None:
        sys.modules["wordcrawl.config"] = original
        wordcrawl.config = original


def _reload_config():
    sys.modules.pop("wordcrawl.config", None)
    return importlib.import_module("wordcrawl.config")


def test_missing_dotenv_logs_warning(monkeypatch, caplog):
    orig_import = builtins.__import__

    def fake_import(name, globals=None, locals=None, fromlist=(), level=0):
        if name == "dotenv" or name.startswith("dotenv."):
            raise ImportError
        return orig_import(name, globals, locals, fromlist, level)

    monkeypatch.setattr(builtins, "__import__", fake_import)
    caplog.set_level(logging.WARNING)
    _reload_config()
    assert "python-dotenv not available" in caplog.text

    # environment fallback works
    monkeypatch.setenv("USER_AGENT", "X-Agent")
    cfg = _reload_config()
    assert cfg.USER_AGENT == "X-Agent"


def test_dotenv_present_but_fails_to_load(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("USER_AGENT=FromFile")
    monkeypatch.chdir(tmp_path)

    fake = types.SimpleNamespace(load_dotenv=lambda: False)
    monkeypatch.setitem(sys.modules, "dotenv", fake)
    with pytest.raises(RuntimeError):
        _reload_config()


def test_dotenv_loads_sets_variables(monkeypatch, tmp_path):
    tmp_path.joinpath(".env").write_text("WORDCRAWL_DEFAULT_DEPTH=5\n")
    monkeypatch.chdir(tmp_path)

    def fake_load():
        # emulate dotenv behavior: read .env into the environment
        for line in (tmp_path / ".env").read_text().splitlines():
            if "=" in line:
                k, v = line.split("=", 1)
                monkeypatch.setenv(k, v)
        return True

    monkeypatch.setitem(sys.modules, "dotenv", types.SimpleNamespace(load_dotenv=fake_load))
    cfg = _reload_config()
    assert cfg.DEFAULT_DEPTH == 5


def test_invalid_int_falls_back_to_default(monkeypatch, caplog):
    from wordcrawl import config

    monkeypatch.setenv("WORDCRAWL_TEST_INT", "nope")
    assert config.get_int_env("WORDCRAWL_TEST_INT", 3) == 3
    assert "Invalid WORDCRAWL_TEST_INT" in caplog.text


def test_log_level_is_normalised(monkeypatch):
    from wordcrawl import config

    monkeypatch.setenv("WORDCRAWL_LOG_LEVEL", " debug ")
    assert config.log_level() == "DEBUG"
    monkeypatch.delenv("WORDCRAWL_LOG_LEVEL")
    assert config.log_level() == "INFO"
