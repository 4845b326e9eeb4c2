import os
import logging
from pathlib import Path

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


USER_AGENT = get_str_env("USER_AGENT", "WordCrawl/0.1")
HTTP_TIMEOUT = get_int_env("HTTP_TIMEOUT", 10)
DEFAULT_DEPTH = get_int_env("WORDCRAWL_DEFAULT_DEPTH", 2)
DEFAULT_TIMEOUT_SECONDS = get_int_env("WORDCRAWL_DEFAULT_TIMEOUT_SECONDS", 60)
DEFAULT_POPULAR_WORD_COUNT = get_int_env("WORDCRAWL_DEFAULT_POPULAR_WORD_COUNT", 10)
# Upper bound for max_depth; inline child runs add stack frames per level
MAX_DEPTH_LIMIT = get_int_env("WORDCRAWL_MAX_DEPTH_LIMIT", 100)


def log_level() -> str:
	return (get_str_env("WORDCRAWL_LOG_LEVEL", "INFO") or "INFO").strip().upper()
