import importlib

MODULES = [
    'wordcrawl.config',
    'wordcrawl.container',
    'wordcrawl.domain',
    'wordcrawl.profiler',
    'wordcrawl.services.crawl_engine',
    'wordcrawl.services.page_source',
    'wordcrawl.services.config_file_store',
    'run',
]

def test_imports():
    for m in MODULES:
        importlib.import_module(m)
