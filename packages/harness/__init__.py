from .config import SearchConfig
from .core import run_search, build_corpus, SearchReport, NoHoneycombError
from .io import write_csv, write_manifest

__all__ = ["SearchConfig", "run_search", "build_corpus", "SearchReport", "NoHoneycombError",
           "write_csv", "write_manifest"]
