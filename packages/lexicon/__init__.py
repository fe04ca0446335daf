from .validator import validate_wordlist, validate_lines, pretty_summary
from .io import read_lines, read_source, write_lines, WordListLoadError
from .loader import load_words, filter_words

__all__ = ["validate_wordlist", "validate_lines", "pretty_summary", "read_source", "load_words",
           "WordListLoadError"]
