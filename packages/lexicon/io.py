from __future__ import annotations
from pathlib import Path
from typing import Iterable, List

import requests

# Seconds to wait for a remote word list.
FETCH_TIMEOUT = 30


class WordListLoadError(OSError):
    """The word list source (file or URL) could not be read."""


def is_url(source: str) -> bool:
    return str(source).startswith(("http://", "https://"))


def _decode_lines(raw: bytes) -> List[str]:
    return [ln.rstrip("\r\n") for ln in raw.decode("utf-8", errors="replace").splitlines()]


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Bytes that are not valid UTF-8 become U+FFFD, so the loader rejects
    those lines as non-alphabetic instead of scoring a mangled word.
    Raises WordListLoadError if the path doesn't exist.
    """
    p = Path(p)
    if not p.is_file():
        raise WordListLoadError(f"word list not found: {p}")
    try:
        raw = p.read_bytes()
    except OSError as e:
        raise WordListLoadError(f"cannot read word list {p}: {e}") from e
    return _decode_lines(raw)


def fetch_lines(url: str, *, timeout: float = FETCH_TIMEOUT) -> List[str]:
    """
    Download a plain-text word list. Network and HTTP errors become
    WordListLoadError.
    """
    try:
        r = requests.get(url, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as e:
        raise WordListLoadError(f"cannot fetch word list {url}: {e}") from e
    return _decode_lines(r.content)


def read_source(source: Path | str) -> List[str]:
    """Read a word list from a local path or an http(s) URL."""
    if is_url(str(source)):
        return fetch_lines(str(source))
    return read_lines(source)


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)
