"""
Word list loading
EFF large wordlist by default, fetched once and cached on disk if absent.
The BIP39 English list from the mnemonic package is available as a
built-in alternative.
"""

import os
import tempfile
import time
from functools import lru_cache
from pathlib import Path
from threading import Lock
from typing import Dict, Iterable, Optional, Tuple

import httpx
from mnemonic import Mnemonic

from passgen.config import Settings, get_settings
from passgen.exceptions import ResourceUnavailable
from passgen.limits import WORDLIST_PREFIX_WIDTH
from passgen.logging_config import (
    log_wordlist_fetched,
    log_wordlist_loaded,
    log_wordlist_unavailable,
)

_cache: Dict[Tuple[str, int], Tuple[str, ...]] = {}
_cache_lock = Lock()
_fetch_lock = Lock()
_failed_fetches: Dict[str, float] = {}

# Seconds before a failed fetch of the same path is attempted again
FETCH_RETRY_SECONDS = 300


def parse_wordlist(lines: Iterable[str], prefix_width: int = WORDLIST_PREFIX_WIDTH) -> Tuple[str, ...]:
    """
    Parse word list lines into title-cased words

    Each line carries a fixed-width dice index column which is dropped.
    Blank lines and lines with nothing after the prefix are skipped.
    """
    words = []
    for line in lines:
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        word = line[prefix_width:].strip()
        if word:
            words.append(word.title())
    return tuple(words)


def fetch_wordlist(
    uri: str,
    destination: Path,
    timeout: float = 10.0,
    transport: Optional[httpx.BaseTransport] = None,
) -> Path:
    """Download the word list once and store it at destination"""
    try:
        with httpx.Client(timeout=timeout, transport=transport, follow_redirects=True) as client:
            response = client.get(uri)
            response.raise_for_status()
    except httpx.HTTPError as exc:
        raise ResourceUnavailable(f"Could not fetch word list from {uri}: {exc}") from exc

    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=destination.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(response.content)
            os.replace(tmp_name, destination)
        except BaseException:
            if os.path.exists(tmp_name):
                os.remove(tmp_name)
            raise
    except OSError as exc:
        raise ResourceUnavailable(f"Could not store word list at {destination}: {exc}") from exc

    log_wordlist_fetched(uri, str(destination))
    return destination


def _read_wordlist(path: Path, prefix_width: int) -> Tuple[str, ...]:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            words = parse_wordlist(handle, prefix_width)
    except (OSError, UnicodeDecodeError) as exc:
        log_wordlist_unavailable(str(path), str(exc))
        raise ResourceUnavailable(f"Could not read word list {path}: {exc}") from exc

    if not words:
        log_wordlist_unavailable(str(path), "empty")
        raise ResourceUnavailable(f"Word list {path} contains no words")
    return words


def _fetch_missing(source_uri: str, path: Path, settings: Settings, transport) -> None:
    """Fetch a missing list; a failed fetch is not retried until the cool-down passes"""
    with _fetch_lock:
        if path.exists():
            return
        failed_at = _failed_fetches.get(str(path))
        if failed_at is not None and time.monotonic() - failed_at < FETCH_RETRY_SECONDS:
            raise ResourceUnavailable(
                f"Word list {path} missing; last fetch failed less than {FETCH_RETRY_SECONDS}s ago"
            )
        try:
            fetch_wordlist(source_uri, path, settings.WORDLIST_FETCH_TIMEOUT, transport)
        except ResourceUnavailable as exc:
            _failed_fetches[str(path)] = time.monotonic()
            log_wordlist_unavailable(str(path), str(exc))
            raise
        _failed_fetches.pop(str(path), None)


def load_wordlist(
    path: Optional[Path] = None,
    source_uri: Optional[str] = None,
    fetch: Optional[bool] = None,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.BaseTransport] = None,
) -> Tuple[str, ...]:
    """
    Load the word list, fetching it first if it is absent locally.

    Results are cached process-wide by path; the returned tuple is shared.
    The fetch runs outside the cache lock.

    Raises:
      ResourceUnavailable if the list is missing and unfetchable,
      unreadable, or empty.
    """
    settings = settings or get_settings()
    if path is None and settings.WORDLIST_SOURCE == "bip39":
        return bip39_wordlist()

    path = Path(path) if path is not None else settings.wordlist_path
    source_uri = source_uri or settings.WORDLIST_SOURCE_URI
    fetch = settings.WORDLIST_FETCH_ENABLED if fetch is None else fetch
    prefix_width = settings.WORDLIST_PREFIX_WIDTH
    key = (str(path.resolve()), prefix_width)

    cached = _cache.get(key)
    if cached is not None:
        return cached

    if not path.exists():
        if not fetch:
            log_wordlist_unavailable(str(path), "missing and fetching is disabled")
            raise ResourceUnavailable(f"Word list {path} not found and fetching is disabled")
        _fetch_missing(source_uri, path, settings, transport)

    with _cache_lock:
        cached = _cache.get(key)
        if cached is not None:
            return cached

        words = _read_wordlist(path, prefix_width)
        _cache[key] = words
        log_wordlist_loaded(str(path), len(words))
        return words


def clear_wordlist_cache():
    """Drop cached word lists and remembered fetch failures"""
    with _cache_lock:
        _cache.clear()
    with _fetch_lock:
        _failed_fetches.clear()


@lru_cache()
def bip39_wordlist() -> Tuple[str, ...]:
    """BIP39 English wordlist (2048 words), title-cased"""
    words = tuple(word.title() for word in Mnemonic("english").wordlist)
    if not words:
        raise ResourceUnavailable("BIP39 wordlist is empty")
    return words
