"""
Shared route dependencies
"""

from typing import Callable, Sequence

from passgen.wordlist import load_wordlist

WordlistLoader = Callable[..., Sequence[str]]


def get_wordlist_loader() -> WordlistLoader:
    """Word list loader used by routes; overridden in tests"""
    return load_wordlist
