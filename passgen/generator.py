"""
Passphrase generation
Words, numbers and delimiters are all drawn from the system CSPRNG
"""

import secrets
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from passgen.exceptions import ResourceUnavailable
from passgen.limits import COMPLEX_DELIMITERS, SIMPLE_DELIMITERS
from passgen.logging_config import log_passphrase_generated
from passgen.schemas.options import GenerationOptions
from passgen.utils.crypto import random_delimiter, random_number_block
from passgen.wordlist import load_wordlist


@dataclass
class PassphraseBuild:
    """Accumulator for one generation call"""
    output: str = ""
    word_count: int = 0
    segments: List[Tuple[str, str]] = field(default_factory=list)

    def append(self, kind: str, text: str) -> None:
        self.output += text
        self.segments.append((kind, text))
        if kind == "word":
            self.word_count += 1


def resolve_delimiter_set(options: GenerationOptions) -> Tuple[str, ...]:
    """Explicit set, else complex or simple by flag"""
    if options.delimiter_set is not None:
        return options.delimiter_set
    if options.use_complex_delimiters:
        return COMPLEX_DELIMITERS
    return SIMPLE_DELIMITERS


class PassphraseGenerator:
    """Generates passphrases for one set of options"""

    def __init__(self, options: Optional[GenerationOptions] = None, words: Optional[Sequence[str]] = None):
        self.options = options or GenerationOptions()
        self._words = words
        self.delimiters = resolve_delimiter_set(self.options)

    @property
    def words(self) -> Sequence[str]:
        """Word list, loaded on first use"""
        if self._words is None:
            self._words = load_wordlist(
                self.options.wordlist_path,
                self.options.wordlist_source_uri,
            )
        if not self._words:
            raise ResourceUnavailable("Word list contains no words")
        return self._words

    def generate(self) -> str:
        """Generate one passphrase"""
        return self.build().output

    def build(self) -> PassphraseBuild:
        """Generate one passphrase, keeping its segments"""
        options = self.options
        words = self.words
        fixed_delimiter = options.delimiter or secrets.choice(self.delimiters)

        state = PassphraseBuild()
        # Keep going until both minimums hold
        while state.word_count < options.word_count or len(state.output) < options.length:
            if state.word_count > 0:
                if options.include_delimiters:
                    state.append("delimiter", self._delimiter(fixed_delimiter))
                if options.include_numbers:
                    state.append("number", random_number_block(options.number_length))
                    if options.include_delimiters:
                        state.append("delimiter", self._delimiter(fixed_delimiter))
            state.append("word", secrets.choice(words).title())

        log_passphrase_generated(state.word_count, len(state.output))
        return state

    def generate_many(self, count: int) -> List[str]:
        """Generate count independent passphrases"""
        return [self.generate() for _ in range(count)]

    def _delimiter(self, fixed: str) -> str:
        if self.options.randomize_delimiters:
            return random_delimiter(self.delimiters, self.options.delimiter_length)
        return fixed


def generate_passphrase(
    options: Optional[GenerationOptions] = None,
    words: Optional[Sequence[str]] = None,
) -> str:
    """
    Generate a passphrase with at least options.length characters and
    options.word_count words.

    Raises:
      ResourceUnavailable if the word list cannot be loaded.
    """
    return PassphraseGenerator(options, words).generate()
