"""
passgen - diceware-style passphrase generator
"""

__version__ = "1.0.0"

from passgen.exceptions import ConfigurationError, PassgenError, ResourceUnavailable
from passgen.generator import PassphraseGenerator, generate_passphrase
from passgen.presets import preset_to_options, resolve_options
from passgen.schemas.options import GenerationOptions, build_options
from passgen.wordlist import load_wordlist

__all__ = [
    "ConfigurationError",
    "GenerationOptions",
    "PassgenError",
    "PassphraseGenerator",
    "ResourceUnavailable",
    "build_options",
    "generate_passphrase",
    "load_wordlist",
    "preset_to_options",
    "resolve_options",
]
