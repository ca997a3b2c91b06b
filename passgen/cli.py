"""
Command-line entry point
Passphrases go to stdout; prompts, logs and errors go to stderr
"""

import argparse
import json
import sys
from typing import Sequence

from passgen.config import ALLOWED_LOG_LEVELS, get_settings, validate_settings
from passgen.exceptions import ConfigurationError, ResourceUnavailable
from passgen.generator import PassphraseGenerator
from passgen.limits import MAX_PASSPHRASES_PER_REQUEST
from passgen.logging_config import setup_logging
from passgen.presets import PRESETS, resolve_options
from passgen.prompts import OptionPrompts
from passgen.wordlist import load_wordlist

EXIT_OK = 0
EXIT_RESOURCE = 1
EXIT_CONFIG = 2

OPTION_FIELDS = (
    "word_count",
    "length",
    "number_length",
    "delimiter_length",
    "delimiter",
    "include_numbers",
    "include_delimiters",
    "randomize_delimiters",
    "use_complex_delimiters",
)


def _count(value: str) -> int:
    number = int(value)
    if number < 1 or number > MAX_PASSPHRASES_PER_REQUEST:
        raise argparse.ArgumentTypeError(f"must be between 1 and {MAX_PASSPHRASES_PER_REQUEST}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passgen",
        description="Generate diceware-style passphrases from the EFF large wordlist.",
    )
    parser.add_argument("--preset", choices=sorted(PRESETS), help="Named bundle of option defaults.")
    parser.add_argument("--word-count", type=int, help="Minimum number of words (2-16, default 2).")
    parser.add_argument("--length", type=int, help="Minimum passphrase length (16-256, default 16).")
    parser.add_argument("--number-length", type=int, help="Digits per number block (1-8, default 2).")
    parser.add_argument(
        "--delimiter-length",
        type=int,
        help="Characters per randomized delimiter (1-8, default 1).",
    )
    parser.add_argument("--delimiter", help="Fixed delimiter used when not randomizing.")
    parser.add_argument(
        "--include-numbers",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Insert a zero-padded number between words.",
    )
    parser.add_argument(
        "--include-delimiters",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Insert delimiters between words and around numbers.",
    )
    parser.add_argument(
        "--randomize-delimiters",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Draw a fresh delimiter for every insertion.",
    )
    parser.add_argument(
        "--use-complex-delimiters",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Draw delimiters from the extended punctuation set.",
    )
    parser.add_argument("--wordlist-path", help="Word list file (default from PASSGEN_WORDLIST_PATH).")
    parser.add_argument("--wordlist-source-uri", help="URL to fetch the word list from if absent.")
    parser.add_argument(
        "--no-fetch",
        action="store_true",
        help="Fail instead of downloading a missing word list.",
    )
    parser.add_argument(
        "--count",
        type=_count,
        default=1,
        help=f"Number of passphrases to print (1-{MAX_PASSPHRASES_PER_REQUEST}).",
    )
    parser.add_argument("--json", action="store_true", help="Output a JSON document.")
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Prompt for options instead of reading them from flags.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=[level for level in ALLOWED_LOG_LEVELS if level],
        help="Logging level (default WARNING).",
    )
    return parser


def _ask(prompt: str) -> str:
    sys.stderr.write(prompt)
    sys.stderr.flush()
    return input()


def _error(message: str) -> None:
    print(f"[PASSGEN] ERROR: {message}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    flag_values = {name: getattr(args, name) for name in OPTION_FIELDS}
    if args.interactive and (args.preset or any(value is not None for value in flag_values.values())):
        parser.error("--interactive cannot be combined with --preset or generation option flags")

    try:
        settings = get_settings()
        validate_settings(settings)
    except ValueError as exc:
        _error(str(exc))
        return EXIT_CONFIG

    setup_logging(args.log_level or settings.LOG_LEVEL or "WARNING")

    try:
        if args.interactive:
            prompts = OptionPrompts(
                input_func=_ask,
                output_func=lambda *parts: print(*parts, file=sys.stderr),
            )
            values = prompts.collect_all()
        else:
            values = flag_values
        preset = values.pop("preset", None) or args.preset or settings.DEFAULT_PRESET or None
        options = resolve_options(
            preset,
            wordlist_path=args.wordlist_path,
            wordlist_source_uri=args.wordlist_source_uri,
            **values,
        )
    except (ConfigurationError, ValueError) as exc:
        _error(str(exc))
        return EXIT_CONFIG

    try:
        words = load_wordlist(
            options.wordlist_path,
            options.wordlist_source_uri,
            fetch=False if args.no_fetch else None,
        )
    except ResourceUnavailable as exc:
        _error(str(exc))
        return EXIT_RESOURCE

    passphrases = PassphraseGenerator(options, words).generate_many(args.count)

    if args.json:
        payload = {
            "passphrases": passphrases,
            "options": options.model_dump(mode="json", exclude_none=True),
        }
        print(json.dumps(payload, indent=2))
    else:
        for passphrase in passphrases:
            print(passphrase)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
