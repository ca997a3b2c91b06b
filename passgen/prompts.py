"""
Interactive option prompts
Used by the CLI when --interactive is given
"""

from passgen.limits import (
    DEFAULT_DELIMITER_LENGTH,
    DEFAULT_LENGTH,
    DEFAULT_NUMBER_LENGTH,
    DEFAULT_WORD_COUNT,
    MAX_DELIMITER_LENGTH,
    MAX_LENGTH,
    MAX_NUMBER_LENGTH,
    MAX_WORD_COUNT,
    MIN_DELIMITER_LENGTH,
    MIN_LENGTH,
    MIN_NUMBER_LENGTH,
    MIN_WORD_COUNT,
)
from passgen.presets import PRESETS


class OptionPrompts:
    """Handles all interactive generation prompts"""

    def __init__(self, input_func=input, output_func=print):
        self.input = input_func
        self.print = output_func

    def collect_all(self):
        """Collect generation options"""
        preset = self._prompt_preset()
        if preset:
            return {"preset": preset}

        config = {}
        config['word_count'] = self._prompt_int(
            "Minimum number of words?", DEFAULT_WORD_COUNT, MIN_WORD_COUNT, MAX_WORD_COUNT
        )
        config['length'] = self._prompt_int(
            "Minimum passphrase length?", DEFAULT_LENGTH, MIN_LENGTH, MAX_LENGTH
        )

        config['include_numbers'] = self._prompt_yes_no("Include numbers between words?")
        if config['include_numbers']:
            config['number_length'] = self._prompt_int(
                "Digits per number?", DEFAULT_NUMBER_LENGTH, MIN_NUMBER_LENGTH, MAX_NUMBER_LENGTH
            )

        config['include_delimiters'] = self._prompt_yes_no("Include delimiters between words?")
        if config['include_delimiters']:
            config['use_complex_delimiters'] = self._prompt_yes_no("Use complex delimiters?")
            config['randomize_delimiters'] = self._prompt_yes_no("Randomize each delimiter?")
            if config['randomize_delimiters']:
                config['delimiter_length'] = self._prompt_int(
                    "Characters per delimiter?",
                    DEFAULT_DELIMITER_LENGTH,
                    MIN_DELIMITER_LENGTH,
                    MAX_DELIMITER_LENGTH,
                )

        return config

    def _prompt_preset(self):
        """Prompt for a preset; empty input means custom options"""
        self.print("[PASSGEN] Use a preset?")
        names = list(PRESETS)
        for index, name in enumerate(names, start=1):
            self.print(f"          {index}. {name}")
        while True:
            choice = self.input(f"          Select [1-{len(names)}] or Enter for custom: ").strip()
            if choice == '':
                return None
            if choice.isdigit() and 1 <= int(choice) <= len(names):
                return names[int(choice) - 1]
            if choice.lower() in PRESETS:
                return choice.lower()
            self.print(f"          Please select 1-{len(names)} or press Enter")

    def _prompt_int(self, question, default, minimum, maximum):
        """Prompt for an integer within [minimum, maximum]"""
        self.print(f"\n[PASSGEN] {question}")
        while True:
            try:
                value = self.input(f"          Enter number (default: {default}): ").strip()
                if value == '':
                    return default
                value = int(value)
                if value < minimum:
                    self.print(f"          Must be at least {minimum}")
                    continue
                if value > maximum:
                    self.print(f"          Maximum is {maximum}")
                    continue
                return value
            except ValueError:
                self.print("          Please enter a valid number")

    def _prompt_yes_no(self, question):
        """Prompt for a yes/no answer, defaulting to no"""
        self.print(f"\n[PASSGEN] {question}")
        while True:
            choice = self.input("          [y/N]: ").strip().lower()
            if choice in ('', 'n', 'no'):
                return False
            if choice in ('y', 'yes'):
                return True
            self.print("          Please enter y or n")
