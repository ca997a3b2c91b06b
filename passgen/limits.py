"""
Generation limits, delimiter sets and word-list constants
shared by the generator, schemas and CLI.
"""

# Validated option ranges (inclusive).
MIN_WORD_COUNT = 2
MAX_WORD_COUNT = 16
MIN_LENGTH = 16
MAX_LENGTH = 256
MIN_NUMBER_LENGTH = 1
MAX_NUMBER_LENGTH = 8
MIN_DELIMITER_LENGTH = 1
MAX_DELIMITER_LENGTH = 8

# Defaults.
DEFAULT_WORD_COUNT = 2
DEFAULT_LENGTH = 16
DEFAULT_NUMBER_LENGTH = 2
DEFAULT_DELIMITER_LENGTH = 1

# Passphrases returned per CLI or API call.
MAX_PASSPHRASES_PER_REQUEST = 100

SIMPLE_DELIMITERS = ("-", "_", "=", "+", ";", ":", ",", ".")
COMPLEX_DELIMITERS = SIMPLE_DELIMITERS + (
    "!", "@", "#", "$", "%", "^", "&", "*",
    "(", ")", "[", "{", "]", "}", "\\", "/", "?",
)

# EFF lines look like "11111\tabacus": five dice digits and a tab.
WORDLIST_PREFIX_WIDTH = 6
WORDLIST_FILENAME = "eff_large_wordlist.txt"
WORDLIST_SOURCE_URI = "https://www.eff.org/files/2016/07/18/eff_large_wordlist.txt"
