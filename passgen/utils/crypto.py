"""
Cryptographically secure random draws
Uses only the system CSPRNG via the secrets module
"""

import secrets
from typing import Sequence


def random_number_block(digits: int) -> str:
    """Uniform number below 10**digits, zero-padded to digits"""
    return str(secrets.randbelow(10 ** digits)).zfill(digits)


def random_delimiter(delimiters: Sequence[str], length: int) -> str:
    """Concatenate length independently drawn delimiter characters"""
    return "".join(secrets.choice(delimiters) for _ in range(length))
