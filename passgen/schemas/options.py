"""
Generation options - validated once before generation starts
"""

from pathlib import Path
from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from passgen.exceptions import ConfigurationError
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


class GenerationOptions(BaseModel):
    """Immutable passphrase generation configuration"""
    model_config = ConfigDict(frozen=True, extra="forbid")

    wordlist_path: Optional[Path] = None        # None means settings default
    wordlist_source_uri: Optional[str] = None   # None means settings default
    word_count: int = Field(default=DEFAULT_WORD_COUNT, ge=MIN_WORD_COUNT, le=MAX_WORD_COUNT)
    length: int = Field(default=DEFAULT_LENGTH, ge=MIN_LENGTH, le=MAX_LENGTH)
    number_length: int = Field(
        default=DEFAULT_NUMBER_LENGTH, ge=MIN_NUMBER_LENGTH, le=MAX_NUMBER_LENGTH
    )
    delimiter_length: int = Field(
        default=DEFAULT_DELIMITER_LENGTH, ge=MIN_DELIMITER_LENGTH, le=MAX_DELIMITER_LENGTH
    )
    delimiter: Optional[str] = Field(default=None, min_length=1, max_length=MAX_DELIMITER_LENGTH)
    include_numbers: bool = False
    include_delimiters: bool = False
    randomize_delimiters: bool = False
    use_complex_delimiters: bool = False
    delimiter_set: Optional[Tuple[str, ...]] = None

    @field_validator("delimiter_set")
    @classmethod
    def validate_delimiter_set(cls, value: Optional[Tuple[str, ...]]) -> Optional[Tuple[str, ...]]:
        if value is None:
            return value
        if not value:
            raise ValueError("delimiter_set must not be empty")
        if any(len(item) != 1 for item in value):
            raise ValueError("delimiter_set entries must be single characters")
        return value


def format_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one line per field"""
    lines = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "options"
        lines.append(f"{field}: {error['msg']}")
    return "Invalid generation options:\n- " + "\n- ".join(lines)


def build_options(**values: Any) -> GenerationOptions:
    """
    Build GenerationOptions from keyword values.

    Raises:
      ConfigurationError when any value is out of range.
    """
    try:
        return GenerationOptions(**values)
    except ValidationError as exc:
        raise ConfigurationError(format_validation_error(exc)) from exc
