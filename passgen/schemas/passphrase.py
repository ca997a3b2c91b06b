"""
Passphrase API schemas
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from passgen.limits import (
    MAX_DELIMITER_LENGTH,
    MAX_LENGTH,
    MAX_NUMBER_LENGTH,
    MAX_PASSPHRASES_PER_REQUEST,
    MAX_WORD_COUNT,
    MIN_DELIMITER_LENGTH,
    MIN_LENGTH,
    MIN_NUMBER_LENGTH,
    MIN_WORD_COUNT,
)


class PassphraseRequest(BaseModel):
    """Generate passphrases; unset fields fall back to the preset, then defaults"""
    preset: Optional[str] = Field(default=None, max_length=32)
    count: int = Field(default=1, ge=1, le=MAX_PASSPHRASES_PER_REQUEST)
    word_count: Optional[int] = Field(default=None, ge=MIN_WORD_COUNT, le=MAX_WORD_COUNT)
    length: Optional[int] = Field(default=None, ge=MIN_LENGTH, le=MAX_LENGTH)
    number_length: Optional[int] = Field(default=None, ge=MIN_NUMBER_LENGTH, le=MAX_NUMBER_LENGTH)
    delimiter_length: Optional[int] = Field(
        default=None, ge=MIN_DELIMITER_LENGTH, le=MAX_DELIMITER_LENGTH
    )
    delimiter: Optional[str] = Field(default=None, min_length=1, max_length=MAX_DELIMITER_LENGTH)
    include_numbers: Optional[bool] = None
    include_delimiters: Optional[bool] = None
    randomize_delimiters: Optional[bool] = None
    use_complex_delimiters: Optional[bool] = None

    def overrides(self) -> dict:
        """Option overrides explicitly set on this request"""
        return self.model_dump(exclude={"preset", "count"}, exclude_none=True)


class PassphraseResponse(BaseModel):
    """Generated passphrases"""
    passphrases: List[str]
    count: int
