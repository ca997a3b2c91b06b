"""
Passphrase endpoints
The generated values are returned once and never logged or stored
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from passgen.config import get_settings
from passgen.exceptions import ConfigurationError, ResourceUnavailable
from passgen.generator import PassphraseGenerator
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
from passgen.presets import resolve_options
from passgen.routers.dependencies import WordlistLoader, get_wordlist_loader
from passgen.schemas.passphrase import PassphraseRequest, PassphraseResponse

router = APIRouter()


def generate_response(request: PassphraseRequest, loader: WordlistLoader) -> PassphraseResponse:
    """Resolve options, load words and generate request.count passphrases"""
    preset = request.preset or get_settings().DEFAULT_PRESET or None
    try:
        options = resolve_options(preset, **request.overrides())
    except ConfigurationError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        )

    try:
        words = loader()
    except ResourceUnavailable:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="wordlist unavailable",
        )

    passphrases = PassphraseGenerator(options, words).generate_many(request.count)
    return PassphraseResponse(passphrases=passphrases, count=len(passphrases))


@router.get("/passphrase", response_model=PassphraseResponse)
def get_passphrase(
    preset: Optional[str] = Query(default=None, max_length=32),
    count: int = Query(default=1, ge=1, le=MAX_PASSPHRASES_PER_REQUEST),
    word_count: Optional[int] = Query(default=None, ge=MIN_WORD_COUNT, le=MAX_WORD_COUNT),
    length: Optional[int] = Query(default=None, ge=MIN_LENGTH, le=MAX_LENGTH),
    number_length: Optional[int] = Query(default=None, ge=MIN_NUMBER_LENGTH, le=MAX_NUMBER_LENGTH),
    delimiter_length: Optional[int] = Query(
        default=None, ge=MIN_DELIMITER_LENGTH, le=MAX_DELIMITER_LENGTH
    ),
    delimiter: Optional[str] = Query(default=None, min_length=1, max_length=MAX_DELIMITER_LENGTH),
    include_numbers: Optional[bool] = None,
    include_delimiters: Optional[bool] = None,
    randomize_delimiters: Optional[bool] = None,
    use_complex_delimiters: Optional[bool] = None,
    loader: WordlistLoader = Depends(get_wordlist_loader),
):
    """Generate passphrases from query parameters"""
    request = PassphraseRequest(
        preset=preset,
        count=count,
        word_count=word_count,
        length=length,
        number_length=number_length,
        delimiter_length=delimiter_length,
        delimiter=delimiter,
        include_numbers=include_numbers,
        include_delimiters=include_delimiters,
        randomize_delimiters=randomize_delimiters,
        use_complex_delimiters=use_complex_delimiters,
    )
    return generate_response(request, loader)


@router.post("/passphrase", response_model=PassphraseResponse)
def create_passphrase(
    request: PassphraseRequest,
    loader: WordlistLoader = Depends(get_wordlist_loader),
):
    """Generate passphrases from a JSON body"""
    return generate_response(request, loader)
