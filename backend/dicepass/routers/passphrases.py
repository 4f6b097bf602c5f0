"""
Passphrase generation endpoint
"""

from fastapi import APIRouter, Depends, HTTPException, status

from dicepass.config import settings
from dicepass.errors import ConfigurationError, MissingWord
from dicepass.dependencies.generation import get_generator
from dicepass.schemas.passphrase import PassphraseRequest, PassphraseResponse
from dicepass.services.generator import GenerationRequest, PassphraseGenerator

router = APIRouter()


@router.post("/passphrases", response_model=PassphraseResponse)
async def create_passphrases(
    body: PassphraseRequest,
    generator: PassphraseGenerator = Depends(get_generator),
):
    try:
        request = GenerationRequest(
            min_chars=body.min_chars,
            quantity=body.quantity,
            complex_mode=body.complex_mode,
            complex_chars=body.complex_chars or settings.COMPLEX_CHARS,
        )
    except ConfigurationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "invalid_request", "message": str(e)},
        )

    try:
        passphrases = generator.generate(request)
    except MissingWord as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"error": "missing_word", "message": str(e)},
        )

    return PassphraseResponse(
        passphrases=passphrases,
        count=len(passphrases),
        complex_mode=request.complex_mode,
    )
