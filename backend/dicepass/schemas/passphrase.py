"""
Passphrase request/response schemas
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from dicepass.config import settings
from dicepass.limits import MIN_CHARS_FLOOR


class PassphraseRequest(BaseModel):
    """Generate passphrases; omitted fields use configured defaults"""
    min_chars: int = Field(
        default=settings.DEFAULT_MIN_CHARS,
        ge=MIN_CHARS_FLOOR,
        le=settings.MAX_MIN_CHARS,
    )
    quantity: int = Field(default=settings.DEFAULT_QUANTITY, ge=1, le=settings.MAX_QUANTITY)
    complex_mode: bool = False
    complex_chars: Optional[str] = Field(default=None, min_length=1, max_length=256)

    @field_validator("complex_chars")
    @classmethod
    def validate_complex_chars(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        if any(char.isspace() for char in value):
            raise ValueError("complex_chars must not contain whitespace")
        return value


class PassphraseResponse(BaseModel):
    """Generated passphrases, in generation order"""
    passphrases: List[str]
    count: int
    complex_mode: bool
