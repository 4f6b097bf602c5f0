"""
Batch passphrase generation
"""

import random
from dataclasses import dataclass
from typing import Iterator, List, Optional

from dicepass.errors import ConfigurationError, MissingWord
from dicepass.limits import (
    DEFAULT_COMPLEX_CHARS,
    DEFAULT_MIN_CHARS,
    DEFAULT_QUANTITY,
    MIN_CHARS_FLOOR,
)
from dicepass.logging_config import log_passphrases_generated
from dicepass.services.builder import PassphraseBuilder
from dicepass.services.complexity import ComplexityTransformer
from dicepass.services.dice import DiceRoller
from dicepass.services.telemetry import (
    GENERATION_FAILURES,
    PASSPHRASES_GENERATED,
    increment_counter,
)
from dicepass.services.wordlist import WordList


@dataclass(frozen=True)
class GenerationRequest:
    """Validated, immutable generation parameters"""
    min_chars: int = DEFAULT_MIN_CHARS
    quantity: int = DEFAULT_QUANTITY
    complex_mode: bool = False
    complex_chars: str = DEFAULT_COMPLEX_CHARS

    def __post_init__(self):
        errors = []

        if isinstance(self.min_chars, bool) or not isinstance(self.min_chars, int):
            errors.append("min_chars must be an integer")
        elif self.min_chars < MIN_CHARS_FLOOR:
            errors.append(f"min_chars must be >= {MIN_CHARS_FLOOR}")

        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            errors.append("quantity must be an integer")
        elif self.quantity < 1:
            errors.append("quantity must be >= 1")

        if not self.complex_chars:
            errors.append("complex_chars must not be empty")
        elif any(char.isspace() for char in self.complex_chars):
            errors.append("complex_chars must not contain whitespace")

        if errors:
            raise ConfigurationError("Invalid generation request:\n- " + "\n- ".join(errors))


class PassphraseGenerator:
    """
    Produces request.quantity independent passphrases from one wordlist.

    The wordlist is passed in by the caller and only read. If any passphrase
    in a batch fails, the whole batch is abandoned and the MissingWord error
    carries the index of the failing passphrase.
    """

    def __init__(
        self,
        wordlist: WordList,
        builder: Optional[PassphraseBuilder] = None,
        transformer: Optional[ComplexityTransformer] = None,
    ):
        self.wordlist = wordlist
        self.builder = builder or PassphraseBuilder()
        self.transformer = transformer or ComplexityTransformer()

    def iter_generate(self, request: GenerationRequest) -> Iterator[str]:
        """Yield passphrases one at a time"""
        for index in range(request.quantity):
            try:
                passphrase = self.builder.build(request.min_chars, self.wordlist)
            except MissingWord as e:
                increment_counter(GENERATION_FAILURES)
                raise e.at_index(index)

            if request.complex_mode:
                passphrase = self.transformer.transform(passphrase, request.complex_chars)

            increment_counter(PASSPHRASES_GENERATED)
            yield passphrase

    def generate(self, request: GenerationRequest) -> List[str]:
        passphrases = list(self.iter_generate(request))
        log_passphrases_generated(len(passphrases), request.complex_mode)
        return passphrases


def generate_passphrases(
    wordlist: WordList,
    min_chars: int = DEFAULT_MIN_CHARS,
    quantity: int = DEFAULT_QUANTITY,
    complex_mode: bool = False,
    complex_chars: str = DEFAULT_COMPLEX_CHARS,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Generate passphrases in one call.

    Parameters are validated before any dice are rolled; pass rng to make
    the output reproducible.
    """
    request = GenerationRequest(
        min_chars=min_chars,
        quantity=quantity,
        complex_mode=complex_mode,
        complex_chars=complex_chars,
    )
    generator = PassphraseGenerator(
        wordlist,
        builder=PassphraseBuilder(DiceRoller(rng)),
        transformer=ComplexityTransformer(rng),
    )
    return generator.generate(request)
