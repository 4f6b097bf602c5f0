"""
Complex mode: case changes, symbol delimiters and one injected digit
"""

import random
import secrets
import string
from typing import Optional

from dicepass.limits import DELIMITER

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def title_case(text: str, delimiter: str = DELIMITER) -> str:
    """
    Uppercase the first letter of every delimited word and lowercase the rest.

    Only ASCII letters change, so the result never depends on locale.
    """
    return delimiter.join(
        word[:1].translate(_TO_UPPER) + word[1:].translate(_TO_LOWER)
        for word in text.split(delimiter)
    )


class ComplexityTransformer:
    """Rewrites a plain passphrase to satisfy common complexity rules"""

    def __init__(self, rng: Optional[random.Random] = None, delimiter: str = DELIMITER):
        self._rng = rng or secrets.SystemRandom()
        self.delimiter = delimiter

    def transform(self, passphrase: str, complex_chars: str) -> str:
        """
        Title-case the words, replace each delimiter left to right with an
        independent draw from complex_chars, then overwrite one character
        (never the first) with a random digit.
        """
        if not complex_chars:
            raise ValueError("complex_chars must not be empty")

        words = title_case(passphrase, self.delimiter).split(self.delimiter)
        parts = [words[0]]
        for word in words[1:]:
            parts.append(self._rng.choice(complex_chars))
            parts.append(word)

        return self._inject_digit("".join(parts))

    def _inject_digit(self, text: str) -> str:
        if len(text) < 2:
            # No position past the first character; append instead
            return text + str(self._rng.randint(0, 9))

        position = self._rng.randint(1, len(text) - 1)
        digit = str(self._rng.randint(0, 9))
        return text[:position] + digit + text[position + 1:]
