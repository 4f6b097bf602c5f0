"""
Dice rolling for word selection
"""

import random
import secrets
from itertools import product
from typing import Iterator, Optional

from dicepass.limits import DIE_FACES, ROLL_LENGTH

_FACES = "".join(str(face) for face in range(1, DIE_FACES + 1))


def is_roll_code(code: str) -> bool:
    """True for exactly ROLL_LENGTH digits, each a die face"""
    return (
        isinstance(code, str)
        and len(code) == ROLL_LENGTH
        and all(char in _FACES for char in code)
    )


def all_roll_codes() -> Iterator[str]:
    """Every valid roll code in ascending order (11111 .. 66666)"""
    for faces in product(_FACES, repeat=ROLL_LENGTH):
        yield "".join(faces)


class DiceRoller:
    """
    Simulates ROLL_LENGTH independent six-sided dice.

    The default source is the OS CSPRNG through secrets.SystemRandom, which is
    safe to share between threads. Tests inject a seeded random.Random.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or secrets.SystemRandom()

    def roll(self) -> str:
        """Roll every die once and return the faces as a roll code"""
        return "".join(
            str(self._rng.randint(1, DIE_FACES)) for _ in range(ROLL_LENGTH)
        )
