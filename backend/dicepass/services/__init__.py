# dicepass generation services
from dicepass.services.builder import PassphraseBuilder
from dicepass.services.complexity import ComplexityTransformer, title_case
from dicepass.services.dice import DiceRoller, all_roll_codes, is_roll_code
from dicepass.services.generator import (
    GenerationRequest,
    PassphraseGenerator,
    generate_passphrases,
)
from dicepass.services.wordlist import WordList, WordListCache, load_wordlist

__all__ = [
    "PassphraseBuilder",
    "ComplexityTransformer", "title_case",
    "DiceRoller", "all_roll_codes", "is_roll_code",
    "GenerationRequest", "PassphraseGenerator", "generate_passphrases",
    "WordList", "WordListCache", "load_wordlist",
]
