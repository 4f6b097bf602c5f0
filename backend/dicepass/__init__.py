"""
dicepass - diceware passphrase generation
"""

from dicepass.errors import (
    ConfigurationError,
    MissingWord,
    PassphraseError,
    WordListUnavailable,
)
from dicepass.services.generator import (
    GenerationRequest,
    PassphraseGenerator,
    generate_passphrases,
)
from dicepass.services.wordlist import WordList, WordListCache, load_wordlist

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError", "MissingWord", "PassphraseError", "WordListUnavailable",
    "GenerationRequest", "PassphraseGenerator", "generate_passphrases",
    "WordList", "WordListCache", "load_wordlist",
]
