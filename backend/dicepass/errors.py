"""
Error taxonomy for passphrase generation
"""

from typing import Optional


class PassphraseError(Exception):
    """Base class for every error raised by dicepass"""


class ConfigurationError(PassphraseError, ValueError):
    """Generation parameters or settings are invalid"""


class WordListUnavailable(PassphraseError):
    """The wordlist could not be obtained or read"""

    def __init__(self, location: str, reason: str):
        self.location = location
        self.reason = reason
        super().__init__(f"Wordlist unavailable at {location}: {reason}")


class MissingWord(PassphraseError):
    """A rolled code has no entry in the wordlist"""

    def __init__(self, code: str, index: Optional[int] = None):
        self.code = code
        self.index = index
        super().__init__(self._describe())

    def _describe(self) -> str:
        message = f"No wordlist entry for roll {self.code}"
        if self.index is not None:
            message += f" (passphrase {self.index})"
        return message

    def at_index(self, index: int) -> "MissingWord":
        """Attach the batch position of the failing passphrase"""
        self.index = index
        self.args = (self._describe(),)
        return self
