"""
Passphrase construction: roll, look up, append until long enough
"""

from typing import List, Optional

from dicepass.limits import DELIMITER
from dicepass.services.dice import DiceRoller
from dicepass.services.wordlist import WordList


class PassphraseBuilder:
    """Builds one plain passphrase from fresh dice rolls"""

    def __init__(self, roller: Optional[DiceRoller] = None, delimiter: str = DELIMITER):
        self.roller = roller or DiceRoller()
        self.delimiter = delimiter

    def build(self, min_chars: int, wordlist: WordList) -> str:
        """
        Append words until the delimited length reaches min_chars.

        The running length counts every word plus one trailing delimiter, and
        the loop stops once that length minus the final delimiter is at least
        min_chars. At least one word is always drawn.

        Raises:
          MissingWord when a roll has no wordlist entry.
        """
        words: List[str] = []
        length = 0
        while True:
            word = wordlist.lookup(self.roller.roll())
            words.append(word)
            length += len(word) + len(self.delimiter)
            if length - len(self.delimiter) >= min_chars:
                break

        return self.delimiter.join(words).strip()
