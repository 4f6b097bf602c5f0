"""
Fixed diceware constants and generation bounds.
"""

import string

# Dice.
ROLL_LENGTH = 5
DIE_FACES = 6
WORDLIST_SIZE = DIE_FACES ** ROLL_LENGTH

# Passphrase construction.
DELIMITER = " "
MIN_CHARS_FLOOR = 12
DEFAULT_MIN_CHARS = 19
DEFAULT_QUANTITY = 1

COMPLEX_SYMBOLS = "`~!@#$%^&*()-_=+[]{}\\|;:,.<>/?"
DEFAULT_COMPLEX_CHARS = string.digits + COMPLEX_SYMBOLS
