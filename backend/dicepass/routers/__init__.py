# dicepass API Routers
from dicepass.routers import health, passphrases

__all__ = ["health", "passphrases"]
