# dicepass Dependencies
from dicepass.dependencies.generation import get_generator, get_wordlist

__all__ = ["get_generator", "get_wordlist"]
