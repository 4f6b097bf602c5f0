"""
Pytest fixtures for dicepass tests
"""

import logging
import os
import pytest
from typing import AsyncGenerator

# Keep tests away from the real cache and network before imports
os.environ.setdefault("WORDLIST_URL", "https://wordlist.test/diceware.wordlist.asc")
os.environ.setdefault("WORDLIST_DIR", os.path.join(os.getcwd(), ".pytest-wordlist-cache"))

from httpx import AsyncClient, ASGITransport

from dicepass.main import create_app
from dicepass.services.dice import all_roll_codes
from dicepass.services.telemetry import reset_counters
from dicepass.services.wordlist import WordList

# Maps die faces to letters so every word is five lowercase letters
FACE_LETTERS = str.maketrans("123456", "abcdef")


@pytest.fixture(scope="session")
def full_wordlist() -> WordList:
    """A complete 7776-entry wordlist (11111 -> aaaaa, 66666 -> fffff)."""
    return WordList({code: code.translate(FACE_LETTERS) for code in all_roll_codes()})


@pytest.fixture
def wordlist_file(tmp_path, full_wordlist):
    """The full wordlist written to disk with PGP armor around it."""
    path = tmp_path / "diceware.wordlist.asc"
    lines = ["-----BEGIN PGP SIGNED MESSAGE-----", "Hash: SHA1", ""]
    lines += [f"{code}\t{word}" for code, word in full_wordlist.items()]
    lines += ["", "-----BEGIN PGP SIGNATURE-----", "iEYEARECAAYFAkIDAAAA", "-----END PGP SIGNATURE-----"]
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def app(full_wordlist):
    return create_app(wordlist=full_wordlist)


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture(autouse=True)
def clean_counters():
    reset_counters()
    yield
    reset_counters()


@pytest.fixture
def restore_root_logging():
    """Undo setup_logging() changes to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
