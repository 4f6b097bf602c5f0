"""
Generation dependencies for passphrase routes
The wordlist lives on application state, loaded once at startup
"""

from fastapi import Depends, HTTPException, Request, status

from dicepass.services.generator import PassphraseGenerator
from dicepass.services.wordlist import WordList


async def get_wordlist(request: Request) -> WordList:
    """Loaded wordlist, or 503 while none is available"""
    wordlist = getattr(request.app.state, "wordlist", None)

    if wordlist is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error": "wordlist_unavailable", "message": "Wordlist not loaded"},
        )

    return wordlist


async def get_generator(wordlist: WordList = Depends(get_wordlist)) -> PassphraseGenerator:
    return PassphraseGenerator(wordlist)
