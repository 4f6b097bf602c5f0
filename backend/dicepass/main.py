"""
dicepass HTTP service
Diceware passphrases over a small JSON API.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from starlette.concurrency import run_in_threadpool

from dicepass.config import settings, validate_settings
from dicepass.logging_config import setup_logging
from dicepass.middleware.rate_limit import RateLimiter
from dicepass.middleware.security import SecurityMiddleware
from dicepass.routers import health, passphrases
from dicepass.services.wordlist import WordList, WordListCache


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    setup_logging(settings.LOG_LEVEL)

    # Fail before touching the network on bad settings
    validate_settings(settings)

    if getattr(app.state, "wordlist", None) is None:
        # Reading or fetching the wordlist blocks
        cache = WordListCache.from_settings(settings)
        app.state.wordlist = await run_in_threadpool(cache.load)

    yield


def create_app(
    wordlist: Optional[WordList] = None,
    rate_limiter: Optional[RateLimiter] = None,
) -> FastAPI:
    """Application factory"""
    app = FastAPI(
        title="dicepass",
        description="Diceware passphrase generator",
        version="1.0.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan
    )
    app.state.wordlist = wordlist

    app.add_middleware(
        SecurityMiddleware,
        rate_limiter=rate_limiter or RateLimiter.from_settings(settings),
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(passphrases.router, prefix="/api", tags=["passphrases"])

    return app


app = create_app()
