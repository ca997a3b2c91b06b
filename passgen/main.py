"""
passgen HTTP service
Returns passphrases over a small JSON API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from passgen import __version__
from passgen.config import get_settings, validate_settings
from passgen.exceptions import ResourceUnavailable
from passgen.logging_config import setup_logging
from passgen.middleware.security import SecurityMiddleware
from passgen.routers import health, passphrase
from passgen.wordlist import load_wordlist

logger = logging.getLogger("passgen.main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler"""
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL or "INFO")

    # Validate settings before accepting requests
    validate_settings(settings)

    # Warm the word list cache; readiness reports failures
    try:
        load_wordlist()
    except ResourceUnavailable as exc:
        logger.warning(f"Word list not loaded at startup: {exc}")

    yield


def create_app() -> FastAPI:
    """Application factory"""
    app = FastAPI(
        title="passgen",
        description="Diceware-style passphrase generator",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan
    )

    app.add_middleware(SecurityMiddleware)

    app.include_router(health.router, tags=["health"])
    app.include_router(passphrase.router, prefix="/api", tags=["passphrase"])

    return app


app = create_app()


def run():
    """Run the service with uvicorn"""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.BACKEND_HOST, port=settings.BACKEND_PORT)
