"""Automatic language redirect — FastAPI application."""

import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.middleware.sessions import SessionMiddleware

from autolanguage.config import HOST, PORT, REDIRECT_STATUS, SESSION_SECRET, load_config
from autolanguage.errors import NoLanguageFoundError
from autolanguage.logging_config import setup_logging
from autolanguage.models.schemas import RedirectConfig
from autolanguage.routes.redirect import create_redirect_router

setup_logging()


async def _no_language_handler(request: Request, exc: NoLanguageFoundError) -> JSONResponse:
    logger.warning(
        "No language for {} (accept-language={!r})",
        request.url.path,
        request.headers.get("accept-language"),
    )
    return JSONResponse(status_code=404, content={"detail": exc.message})


def create_app(config: RedirectConfig | None = None, session_secret: str = SESSION_SECRET) -> FastAPI:
    """Build the application; *config* defaults to the ``AUTOLANG_*`` environment."""
    config = config or load_config()
    app = FastAPI(
        title="Automatic language redirect",
        description="Redirects visitors to the best matching language variant of the site",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
    )
    app.add_exception_handler(NoLanguageFoundError, _no_language_handler)  # type: ignore[arg-type]

    # Stored preference: session is only readable when a secret is configured
    if session_secret:
        app.add_middleware(SessionMiddleware, secret_key=session_secret)

    app.include_router(create_redirect_router(config, status_code=REDIRECT_STATUS))
    logger.info("Redirecting to {} for languages {}", config.template, ", ".join(config.allowed))
    return app


app = create_app()


def main() -> None:
    dev_mode = os.environ.get("AUTOLANG_DEV", "0") == "1"
    uvicorn.run(
        "autolanguage.main:app",
        host=HOST,
        port=PORT,
        reload=dev_mode,
    )


if __name__ == "__main__":
    main()
