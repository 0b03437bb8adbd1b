"""Language redirect route — wires the resolver into FastAPI/Starlette."""

import inspect
from collections.abc import Callable
from dataclasses import replace

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse
from starlette.responses import Response

from autolanguage.models.schemas import FallbackInvocation, RedirectConfig, RequestSignals
from autolanguage.services.resolver import resolve

UserLanguageFn = Callable[[Request], str | None]


def signals_from_request(request: Request) -> RequestSignals:
    """Snapshot cookies, session and Accept-Language from *request*.

    The session is only read when a ``SessionMiddleware`` has populated
    the scope; otherwise it is treated as empty.
    """
    session = dict(request.session) if "session" in request.scope else {}
    return RequestSignals(
        cookies=dict(request.cookies),
        session=session,
        accept_language=request.headers.get("accept-language"),
    )


async def run_fallback(invocation: FallbackInvocation):
    """Execute a fallback handler, awaiting it if it is a coroutine function."""
    result = invocation()
    if inspect.isawaitable(result):
        result = await result
    return result


async def redirect_for(
    request: Request,
    config: RedirectConfig,
    status_code: int = 302,
):
    """Resolve the language for *request* and build the response.

    ``NoLanguageFoundError`` propagates to the application's exception handlers.
    """
    result = resolve(config, signals_from_request(request))
    if isinstance(result, FallbackInvocation):
        return await run_fallback(result)
    return RedirectResponse(url=result.url, status_code=status_code)


def create_redirect_router(
    config: RedirectConfig,
    path: str = "/",
    status_code: int = 302,
    user_language: UserLanguageFn | None = None,
) -> APIRouter:
    """Build a router that redirects GET *path* to the visitor's language.

    *user_language* returns the logged-in user's language for a request
    (or ``None``); it is merged into a per-request copy of *config*.
    """
    router = APIRouter(tags=["Language redirect"])

    @router.get(path, include_in_schema=False)
    async def language_redirect(request: Request) -> Response:
        effective = config
        if user_language is not None:
            known = user_language(request)
            if known:
                effective = replace(config, known_user=known)
        return await redirect_for(request, effective, status_code=status_code)

    return router
