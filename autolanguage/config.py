"""Central configuration: environment-driven resolver and server settings."""

import os
from collections.abc import Mapping

from autolanguage.models.schemas import FallbackLanguage, RedirectConfig

# Resolver defaults (overridable via AUTOLANG_* env vars)
DEFAULT_ALLOWED = "en"
DEFAULT_FALLBACK = "en"
DEFAULT_TEMPLATE = "/:language/"

# HTTP
REDIRECT_STATUS = int(os.environ.get("AUTOLANG_REDIRECT_STATUS", "302"))
SESSION_SECRET = os.environ.get("AUTOLANG_SESSION_SECRET", "")
HOST = os.environ.get("AUTOLANG_HOST", "0.0.0.0")
PORT = int(os.environ.get("AUTOLANG_PORT", "8000"))

LOG_LEVEL = os.environ.get("AUTOLANG_LOG_LEVEL", "INFO")


def _split_codes(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def load_config(environ: Mapping[str, str] | None = None) -> RedirectConfig:
    """Build a ``RedirectConfig`` from ``AUTOLANG_*`` variables.

    An empty ``AUTOLANG_FALLBACK`` disables the fallback, so unresolvable
    requests raise ``NoLanguageFoundError``.
    """
    env = os.environ if environ is None else environ
    fallback = env.get("AUTOLANG_FALLBACK", DEFAULT_FALLBACK).strip()
    return RedirectConfig(
        allowed=_split_codes(env.get("AUTOLANG_ALLOWED", DEFAULT_ALLOWED)),
        fallback=FallbackLanguage(fallback) if fallback else None,
        template=env.get("AUTOLANG_TEMPLATE", DEFAULT_TEMPLATE),
        cookie_name=env.get("AUTOLANG_COOKIE") or None,
        session_key=env.get("AUTOLANG_SESSION") or None,
        validate_session=env.get("AUTOLANG_VALIDATE_SESSION", "0") == "1",
    )
