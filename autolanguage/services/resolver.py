"""Redirect language resolution.

Sources are tried in a fixed order and the first hit wins:

1. the known (logged-in) user's language, trusted as-is;
2. the preference cookie, only if its value is in the allow-list;
3. the session value, trusted as-is unless ``validate_session`` is set;
4. the browser's ``Accept-Language`` header;
5. the configured fallback.
"""

from loguru import logger

from autolanguage.errors import NoLanguageFoundError
from autolanguage.models.enums import LANGUAGE_TOKEN, LanguageSource
from autolanguage.models.schemas import (
    FallbackHandler,
    FallbackInvocation,
    FallbackLanguage,
    RedirectConfig,
    RedirectTarget,
    RequestSignals,
    ResolutionResult,
)
from autolanguage.services.accept_language import get_preferred_language


def render_template(template: str, language: str) -> str:
    """Substitute *language* for the first ``:language`` token in *template*."""
    return template.replace(LANGUAGE_TOKEN, language, 1)


def _stored_language(
    config: RedirectConfig, signals: RequestSignals
) -> tuple[str, LanguageSource] | None:
    if config.known_user:
        return config.known_user, LanguageSource.USER

    if config.cookie_name and config.cookie_name in signals.cookies:
        value = signals.cookies[config.cookie_name]
        if config.is_allowed(value):
            return value, LanguageSource.COOKIE
        logger.debug("Ignoring cookie {}={!r}: not an allowed language", config.cookie_name, value)

    session_value = signals.session.get(config.session_key) if config.session_key else None
    if session_value is not None:
        value = str(session_value)
        if not config.validate_session or config.is_allowed(value):
            return value, LanguageSource.SESSION
        logger.debug("Ignoring session {}={!r}: not an allowed language", config.session_key, value)

    return None


def resolve(config: RedirectConfig, signals: RequestSignals) -> ResolutionResult:
    """Resolve the redirect for one request.

    Returns a ``RedirectTarget``, or a ``FallbackInvocation`` when the
    configured fallback is a handler (the caller runs it). Raises
    ``NoLanguageFoundError`` when nothing matched and there is no fallback.
    """
    found = _stored_language(config, signals)
    if found is None:
        browser = get_preferred_language(signals.accept_language, config.allowed)
        if browser is not None:
            found = browser, LanguageSource.BROWSER

    if found is None:
        match config.fallback:
            case FallbackHandler(callback=callback):
                logger.debug("No language found, delegating to fallback handler")
                return FallbackInvocation(callback)
            case FallbackLanguage(code=code):
                found = code, LanguageSource.FALLBACK
            case None:
                raise NoLanguageFoundError()

    language, source = found
    logger.debug("Resolved language {!r} from {}", language, source)
    return RedirectTarget(
        url=render_template(config.template, language),
        language=language,
        source=source,
    )


class LanguageResolver:
    """Binds a ``RedirectConfig``; safe to share across concurrent requests."""

    def __init__(self, config: RedirectConfig | None = None):
        self._config = config or RedirectConfig()

    @property
    def config(self) -> RedirectConfig:
        return self._config

    def resolve(self, signals: RequestSignals) -> ResolutionResult:
        return resolve(self._config, signals)

    def get_preferred_language(self, header: str | None) -> str | None:
        return get_preferred_language(header, self._config.allowed)
