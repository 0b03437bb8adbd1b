"""Configuration, request signals and resolution results.

All types are frozen dataclasses: a ``RedirectConfig`` is built once and
shared read-only between requests, ``RequestSignals`` is built per request.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from autolanguage.models.enums import LANGUAGE_TOKEN, LanguageSource

FallbackCallback = Callable[[], Any]


@dataclass(frozen=True, slots=True)
class FallbackLanguage:
    """Redirect to a fixed language code when nothing else matched."""

    code: str


@dataclass(frozen=True, slots=True)
class FallbackHandler:
    """Hand the request over to a zero-argument callable (e.g. a language picker page)."""

    callback: FallbackCallback


FallbackSpec = FallbackLanguage | FallbackHandler | None


def _coerce_fallback(value: Any) -> FallbackSpec:
    """Wrap a plain code or callable into its fallback variant."""
    match value:
        case None | FallbackLanguage() | FallbackHandler():
            return value
        case str():
            return FallbackLanguage(value)
        case _ if callable(value):
            return FallbackHandler(value)
    raise ValueError(f"Unsupported fallback: {value!r}")


@dataclass(frozen=True)
class RedirectConfig:
    """Immutable resolver configuration.

    ``allowed`` is normalized to a lower-cased, de-duplicated tuple in
    first-seen order. ``fallback`` accepts a ``str`` or a callable as a
    shorthand for ``FallbackLanguage`` / ``FallbackHandler``.
    """

    known_user: str | None = None
    allowed: tuple[str, ...] = ("en",)
    fallback: FallbackSpec = FallbackLanguage("en")
    template: str = f"/{LANGUAGE_TOKEN}/"
    cookie_name: str | None = None
    session_key: str | None = None
    validate_session: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.allowed, str):
            raise ValueError("allowed must be a collection of language codes, not a string")
        allowed = tuple(dict.fromkeys(code.strip().lower() for code in self.allowed if code.strip()))
        if not allowed:
            raise ValueError("allowed must contain at least one language code")
        if not self.template:
            raise ValueError("template must not be empty")
        object.__setattr__(self, "allowed", allowed)
        object.__setattr__(self, "fallback", _coerce_fallback(self.fallback))

    def is_allowed(self, code: str) -> bool:
        return code in self.allowed


@dataclass(frozen=True)
class RequestSignals:
    """Ambient request state read by the resolver (never written)."""

    cookies: Mapping[str, str] = field(default_factory=dict)
    session: Mapping[str, Any] = field(default_factory=dict)
    accept_language: str | None = None


@dataclass(frozen=True, slots=True)
class WeightedLanguage:
    """Base language code with its accumulated quality weight."""

    code: str
    weight: float


@dataclass(frozen=True, slots=True)
class RedirectTarget:
    """Resolved redirect: the rendered URL and where the language came from."""

    url: str
    language: str
    source: LanguageSource


@dataclass(frozen=True, slots=True)
class FallbackInvocation:
    """The caller must execute ``handler`` and use its result as the response."""

    handler: FallbackCallback

    def __call__(self) -> Any:
        return self.handler()


ResolutionResult = RedirectTarget | FallbackInvocation
