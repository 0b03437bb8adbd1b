"""Redirect visitors to the best matching language variant of a site."""

from autolanguage.errors import NoLanguageFoundError
from autolanguage.models.enums import LanguageSource
from autolanguage.models.schemas import (
    FallbackHandler,
    FallbackInvocation,
    FallbackLanguage,
    RedirectConfig,
    RedirectTarget,
    RequestSignals,
    WeightedLanguage,
)
from autolanguage.services.accept_language import get_preferred_language, parse_accept_language
from autolanguage.services.resolver import LanguageResolver, render_template, resolve

__all__ = [
    "FallbackHandler",
    "FallbackInvocation",
    "FallbackLanguage",
    "LanguageResolver",
    "LanguageSource",
    "NoLanguageFoundError",
    "RedirectConfig",
    "RedirectTarget",
    "RequestSignals",
    "WeightedLanguage",
    "get_preferred_language",
    "parse_accept_language",
    "render_template",
    "resolve",
]
