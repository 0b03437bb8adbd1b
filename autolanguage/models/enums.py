"""Domain enumerations for language resolution."""

from enum import StrEnum


class LanguageSource(StrEnum):
    """Which resolution rule produced the redirect language."""

    USER = "user"
    COOKIE = "cookie"
    SESSION = "session"
    BROWSER = "browser"
    FALLBACK = "fallback"


# Placeholder substituted with the resolved language in redirect templates
LANGUAGE_TOKEN = ":language"
