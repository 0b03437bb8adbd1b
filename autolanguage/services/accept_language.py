"""Accept-Language header parsing and ranking.

Simplified on purpose: tags are reduced to a base code by dropping one
trailing alphabetic subtag (``en-us`` -> ``en``, ``zh-hant`` -> ``zh``),
and repeated base codes add their quality values together, so
``en-US,en-GB;q=0.5`` ranks ``en`` at 1.5.
"""

import math
import re
from collections.abc import Iterable

from loguru import logger

from autolanguage.models.schemas import WeightedLanguage

_DIRECTIVE_SEPARATOR = re.compile(r",\s*")
_TRAILING_SUBTAG = re.compile(r"-[a-z]{2,}$")

DEFAULT_QUALITY = 1.0


def base_code(tag: str) -> str:
    """Lower-case *tag* and strip a trailing region/script subtag."""
    return _TRAILING_SUBTAG.sub("", tag.strip().lower())


def _quality(params: list[str]) -> float | None:
    """Return the ``q=`` value from directive params, ``None`` if unparseable."""
    for param in params:
        name, sep, value = param.strip().partition("=")
        if not sep or name.strip().lower() != "q":
            continue
        value = value.strip()
        if not value:
            return DEFAULT_QUALITY
        try:
            quality = float(value)
        except ValueError:
            return None
        if not math.isfinite(quality) or not 0.0 <= quality <= 1.0:
            return None
        return quality
    return DEFAULT_QUALITY


def parse_accept_language(header: str | None) -> list[WeightedLanguage]:
    """Parse *header* into base codes ranked by accumulated weight, highest first.

    Codes with equal weight keep the order in which they first appeared.
    Directives whose quality is not a number in the 0-1 range are skipped.
    """
    if not header or not header.strip():
        return []

    weights: dict[str, float] = {}
    for directive in _DIRECTIVE_SEPARATOR.split(header.strip()):
        tag, *params = directive.split(";")
        code = base_code(tag)
        if not code:
            continue
        quality = _quality(params)
        if quality is None:
            logger.debug("Skipping Accept-Language directive with bad quality: {!r}", directive)
            continue
        weights[code] = weights.get(code, 0.0) + quality

    ranked = sorted(weights.items(), key=lambda item: item[1], reverse=True)
    return [WeightedLanguage(code, weight) for code, weight in ranked]


def get_preferred_language(header: str | None, allowed: Iterable[str]) -> str | None:
    """Return the highest ranked base code from *header* that is in *allowed*."""
    permitted = {code.lower() for code in allowed}
    for candidate in parse_accept_language(header):
        if candidate.code in permitted:
            return candidate.code
    return None
