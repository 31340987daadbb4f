"""Resolution of language tags to Babel locales."""
import logging
from functools import lru_cache
from typing import Optional

from babel import Locale
from babel.numbers import get_territory_currencies

INVARIANT_LOCALE = "en"
"""Culture-neutral locale: English, no territory."""

INVARIANT_CURRENCY = "XXX"
"""ISO 4217 code for "no currency", displayed as the generic currency sign."""

logger = logging.getLogger(__name__)


def is_blank(tag: Optional[str]) -> bool:
    """
    True if a language tag is absent, empty or whitespace.

    >>> is_blank(None), is_blank("  "), is_blank("en-US")
    (True, True, False)
    """
    return tag is None or not tag.strip()


@lru_cache(maxsize=256)
def _parse_tag(tag: str) -> Locale:
    logger.debug(f"Parsing locale tag {tag}")
    return Locale.parse(tag, sep="-")


def resolve_locale(tag: Optional[str], invariant: str = INVARIANT_LOCALE) -> Locale:
    """
    Resolve a language tag such as ``en-US`` to a locale.

    Blank tags resolve to the invariant locale. Both ``-`` and ``_`` are
    accepted as separators.

    >>> str(resolve_locale("en-US"))
    'en_US'
    >>> str(resolve_locale(None))
    'en'

    :param tag: language tag, may be None
    :param invariant: locale used for blank tags
    :return: the parsed locale
    :raises ValueError: if the tag is malformed
    :raises babel.UnknownLocaleError: if no locale data exists for the tag
    """
    if is_blank(tag):
        return _parse_tag(invariant)
    return _parse_tag(tag.strip().replace("_", "-"))


def currency_for_locale(locale: Locale) -> str:
    """
    Currency in use in the territory of a locale.

    >>> currency_for_locale(resolve_locale("de-DE"))
    'EUR'
    >>> currency_for_locale(resolve_locale(None))
    'XXX'

    :param locale:
    :return: ISO 4217 code
    """
    if not locale.territory:
        return INVARIANT_CURRENCY
    currencies = get_territory_currencies(locale.territory)
    if not currencies:
        return INVARIANT_CURRENCY
    return currencies[0]
