"""
Locale-aware formatting of values into templates.

* :class:`LocaleFormatter`: composite templates such as ``"{0:N2}"``
* :func:`resolve_locale`: language tag to locale

Locale data comes from Babel.
"""

from .culture import INVARIANT_CURRENCY, INVARIANT_LOCALE, is_blank, resolve_locale
from .locale_formatter import LocaleFormatter
from .specifiers import FormatSpecifier

__all__ = [
    "LocaleFormatter",
    "FormatSpecifier",
    "resolve_locale",
    "is_blank",
    "INVARIANT_LOCALE",
    "INVARIANT_CURRENCY",
]
