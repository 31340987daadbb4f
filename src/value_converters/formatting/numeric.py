"""
Standard numeric format specifiers.

Each specifier is a letter with an optional precision, e.g. ``N2``:

* ``C``: currency
* ``D``: zero-padded integer
* ``E``: scientific
* ``F``: fixed point
* ``G``: general
* ``N``: grouped number
* ``P``: percent
* ``R``: round-trip
* ``X``: hexadecimal
* ``B``: binary

Symbols and patterns come from the CLDR data shipped with Babel.
"""
import math
import re
from contextlib import contextmanager
from copy import copy
from decimal import Decimal, localcontext
from typing import Any, Callable, Dict, Iterator, Optional

from babel import Locale
from babel.numbers import (
    format_decimal,
    get_decimal_symbol,
    get_infinity_symbol,
    get_minus_sign_symbol,
    get_nan_symbol,
    get_plus_sign_symbol,
)

from value_converters.errors import ValueFormatError
from value_converters.formatting.culture import currency_for_locale
from value_converters.formatting.specifiers import FormatSpecifier

NUMBER_TYPES = (int, float, Decimal)

GENERAL = FormatSpecifier(symbol="G")
"""Specifier used when a number is formatted without a spec"""

EXPONENT_PATTERN = re.compile(r"([eE])([+-])(\d+)$")

INTEGER_SPECIFIERS = "BDX"

PRECISION_MARGIN = 8
"""Spare decimal digits for fractions and percent scaling"""


def is_number(value: Any) -> bool:
    """
    True for values handled by numeric specifiers.

    >>> is_number(3), is_number(Decimal("1.5")), is_number(True), is_number("3")
    (True, True, False, False)
    """
    return isinstance(value, NUMBER_TYPES) and not isinstance(value, bool)


def _localize(text: str, locale: Locale) -> str:
    """Swap ASCII symbols produced by Python formatting for locale symbols."""
    return text.translate(
        {
            ord("."): get_decimal_symbol(locale),
            ord("-"): get_minus_sign_symbol(locale),
            ord("+"): get_plus_sign_symbol(locale),
        }
    )


def is_finite(value: Any) -> bool:
    """
    False for NaN and infinities.

    >>> is_finite(10**30), is_finite(float("inf")), is_finite(Decimal("NaN"))
    (True, False, False)
    """
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def _non_finite(value: Any, locale: Locale) -> str:
    is_nan = value.is_nan() if isinstance(value, Decimal) else math.isnan(value)
    if is_nan:
        return get_nan_symbol(locale)
    if value < 0:
        return get_minus_sign_symbol(locale) + get_infinity_symbol(locale)
    return get_infinity_symbol(locale)


def _integer_digits(value: Any) -> int:
    if isinstance(value, int):
        return len(str(abs(value)))
    return max(Decimal(value).adjusted() + 1, 1)


@contextmanager
def _enough_precision(value: Any, fraction_digits: int = 0) -> Iterator[None]:
    """Widen the decimal context so babel can quantize values of any size."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _integer_digits(value) + fraction_digits + PRECISION_MARGIN)
        yield


def _require_integer(value: Any, specifier: FormatSpecifier) -> int:
    if not isinstance(value, int):
        raise ValueFormatError(
            f"Format specifier {specifier.symbol} requires an integer, got {type(value).__name__}"
        )
    return value


def _with_sign(value: int, digits: str, locale: Locale) -> str:
    if value < 0:
        return get_minus_sign_symbol(locale) + digits
    return digits


def _fraction_pattern(digits: int) -> str:
    return "." + "0" * digits if digits else ""


def _currency(value, specifier: FormatSpecifier, locale: Locale, currency: Optional[str]) -> str:
    pattern = copy(locale.currency_formats["standard"])
    digits = specifier.precision_or(2)
    pattern.frac_prec = (digits, digits)
    return pattern.apply(
        value, locale, currency=currency or currency_for_locale(locale), currency_digits=False
    )


def _decimal(value, specifier: FormatSpecifier, locale: Locale, currency: Optional[str]) -> str:
    n = _require_integer(value, specifier)
    return _with_sign(n, str(abs(n)).zfill(specifier.precision_or(0)), locale)


def _exponential(value, specifier: FormatSpecifier, locale: Locale, currency: Optional[str]) -> str:
    if isinstance(value, int):
        value = Decimal(value)
    text = format(value, f".{specifier.precision_or(6)}{specifier.symbol}")
    # exponent always carries a sign and at least three digits
    text = EXPONENT_PATTERN.sub(lambda m: m.group(1) + m.group(2) + m.group(3).zfill(3), text)
    return _localize(text, locale)


def _fixed(value, specifier: FormatSpecifier, locale: Locale, currency: Optional[str]) -> str:
    pattern = "0" + _fraction_pattern(specifier.precision_or(2))
    return format_decimal(value, format=pattern, locale=locale)


def _general(value, specifier: FormatSpecifier, locale: Locale, currency: Optional[str]) -> str:
    if specifier.precision:
        text = format(value, f".{specifier.precision}{specifier.symbol}")
    elif isinstance(value, float):
        text = repr(value)
        # whole numbers drop the ".0", so 1.0 shows as 1
        if text.endswith(".0"):
            text = text[:-2]
        if specifier.symbol.isupper():
            text = text.replace("e", "E")
    else:
        text = str(value)
    return _localize(text, locale)


def _number(value, specifier: FormatSpecifier, locale: Locale, currency: Optional[str]) -> str:
    pattern = "#,##0" + _fraction_pattern(specifier.precision_or(2))
    return format_decimal(value, format=pattern, locale=locale)


def _percent(value, specifier: FormatSpecifier, locale: Locale, currency: Optional[str]) -> str:
    pattern = copy(locale.percent_formats[None])
    digits = specifier.precision_or(2)
    pattern.frac_prec = (digits, digits)
    return pattern.apply(value, locale)


def _round_trip(value, specifier: FormatSpecifier, locale: Locale, currency: Optional[str]) -> str:
    return _general(value, FormatSpecifier(symbol=specifier.symbol), locale, currency)


def _hexadecimal(value, specifier: FormatSpecifier, locale: Locale, currency: Optional[str]) -> str:
    n = _require_integer(value, specifier)
    digits = format(abs(n), specifier.symbol).zfill(specifier.precision_or(0))
    return _with_sign(n, digits, locale)


def _binary(value, specifier: FormatSpecifier, locale: Locale, currency: Optional[str]) -> str:
    n = _require_integer(value, specifier)
    return _with_sign(n, format(abs(n), "b").zfill(specifier.precision_or(0)), locale)


HANDLERS: Dict[str, Callable[..., str]] = {
    "B": _binary,
    "C": _currency,
    "D": _decimal,
    "E": _exponential,
    "F": _fixed,
    "G": _general,
    "N": _number,
    "P": _percent,
    "R": _round_trip,
    "X": _hexadecimal,
}


def format_number(
    value: Any, specifier: FormatSpecifier, locale: Locale, currency: str = None
) -> str:
    """
    Format a number with a standard specifier.

    >>> from value_converters.formatting.specifiers import parse_standard_specifier
    >>> format_number(1234.5, parse_standard_specifier("N2"), Locale.parse("de_DE"))
    '1.234,50'

    :param value: an int, float or Decimal
    :param specifier: parsed standard specifier
    :param locale:
    :param currency: currency code for ``C``, defaults to the locale's currency
    :return: formatted text
    :raises ValueFormatError: if the specifier is unknown or does not apply to the value
    """
    symbol = specifier.symbol.upper()
    handler = HANDLERS.get(symbol)
    if handler is None:
        raise ValueFormatError(f"Unknown numeric format specifier: {specifier.symbol}")
    if not is_finite(value) and symbol not in INTEGER_SPECIFIERS:
        return _non_finite(value, locale)
    with _enough_precision(value, specifier.precision_or(0)):
        return handler(value, specifier, locale, currency)


def format_custom_number(value: Any, pattern: str, locale: Locale) -> str:
    """
    Format a number with a custom pattern such as ``#,##0.00``.

    >>> format_custom_number(float("nan"), "#,##0.00", Locale.parse("en_US"))
    'NaN'

    :param value:
    :param pattern: LDML number pattern
    :param locale:
    :return: formatted text
    """
    if not is_finite(value):
        return _non_finite(value, locale)
    with _enough_precision(value, len(pattern)):
        return format_decimal(value, format=pattern, locale=locale)
