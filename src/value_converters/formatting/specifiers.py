"""Parsing of format specifiers."""
import re
from typing import Optional

from pydantic import BaseModel

STANDARD_SPECIFIER_PATTERN = re.compile(r"^([A-Za-z])(\d{1,3})?$")
CUSTOM_NUMERIC_PATTERN = re.compile(r"^[0#,.%;‰E+\-]+$")


class FormatSpecifier(BaseModel):
    """
    A standard format specifier, e.g. ``N2`` or ``D``.
    """

    symbol: str
    """Single letter; case is significant for some specifiers, e.g. X vs x"""

    precision: Optional[int] = None
    """Precision or minimum digits, if given"""

    def precision_or(self, default: Optional[int]) -> Optional[int]:
        return default if self.precision is None else self.precision


def parse_standard_specifier(spec: str) -> Optional[FormatSpecifier]:
    """
    Parse a standard specifier, a letter followed by optional digits.

    >>> parse_standard_specifier("D3")
    FormatSpecifier(symbol='D', precision=3)
    >>> parse_standard_specifier(".2f") is None
    True

    :param spec:
    :return: the specifier, or None if spec is not a standard specifier
    """
    m = STANDARD_SPECIFIER_PATTERN.match(spec)
    if not m:
        return None
    symbol, digits = m.groups()
    return FormatSpecifier(symbol=symbol, precision=int(digits) if digits else None)


def is_custom_numeric_pattern(spec: str) -> bool:
    """
    True if spec looks like a custom numeric pattern such as ``#,##0.00``.

    Runs of two or more zeros, such as ``000``, are minimum digit patterns.
    Other specs that are also valid Python format specs, such as ``010``,
    ``08`` or ``.0``, are left to Python.

    >>> is_custom_numeric_pattern("#,##0.00"), is_custom_numeric_pattern("0.000")
    (True, True)
    >>> is_custom_numeric_pattern("000"), is_custom_numeric_pattern("0")
    (True, False)
    >>> is_custom_numeric_pattern(",.2"), is_custom_numeric_pattern("08")
    (False, False)
    """
    if not CUSTOM_NUMERIC_PATTERN.match(spec):
        return False
    if len(spec) > 1 and spec.strip("0") == "":
        return True
    return "#" in spec or (spec.startswith("0") and "." in spec)


def is_strftime_pattern(spec: str) -> bool:
    return "%" in spec
