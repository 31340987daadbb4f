"""Culture-aware composite formatting on top of :class:`string.Formatter`."""
import re
from string import Formatter
from typing import Any, Optional

from babel import Locale

from value_converters.formatting.culture import currency_for_locale
from value_converters.formatting.dates import format_temporal, is_temporal
from value_converters.formatting.numeric import (
    GENERAL,
    format_custom_number,
    format_number,
    is_number,
)
from value_converters.formatting.specifiers import (
    is_custom_numeric_pattern,
    parse_standard_specifier,
)

ALIGNMENT_PATTERN = re.compile(r"^(?P<field>.*?)\s*,\s*(?P<width>-?\d+)\s*$")
"""Field names with a width, e.g. ``0,8`` or ``0,-5``"""

ALIGNMENT_MARK = "\x1f"
"""Separates a field width from the format spec it travels with"""


class LocaleFormatter(Formatter):
    """
    Formats templates such as ``"Total: {0:N2}"`` under a locale.

    Templates use Python replacement fields. Format specs may be standard
    specifiers (``C``, ``D3``, ``N2``, ``d``, ``T``...), custom numeric or date
    patterns (``#,##0.00``, ``yyyy-MM-dd``), or ordinary Python format specs.

    >>> formatter = LocaleFormatter(Locale.parse("de_DE"))
    >>> formatter.format("{0:N2} / {0:.1f}", 1234.5)
    '1.234,50 / 1234.5'

    A width after the field name pads the result, on the left when positive
    and on the right when negative:

    >>> formatter.format("[{0,6:N1}] [{0,-4:D}]", 42)
    '[  42,0] [42  ]'
    """

    def __init__(self, locale: Locale, currency: Optional[str] = None):
        super().__init__()
        self.locale = locale
        self.currency = currency or currency_for_locale(locale)

    def parse(self, format_string: str):
        for literal_text, field_name, format_spec, conversion in super().parse(format_string):
            if field_name is not None:
                m = ALIGNMENT_PATTERN.match(field_name)
                if m:
                    field_name = m.group("field")
                    format_spec = f"{m.group('width')}{ALIGNMENT_MARK}{format_spec}"
            yield literal_text, field_name, format_spec, conversion

    def format_field(self, value: Any, format_spec: str) -> str:
        if ALIGNMENT_MARK in format_spec:
            width, format_spec = format_spec.split(ALIGNMENT_MARK, 1)
            return self.align(self.format_field(value, format_spec), int(width))
        if is_temporal(value):
            return format_temporal(value, format_spec, self.locale)
        if is_number(value):
            return self.format_numeric_field(value, format_spec)
        return format(value, format_spec)

    @staticmethod
    def align(text: str, width: int) -> str:
        if width < 0:
            return text.ljust(-width)
        return text.rjust(width)

    def format_numeric_field(self, value: Any, format_spec: str) -> str:
        if not format_spec:
            return format_number(value, GENERAL, self.locale)
        specifier = parse_standard_specifier(format_spec)
        if specifier:
            return format_number(value, specifier, self.locale, self.currency)
        if is_custom_numeric_pattern(format_spec):
            return format_custom_number(value, format_spec, self.locale)
        return format(value, format_spec)
