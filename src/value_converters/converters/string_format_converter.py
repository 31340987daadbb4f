"""Converter that displays values through a format template."""
import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from value_converters.converters.value_converter import ValueConverter
from value_converters.errors import UnsupportedConversionError
from value_converters.formatting import (
    INVARIANT_CURRENCY,
    INVARIANT_LOCALE,
    LocaleFormatter,
    is_blank,
    resolve_locale,
)

logger = logging.getLogger(__name__)


@dataclass
class FormatAttempt:
    """
    Outcome of formatting a value.
    """

    value: Any
    """The value that was formatted"""

    text: Optional[str] = None
    """Formatted text, on success"""

    error: Optional[Exception] = None
    """Why formatting failed, on failure"""

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """
        The formatted text, or the original value if formatting failed.
        """
        if self.ok:
            return self.text
        return self.value


@dataclass
class StringFormatConverter(ValueConverter):
    """
    Displays a value through a format template passed as the parameter.

    >>> converter = StringFormatConverter()
    >>> converter.convert(1234.5, str, "{0:N2}", "de-DE")
    '1.234,50'

    Without a template the value's ``str`` is used:

    >>> converter.convert(3.14, str, "", "en-US")
    '3.14'

    If the language tag or the template cannot be applied, the original value
    is returned as is, not as a string:

    >>> converter.convert(3.14, str, "{0:C}", "xx-BOGUS")
    3.14

    Conversion back to the source value is not supported.
    """

    name: ClassVar[str] = "string_format"

    invariant_locale: str = INVARIANT_LOCALE
    """Locale used when no language tag is given"""

    invariant_currency: str = INVARIANT_CURRENCY
    """Currency used by the C specifier under the invariant locale"""

    def convert(
        self,
        value: Any,
        target_type: Optional[type] = None,
        parameter: Any = None,
        language: Optional[str] = None,
    ) -> Any:
        """
        Format a value for display.

        :param value: value to display; None is returned as None
        :param target_type: ignored
        :param parameter: format template, e.g. ``"{0:N2}"``; non-strings are ignored
        :param language: language tag; blank means the invariant locale
        :return: formatted string, ``str(value)`` without a template,
            or the original value if formatting fails
        """
        if value is None:
            return None
        format_string = parameter if isinstance(parameter, str) else None
        if not format_string:
            return str(value)
        return self.try_format(value, format_string, language).unwrap()

    def try_format(
        self, value: Any, format_string: str, language: Optional[str] = None
    ) -> FormatAttempt:
        """
        Format a value into a template under the locale for a language tag.

        :param value:
        :param format_string: template with a single positional field
        :param language: language tag; blank means the invariant locale
        :return: the attempt, carrying either the text or the error
        """
        try:
            if is_blank(language):
                locale = resolve_locale(None, invariant=self.invariant_locale)
                formatter = LocaleFormatter(locale, currency=self.invariant_currency)
            else:
                formatter = LocaleFormatter(resolve_locale(language))
            return FormatAttempt(value, text=formatter.format(format_string, value))
        except Exception as e:
            logger.debug(f"Cannot format {value!r} with {format_string!r} for {language!r}: {e}")
            return FormatAttempt(value, error=e)

    def convert_back(
        self,
        value: Any,
        target_type: Optional[type] = None,
        parameter: Any = None,
        language: Optional[str] = None,
    ) -> Any:
        """
        Not supported; formatted text cannot be mapped back to a value.

        :raises UnsupportedConversionError: always
        """
        raise UnsupportedConversionError(type(self).__name__)
