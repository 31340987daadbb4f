import logging
from datetime import date, time
from decimal import Decimal

import pytest

from value_converters import StringFormatConverter, UnsupportedConversionError
from value_converters.converters import FormatAttempt, get_converter, list_converters


class Named:
    def __str__(self):
        return "named thing"


@pytest.fixture
def converter() -> StringFormatConverter:
    return StringFormatConverter()


@pytest.mark.parametrize(
    "parameter,language",
    [
        ("{0}", "en-US"),
        ("", None),
        (None, "xx-BOGUS"),
        ("{0:D3}", "   "),
    ],
)
def test_none_value(converter, parameter, language):
    assert converter.convert(None, str, parameter, language) is None


@pytest.mark.parametrize("value", [3.14, 42, "text", [1, 2], Named(), Decimal("1.50")])
@pytest.mark.parametrize("parameter", ["", None, 5, b"{0:D3}"])
def test_no_format_string(converter, value, parameter):
    assert converter.convert(value, str, parameter, "de-DE") == str(value)


@pytest.mark.parametrize(
    "value,parameter,language,expected",
    [
        (42, "{0:D3}", "en-US", "042"),
        ("hello", "{0}-{0}", None, "hello-hello"),
        (1234.5, "{0:N2}", "en-US", "1,234.50"),
        (1234.5, "{0:N2}", "de-DE", "1.234,50"),
        (1234.5, "{0:N2}", "de_DE", "1.234,50"),
        (0.125, "{0:P1}", "en-US", "12.5%"),
        (255, "{0:X4}", "", "00FF"),
        (3.14159, "Pi is {0:F2}", "de-DE", "Pi is 3,14"),
        (3.14, "{0}", "de-DE", "3,14"),
        (3.14, "{0}", "en-US", "3.14"),
        (1234.5678, "{0:#,##0.00}", "en-US", "1,234.57"),
        (1234.5678, "{0:.1f}", "de-DE", "1234.6"),
        (date(2024, 1, 2), "{0:d}", "en-US", "1/2/24"),
        (date(2024, 1, 2), "{0:D}", "de-DE", "Dienstag, 2. Januar 2024"),
        (date(2024, 1, 2), "{0:yyyy-MM-dd}", None, "2024-01-02"),
        ("hello", "{0!r}", "en-US", "'hello'"),
        ("a", "{{{0}}}", None, "{a}"),
        ({"name": "Ada"}, "Hi {0[name]}", None, "Hi Ada"),
        (10**30, "{0:N0}", "en-US", "1" + ",000" * 10),
        (42, "{0,5}", "en-US", "   42"),
        (42, "{0,-5:D3}|", "en-US", "042  |"),
        (42, "{0:000}", "en-US", "042"),
        (float("nan"), "{0:N2}", "en-US", "NaN"),
        (float("-inf"), "{0:C}", "en-US", "-∞"),
        (1.0, "{0}", "en-US", "1"),
    ],
)
def test_format(converter, value, parameter, language, expected):
    assert converter.convert(value, str, parameter, language) == expected


@pytest.mark.parametrize(
    "value,parameter,language",
    [
        (3.14, "{0:C}", "xx-BOGUS"),
        (3.14, "{0:N2}", "not a tag!!"),
        (3.14, "{0:D3}", "en-US"),
        ("hello", "{1}", "en-US"),
        (42, "{0:Q}", "en-US"),
        (3.14, "{0", "en-US"),
        (Decimal("1.5"), "{0:X}", None),
        (time(9, 30), "{0:d}", "en-US"),
        ([1, 2], "{0:N2}", "en-US"),
    ],
)
def test_failure_returns_original_value(converter, value, parameter, language):
    assert converter.convert(value, str, parameter, language) is value


def test_failure_is_logged(converter, caplog):
    with caplog.at_level(logging.DEBUG, logger="value_converters"):
        assert converter.convert(3.14, str, "{0:C}", "xx-BOGUS") == 3.14
    assert "Cannot format" in caplog.text


def test_currency(converter):
    assert converter.convert(3.14, str, "{0:C}", "en-US") == "$3.14"
    euros = converter.convert(3.14, str, "{0:C}", "de-DE")
    assert "3,14" in euros
    assert "€" in euros


def test_invariant_locale(converter):
    result = converter.convert(1234.5, str, "{0:C}", None)
    assert "1,234.50" in result
    assert "$" not in result
    for blank in ["", "  ", "\t"]:
        assert converter.convert(1234.5, str, "{0:C}", blank) == result


def test_configured_invariant_locale():
    converter = StringFormatConverter(invariant_locale="de")
    assert converter.convert(1234.5, str, "{0:N2}", None) == "1.234,50"
    assert converter.convert(1234.5, str, "{0:N2}", "en-US") == "1,234.50"


def test_deterministic(converter):
    results = {converter.convert(1234.5, str, "{0:N2} {0:E2}", "fr-FR") for _ in range(3)}
    assert len(results) == 1


def test_try_format(converter):
    attempt = converter.try_format(42, "{0:D3}", "en-US")
    assert isinstance(attempt, FormatAttempt)
    assert attempt.ok
    assert attempt.unwrap() == "042"
    attempt = converter.try_format(42, "{0:D3}", "xx-BOGUS")
    assert not attempt.ok
    assert attempt.text is None
    assert attempt.error is not None
    assert attempt.unwrap() == 42


@pytest.mark.parametrize(
    "value,parameter,language",
    [
        ("042", "{0:D3}", "en-US"),
        (None, None, None),
        ("3.14", "", "xx-BOGUS"),
    ],
)
def test_convert_back_unsupported(converter, value, parameter, language):
    with pytest.raises(UnsupportedConversionError):
        converter.convert_back(value, int, parameter, language)
    with pytest.raises(NotImplementedError):
        converter.convert_back(value, int, parameter, language)


def test_get_converter():
    assert "string_format" in list_converters()
    converter = get_converter("string_format", invariant_locale="fr")
    assert isinstance(converter, StringFormatConverter)
    assert converter.invariant_locale == "fr"
    with pytest.raises(ValueError):
        get_converter("no_such_converter")
