from datetime import date, datetime, time, timedelta, timezone

import pytest
from babel import Locale

from value_converters.errors import ValueFormatError
from value_converters.formatting.dates import default_spec, format_temporal, to_ldml_pattern

EN = Locale.parse("en_US")
DE = Locale.parse("de_DE")

MOMENT = datetime(2024, 1, 2, 15, 4, 5)


@pytest.mark.parametrize(
    "spec,value,locale,expected",
    [
        ("d", MOMENT, DE, "02.01.24"),
        ("d", date(2024, 1, 2), EN, "1/2/24"),
        ("D", MOMENT, EN, "Tuesday, January 2, 2024"),
        ("t", MOMENT, DE, "15:04"),
        ("T", MOMENT, DE, "15:04:05"),
        ("T", time(9, 30), DE, "09:30:00"),
        ("M", MOMENT, EN, "January 2"),
        ("Y", MOMENT, EN, "January 2024"),
        ("s", MOMENT, DE, "2024-01-02T15:04:05"),
        ("s", date(2024, 1, 2), DE, "2024-01-02T00:00:00"),
        ("u", MOMENT, DE, "2024-01-02 15:04:05Z"),
        ("o", MOMENT, DE, "2024-01-02T15:04:05"),
        ("O", date(2024, 1, 2), DE, "2024-01-02"),
        ("R", MOMENT, DE, "Tue, 02 Jan 2024 15:04:05 GMT"),
        ("yyyy-MM-dd HH:mm", MOMENT, DE, "2024-01-02 15:04"),
        ("dddd", MOMENT, DE, "Dienstag"),
        ("ddd dd", MOMENT, EN, "Tue 02"),
        ("HH:mm:ss", time(9, 30, 15), EN, "09:30:15"),
        ("%d/%m/%Y", MOMENT, EN, "02/01/2024"),
        ("HH\\h", MOMENT, EN, "15h"),
    ],
)
def test_format_temporal(spec, value, locale, expected):
    assert format_temporal(value, spec, locale) == expected


def test_combined_date_and_time():
    text = format_temporal(MOMENT, "g", DE)
    assert "02.01.24" in text
    assert "15:04" in text
    text = format_temporal(MOMENT, "F", EN)
    assert "Tuesday, January 2, 2024" in text
    assert "3:04:05" in text


def test_universal_time_is_utc():
    aware = datetime(2024, 1, 2, 15, 4, 5, tzinfo=timezone(timedelta(hours=2)))
    assert format_temporal(aware, "u", EN) == "2024-01-02 13:04:05Z"
    assert format_temporal(aware, "r", EN) == "Tue, 02 Jan 2024 13:04:05 GMT"


def test_default_spec():
    assert default_spec(MOMENT) == "G"
    assert default_spec(date(2024, 1, 2)) == "d"
    assert default_spec(time(1, 2)) == "T"
    assert format_temporal(date(2024, 1, 2), "", DE) == "02.01.24"


@pytest.mark.parametrize(
    "spec,value",
    [
        ("d", time(9, 30)),
        ("D", time(9, 30)),
        ("t", date(2024, 1, 2)),
        ("G", date(2024, 1, 2)),
        ("M", time(9, 30)),
        ("s", time(9, 30)),
    ],
)
def test_mismatched_parts(spec, value):
    with pytest.raises(ValueFormatError):
        format_temporal(value, spec, EN)


@pytest.mark.parametrize(
    "pattern,expected",
    [
        ("yyyy-MM-dd", "yyyy-MM-dd"),
        ("dddd, d MMMM", "EEEE, d MMMM"),
        ("h:mm tt", "h:mm a"),
        ("HH:mm:ss.fff", "HH:mm:ss.SSS"),
        ("HH:mm zzz", "HH:mm xxx"),
        ("'at' HH", "'at' HH"),
        ('"Week" d', "'Week' d"),
        ("HH\\h", "HH'h'"),
        ("d 'of' MMMM", "d 'of' MMMM"),
        ("yyyy q", "yyyy 'q'"),
    ],
)
def test_to_ldml_pattern(pattern, expected):
    assert to_ldml_pattern(pattern) == expected


def test_unterminated_literal():
    with pytest.raises(ValueFormatError):
        to_ldml_pattern("HH 'o")
