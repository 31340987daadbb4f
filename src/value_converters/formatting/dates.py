"""
Date and time format specifiers.

Single letters select a standard, locale-dependent form (``d``, ``D``, ``t``,
``T``, ``f``, ``F``, ``g``, ``G``, ``M``, ``Y``) or a fixed, culture-neutral
form (``s``, ``u``, ``O``, ``R``). Specs containing ``%`` use ``strftime``.
Anything else is a custom pattern such as ``yyyy-MM-dd HH:mm``.
"""
import logging
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Dict, List, Union

from babel import Locale
from babel.dates import format_date, format_datetime, format_skeleton, format_time

from value_converters.errors import ValueFormatError
from value_converters.formatting.specifiers import is_strftime_pattern

TEMPORAL = Union[date, datetime, time]

RFC1123_PATTERN = "EEE, dd MMM yyyy HH:mm:ss 'GMT'"
RFC1123_LOCALE = Locale("en")

logger = logging.getLogger(__name__)


def is_temporal(value: Any) -> bool:
    return isinstance(value, (date, time))


def _as_datetime(value: TEMPORAL, spec: str) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    raise ValueFormatError(f"Format specifier {spec} requires a date, got a time")


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


def _date_part(value: TEMPORAL, width: str, locale: Locale) -> str:
    if isinstance(value, time):
        raise ValueFormatError(f"Cannot format a time as a {width} date")
    return format_date(value, width, locale=locale)


def _time_part(value: TEMPORAL, width: str, locale: Locale) -> str:
    if not isinstance(value, (datetime, time)):
        raise ValueFormatError(f"Cannot format a date as a {width} time")
    return format_time(value, width, locale=locale)


def _date_and_time(value: TEMPORAL, date_width: str, time_width: str, locale: Locale) -> str:
    date_text = _date_part(value, date_width, locale)
    time_text = _time_part(value, time_width, locale)
    # same combination rule babel applies in format_datetime
    combined = locale.datetime_formats[date_width].replace("'", "")
    return combined.replace("{0}", time_text).replace("{1}", date_text)


def _skeleton(skeleton: str) -> Callable[[TEMPORAL, Locale], str]:
    def format_with_skeleton(value: TEMPORAL, locale: Locale) -> str:
        if isinstance(value, time):
            raise ValueFormatError(f"Cannot format a time with skeleton {skeleton}")
        return format_skeleton(skeleton, value, locale=locale)

    return format_with_skeleton


STANDARD_FORMATS: Dict[str, Callable[[TEMPORAL, Locale], str]] = {
    "d": lambda v, loc: _date_part(v, "short", loc),
    "D": lambda v, loc: _date_part(v, "full", loc),
    "t": lambda v, loc: _time_part(v, "short", loc),
    "T": lambda v, loc: _time_part(v, "medium", loc),
    "f": lambda v, loc: _date_and_time(v, "full", "short", loc),
    "F": lambda v, loc: _date_and_time(v, "full", "medium", loc),
    "g": lambda v, loc: _date_and_time(v, "short", "short", loc),
    "G": lambda v, loc: _date_and_time(v, "short", "medium", loc),
    "M": _skeleton("MMMMd"),
    "m": _skeleton("MMMMd"),
    "Y": _skeleton("yMMMM"),
    "y": _skeleton("yMMMM"),
    "s": lambda v, loc: _as_datetime(v, "s").strftime("%Y-%m-%dT%H:%M:%S"),
    "u": lambda v, loc: _as_utc(_as_datetime(v, "u")).strftime("%Y-%m-%d %H:%M:%SZ"),
    "O": lambda v, loc: v.isoformat(),
    "o": lambda v, loc: v.isoformat(),
    "R": lambda v, loc: format_datetime(
        _as_utc(_as_datetime(v, "R")), RFC1123_PATTERN, locale=RFC1123_LOCALE
    ),
    "r": lambda v, loc: format_datetime(
        _as_utc(_as_datetime(v, "r")), RFC1123_PATTERN, locale=RFC1123_LOCALE
    ),
}


def _quote(text: str) -> str:
    if not text:
        return ""
    return "'" + text.replace("'", "''") + "'"


def _translate_run(letter: str, count: int) -> str:
    if letter == "d":
        if count <= 2:
            return "d" * count
        return "EEE" if count == 3 else "EEEE"
    if letter in "fF":
        return "S" * count
    if letter == "t":
        return "a"
    if letter == "z":
        return "x" if count < 3 else "xxx"
    if letter == "K":
        return "xxx"
    if letter == "g":
        return "G"
    if letter in "yMHhms":
        return letter * count
    # unknown letters are literal text
    return _quote(letter * count)


def to_ldml_pattern(pattern: str) -> str:
    """
    Translate a custom date pattern to an LDML pattern understood by Babel.

    >>> to_ldml_pattern("dddd, dd.MM.yyyy HH:mm tt")
    'EEEE, dd.MM.yyyy HH:mm a'
    >>> to_ldml_pattern('yyyy"年"M')
    "yyyy'年'M"

    :param pattern:
    :return: LDML pattern
    :raises ValueFormatError: on an unterminated quoted literal
    """
    out: List[str] = []
    i = 0
    while i < len(pattern):
        c = pattern[i]
        if c == "\\" and i + 1 < len(pattern):
            out.append(_quote(pattern[i + 1]))
            i += 2
        elif c in "'\"":
            end = pattern.find(c, i + 1)
            if end == -1:
                raise ValueFormatError(f"Unterminated literal in date pattern {pattern}")
            out.append(_quote(pattern[i + 1 : end]))
            i = end + 1
        elif c.isalpha():
            j = i
            while j < len(pattern) and pattern[j] == c:
                j += 1
            out.append(_translate_run(c, j - i))
            i = j
        else:
            out.append(c)
            i += 1
    return "".join(out)


def default_spec(value: TEMPORAL) -> str:
    """
    Specifier used when a temporal value is formatted without a spec.

    >>> default_spec(date(2024, 1, 2)), default_spec(time(9, 30))
    ('d', 'T')
    """
    if isinstance(value, datetime):
        return "G"
    if isinstance(value, date):
        return "d"
    return "T"


def format_temporal(value: TEMPORAL, spec: str, locale: Locale) -> str:
    """
    Format a date, datetime or time.

    >>> format_temporal(date(2024, 1, 2), "D", Locale.parse("en_US"))
    'Tuesday, January 2, 2024'
    >>> format_temporal(date(2024, 1, 2), "yyyy-MM-dd", Locale.parse("en_US"))
    '2024-01-02'

    :param value:
    :param spec: standard specifier, strftime directives, or custom pattern
    :param locale:
    :return: formatted text
    :raises ValueFormatError: if the spec does not apply to the value
    """
    if not spec:
        spec = default_spec(value)
    if spec in STANDARD_FORMATS:
        return STANDARD_FORMATS[spec](value, locale)
    if is_strftime_pattern(spec):
        return value.strftime(spec)
    ldml = to_ldml_pattern(spec)
    logger.debug(f"Custom date pattern {spec} translated to {ldml}")
    if isinstance(value, time):
        return format_time(value, ldml, locale=locale)
    return format_datetime(_as_datetime(value, spec), ldml, locale=locale)
