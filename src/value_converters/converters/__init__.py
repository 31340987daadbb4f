"""Value converters for data-binding pipelines.

* Base class: :class:`ValueConverter`

Currently one implementation is provided, :class:`StringFormatConverter`.
"""

from typing import List

from .string_format_converter import FormatAttempt, StringFormatConverter
from .value_converter import ValueConverter

__all__ = [
    "ValueConverter",
    "StringFormatConverter",
    "FormatAttempt",
    "get_converter",
    "list_converters",
]


def get_all_subclasses(cls):
    """Recursively get all subclasses of a given class."""
    direct_subclasses = cls.__subclasses__()
    return direct_subclasses + [
        s for subclass in direct_subclasses for s in get_all_subclasses(subclass)
    ]


def list_converters() -> List[str]:
    """Names of all registered converters."""
    return [c.name for c in get_all_subclasses(ValueConverter)]


def get_converter(name: str, *args, **kwargs) -> ValueConverter:
    """
    Instantiate a converter by name.

    >>> get_converter("string_format")
    StringFormatConverter(invariant_locale='en', invariant_currency='XXX')

    :param name: e.g. ``string_format``
    :return: converter instance
    :raises ValueError: if no converter has that name
    """
    for c in get_all_subclasses(ValueConverter):
        if c.name == name:
            return c(*args, **kwargs)
    raise ValueError(f"Unknown converter {name}, not found in {list_converters()}")
