"""
value-converters: display converters for data-binding pipelines.

Architecture
============

* :mod:`.converters`: converters called by a binding engine, with a ``convert`` and ``convert_back`` entry point
* :mod:`.formatting`: locale-aware formatting of values into templates
* :mod:`.cli`: command line for trying converters


"""
import importlib_metadata

try:
    __version__ = importlib_metadata.version(__name__)
except importlib_metadata.PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0"  # pragma: no cover

from value_converters.converters import StringFormatConverter, ValueConverter, get_converter
from value_converters.errors import UnsupportedConversionError, ValueFormatError

__all__ = [
    "ValueConverter",
    "StringFormatConverter",
    "get_converter",
    "UnsupportedConversionError",
    "ValueFormatError",
]
