"""Abstract value converter."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Optional


@dataclass
class ValueConverter(ABC):
    """
    Base class for converters used by data-binding pipelines.

    A binding engine calls :meth:`convert` to turn a source value into
    something a view can display, and :meth:`convert_back` to turn user
    input back into a source value. Each call receives the value, the type
    expected by the target, an optional converter parameter, and a language
    tag.

    >>> from value_converters.converters import get_converter
    >>> converter = get_converter("string_format")
    >>> converter.convert(42, str, "{0:D3}", "en-US")
    '042'

    Converters are stateless between calls; dataclass fields only hold
    configuration.
    """

    name: ClassVar[str] = "base"

    @abstractmethod
    def convert(
        self,
        value: Any,
        target_type: Optional[type] = None,
        parameter: Any = None,
        language: Optional[str] = None,
    ) -> Any:
        """
        Convert a source value for display.

        :param value: source value
        :param target_type: type expected by the binding target
        :param parameter: optional converter parameter
        :param language: language tag, e.g. en-US
        :return: converted value
        """

    @abstractmethod
    def convert_back(
        self,
        value: Any,
        target_type: Optional[type] = None,
        parameter: Any = None,
        language: Optional[str] = None,
    ) -> Any:
        """
        Convert a displayed value back to a source value.

        :param value: target value
        :param target_type: type expected by the binding source
        :param parameter: optional converter parameter
        :param language: language tag, e.g. en-US
        :return: source value
        """
