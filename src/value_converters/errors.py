"""Errors raised by value converters."""


class ValueFormatError(ValueError):
    """
    A format specifier cannot be applied to a value.

    For example, an integer-only specifier such as ``D3`` applied to a float.
    """


class UnsupportedConversionError(NotImplementedError):
    """
    A converter does not support the requested direction.
    """

    def __init__(self, converter_name: str, direction: str = "convert_back"):
        super().__init__(f"{converter_name} does not support {direction}")
        self.converter_name = converter_name
        self.direction = direction
