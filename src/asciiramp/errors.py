class ConversionError(ValueError):
    """Base class for every failure raised by a conversion."""


class InvalidDimensions(ConversionError):
    """Zero-sized source or target grid, or a degenerate aspect ratio."""


class InvalidParameter(ConversionError):
    """Non-positive brightness, empty ramp or unknown luminance mode."""


class DecodeError(ConversionError):
    """The image decoder could not turn the input into pixels."""
