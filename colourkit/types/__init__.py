from .format_type import FormatType, format_of, BYTE_MAX, HEX_DIGITS
from .colour_types import (
    ARGBTuple,
    RGBTuple,
    UnitRGBTuple,
    HSBTuple,
    AlphaValue,
)

__all__ = [
    "FormatType",
    "format_of",
    "BYTE_MAX",
    "HEX_DIGITS",
    "ARGBTuple",
    "RGBTuple",
    "UnitRGBTuple",
    "HSBTuple",
    "AlphaValue",
]
