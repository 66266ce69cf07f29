# No dependencies
from enum import Enum


class FormatType(str, Enum):
    INT = "int"
    FLOAT = "float"


BYTE_MAX = 255
HEX_DIGITS = 8


def format_of(value) -> FormatType:
    """
    Decide which format a channel value is expressed in.

    ``float`` values are unit-range (0.0-1.0), integral values are 8-bit
    (0-255). ``bool`` is rejected along with every other non-numeric type.
    """
    if isinstance(value, bool):
        raise TypeError(f"Expected an int or float channel value, got {value!r}")
    if isinstance(value, float):
        return FormatType.FLOAT
    if isinstance(value, int):
        return FormatType.INT
    # numpy scalars and other numbers.Real implementations
    if hasattr(value, "__index__"):
        return FormatType.INT
    if hasattr(value, "__float__"):
        return FormatType.FLOAT
    raise TypeError(f"Expected an int or float channel value, got {value!r}")
