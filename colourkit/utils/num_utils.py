"""Shared clamp/round rules.

Every construction and mutation path of :class:`~colourkit.Colour` funnels
scalars through these helpers so that quantization is identical everywhere.
"""
import math

from boundednumbers import UnitFloat, clamp

from ..types.format_type import BYTE_MAX, FormatType, format_of


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding up (0.5 -> 1, 2.5 -> 3)."""
    return math.floor(value + 0.5)


def quantize_byte(value) -> int:
    """Clamp ``value`` to [0, 255] and round it to the nearest integer. NaN maps to 0."""
    if format_of(value) is FormatType.INT:
        return clamp(int(value), 0, BYTE_MAX)
    value = as_float(value)
    if math.isnan(value):
        return 0
    return round_half_up(clamp(value, 0.0, float(BYTE_MAX)))


def as_float(value) -> float:
    """``float(value)`` for numeric input only; strings and other types raise TypeError."""
    format_of(value)
    return float(value)


def unit_float(value) -> float:
    """Clamp ``value`` to the unit interval. NaN maps to 0.0."""
    if format_of(value) is FormatType.INT:
        return float(clamp(int(value), 0, 1))
    value = as_float(value)
    if math.isnan(value):
        return 0.0
    return float(UnitFloat(value))


def unit_to_byte(value) -> int:
    return quantize_byte(unit_float(value) * BYTE_MAX)


def byte_to_unit(value: int) -> float:
    return value / BYTE_MAX


def channel_to_byte(value) -> int:
    """
    Convert a channel value to 8 bits.

    ``float`` values are read as unit-range and scaled, integral values are
    taken as 8-bit already. Both are clamped.
    """
    if format_of(value) is FormatType.FLOAT:
        return unit_to_byte(value)
    return quantize_byte(value)


def div_round_half_up(numerator: int, denominator: int) -> int:
    """Integer ``numerator / denominator`` rounded to nearest, halves up. ``denominator`` must be > 0."""
    return (2 * numerator + denominator) // (2 * denominator)
