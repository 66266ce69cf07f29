import math

from boundednumbers.functions import cyclic_wrap_float

from ..types.colour_types import RGBTuple, UnitRGBTuple
from ..types.format_type import BYTE_MAX
from ..utils.num_utils import quantize_byte, unit_float

SECTORS = 6


def hsb_to_unit_rgb(h: float, s: float, v: float) -> UnitRGBTuple:
    """
    Convert HSB to unit-range RGB (0.0-1.0).

    All three inputs are clamped to [0, 1] first. A hue of 1.0 is the same
    angle as 0.0.
    """
    h, s, v = unit_float(h), unit_float(s), unit_float(v)

    if s == 0.0:
        return v, v, v

    sector_pos = cyclic_wrap_float(h * SECTORS, 0.0, SECTORS)
    sector = min(math.floor(sector_pos), SECTORS - 1)
    f = sector_pos - sector

    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))

    if sector == 0:
        return v, t, p
    if sector == 1:
        return q, v, p
    if sector == 2:
        return p, v, t
    if sector == 3:
        return p, q, v
    if sector == 4:
        return t, p, v
    return v, p, q


def hsb_to_rgb(h: float, s: float, v: float) -> RGBTuple:
    """Convert HSB (unit range) to 8-bit RGB, rounding each channel to nearest."""
    r, g, b = hsb_to_unit_rgb(h, s, v)
    return (
        quantize_byte(r * BYTE_MAX),
        quantize_byte(g * BYTE_MAX),
        quantize_byte(b * BYTE_MAX),
    )
