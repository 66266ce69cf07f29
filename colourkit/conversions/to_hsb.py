from ..types.colour_types import HSBTuple
from ..types.format_type import BYTE_MAX
from ..utils.num_utils import unit_float


def unit_rgb_to_hsb(r: float, g: float, b: float) -> HSBTuple:
    """
    Convert unit-range RGB (0.0-1.0) to HSB.

    Input channels are clamped to [0, 1].

    Returns:
        (hue, saturation, brightness), each in [0, 1]. Hue is in [0, 1);
        achromatic colours report hue 0.0, black reports saturation 0.0.
    """
    r, g, b = unit_float(r), unit_float(g), unit_float(b)
    hi = max(r, g, b)
    lo = min(r, g, b)

    if hi == 0.0:
        return 0.0, 0.0, 0.0

    delta = hi - lo
    saturation = delta / hi

    if delta == 0.0:
        return 0.0, saturation, hi

    if r == hi:
        hue = (g - b) / delta
    elif g == hi:
        hue = 2.0 + (b - r) / delta
    else:
        hue = 4.0 + (r - g) / delta

    hue /= 6.0
    if hue < 0.0:
        hue += 1.0

    return hue, saturation, hi


def rgb_to_hsb(red: int, green: int, blue: int) -> HSBTuple:
    """Convert 8-bit RGB (0-255) to HSB in unit range."""
    return unit_rgb_to_hsb(red / BYTE_MAX, green / BYTE_MAX, blue / BYTE_MAX)
