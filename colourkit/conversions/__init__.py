"""
colourkit Colour Conversions
============================

Scalar conversion helpers used by :class:`colourkit.Colour`.

Conversion Functions
-------------------

RGB -> HSB:
    unit_rgb_to_hsb(r, g, b)
        Unit-range RGB to HSB
    rgb_to_hsb(red, green, blue)
        8-bit RGB to HSB

HSB -> RGB:
    hsb_to_unit_rgb(h, s, v)
        HSB to unit-range RGB
    hsb_to_rgb(h, s, v)
        HSB to 8-bit RGB, rounded to nearest

Packed ARGB:
    pack_argb(alpha, red, green, blue) / unpack_argb(argb)
        ``(alpha << 24) | (red << 16) | (green << 8) | blue``
    premultiply(alpha, red, green, blue) / unpremultiply(...)
        Scale colour channels by alpha / 255 and back

Text:
    format_argb_hex(argb) / parse_argb_hex(text)
        ``AARRGGBB`` uppercase hex; lenient parsing with ColourParseWarning

Notes
-----
Hue, saturation and brightness are all in [0, 1] (hue is not in degrees).

Examples
--------
>>> from colourkit.conversions import rgb_to_hsb, hsb_to_rgb
>>> rgb_to_hsb(255, 0, 0)
(0.0, 1.0, 1.0)
>>> hsb_to_rgb(1 / 3, 1.0, 1.0)
(0, 255, 0)
"""

from .to_hsb import unit_rgb_to_hsb, rgb_to_hsb
from .to_rgb import hsb_to_unit_rgb, hsb_to_rgb
from .packed import (
    ARGB_MASK,
    pack_argb,
    unpack_argb,
    premultiply,
    unpremultiply,
    premultiply_channel,
    unpremultiply_channel,
)
from .hex_codec import ColourParseWarning, format_argb_hex, parse_argb_hex

__all__ = [
    # RGB -> HSB
    'unit_rgb_to_hsb',
    'rgb_to_hsb',

    # HSB -> RGB
    'hsb_to_unit_rgb',
    'hsb_to_rgb',

    # Packed ARGB
    'ARGB_MASK',
    'pack_argb',
    'unpack_argb',
    'premultiply',
    'unpremultiply',
    'premultiply_channel',
    'unpremultiply_channel',

    # Text
    'ColourParseWarning',
    'format_argb_hex',
    'parse_argb_hex',
]
