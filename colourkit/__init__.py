"""
colourkit - ARGB Colour Value Type
==================================

An immutable 8-bit-per-channel colour with HSB conversion, premultiplied-alpha
compositing, perceptual brighten/darken/contrast helpers and a lossless
``AARRGGBB`` text encoding.

Key Features
------------
- Construction from packed ARGB integers, 8-bit RGB(A), HSB and grey levels
- Alpha as 8-bit ``int`` or unit ``float`` everywhere
- Exact RGB -> HSB -> RGB round trips
- Bit-exact "over" compositing in premultiplied space
- Every numeric input is clamped, never rejected
- Immutable, hashable instances safe to share between threads

Quick Start
-----------
>>> from colourkit import Colour
>>>
>>> red = Colour.from_rgb(255, 0, 0)
>>> blue = Colour.from_rgba(0, 0, 255, 128)
>>> red.overlaid_with(blue).to_string()
'FF7F0080'
>>>
>>> red.with_rotated_hue(1 / 3) == Colour.from_rgb(0, 255, 0)
True
>>> Colour.grey_level(0.0).contrasting().to_string()
'FFFFFFFF'

Modules
-------
- colour: the Colour value type and PixelARGB export
- conversions: HSB, packed-integer and hex conversion functions
- types: channel format table and type aliases
- utils: the shared clamp/round helpers
"""

from .colour import Colour, PixelARGB
from .conversions import (
    ColourParseWarning,
    unit_rgb_to_hsb,
    rgb_to_hsb,
    hsb_to_unit_rgb,
    hsb_to_rgb,
    pack_argb,
    unpack_argb,
    premultiply,
    unpremultiply,
    format_argb_hex,
    parse_argb_hex,
)
from .types import FormatType

# Friendly alias for US spelling
Color = Colour

__version__ = "1.0.0"

__all__ = [
    # core colour types
    "Colour",
    "Color",
    "PixelARGB",
    "ColourParseWarning",
    # conversions
    "unit_rgb_to_hsb",
    "rgb_to_hsb",
    "hsb_to_unit_rgb",
    "hsb_to_rgb",
    "pack_argb",
    "unpack_argb",
    "premultiply",
    "unpremultiply",
    "format_argb_hex",
    "parse_argb_hex",
    # types
    "FormatType",
    # version
    "__version__",
]
