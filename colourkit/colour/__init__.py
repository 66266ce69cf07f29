"""
colourkit Colour Value
======================

The :class:`Colour` value type and its premultiplied pixel export.

Features
--------
- Immutable colour instances (frozen after initialization)
- Construction from packed ARGB, 8-bit RGB(A), HSB and grey levels
- Value clamping instead of errors for every numeric input
- HSB adjustments (hue, saturation, brightness, rotation)
- Premultiplied "over" compositing
- Brighter/darker/contrasting derived colours
- Lossless ``AARRGGBB`` text encoding

Usage
-----
>>> from colourkit.colour import Colour
>>>
>>> orange = Colour.from_rgb(255, 128, 0)
>>> orange.to_string()
'FFFF8000'
>>> Colour.from_string("FFFF8000") == orange
True
>>>
>>> # Work with alpha
>>> half = orange.with_alpha(0.5)
>>> half.alpha
128
>>> half.pixel_argb().red  # premultiplied
128

Notes
-----
- Accessors return non-premultiplied channels; equality uses the
  premultiplied form, so all fully transparent colours are equal.
- ``float`` alpha arguments are unit-range, ``int`` alpha arguments are 8-bit.
"""

from .colour import Colour, DEFAULT_BRIGHTER_AMOUNT, DEFAULT_DARKER_AMOUNT, CONTRAST_STEPS
from .pixel import PixelARGB

__all__ = [
    'Colour',
    'PixelARGB',
    'DEFAULT_BRIGHTER_AMOUNT',
    'DEFAULT_DARKER_AMOUNT',
    'CONTRAST_STEPS',
]
