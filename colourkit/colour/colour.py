from __future__ import annotations
from typing import Union

import numpy as np
from boundednumbers.functions import cyclic_wrap_float

from ..conversions import (
    ARGB_MASK,
    format_argb_hex,
    hsb_to_rgb,
    pack_argb,
    parse_argb_hex,
    premultiply,
    rgb_to_hsb,
    unpack_argb,
)
from ..types.colour_types import AlphaValue, ARGBTuple, HSBTuple
from ..types.format_type import BYTE_MAX, FormatType, format_of
from ..utils.num_utils import (
    as_float,
    byte_to_unit,
    channel_to_byte,
    div_round_half_up,
    quantize_byte,
    unit_to_byte,
)
from .pixel import PixelARGB

DEFAULT_BRIGHTER_AMOUNT = 0.4
DEFAULT_DARKER_AMOUNT = 0.4
CONTRAST_STEPS = 50
MID_BRIGHTNESS = 0.5


class Colour:
    """
    An 8-bit-per-channel ARGB colour.

    Channels are exposed non-premultiplied, exactly as they were given.
    Equality and hashing use the premultiplied form (see :meth:`pixel_argb`),
    so every fully transparent colour compares equal to every other one.

    Instances are immutable; every ``with_*`` method returns a new colour.
    Numeric arguments are clamped into range instead of raising.

    >>> c = Colour(0xFFFF8000)
    >>> c.red, c.green, c.blue, c.alpha
    (255, 128, 0, 255)
    >>> str(c)
    'FFFF8000'
    """
    __slots__ = ('_argb', '_pixel')

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, argb: Union[int, Colour] = 0) -> None:
        """
        Create a colour from a packed ``0xAARRGGBB`` integer, or copy another colour.

        The default is transparent black. Bits above the low 32 are ignored.
        """
        if isinstance(argb, Colour):
            argb = argb.argb
        elif format_of(argb) is not FormatType.INT:
            raise TypeError(f"Packed ARGB value must be an integer, got {argb!r}")

        argb = int(argb) & ARGB_MASK
        super().__setattr__('_argb', argb)
        super().__setattr__('_pixel', PixelARGB(*premultiply(*unpack_argb(argb))))

    # ------------------ ALTERNATE CONSTRUCTORS ------------------
    @classmethod
    def _from_channels(cls, alpha: int, red: int, green: int, blue: int) -> Colour:
        return cls(pack_argb(alpha, red, green, blue))

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int) -> Colour:
        """Opaque colour from 8-bit channels."""
        return cls.from_rgba(red, green, blue, BYTE_MAX)

    @classmethod
    def from_rgba(cls, red: int, green: int, blue: int, alpha: AlphaValue = BYTE_MAX) -> Colour:
        """
        Colour from 8-bit channels and an alpha.

        Args:
            red, green, blue: 0-255, clamped.
            alpha: an ``int`` 0-255, or a ``float`` 0.0-1.0 which is scaled
                and rounded to nearest. Clamped either way.
        """
        return cls._from_channels(
            channel_to_byte(alpha),
            quantize_byte(red),
            quantize_byte(green),
            quantize_byte(blue),
        )

    @classmethod
    def from_hsb(
        cls,
        hue: float,
        saturation: float,
        brightness: float,
        alpha: AlphaValue = 1.0,
    ) -> Colour:
        """
        Colour from hue, saturation and brightness, all 0.0-1.0 (clamped).

        ``alpha`` follows the same int/float rule as :meth:`from_rgba`.
        """
        red, green, blue = hsb_to_rgb(hue, saturation, brightness)
        return cls._from_channels(channel_to_byte(alpha), red, green, blue)

    @classmethod
    def grey_level(cls, brightness: float) -> Colour:
        """Opaque grey; 0.0 is black, 1.0 is white."""
        level = unit_to_byte(brightness)
        return cls._from_channels(BYTE_MAX, level, level, level)

    @classmethod
    def from_string(cls, encoded: str) -> Colour:
        """
        Read a colour written by :meth:`to_string`.

        Malformed strings never raise; see
        :func:`colourkit.conversions.parse_argb_hex` for the fallback rules.
        """
        return cls(parse_argb_hex(encoded, stacklevel=3))

    # ------------------ READ-ONLY PROPERTIES ------------------
    def _channels(self) -> ARGBTuple:
        return unpack_argb(self._argb)

    @property
    def argb(self) -> int:
        """Packed non-premultiplied value, ``(alpha << 24) | (red << 16) | (green << 8) | blue``."""
        return self._argb

    @property
    def alpha(self) -> int:
        return self._channels()[0]

    @property
    def red(self) -> int:
        return self._channels()[1]

    @property
    def green(self) -> int:
        return self._channels()[2]

    @property
    def blue(self) -> int:
        return self._channels()[3]

    @property
    def float_alpha(self) -> float:
        return byte_to_unit(self.alpha)

    @property
    def float_red(self) -> float:
        return byte_to_unit(self.red)

    @property
    def float_green(self) -> float:
        return byte_to_unit(self.green)

    @property
    def float_blue(self) -> float:
        return byte_to_unit(self.blue)

    @property
    def is_opaque(self) -> bool:
        return self.alpha == BYTE_MAX

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0

    def pixel_argb(self) -> PixelARGB:
        """The premultiplied pixel for this colour."""
        return self._pixel

    # ------------------ HSB ------------------
    def get_hsb(self) -> HSBTuple:
        """Return ``(hue, saturation, brightness)``, each in [0, 1]."""
        _, red, green, blue = self._channels()
        return rgb_to_hsb(red, green, blue)

    @property
    def hue(self) -> float:
        return self.get_hsb()[0]

    @property
    def saturation(self) -> float:
        return self.get_hsb()[1]

    @property
    def brightness(self) -> float:
        return self.get_hsb()[2]

    def _with_hsb(self, hue: float, saturation: float, brightness: float) -> Colour:
        red, green, blue = hsb_to_rgb(hue, saturation, brightness)
        return self._from_channels(self.alpha, red, green, blue)

    def with_hue(self, hue: float) -> Colour:
        _, saturation, brightness = self.get_hsb()
        return self._with_hsb(hue, saturation, brightness)

    def with_saturation(self, saturation: float) -> Colour:
        hue, _, brightness = self.get_hsb()
        return self._with_hsb(hue, saturation, brightness)

    def with_brightness(self, brightness: float) -> Colour:
        hue, saturation, _ = self.get_hsb()
        return self._with_hsb(hue, saturation, brightness)

    def with_rotated_hue(self, amount: float) -> Colour:
        """Rotate the hue by ``amount`` turns; the result wraps into [0, 1)."""
        hue, saturation, brightness = self.get_hsb()
        return self._with_hsb(
            cyclic_wrap_float(hue + as_float(amount), 0.0, 1.0), saturation, brightness
        )

    def with_multiplied_saturation(self, multiplier: float) -> Colour:
        hue, saturation, brightness = self.get_hsb()
        return self._with_hsb(hue, saturation * as_float(multiplier), brightness)

    def with_multiplied_brightness(self, multiplier: float) -> Colour:
        hue, saturation, brightness = self.get_hsb()
        return self._with_hsb(hue, saturation, brightness * as_float(multiplier))

    # ------------------ ALPHA & COMPOSITING ------------------
    def with_alpha(self, alpha: AlphaValue) -> Colour:
        """Same colour, new alpha (``int`` 0-255 or ``float`` 0.0-1.0)."""
        _, red, green, blue = self._channels()
        return self._from_channels(channel_to_byte(alpha), red, green, blue)

    def with_multiplied_alpha(self, multiplier: float) -> Colour:
        _, red, green, blue = self._channels()
        return self._from_channels(
            quantize_byte(self.alpha * as_float(multiplier)), red, green, blue
        )

    def overlaid_with(self, foreground: Colour) -> Colour:
        """
        Composite ``foreground`` over this colour ("over" operator).

        Worked in premultiplied space with exact integer arithmetic:

            alpha   = fg_alpha + bg_alpha * (1 - fg_alpha)
            premul  = fg_premul + bg_premul * (1 - fg_alpha)

        and the result is un-premultiplied and rounded to nearest. A fully
        transparent foreground gives back this colour, an opaque one gives
        back the foreground.
        """
        if not isinstance(foreground, Colour):
            raise TypeError(f"Can only overlay a Colour, got {type(foreground).__name__}")

        fg_alpha, fg_red, fg_green, fg_blue = foreground._channels()
        bg_alpha, bg_red, bg_green, bg_blue = self._channels()

        if fg_alpha == 0:
            return self
        if bg_alpha == 0 or fg_alpha == BYTE_MAX:
            return foreground

        inverse = BYTE_MAX - fg_alpha
        # both weights and the result alpha are scaled by 255 * 255
        fg_weight = fg_alpha * BYTE_MAX
        bg_weight = bg_alpha * inverse
        result_alpha = fg_weight + bg_weight

        def blend(fg_channel: int, bg_channel: int) -> int:
            return div_round_half_up(fg_channel * fg_weight + bg_channel * bg_weight, result_alpha)

        return self._from_channels(
            div_round_half_up(result_alpha, BYTE_MAX),
            blend(fg_red, bg_red),
            blend(fg_green, bg_green),
            blend(fg_blue, bg_blue),
        )

    # ------------------ BRIGHTNESS & CONTRAST ------------------
    def brighter(self, amount: float = DEFAULT_BRIGHTER_AMOUNT) -> Colour:
        """
        Move brightness toward 1.0 and saturation toward 0.0.

        brightness' = b + (1 - b) * amount, saturation' = s * (1 - amount).
        0 leaves the colour unchanged, 1 gives white with the same alpha.
        """
        amount = as_float(amount)
        hue, saturation, brightness = self.get_hsb()
        return self._with_hsb(
            hue,
            saturation * (1.0 - amount),
            brightness + (1.0 - brightness) * amount,
        )

    def darker(self, amount: float = DEFAULT_DARKER_AMOUNT) -> Colour:
        """
        Scale brightness by ``1 - amount``.

        0 leaves the colour unchanged, 1 gives black with the same alpha.
        """
        amount = as_float(amount)
        hue, saturation, brightness = self.get_hsb()
        return self._with_hsb(hue, saturation, brightness * (1.0 - amount))

    def contrasting(self, amount: float = 1.0) -> Colour:
        """
        A colour that stands out against this one.

        Black (for colours with brightness >= 0.5) or white is overlaid on
        this colour with opacity ``amount``: 0 returns this colour, 1 returns
        plain black or white.
        """
        target = _BLACK if self.brightness >= MID_BRIGHTNESS else _WHITE
        return self.overlaid_with(target.with_alpha(as_float(amount)))

    @staticmethod
    def contrasting_pair(colour1: Colour, colour2: Colour) -> Colour:
        """
        A colour that contrasts with both ``colour1`` and ``colour2``.

        The brightness is the level (in steps of 1/50) farthest from the
        nearer of the two input brightnesses. Levels are tried from white
        downward when the inputs are dark on average and from black upward
        otherwise, and the first best level wins. Hue and saturation come from
        ``colour2`` laid over ``colour1`` at half opacity, with saturation
        faded out toward the black and white ends.
        """
        b1 = colour1.brightness
        b2 = colour2.brightness

        levels = np.linspace(0.0, 1.0, CONTRAST_STEPS + 1)
        if (b1 + b2) / 2.0 < MID_BRIGHTNESS:
            levels = levels[::-1]

        scores = np.minimum(np.abs(levels - b1), np.abs(levels - b2))
        best = float(levels[int(np.argmax(scores))])

        blend = colour1.overlaid_with(colour2.with_multiplied_alpha(0.5))
        hue, saturation, _ = blend.get_hsb()
        saturation *= 1.0 - abs(2.0 * best - 1.0)
        return Colour.from_hsb(hue, saturation, best, blend.alpha)

    # ------------------ SERIALIZATION ------------------
    def to_string(self) -> str:
        """Eight uppercase hex digits, ``AARRGGBB``."""
        return format_argb_hex(self._argb)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(0x{self.to_string()})"

    def __int__(self) -> int:
        return self._argb

    def __reduce__(self):
        return (self.__class__, (self._argb,))

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colour):
            return NotImplemented
        return self._pixel.argb == other._pixel.argb

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._pixel.argb)


_BLACK = Colour(0xFF000000)
_WHITE = Colour(0xFFFFFFFF)
