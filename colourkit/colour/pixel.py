from __future__ import annotations
from typing import TYPE_CHECKING, Iterator

import numpy as np

from ..conversions.packed import pack_argb, unpremultiply
from ..types.colour_types import ARGBTuple
from ..types.format_type import FormatType, format_of

if TYPE_CHECKING:
    from .colour import Colour


class PixelARGB:
    """
    A single premultiplied-alpha pixel, as written into a bitmap.

    Each of ``red``, ``green`` and ``blue`` has already been scaled by
    ``alpha / 255``. Obtain one from :meth:`Colour.pixel_argb`.
    """
    __slots__ = ('_components',)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, alpha: int, red: int, green: int, blue: int) -> None:
        for channel in (alpha, red, green, blue):
            if format_of(channel) is not FormatType.INT:
                raise TypeError(f"Pixel channels must be integers, got {channel!r}")
            if not 0 <= channel <= 0xFF:
                raise ValueError(f"Pixel channels must be in [0, 255], got {channel!r}")
        if max(red, green, blue) > alpha:
            raise ValueError(
                f"Premultiplied channels cannot exceed alpha: {(alpha, red, green, blue)!r}"
            )
        super().__setattr__('_components', (int(alpha), int(red), int(green), int(blue)))

    @property
    def alpha(self) -> int:
        return self._components[0]

    @property
    def red(self) -> int:
        return self._components[1]

    @property
    def green(self) -> int:
        return self._components[2]

    @property
    def blue(self) -> int:
        return self._components[3]

    @property
    def argb(self) -> int:
        """Packed premultiplied value, ``(alpha << 24) | (red << 16) | (green << 8) | blue``."""
        return pack_argb(*self._components)

    def to_tuple(self) -> ARGBTuple:
        return self._components

    def to_array(self) -> np.ndarray:
        """The pixel as a ``uint8`` array in ``[alpha, red, green, blue]`` order."""
        return np.array(self._components, dtype=np.uint8)

    def unpremultiplied(self) -> Colour:
        """Recover a :class:`Colour`. Low-alpha pixels lose colour precision."""
        from .colour import Colour
        alpha, red, green, blue = unpremultiply(*self._components)
        return Colour(pack_argb(alpha, red, green, blue))

    def __iter__(self) -> Iterator[int]:
        return iter(self._components)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelARGB):
            return NotImplemented
        return self._components == other._components

    def __hash__(self) -> int:
        return hash(self._components)

    def __reduce__(self):
        return (self.__class__, self._components)

    def __repr__(self) -> str:
        return f"PixelARGB(alpha={self.alpha}, red={self.red}, green={self.green}, blue={self.blue})"
