"""
Packed 32-bit ARGB codec and alpha premultiplication.

The packed layout is ``(alpha << 24) | (red << 16) | (green << 8) | blue``.
"""
from ..types.colour_types import ARGBTuple
from ..types.format_type import BYTE_MAX
from ..utils.num_utils import div_round_half_up

ARGB_MASK = 0xFFFFFFFF
ALPHA_SHIFT = 24
RED_SHIFT = 16
GREEN_SHIFT = 8
BLUE_SHIFT = 0


def pack_argb(alpha: int, red: int, green: int, blue: int) -> int:
    return (
        ((alpha & 0xFF) << ALPHA_SHIFT)
        | ((red & 0xFF) << RED_SHIFT)
        | ((green & 0xFF) << GREEN_SHIFT)
        | ((blue & 0xFF) << BLUE_SHIFT)
    )


def unpack_argb(argb: int) -> ARGBTuple:
    """Split a packed value into ``(alpha, red, green, blue)``. Bits above 32 are ignored."""
    argb = int(argb) & ARGB_MASK
    return (
        (argb >> ALPHA_SHIFT) & 0xFF,
        (argb >> RED_SHIFT) & 0xFF,
        (argb >> GREEN_SHIFT) & 0xFF,
        (argb >> BLUE_SHIFT) & 0xFF,
    )


def premultiply_channel(channel: int, alpha: int) -> int:
    return div_round_half_up(channel * alpha, BYTE_MAX)


def unpremultiply_channel(channel: int, alpha: int) -> int:
    if alpha == 0:
        return 0
    return min(BYTE_MAX, div_round_half_up(channel * BYTE_MAX, alpha))


def premultiply(alpha: int, red: int, green: int, blue: int) -> ARGBTuple:
    """Scale each colour channel by ``alpha / 255``, rounding to nearest."""
    return (
        alpha,
        premultiply_channel(red, alpha),
        premultiply_channel(green, alpha),
        premultiply_channel(blue, alpha),
    )


def unpremultiply(alpha: int, red: int, green: int, blue: int) -> ARGBTuple:
    """Inverse of :func:`premultiply`. Channels of a fully transparent pixel become 0."""
    return (
        alpha,
        unpremultiply_channel(red, alpha),
        unpremultiply_channel(green, alpha),
        unpremultiply_channel(blue, alpha),
    )
