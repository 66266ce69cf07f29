"""
Text encoding of packed colours.

The format is eight uppercase hexadecimal digits in ``AARRGGBB`` order,
e.g. ``"FFFF8000"`` for opaque orange. Parsing is lenient so that colour
strings coming from hand-edited configuration never abort a program.
"""
import string
import warnings

from ..types.format_type import HEX_DIGITS
from .packed import ARGB_MASK

_PREFIXES = ("#", "0x", "0X")
_HEX_CHARS = frozenset(string.hexdigits)


class ColourParseWarning(UserWarning):
    """Emitted when a colour string had to be repaired while parsing."""


def format_argb_hex(argb: int) -> str:
    return f"{int(argb) & ARGB_MASK:0{HEX_DIGITS}X}"


def parse_argb_hex(text: str, *, stacklevel: int = 2) -> int:
    """
    Parse an ``AARRGGBB`` string into a packed ARGB value.

    Surrounding whitespace and a ``#`` or ``0x`` prefix are accepted. Anything
    else that is not a hex digit is skipped, the remaining digits are read as
    one number and only its low 32 bits are kept, so missing leading digits
    read as 0 and an empty string gives 0. A :class:`ColourParseWarning` is
    issued whenever the input was not exactly eight hex digits.

    Raises:
        TypeError: if ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise TypeError(f"Colour string must be str, got {type(text).__name__}")

    body = text.strip()
    for prefix in _PREFIXES:
        if body.startswith(prefix):
            body = body[len(prefix):]
            break

    digits = "".join(ch for ch in body if ch in _HEX_CHARS)

    if len(digits) != len(body) or len(digits) != HEX_DIGITS:
        warnings.warn(
            f"Malformed colour string {text!r}: expected {HEX_DIGITS} hex digits, "
            f"read {digits or '0'!r} instead",
            ColourParseWarning,
            stacklevel=stacklevel,
        )

    if not digits:
        return 0
    return int(digits, 16) & ARGB_MASK
