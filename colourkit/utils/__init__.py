from .num_utils import (
    round_half_up,
    as_float,
    div_round_half_up,
    quantize_byte,
    unit_float,
    unit_to_byte,
    byte_to_unit,
    channel_to_byte,
)

__all__ = [
    "round_half_up",
    "as_float",
    "div_round_half_up",
    "quantize_byte",
    "unit_float",
    "unit_to_byte",
    "byte_to_unit",
    "channel_to_byte",
]
