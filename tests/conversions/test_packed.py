from colourkit.conversions.packed import (
    pack_argb,
    unpack_argb,
    premultiply,
    unpremultiply,
    premultiply_channel,
    unpremultiply_channel,
)
from ..samples import samples_premultiply


def test_pack_argb_bit_order():
    assert pack_argb(0xFF, 0xFF, 0x80, 0x00) == 0xFFFF8000
    assert pack_argb(0x12, 0x34, 0x56, 0x78) == 0x12345678


def test_unpack_argb_bit_order():
    assert unpack_argb(0xFFFF8000) == (0xFF, 0xFF, 0x80, 0x00)
    assert unpack_argb(0x12345678) == (0x12, 0x34, 0x56, 0x78)


def test_unpack_ignores_high_bits():
    assert unpack_argb(0x1_12345678) == (0x12, 0x34, 0x56, 0x78)
    assert unpack_argb(-1) == (255, 255, 255, 255)


def test_premultiply_samples():
    for argb, expected in samples_premultiply.items():
        assert premultiply(*argb) == expected


def test_premultiply_rounds_to_nearest():
    # 128 * 128 / 255 = 64.25
    assert premultiply_channel(128, 128) == 64
    # 3 * 170 / 255 = 2.0
    assert premultiply_channel(3, 170) == 2
    # 1 * 128 / 255 = 0.502
    assert premultiply_channel(1, 128) == 1


def test_unpremultiply_transparent_is_zero():
    assert unpremultiply(0, 0, 0, 0) == (0, 0, 0, 0)
    assert unpremultiply_channel(10, 0) == 0


def test_unpremultiply_opaque_is_identity():
    assert unpremultiply(255, 12, 34, 56) == (255, 12, 34, 56)


def test_premultiply_round_trip_at_high_alpha():
    for alpha in (128, 200, 255):
        for channel in range(256):
            assert unpremultiply_channel(premultiply_channel(channel, alpha), alpha) in (
                channel - 1, channel, channel + 1
            )
