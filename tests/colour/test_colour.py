from colourkit import Colour, Color, PixelARGB
import copy
import pickle
import numpy as np
import pytest


def test_default_is_transparent_black():
    c = Colour()
    assert (c.alpha, c.red, c.green, c.blue) == (0, 0, 0, 0)
    assert c.is_transparent
    assert not c.is_opaque


def test_from_packed_argb():
    c = Colour(0xFFFF8000)
    assert c.red == 255
    assert c.green == 128
    assert c.blue == 0
    assert c.alpha == 255
    assert c.argb == 0xFFFF8000
    assert int(c) == 0xFFFF8000


def test_packed_argb_ignores_high_bits():
    assert Colour(0x1_FFFF8000).argb == 0xFFFF8000
    assert Colour(-1).argb == 0xFFFFFFFF


def test_packed_argb_must_be_integral():
    with pytest.raises(TypeError):
        Colour(1.5)
    with pytest.raises(TypeError):
        Colour("FFFF8000")


def test_copy_constructor():
    c = Colour(0x80102030)
    d = Colour(c)
    assert d == c
    assert d.argb == c.argb


def test_from_rgb_is_opaque():
    c = Colour.from_rgb(10, 20, 30)
    assert (c.alpha, c.red, c.green, c.blue) == (255, 10, 20, 30)
    assert c.is_opaque


def test_from_rgba_int_alpha():
    c = Colour.from_rgba(10, 20, 30, 40)
    assert (c.alpha, c.red, c.green, c.blue) == (40, 10, 20, 30)


def test_from_rgba_float_alpha_is_scaled_and_rounded():
    assert Colour.from_rgba(10, 20, 30, 0.5).alpha == 128
    assert Colour.from_rgba(10, 20, 30, 1.0).alpha == 255
    assert Colour.from_rgba(10, 20, 30, 0.0).alpha == 0
    # 0.1 * 255 = 25.5
    assert Colour.from_rgba(10, 20, 30, 0.1).alpha == 26


def test_from_rgba_clamps_out_of_range():
    c = Colour.from_rgba(300, -5, 255.6, 1000)
    assert (c.alpha, c.red, c.green, c.blue) == (255, 255, 0, 255)
    assert Colour.from_rgba(0, 0, 0, 2.5).alpha == 255
    assert Colour.from_rgba(0, 0, 0, -0.5).alpha == 0


def test_from_rgba_treats_nan_as_zero():
    c = Colour.from_rgba(float("nan"), 10, 10, float("nan"))
    assert (c.alpha, c.red) == (0, 0)


def test_from_rgba_accepts_numpy_scalars():
    c = Colour.from_rgba(np.uint8(200), np.int64(100), np.uint8(50), np.float32(0.5))
    assert (c.alpha, c.red, c.green, c.blue) == (128, 200, 100, 50)


def test_from_rgba_rejects_non_numeric():
    with pytest.raises(TypeError):
        Colour.from_rgba("10", 20, 30)
    with pytest.raises(TypeError):
        Colour.from_rgba(10, 20, 30, None)


def test_accessors_round_trip_at_low_alpha():
    # premultiplied these would collapse, the accessors must not
    c = Colour.from_rgba(201, 99, 7, 3)
    assert (c.red, c.green, c.blue, c.alpha) == (201, 99, 7, 3)


def test_float_accessors():
    c = Colour.from_rgba(255, 0, 51, 102)
    assert c.float_red == 1.0
    assert c.float_green == 0.0
    assert c.float_blue == pytest.approx(0.2)
    assert c.float_alpha == pytest.approx(0.4)


def test_grey_level():
    assert Colour.grey_level(0.0) == Colour(0xFF000000)
    assert Colour.grey_level(1.0) == Colour(0xFFFFFFFF)
    assert Colour.grey_level(0.5) == Colour.from_rgb(128, 128, 128)
    assert Colour.grey_level(0.2) == Colour.from_rgb(51, 51, 51)


def test_grey_level_clamps():
    assert Colour.grey_level(-3.0) == Colour(0xFF000000)
    assert Colour.grey_level(7.0) == Colour(0xFFFFFFFF)


def test_equality():
    assert Colour.from_rgb(1, 2, 3) == Colour(0xFF010203)
    assert Colour.from_rgb(1, 2, 3) != Colour.from_rgb(1, 2, 4)
    assert Colour.from_rgb(1, 2, 3) != Colour.from_rgba(1, 2, 3, 254)


def test_all_transparent_colours_are_equal():
    transparent = Colour()
    for r, g, b in [(255, 0, 0), (12, 34, 56), (255, 255, 255)]:
        c = Colour.from_rgba(r, g, b, 0)
        assert c == transparent
        assert hash(c) == hash(transparent)
    assert len({Colour.from_rgba(r, 0, 0, 0) for r in range(256)}) == 1


def test_equality_uses_premultiplied_channels():
    # at alpha 1 both premultiply to (1, 0, 0, 0)
    assert Colour.from_rgba(100, 0, 0, 1) == Colour.from_rgba(120, 0, 0, 1)
    assert Colour.from_rgba(100, 0, 0, 1).red != Colour.from_rgba(120, 0, 0, 1).red


def test_equality_with_other_types():
    assert Colour(0xFF000000) != 0xFF000000
    assert Colour(0xFF000000) != "FF000000"


def test_hashable():
    colours = {Colour.from_rgb(1, 2, 3), Colour(0xFF010203), Colour.from_rgb(3, 2, 1)}
    assert len(colours) == 2


def test_immutable():
    c = Colour.from_rgb(1, 2, 3)
    with pytest.raises(AttributeError):
        c.red = 10
    with pytest.raises(AttributeError):
        c._argb = 0
    with pytest.raises(AttributeError):
        del c._argb
    assert c.red == 1


def test_copy_and_pickle():
    c = Colour.from_rgba(10, 20, 30, 40)
    for other in (copy.copy(c), copy.deepcopy(c), pickle.loads(pickle.dumps(c))):
        assert other == c
        assert other.argb == c.argb


def test_repr():
    assert repr(Colour(0xFFFF8000)) == "Colour(0xFFFF8000)"


def test_color_alias():
    assert Color is Colour


def test_pixel_argb_is_premultiplied():
    pixel = Colour.from_rgba(255, 128, 0, 128).pixel_argb()
    assert isinstance(pixel, PixelARGB)
    assert pixel.to_tuple() == (128, 128, 64, 0)
    assert pixel.argb == 0x80804000
