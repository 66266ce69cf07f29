"""Basic colourkit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from colourkit import Colour
from colourkit.conversions import rgb_to_hsb, hsb_to_rgb


def demonstrate_colours() -> None:
    # Construct colours from packed values, channels and HSB.
    accent = Colour(0xFFFF8040)
    print("Channels:", accent.alpha, accent.red, accent.green, accent.blue)
    print("HSB:", accent.get_hsb())

    teal = Colour.from_hsb(0.5, 0.6, 0.7, alpha=0.75)
    print("From HSB:", teal, "alpha", teal.alpha)

    hsb = rgb_to_hsb(255, 128, 64)
    print("RGB -> HSB -> RGB:", hsb_to_rgb(*hsb))


def demonstrate_compositing() -> None:
    # Lay a translucent colour over an opaque one.
    red = Colour.from_rgb(255, 0, 0)
    blue = Colour.from_rgba(0, 0, 255, 0.5)
    mixed = red.overlaid_with(blue)
    print("Red overlaid with half blue:", mixed)
    print("Premultiplied pixel:", mixed.with_alpha(0.25).pixel_argb())


def demonstrate_adjustments() -> None:
    base = Colour.from_rgb(51, 102, 153)
    print("Brighter:", base.brighter(), "Darker:", base.darker())
    print("Rotated hue:", base.with_rotated_hue(0.25))
    print("Contrasting:", base.contrasting(), base.contrasting(0.3))
    print("Contrasting pair:", Colour.contrasting_pair(base, Colour.grey_level(0.9)))


def demonstrate_strings() -> None:
    encoded = Colour.from_rgba(18, 52, 86, 120).to_string()
    print("Encoded:", encoded)
    print("Decoded:", repr(Colour.from_string(encoded)))


if __name__ == "__main__":
    demonstrate_colours()
    demonstrate_compositing()
    demonstrate_adjustments()
    demonstrate_strings()
