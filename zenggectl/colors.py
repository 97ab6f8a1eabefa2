"""RGB and HSV colour values and conversion between them."""

import math
from dataclasses import dataclass


def _check_byte(name, value):
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be in 0..255, got {value}")


def rgb_to_hsv(r, g, b):
    """Convert 8-bit RGB to (hue in degrees, saturation 0..1, value 0..1)."""
    for name, component in (("red", r), ("green", g), ("blue", b)):
        _check_byte(name, component)
    fr, fg, fb = r / 255.0, g / 255.0, b / 255.0
    high = max(fr, fg, fb)
    low = min(fr, fg, fb)
    delta = high - low

    if delta == 0:
        hue = 0.0
    elif high == fr:
        hue = 60 * math.fmod((fg - fb) / delta, 6)
    elif high == fg:
        hue = 60 * ((fb - fr) / delta + 2)
    else:
        hue = 60 * ((fr - fg) / delta + 4)
    if hue < 0:
        hue += 360

    saturation = 0.0 if high == 0 else delta / high
    return hue, saturation, high


def rgb_to_hsv_bytes(r, g, b):
    """Convert 8-bit RGB to the strip's byte HSV: hue halved, saturation and value in percent."""
    hue, saturation, value = rgb_to_hsv(r, g, b)
    return int(hue) // 2, int(saturation * 100), int(value * 100)


@dataclass(frozen=True)
class HSVColor:
    """A colour in the strip's byte HSV encoding."""

    hue: int
    saturation: int
    value: int

    def __str__(self):
        return f"hsv({self.hue}, {self.saturation}, {self.value})"


@dataclass(frozen=True)
class RGBColor:
    """An 8-bit RGB colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self):
        _check_byte("red", self.red)
        _check_byte("green", self.green)
        _check_byte("blue", self.blue)

    @classmethod
    def from_bytes(cls, data):
        """Build a colour from exactly three bytes."""
        if len(data) != 3:
            raise ValueError(f"RGB colour needs 3 bytes, got {len(data)}")
        red, green, blue = data
        return cls(red, green, blue)

    def to_hsv(self):
        """Return the colour in the strip's byte HSV encoding."""
        return HSVColor(*rgb_to_hsv_bytes(self.red, self.green, self.blue))

    def __str__(self):
        return f"rgb({self.red}, {self.green}, {self.blue})"