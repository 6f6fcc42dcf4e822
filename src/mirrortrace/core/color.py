"""8-bit RGB color value type.

Colors are stored as integer channels in [0, 255]. The operators follow the
shading model's needs:

    color * float   scales every channel, saturating to [0, 255]
    color * color   perceptual multiply, (a * b) // 255 per channel
    color + color   per-channel sum, saturating at 255

Example:
    >>> from mirrortrace.core.color import Color
    >>> Color(200, 200, 200) * 2.0
    Color(r=255, g=255, b=255)
    >>> Color(0xAA, 0x55, 0x22) * Color(0xAA, 0x55, 0x22)
    Color(r=113, g=28, b=4)
"""

from __future__ import annotations

from dataclasses import dataclass

CHANNEL_MAX = 255


def clamp_channel(value: float) -> int:
    """Saturate a channel value to [0, 255], truncating toward zero.

    NaN saturates to 0.
    """
    if value > CHANNEL_MAX:
        return CHANNEL_MAX
    if value > 0.0:
        return int(value)
    return 0


@dataclass(frozen=True, slots=True)
class Color:
    """An RGB color with 8-bit channels.

    Attributes:
        r: Red channel in [0, 255].
        g: Green channel in [0, 255].
        b: Blue channel in [0, 255].
    """

    r: int
    g: int
    b: int

    def __mul__(self, other: Color | float) -> Color:
        if isinstance(other, Color):
            return Color(
                self.r * other.r // CHANNEL_MAX,
                self.g * other.g // CHANNEL_MAX,
                self.b * other.b // CHANNEL_MAX,
            )
        return Color(
            clamp_channel(self.r * other),
            clamp_channel(self.g * other),
            clamp_channel(self.b * other),
        )

    def __add__(self, other: Color) -> Color:
        return Color(
            min(self.r + other.r, CHANNEL_MAX),
            min(self.g + other.g, CHANNEL_MAX),
            min(self.b + other.b, CHANNEL_MAX),
        )

    @classmethod
    def from_hex(cls, value: int) -> Color:
        """Create a color from a 0xRRGGBB integer."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_tuple(self) -> tuple[int, int, int]:
        """Return the channels as an (r, g, b) tuple."""
        return (self.r, self.g, self.b)


BLACK = Color(0, 0, 0)
WHITE = Color(0xFF, 0xFF, 0xFF)

# Background for rays that escape the scene
SKY_COLOR = Color(0x99, 0xCC, 0xFF)
