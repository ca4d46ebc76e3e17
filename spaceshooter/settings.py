"""Game-wide constants and the colour type shared by every sprite."""

from dataclasses import dataclass

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

MAX_WALL_TOUCH = 3
MAX_ALIVE_BALL = 10

PLAYER_SPEED = 10

PLAYER_SPEEDUP = 10
PLAYER_SPEEDDOWN = 5
SPEED_EFFECT_TIME = 10000


@dataclass
class Color:
    """An RGBA colour with 0-255 channels."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 0

    def as_tuple(self) -> tuple[int, int, int, int]:
        """Return the colour as an ``(r, g, b, a)`` tuple."""
        return (self.r, self.g, self.b, self.a)