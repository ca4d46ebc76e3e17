"""Balls fired by the cannon, bouncing off the screen edges."""

import pygame

from .settings import SCREEN_HEIGHT, SCREEN_WIDTH, Color

BALL_SIZE = 20
BALL_SPEED = 8
BALL_COLOR = Color(240, 240, 145, 85)


class Ball:
    """A square projectile with an integer position and a velocity."""

    def __init__(self, x: int, y: int) -> None:
        self.x = int(x)
        self.y = int(y)
        self.width = BALL_SIZE
        self.height = BALL_SIZE
        self.color = BALL_COLOR
        self.velocity: tuple[float, float] = (5.0, 8.0)
        self.speed = BALL_SPEED
        self.touched_wall = 0

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def handle_collision_with_wall(self) -> None:
        """Reverse direction on touching an edge and count the touch."""
        vx, vy = self.velocity
        if self.x <= 0 or self.x >= SCREEN_WIDTH - self.width:
            vx = -vx
            self.touched_wall += 1
        if self.y <= 0 or self.y >= SCREEN_HEIGHT - self.height:
            vy = -vy
            self.touched_wall += 1
        self.velocity = (vx, vy)

    def update(self) -> None:
        """Move one step and bounce off the walls."""
        vx, vy = self.velocity
        self.x = int(self.x + vx)
        self.y = int(self.y + vy)
        self.handle_collision_with_wall()

    def update_velocity(self, x: float, y: float) -> None:
        """Set the velocity, truncating each component to an integer."""
        self.velocity = (float(int(x)), float(int(y)))

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, self.color.as_tuple(), self.rect)