"""The cannon on the right edge of the screen, firing balls at a target."""

import math

import pygame

from .ball import Ball
from .settings import MAX_ALIVE_BALL, MAX_WALL_TOUCH, SCREEN_HEIGHT, SCREEN_WIDTH, Color

CANNON_SIZE = 50
CANNON_COLOR = Color(15, 24, 211, 150)


class MaxBallsReached(Exception):
    """Raised when the cannon already has the maximum number of live balls."""


class Cannon:
    """Fires balls and keeps track of those still alive."""

    def __init__(self) -> None:
        self.width = CANNON_SIZE
        self.height = CANNON_SIZE
        self.x = SCREEN_WIDTH - self.width // 2
        self.y = SCREEN_HEIGHT // 2 - self.height // 2
        self.balls: list[Ball] = []
        self.color = CANNON_COLOR

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def shoot(self, x: int, y: int) -> Ball:
        """Fire a ball towards screen point (x, y) and return it."""
        if len(self.balls) == MAX_ALIVE_BALL:
            raise MaxBallsReached("Maximum number of alive balls reached!")
        dx = x - SCREEN_WIDTH
        dy = y - SCREEN_HEIGHT // 2
        distance = math.hypot(dx, dy)
        if distance == 0:
            raise ValueError("target coincides with the cannon's muzzle")

        ball = Ball(SCREEN_WIDTH - 50 // 2, SCREEN_HEIGHT // 2 - 50 // 2)
        factor = ball.speed / distance
        ball.update_velocity(factor * dx, factor * dy)
        self.balls.append(ball)
        return ball

    def update(self) -> None:
        """Move every ball, then drop those that hit the walls too often."""
        for ball in self.balls:
            ball.update()
        self.balls = [b for b in self.balls if b.touched_wall < MAX_WALL_TOUCH]

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, self.color.as_tuple(), self.rect)
        for ball in self.balls:
            ball.draw(surface)