"""The player-controlled square, moved with the W, A, S and D keys."""

from __future__ import annotations

import threading

import pygame

from .settings import PLAYER_SPEED, SCREEN_HEIGHT, SCREEN_WIDTH, Color

PLAYER_COLOR = Color(0xFF, 0x00, 0x00, 0xFF)


class Player:
    """The player's square; one shared instance is handed out by get_instance."""

    _instance: Player | None = None

    def __init__(self, w: int, h: int, x: int, y: int) -> None:
        self.width = w
        self.height = h
        self.x = x
        self.y = y
        self.velocity = [0.0, 0.0]
        self.acceleration = [0.0, 0.0]
        self.speed = float(PLAYER_SPEED)
        self.color = PLAYER_COLOR
        self.lock = threading.Lock()

    @classmethod
    def get_instance(cls) -> Player:
        """Return the shared player, creating it near the screen centre."""
        if cls._instance is None:
            cls._instance = cls(
                50, 50, SCREEN_WIDTH // 2 - 50 // 2, SCREEN_HEIGHT // 2 - 50
            )
        return cls._instance

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def handle_out_of_screen(self) -> None:
        """Clamp the player inside the screen."""
        if self.y >= SCREEN_HEIGHT - self.height:
            self.velocity[0] = 0.0
            self.y = SCREEN_HEIGHT - self.height
        if self.y <= 0:
            self.y = 0
        if self.x <= 0:
            self.x = 0
        if self.x >= SCREEN_WIDTH - self.width:
            self.x = SCREEN_WIDTH - self.width

    def update(self) -> None:
        self.x = int(self.x + self.velocity[0])
        self.y = int(self.y + self.velocity[1])
        self.handle_out_of_screen()

    def handle_key_pressed(self, key: int) -> None:
        if key == pygame.K_w:
            self.velocity[1] = -self.speed
        elif key == pygame.K_s:
            self.velocity[1] = self.speed
        elif key == pygame.K_a:
            self.velocity[0] = -self.speed
        elif key == pygame.K_d:
            self.velocity[0] = self.speed

    def handle_key_released(self, key: int) -> None:
        if key in (pygame.K_w, pygame.K_s):
            self.velocity[1] = 0.0
        if key in (pygame.K_a, pygame.K_d):
            self.velocity[0] = 0.0

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(surface, self.color.as_tuple(), self.rect)