"""Power-up boxes that affect the player or a ball on collision."""

from abc import ABC, abstractmethod

from .ball import Ball
from .player import Player


class BoostBox(ABC):
    """A power-up box reacting to collisions."""

    def __init__(self, name: str = "") -> None:
        self.name = name

    @abstractmethod
    def handle_player_collision(self, player: Player) -> None:
        """React to the player touching the box."""

    @abstractmethod
    def handle_ball_collision(self, ball: Ball) -> None:
        """React to a ball touching the box."""


class SpeedBoostBox(BoostBox):
    """A speed power-up; touching it currently has no effect."""

    def handle_player_collision(self, player: Player) -> None:
        return None

    def handle_ball_collision(self, ball: Ball) -> None:
        return None