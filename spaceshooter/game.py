"""The game window, event handling and main loop."""

import os
import sys
import time

import pygame

from .cannon import Cannon, MaxBallsReached
from .player import Player
from .settings import SCREEN_HEIGHT, SCREEN_WIDTH

IMAGE_PATH = "sample.bmp"
FRAME_DELAY = 0.016
BACKGROUND = (0, 0, 0)


def handle_event(event: pygame.event.Event, player: Player, cannon: Cannon) -> bool:
    """Apply one event to the game; return True if it asks to quit."""
    if event.type == pygame.QUIT:
        return True
    if event.type == pygame.KEYDOWN:
        player.handle_key_pressed(event.key)
    elif event.type == pygame.KEYUP:
        player.handle_key_released(event.key)
    elif event.type == pygame.MOUSEBUTTONDOWN:
        x, y = event.pos
        print(f"{x} {y}")
        try:
            cannon.shoot(x, y)
        except MaxBallsReached as exc:
            print(exc, file=sys.stderr)
    return False


def step(player: Player, cannon: Cannon, surface: pygame.Surface) -> None:
    """Advance the game by one frame and draw it onto the surface."""
    player.update()
    cannon.update()
    surface.fill(BACKGROUND)
    player.draw(surface)
    cannon.draw(surface)


def game_loop(surface: pygame.Surface) -> None:
    """Run frames until the window is closed."""
    player = Player.get_instance()
    cannon = Cannon()

    try:
        pygame.image.load(IMAGE_PATH)
    except (pygame.error, OSError) as exc:
        print(exc)
        return

    quit_requested = False
    while not quit_requested:
        with player.lock:
            for event in pygame.event.get():
                if handle_event(event, player, cannon):
                    quit_requested = True
            step(player, cannon, surface)
        pygame.display.flip()
        time.sleep(FRAME_DELAY)


def main(argv=None) -> int:
    """Open the window and play until it is closed."""
    if sys.platform.startswith("linux"):
        os.environ.setdefault("SDL_VIDEO_X11_NET_WM_BYPASS_COMPOSITOR", "0")
    try:
        pygame.init()
        surface = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    except pygame.error as exc:
        print(f"Window could not be created!\nSDL_Error: {exc}")
        return -1
    pygame.display.set_caption("Hello world")
    try:
        game_loop(surface)
    finally:
        pygame.quit()
    return 0