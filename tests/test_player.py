import pygame

from spaceshooter.player import Player
from spaceshooter.settings import PLAYER_SPEED, SCREEN_HEIGHT, SCREEN_WIDTH


def test_get_instance_returns_same_object():
    first = Player.get_instance()
    first.handle_key_pressed(pygame.K_s)
    try:
        assert Player.get_instance().velocity[1] == PLAYER_SPEED
    finally:
        first.handle_key_released(pygame.K_s)
    assert Player.get_instance().velocity[1] == 0


def test_instance_is_horizontally_centred():
    player = Player.get_instance()
    assert (player.width, player.height) == (50, 50)
    assert player.x + player.width // 2 == SCREEN_WIDTH // 2


def test_key_d_moves_right():
    player = Player(50, 50, 100, 100)
    player.handle_key_pressed(pygame.K_d)
    player.update()
    assert player.x == 100 + PLAYER_SPEED
    assert player.y == 100


def test_key_w_and_a_set_negative_velocity():
    player = Player(50, 50, 100, 100)
    player.handle_key_pressed(pygame.K_w)
    player.handle_key_pressed(pygame.K_a)
    assert player.velocity == [-PLAYER_SPEED, -PLAYER_SPEED]


def test_key_s_sets_downward_velocity():
    player = Player(50, 50, 100, 100)
    player.handle_key_pressed(pygame.K_s)
    assert player.velocity == [0, PLAYER_SPEED]


def test_release_stops_matching_axis():
    player = Player(50, 50, 100, 100)
    player.handle_key_pressed(pygame.K_d)
    player.handle_key_pressed(pygame.K_s)
    player.handle_key_released(pygame.K_w)
    assert player.velocity == [PLAYER_SPEED, 0]
    player.handle_key_released(pygame.K_a)
    assert player.velocity == [0, 0]


def test_other_keys_are_ignored():
    player = Player(50, 50, 100, 100)
    player.handle_key_pressed(pygame.K_q)
    assert player.velocity == [0, 0]


def test_clamped_to_top_left():
    player = Player(50, 50, -30, -30)
    player.handle_out_of_screen()
    assert (player.x, player.y) == (0, 0)


def test_clamped_to_right_edge():
    player = Player(50, 50, SCREEN_WIDTH + 5, 100)
    player.handle_out_of_screen()
    assert player.x == SCREEN_WIDTH - 50


def test_bottom_edge_stops_horizontal_motion():
    player = Player(50, 50, 100, SCREEN_HEIGHT)
    player.handle_key_pressed(pygame.K_d)
    player.handle_out_of_screen()
    assert player.y == SCREEN_HEIGHT - 50
    assert player.velocity[0] == 0


def test_draw_fills_red():
    surface = pygame.Surface((200, 200))
    Player(50, 50, 10, 10).draw(surface)
    assert tuple(surface.get_at((20, 20)))[:3] == (0xFF, 0, 0)