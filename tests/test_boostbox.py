import pytest

from spaceshooter.ball import Ball
from spaceshooter.boostbox import BoostBox, SpeedBoostBox
from spaceshooter.player import Player


def test_boostbox_is_abstract():
    with pytest.raises(TypeError):
        BoostBox()


def test_name_defaults_to_empty():
    assert SpeedBoostBox().name == ""


def test_name_is_kept():
    assert SpeedBoostBox("speed").name == "speed"


def test_player_collision_leaves_player_unchanged():
    player = Player(50, 50, 100, 100)
    SpeedBoostBox().handle_player_collision(player)
    assert (player.x, player.y, player.speed, player.velocity) == (100, 100, 10, [0, 0])


def test_ball_collision_leaves_ball_unchanged():
    ball = Ball(30, 40)
    SpeedBoostBox().handle_ball_collision(ball)
    assert (ball.x, ball.y, ball.velocity, ball.speed) == (30, 40, (5, 8), 8)