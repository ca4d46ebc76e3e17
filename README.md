# spaceshooter

A small arcade game built on pygame. You steer a red square around a 1280×720
window. A blue cannon sits on the right edge. Each mouse click fires a ball toward
the point you clicked.

## Installing

```
pip install .
```

## Playing

```
spaceshooter
```

The game loads `sample.bmp` from the current directory when it starts. If that
file is missing or cannot be read, it prints the error and exits without running.
It does not draw the image.

Controls:

- `W` / `S`: move up / down
- `A` / `D`: move left / right
- Mouse click: fire a ball from the cannon toward the pointer. The click position is printed to standard output.
- Close the window to quit

The player is kept inside the screen. Each ball bounces off the walls. A ball is
removed once it has counted three wall touches. A corner hit counts as two touches.
At most 10 balls can be alive at once. A click while 10 balls are alive fires
nothing and prints "Maximum number of alive balls reached!" to standard error.

## Using the pieces

The game objects can be driven without opening a window:

```python
from spaceshooter.cannon import Cannon, MaxBallsReached
from spaceshooter.player import Player

player = Player.get_instance()   # one shared player, created on first call
cannon = Cannon()

ball = cannon.shoot(640, 360)    # returns the new Ball
cannon.update()                  # moves balls, drops those with 3+ wall touches
player.update()
```

- `Cannon.shoot(x, y)` raises `MaxBallsReached` when 10 balls are alive.
- `Cannon.shoot(x, y)` raises `ValueError` when the target is the cannon's muzzle point itself.
- `Player.handle_key_pressed(key)` and `Player.handle_key_released(key)` take pygame key codes (`pygame.K_w` and so on).
- `spaceshooter.game.handle_event(event, player, cannon)` applies one pygame event. It returns `True` for a quit event.
- `spaceshooter.game.step(player, cannon, surface)` advances one frame and draws it onto any pygame surface.
- `spaceshooter.settings` holds the screen size and game limits, and the `Color` type.

## What it does not do

There is no scoring and no game over. Balls and the player never collide. The
`spaceshooter.boostbox` module defines `BoostBox` and `SpeedBoostBox` power-ups.
Touching a `SpeedBoostBox` has no effect, and boxes are never placed in the game.

## Running the tests

```
pip install .[test]
pytest
```