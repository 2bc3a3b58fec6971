# dinoladder

A tiny arcade game. A dinosaur starts at the bottom of a 128x160 pixel screen and climbs
a series of ladders to reach a bar of soap at the top. Eggs fall from above, and if one of
them touches the dinosaur, the game is over.

The screen is a simulated RGB565 panel held in memory. It comes with a small drawing
library that has filled and outlined rectangles, lines, circles, images that can be
mirrored, and 5x7 bitmap text at normal and double size. The game window is drawn with
pygame.

## Installing

```
pip install .
```

## Playing

```
dinoladder
```

The window shows the screen scaled up four times. Use `--scale` to pick another factor:

```
dinoladder --scale 3
```

On the title screen, press **up** to start. During play:

- **left** / **right** walk along a floor
- **up** / **down** climb while the dinosaur is on a ladder

If the dinosaur reaches the top, "Dino clean!" appears. If a falling egg touches it,
"You died" appears. Close the window to quit.

## Driving the game from code

`dinoladder.game.Game` runs one 50 ms frame for each call to `step`. It draws onto a
`Display` and returns the current `Phase` (`TITLE`, `PLAYING`, `CLEAN` or `DEAD`):

```python
from dinoladder.display import Display
from dinoladder.game import Buttons, Game, Phase

game = Game(Display())
phase = game.step(Buttons(up=True))   # leaves the title screen
assert phase is Phase.PLAYING
game.step(Buttons(right=True))
print(game.x, game.y)
```

The positions of the falling eggs come from `Prbs`, a 31-bit pseudo-random bit sequence
generator. You can pass any iterator of integers as `rng`.

## Using the drawing library

```python
from dinoladder.display import Display, rgb_to_word

screen = Display(128, 160)
white = rgb_to_word(255, 255, 255)
screen.draw_rectangle(10, 10, 40, 20, white)
screen.fill_circle(64, 80, 10, white)
screen.print_text("Hello", 12, 14, white, 0)
screen.print_number(42, 12, 40, white, 0)   # drawn as "00042"
colour = screen.get_pixel(10, 10)
```

Writes that fall outside the screen are ignored. Circles that would reach past an edge
are not drawn at all. `get_pixel` raises `IndexError` when the point is off the screen.

Characters come from `dinoladder.font.glyph`, which returns the five column bytes of a
printable ASCII character. The game's bitmaps are `Sprite` objects in `dinoladder.sprites`.

## What it does not do

A round ends on the "Dino clean!" or "You died" screen. There is no restart, score or
saved state. To play again, start the command again.

## Running the tests

```
pip install .[test]
pytest
```