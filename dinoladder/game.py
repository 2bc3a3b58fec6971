"""The ladder-climbing dinosaur game: state machine and a windowed front end."""

import argparse
import enum
from dataclasses import dataclass

from .display import SCREEN_HEIGHT, SCREEN_WIDTH, Display, rgb_to_word
from . import sprites

LADDER_COLOUR = rgb_to_word(222, 184, 135)
WHITE = rgb_to_word(255, 255, 255)
BLACK = rgb_to_word(0, 0, 0)
LADDERS = ((100, 124, 14, 39), (0, 100, 14, 25), (100, 75, 14, 25),
           (0, 50, 14, 25), (100, 25, 14, 25))
LADDER_ZONES = ((100, 125), (0, 100), (100, 75), (0, 50), (100, 25))
FLOORS = (25, 50, 75, 100, 125)
LOW_BOUND = 12
HIGH_BOUND = 110
FRAME_MS = 50


def is_inside(x1, y1, w, h, px, py):
    """True if (px, py) lies in the closed rectangle x1..x1+w, y1..y1+h (16-bit)."""
    x2 = (x1 + w) & 0xFFFF
    y2 = (y1 + h) & 0xFFFF
    px &= 0xFFFF
    py &= 0xFFFF
    return x1 <= px <= x2 and y1 <= py <= y2


class Prbs:
    """A 31-bit pseudo-random bit sequence generator."""

    def __init__(self, seed=1234):
        self._register = seed & 0xFFFFFFFF

    def __iter__(self):
        return self

    def __next__(self):
        reg = self._register
        new_bit = (~((reg >> 27 & 1) ^ (reg >> 30 & 1))) & 1
        self._register = ((reg << 1) | new_bit) & 0xFFFFFFFF
        return self._register & 0x7FFFFFFF


@dataclass(frozen=True)
class Buttons:
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False


class Phase(enum.Enum):
    TITLE = "title"
    PLAYING = "playing"
    CLEAN = "clean"
    DEAD = "dead"


class Game:
    """Advances one 50 ms frame per step, drawing onto a Display."""

    def __init__(self, display=None, rng=None):
        self.display = display if display is not None else Display()
        self.rng = rng if rng is not None else Prbs()
        self.phase = Phase.TITLE
        self.x = 12
        self.y = 144
        self._old_x = self.x
        self._old_y = self.y
        self.egg_x = 0
        self.egg_y = 0
        self._old_egg_y = 0
        self._toggle = False
        self._h_moved = self._v_moved = False
        self._h_inverted = self._v_inverted = False

    def _on_ladder(self):
        x, y = self.x, self.y
        return any(
            is_inside(lx, ly, 14, 40, x, y)
            or is_inside(lx, ly, 14, 39, x + 12, y)
            or is_inside(lx, ly, 14, 39, x, y + 16)
            or is_inside(lx, ly, 14, 39, x + 12, y + 16)
            for lx, ly in LADDER_ZONES
        )

    def _draw_ladders(self, colour=LADDER_COLOUR):
        for rect in LADDERS:
            self.display.fill_rectangle(*rect, colour)

    def _draw_floors(self, colour=WHITE):
        for level in FLOORS:
            self.display.draw_line(0, level, 128, level, colour)

    def _put(self, x, y, sprite, h_flip=False, v_flip=False):
        self.display.put_image(x, y, sprite.width, sprite.height,
                               sprite.pixels, h_flip, v_flip)

    def _title(self, buttons):
        d = self.display
        if not buttons.up:
            for x, letter in zip((37, 49, 61, 73), (sprites.LETTER_D, sprites.LETTER_I,
                                                    sprites.LETTER_N, sprites.LETTER_O)):
                self._put(x, 32, letter)
            d.print_text("Press up to start", 5, 50, WHITE, BLACK)
            return
        for x in (37, 49, 61, 73):
            d.fill_rectangle(x, 32, 12, 16, 0)
        d.fill_rectangle(0, 50, 128, 16, 0)
        self._draw_ladders()
        self._draw_floors()
        self._put(100, 12, sprites.SOAP)
        self._h_moved = self._v_moved = False
        self._h_inverted = self._v_inverted = False
        self.phase = Phase.PLAYING

    def _play(self, buttons):
        d = self.display
        self.egg_y = (self.egg_y + 2) & 0xFFFF
        self._put(self.egg_x, self.egg_y, sprites.EGG)
        d.fill_rectangle(self.egg_x, self._old_egg_y, 12, 16, 0)
        self._old_egg_y = self.y
        self._draw_ladders()
        self._put(100, 12, sprites.SOAP)

        ex, ey, x, y = self.egg_x, self.egg_y, self.x, self.y
        dead = any(is_inside(ex, ey, 12, 16, px, py)
                   for px, py in ((x, y), (x + 12, y), (x, y + 16), (x + 12, y + 16)))

        if self.egg_y == 150:
            self.egg_y = 0
            self.egg_x = LOW_BOUND + next(self.rng) % (HIGH_BOUND - LOW_BOUND + 1)

        if buttons.right and self.x < 110:
            self.x += 1
            self._h_moved = True
            self._h_inverted = False
        if buttons.left and self.x > 10:
            self.x -= 1
            self._h_moved = True
            self._h_inverted = True
        if buttons.down and self._on_ladder():
            self.y += 1
            self._v_moved = True
            self._v_inverted = False
        if buttons.up:
            if self._on_ladder():
                self.y -= 1
                self._v_moved = True
                self._v_inverted = True
            self._draw_ladders()

        if self._v_moved or self._h_moved:
            d.fill_rectangle(self._old_x, self._old_y, 12, 16, 0)
            self._old_x, self._old_y = self.x, self.y
            if self._h_moved:
                frame = sprites.DINO_WALK_1 if self._toggle else sprites.DINO_WALK_2
                self._put(self.x, self.y, frame, self._h_inverted)
                self._toggle = not self._toggle
            else:
                self._put(self.x, self.y, sprites.DINO_CLIMB, False, self._v_inverted)
            self._draw_floors()

        if self.y <= 15:
            self.phase = Phase.CLEAN
        elif dead:
            self.phase = Phase.DEAD
        if self.phase is not Phase.PLAYING:
            self._end_screen()

    def _end_screen(self):
        d = self.display
        self._draw_ladders(0)
        self._draw_floors(0)
        if self.phase is Phase.CLEAN:
            d.fill_rectangle(0, 100, 100, 100, 0)
        else:
            d.fill_rectangle(100, 12, 16, 12, 0)
        d.fill_rectangle(self.x, self.y, 12, 16, 0)
        d.fill_rectangle(self.egg_x, self.egg_y, 12, 16, 0)
        message = "Dino clean!" if self.phase is Phase.CLEAN else "You died"
        d.print_text(message, 35, 45, WHITE, 0)

    def step(self, buttons):
        """Run one frame with the given buttons held; return the resulting phase."""
        if self.phase is Phase.TITLE:
            self._title(buttons)
        elif self.phase is Phase.PLAYING:
            self._play(buttons)
        else:
            self._end_screen()
        return self.phase


def _word_to_rgb(word):
    r = (word >> 8 & 0x1F) << 3
    b = (word >> 3 & 0x1F) << 3
    g = ((word & 7) << 5) | ((word >> 13 & 7) << 2)
    return r, g, b


def main(argv=None):
    """Open a window and play the game with the arrow keys."""
    parser = argparse.ArgumentParser(prog="dinoladder")
    parser.add_argument("--scale", type=int, default=4)
    args = parser.parse_args(argv)

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH * args.scale, SCREEN_HEIGHT * args.scale))
        pygame.display.set_caption("Dino ladder")
        clock = pygame.time.Clock()
        game = Game(Display())
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
            keys = pygame.key.get_pressed()
            game.step(Buttons(up=bool(keys[pygame.K_UP]), down=bool(keys[pygame.K_DOWN]),
                              left=bool(keys[pygame.K_LEFT]), right=bool(keys[pygame.K_RIGHT])))
            buffer = bytearray()
            for y in range(SCREEN_HEIGHT):
                for x in range(SCREEN_WIDTH):
                    buffer.extend(_word_to_rgb(game.display.get_pixel(x, y)))
            frame = pygame.image.frombuffer(bytes(buffer), (SCREEN_WIDTH, SCREEN_HEIGHT), "RGB")
            screen.blit(pygame.transform.scale(frame, screen.get_size()), (0, 0))
            pygame.display.flip()
            clock.tick(1000 // FRAME_MS)
    finally:
        pygame.quit()