import itertools

from dinoladder import sprites
from dinoladder.display import Display, rgb_to_word
from dinoladder.game import Buttons, Game, Phase, Prbs, is_inside


def test_is_inside_edges_inclusive():
    assert is_inside(10, 10, 5, 5, 15, 15)
    assert is_inside(10, 10, 5, 5, 10, 10)
    assert not is_inside(10, 10, 5, 5, 16, 12)
    assert not is_inside(10, 10, 5, 5, 12, 9)


def test_prbs_reproducible_and_31_bit():
    a = list(itertools.islice(Prbs(1234), 50))
    b = list(itertools.islice(Prbs(1234), 50))
    assert a == b
    assert all(0 <= v < 2 ** 31 for v in a)
    assert len(set(a)) > 40


def test_prbs_shifts_register():
    gen = Prbs(1234)
    first = next(gen)
    assert first >> 1 == 1234


def test_title_draws_letters():
    game = Game(Display())
    assert game.step(Buttons()) is Phase.TITLE
    assert game.display.get_pixel(37 + 2, 32 + 2) == sprites.LETTER_D.pixels[2 * 12 + 2]


def test_up_starts_game_and_draws_ladders():
    game = Game(Display())
    assert game.step(Buttons(up=True)) is Phase.PLAYING
    assert game.display.get_pixel(105, 130) == rgb_to_word(222, 184, 135)


def test_right_moves_player():
    game = Game(Display())
    game.step(Buttons(up=True))
    x = game.x
    game.step(Buttons(right=True))
    assert game.x == x + 1


def test_standing_still_egg_kills():
    game = Game(Display())
    game.step(Buttons(up=True))
    phases = [game.step(Buttons()) for _ in range(100)]
    assert phases[-1] is Phase.DEAD
    assert game.step(Buttons()) is Phase.DEAD


def test_climb_ladder():
    game = Game(Display())
    game.step(Buttons(up=True))
    for _ in range(80):
        game.step(Buttons(right=True))
    assert game.phase is Phase.PLAYING
    y = game.y
    game.step(Buttons(up=True))
    assert game.y == y - 1


def test_cannot_climb_away_from_ladder():
    game = Game(Display())
    game.step(Buttons(up=True))
    y = game.y
    game.step(Buttons(up=True))
    assert game.y == y