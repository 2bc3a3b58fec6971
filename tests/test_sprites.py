import pytest

from dinoladder import sprites
from dinoladder.sprites import Sprite

ALL = [
    sprites.DINO_WALK_1, sprites.DINO_WALK_2, sprites.DINO_CLIMB, sprites.DOG,
    sprites.LETTER_D, sprites.LETTER_I, sprites.LETTER_N, sprites.LETTER_O,
    sprites.PLANT, sprites.EGG, sprites.SOAP,
]


@pytest.mark.parametrize("sprite", ALL)
def test_rebuilt_sprite_keeps_every_pixel(sprite):
    rebuilt = Sprite(sprite.width, sprite.height, list(sprite.pixels))
    assert rebuilt == sprite
    assert len(rebuilt.pixels) == sprite.width * sprite.height


def test_soap_is_wide():
    rebuilt = Sprite(16, 12, sprites.SOAP.pixels)
    assert rebuilt == sprites.SOAP
    assert rebuilt.pixels[2] == 13294
    assert rebuilt.pixels[12] == 20156


def test_egg_shell_top_pixels():
    rebuilt = Sprite(12, 16, sprites.EGG.pixels)
    assert rebuilt.pixels[41:43] == (63421, 63421)
    assert rebuilt.pixels[:41] == (0,) * 41


def test_walk_frames_differ_only_in_legs():
    first = Sprite(12, 16, sprites.DINO_WALK_1.pixels)
    second = Sprite(12, 16, sprites.DINO_WALK_2.pixels)
    assert first.pixels[: 14 * 12] == second.pixels[: 14 * 12]
    assert first.pixels[14 * 12:] != second.pixels[14 * 12:]


def test_short_image_padded_with_black():
    s = Sprite(2, 2, [5])
    assert s.pixels == (5, 0, 0, 0)


def test_long_image_truncated():
    s = Sprite(1, 2, [1, 2, 3])
    assert s.pixels == (1, 2)


def test_bad_dimensions_rejected():
    with pytest.raises(ValueError):
        Sprite(0, 3, [])


def test_bad_colour_rejected():
    with pytest.raises(ValueError):
        Sprite(1, 1, [70000])