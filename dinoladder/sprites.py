"""Bitmap sprites used by the game, stored as row-major 16-bit colour words."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Sprite:
    """A width x height image; missing trailing pixels read as black."""

    width: int
    height: int
    pixels: tuple

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError("sprite dimensions must be positive")
        pixels = tuple(self.pixels)
        for colour in pixels:
            if not 0 <= colour <= 0xFFFF:
                raise ValueError(f"colour {colour} is not a 16-bit word")
        size = self.width * self.height
        pixels = (pixels + (0,) * size)[:size]
        object.__setattr__(self, "pixels", pixels)


def _from_art(palette, rows):
    """Build a sprite from rows of palette characters; '.' is black."""
    colours = {".": 0, **palette}
    return Sprite(
        width=len(rows[0]),
        height=len(rows),
        pixels=tuple(colours[ch] for row in rows for ch in row),
    )


_DINO = {"g": 16142, "d": 9293, "w": 65535, "p": 54815}

_DINO_BODY = (
    "............",
    ".......g....",
    "......gggd..",
    ".....ggdddd.",
    "......gdd.dd",
    ".....ggddddd",
    "......gdddw.",
    "d.....gdd...",
    "dg...gddp...",
    "ddg.gdddp...",
    "ddgggddddp..",
    ".dddddddpp..",
    ".dddddddp...",
    "..ddppddp...",
)

DINO_WALK_1 = _from_art(_DINO, _DINO_BODY + (
    "..dd..dd....",
    "..ddd..dd...",
))

DINO_WALK_2 = _from_art(_DINO, _DINO_BODY + (
    ".dd....dd...",
    ".ddd...ddd..",
))

DINO_CLIMB = _from_art(_DINO, (
    ".......d....",
    "......dd....",
    ".....dd.....",
    ".....dd.....",
    "...dddgd.d..",
    "...ddggdd.d.",
    "...ddgddd...",
    "..d.ddgd....",
    ".d.d.gg.....",
    ".....dg.....",
    "....dgdd....",
    "....ddgd....",
    "....wddw....",
    ".....dd.....",
    ".....dd.....",
    "............",
))

DOG = _from_art({"g": 16142, "o": 1994}, (
    "..gggggggg..",
    "...gggggg...",
    "..gggggggg..",
    "..gggooggg..",
    "..gggogogg..",
    "..gggogogg..",
    "..gggogogg..",
    "..gggooggg..",
    "..gggggggg..",
    "..gggooogg..",
    "..gggogggg..",
    "..gggogggg..",
    "..gggogogg..",
    "..gggooogg..",
    "...gggggg...",
    "...gggggg...",
))

_LETTER = {"w": 65535, "s": 61307}

LETTER_D = _from_art(_LETTER, (
    "............",
    "............",
    "..sswwwww...",
    "..ww....ws..",
    "..ww....ws..",
    "..ww....ww..",
    "..ww....ww..",
    "..ww....ww..",
    "..ww....ww..",
    "..ww....ww..",
    "..ww....ww..",
    "..sw....ww..",
    "..swwwwwws..",
    "..swwwwws...",
    "............",
    "............",
))

LETTER_I = _from_art(_LETTER, (
    "............",
    "............",
    "..sswwwwss..",
    "..wwwwwwws..",
    ".....ww.....",
    ".....ww.....",
    ".....ww.....",
    ".....ws.....",
    ".....ws.....",
    ".....ww.....",
    ".....ww.....",
    ".....ww.....",
    "..swwwwwww..",
    "..sswwwwws..",
    "............",
    "............",
))

LETTER_N = _from_art(_LETTER, (
    "............",
    "............",
    "..wws...ss..",
    "..wwws..ws..",
    "..wwws..ww..",
    "..wwwws.ww..",
    "..swwww.ww..",
    "..wwwwwwww..",
    "..wwwwwwww..",
    "..ww.swwww..",
    "..ww..swww..",
    "..ww..swww..",
    "..sw...wws..",
    "..sw...wws..",
    "............",
    "............",
))

LETTER_O = _from_art(_LETTER, (
    "............",
    "............",
    "...swwwss...",
    "..ss....ww..",
    "..ww....ww..",
    "..ww....ww..",
    "..ww....ww..",
    "..sw....ws..",
    "..ww....ww..",
    "..ws....sw..",
    "..ww....ww..",
    "..ww....ww..",
    "..ww....ww..",
    "..ww....ss..",
    "...wwwwws...",
    "............",
))

PLANT = _from_art(
    {"g": 16142, "b": 24327, "y": 40224, "o": 65315, "w": 65535, "c": 40743},
    (
        "............",
        "............",
        ".g...y......",
        ".gb..yy..g..",
        ".gbbyo..g.g.",
        "..ggyogggg..",
        "...yowogg...",
        "..yooogb....",
        "..oo.gbc....",
        ".....gbc....",
        "......gbb...",
        ".......ggg..",
        "............",
        "............",
        "............",
        "............",
    ),
)

EGG = _from_art(
    {
        "a": 63421, "b": 7980, "c": 24364, "d": 63950, "e": 32316,
        "f": 48948, "g": 40756, "h": 65007, "i": 65315, "j": 16180,
        "k": 57140, "l": 16172, "m": 65323, "n": 40959, "o": 32556,
        "p": 64743, "q": 65084, "r": 65332, "s": 32604, "t": 32768,
        "u": 65348, "v": 24576, "w": 65535,
    },
    (
        "............",
        "............",
        "............",
        ".....aa.....",
        "....bcde....",
        "...fbghij...",
        "...gkhwlm...",
        "..dhdwhwnd..",
        "..wcowpwww..",
        "..wqirwwor..",
        "..hdlrhfis..",
        "...whhdir...",
        "...twwwuv...",
        "............",
        "............",
        "............",
    ),
)

SOAP = _from_art(
    {
        "a": 13294, "b": 20156, "c": 63973, "d": 24475,
        "e": 57293, "f": 65401, "g": 40876, "w": 65535,
    },
    (
        "..a.........b...",
        ".a.a...c..db.b..",
        "..a...cecffdb...",
        "....eeecffdeeg..",
        ".wgeeedffdeewwg.",
        ".gweedddgwwwgdd.",
        ".gdweewwweggdfd.",
        ".gfdwweffggdffd.",
        ".gffweffggdfd...",
        "..dfwffggd......",
        "...fefg.........",
        "................",
    ),
)