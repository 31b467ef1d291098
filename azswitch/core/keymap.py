"""AZERTY key → QWERTY character translation tables.

Keys are identified by the Qt key code the host reports for the physical
key on a French AZERTY layout.  Accented keys (``é``, ``è``, ``ç``, ``à``,
``ù``, ``²``) arrive as their Latin-1 key codes, the ``^`` key as the dead
circumflex.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from PyQt5.QtCore import Qt


def _freeze(table: dict) -> Mapping[int, str]:
    return MappingProxyType({int(key): char for key, char in table.items()})


# Row by row, left to right
UNSHIFTED_MAP: Mapping[int, str] = _freeze({
    # number row
    Qt.Key_twosuperior: "`",
    Qt.Key_Ampersand: "1",
    Qt.Key_Eacute: "2",
    Qt.Key_QuoteDbl: "3",
    Qt.Key_Apostrophe: "4",
    Qt.Key_ParenLeft: "5",
    Qt.Key_Minus: "6",
    Qt.Key_Egrave: "7",
    Qt.Key_Underscore: "8",
    Qt.Key_Ccedilla: "9",
    Qt.Key_Agrave: "0",
    Qt.Key_ParenRight: "-",
    Qt.Key_Equal: "=",
    # top row
    Qt.Key_A: "q",
    Qt.Key_Z: "w",
    Qt.Key_E: "e",
    Qt.Key_R: "r",
    Qt.Key_T: "t",
    Qt.Key_Y: "y",
    Qt.Key_U: "u",
    Qt.Key_I: "i",
    Qt.Key_O: "o",
    Qt.Key_P: "p",
    Qt.Key_Dead_Circumflex: "[",
    Qt.Key_Dollar: "]",
    # home row
    Qt.Key_Q: "a",
    Qt.Key_S: "s",
    Qt.Key_D: "d",
    Qt.Key_F: "f",
    Qt.Key_G: "g",
    Qt.Key_H: "h",
    Qt.Key_J: "j",
    Qt.Key_K: "k",
    Qt.Key_L: "l",
    Qt.Key_M: ";",
    Qt.Key_Ugrave: "'",
    Qt.Key_Asterisk: "\\",
    # bottom row
    Qt.Key_W: "z",
    Qt.Key_X: "x",
    Qt.Key_C: "c",
    Qt.Key_V: "v",
    Qt.Key_B: "b",
    Qt.Key_N: "n",
    Qt.Key_Comma: "m",
    Qt.Key_Semicolon: ",",
    Qt.Key_Colon: ".",
    Qt.Key_Exclam: "/",
    # space bar
    Qt.Key_Space: " ",
})

SHIFTED_MAP: Mapping[int, str] = _freeze({
    # number row
    Qt.Key_twosuperior: "~",
    Qt.Key_Ampersand: "!",
    Qt.Key_Eacute: "@",
    Qt.Key_QuoteDbl: "#",
    Qt.Key_Apostrophe: "$",
    Qt.Key_ParenLeft: "%",
    Qt.Key_Minus: "^",
    Qt.Key_Egrave: "&",
    Qt.Key_Underscore: "*",
    Qt.Key_Ccedilla: "(",
    Qt.Key_Agrave: ")",
    Qt.Key_ParenRight: "_",
    Qt.Key_Equal: "+",
    # top row
    Qt.Key_A: "Q",
    Qt.Key_Z: "W",
    Qt.Key_E: "E",
    Qt.Key_R: "R",
    Qt.Key_T: "T",
    Qt.Key_Y: "Y",
    Qt.Key_U: "U",
    Qt.Key_I: "I",
    Qt.Key_O: "O",
    Qt.Key_P: "P",
    Qt.Key_Dead_Circumflex: "{",
    Qt.Key_Dollar: "}",
    # home row
    Qt.Key_Q: "A",
    Qt.Key_S: "S",
    Qt.Key_D: "D",
    Qt.Key_F: "F",
    Qt.Key_G: "G",
    Qt.Key_H: "H",
    Qt.Key_J: "J",
    Qt.Key_K: "K",
    Qt.Key_L: "L",
    Qt.Key_M: ":",
    Qt.Key_Ugrave: '"',
    Qt.Key_Asterisk: "|",
    # bottom row
    Qt.Key_W: "Z",
    Qt.Key_X: "X",
    Qt.Key_C: "C",
    Qt.Key_V: "V",
    Qt.Key_B: "B",
    Qt.Key_N: "N",
    Qt.Key_Comma: "M",
    Qt.Key_Semicolon: "<",
    Qt.Key_Colon: ">",
    Qt.Key_Exclam: "?",
    # space bar
    Qt.Key_Space: " ",
})

# While Shift (or the layout's shift-lock) is active Qt reports the symbol
# printed on the upper half of an AZERTY key instead of the key itself.
# Map those codes back to the key they came from.
SHIFTED_ALIASES: Mapping[int, int] = MappingProxyType({
    int(Qt.Key_1): int(Qt.Key_Ampersand),
    int(Qt.Key_2): int(Qt.Key_Eacute),
    int(Qt.Key_3): int(Qt.Key_QuoteDbl),
    int(Qt.Key_4): int(Qt.Key_Apostrophe),
    int(Qt.Key_5): int(Qt.Key_ParenLeft),
    int(Qt.Key_6): int(Qt.Key_Minus),
    int(Qt.Key_7): int(Qt.Key_Egrave),
    int(Qt.Key_8): int(Qt.Key_Underscore),
    int(Qt.Key_9): int(Qt.Key_Ccedilla),
    int(Qt.Key_0): int(Qt.Key_Agrave),
    int(Qt.Key_degree): int(Qt.Key_ParenRight),
    int(Qt.Key_Plus): int(Qt.Key_Equal),
    int(Qt.Key_Dead_Diaeresis): int(Qt.Key_Dead_Circumflex),
    int(Qt.Key_diaeresis): int(Qt.Key_Dead_Circumflex),
    int(Qt.Key_sterling): int(Qt.Key_Dollar),
    int(Qt.Key_Percent): int(Qt.Key_Ugrave),
    int(Qt.Key_mu): int(Qt.Key_Asterisk),
    int(Qt.Key_Question): int(Qt.Key_Comma),
    int(Qt.Key_Period): int(Qt.Key_Semicolon),
    int(Qt.Key_Slash): int(Qt.Key_Colon),
    int(Qt.Key_section): int(Qt.Key_Exclam),
})


def normalize_key(key: int) -> int:
    """Return the base AZERTY key code for *key* (identity if not aliased)."""
    return SHIFTED_ALIASES.get(int(key), int(key))


def translate(key: int, upper_case: bool) -> str | None:
    """Return the QWERTY character for *key*, or None if the key is unmapped."""
    table = SHIFTED_MAP if upper_case else UNSHIFTED_MAP
    return table.get(int(key))
