"""Keyboard symbols, modifier flags and joystick hat positions."""

from __future__ import annotations

from enum import IntEnum, IntFlag

_ASCII_KEYS: list[tuple[str, int]] = [
    ("UNKNOWN", 0),
    ("FIRST", 0),
    ("BACKSPACE", 8),
    ("TAB", 9),
    ("CLEAR", 12),
    ("RETURN", 13),
    ("PAUSE", 19),
    ("ESCAPE", 27),
    ("SPACE", 32),
    ("EXCLAIM", 33),
    ("QUOTEDBL", 34),
    ("HASH", 35),
    ("DOLLAR", 36),
    ("AMPERSAND", 38),
    ("QUOTE", 39),
    ("LEFTPAREN", 40),
    ("RIGHTPAREN", 41),
    ("ASTERISK", 42),
    ("PLUS", 43),
    ("COMMA", 44),
    ("MINUS", 45),
    ("PERIOD", 46),
    ("SLASH", 47),
    *((f"K_{digit}", 48 + digit) for digit in range(10)),
    ("COLON", 58),
    ("SEMICOLON", 59),
    ("LESS", 60),
    ("EQUALS", 61),
    ("GREATER", 62),
    ("QUESTION", 63),
    ("AT", 64),
    ("LEFTBRACKET", 91),
    ("BACKSLASH", 92),
    ("RIGHTBRACKET", 93),
    ("CARET", 94),
    ("UNDERSCORE", 95),
    ("BACKQUOTE", 96),
    *((chr(code).upper(), code) for code in range(ord("a"), ord("z") + 1)),
    ("DELETE", 127),
]

_WORLD_KEYS = [(f"WORLD_{n}", 160 + n) for n in range(96)]

_KEYPAD_KEYS = [
    *((f"KP{digit}", 256 + digit) for digit in range(10)),
    ("KP_PERIOD", 266),
    ("KP_DIVIDE", 267),
    ("KP_MULTIPLY", 268),
    ("KP_MINUS", 269),
    ("KP_PLUS", 270),
    ("KP_ENTER", 271),
    ("KP_EQUALS", 272),
]

_NAVIGATION_KEYS = [
    ("UP", 273),
    ("DOWN", 274),
    ("RIGHT", 275),
    ("LEFT", 276),
    ("INSERT", 277),
    ("HOME", 278),
    ("END", 279),
    ("PAGEUP", 280),
    ("PAGEDOWN", 281),
]

_FUNCTION_KEYS = [(f"F{n}", 281 + n) for n in range(1, 16)]

_MODIFIER_KEYS = [
    ("NUMLOCK", 300),
    ("CAPSLOCK", 301),
    ("SCROLLOCK", 302),
    ("RSHIFT", 303),
    ("LSHIFT", 304),
    ("RCTRL", 305),
    ("LCTRL", 306),
    ("RALT", 307),
    ("LALT", 308),
    ("RMETA", 309),
    ("LMETA", 310),
    ("LSUPER", 311),
    ("RSUPER", 312),
    ("MODE", 313),
    ("COMPOSE", 314),
]

_MISC_KEYS = [
    ("HELP", 315),
    ("PRINT", 316),
    ("SYSREQ", 317),
    ("BREAK", 318),
    ("MENU", 319),
    ("POWER", 320),
    ("EURO", 321),
    ("UNDO", 322),
    ("LAST", 323),
]

Key = IntEnum(
    "Key",
    _ASCII_KEYS
    + _WORLD_KEYS
    + _KEYPAD_KEYS
    + _NAVIGATION_KEYS
    + _FUNCTION_KEYS
    + _MODIFIER_KEYS
    + _MISC_KEYS,
    module=__name__,
)
Key.__doc__ = "Keyboard symbols; printable keys match their ASCII codes."


class KeyMod(IntFlag):
    """Modifier key state flags, combinable with ``|``."""

    NONE = 0x0000
    LSHIFT = 0x0001
    RSHIFT = 0x0002
    LCTRL = 0x0040
    RCTRL = 0x0080
    LALT = 0x0100
    RALT = 0x0200
    LMETA = 0x0400
    RMETA = 0x0800
    NUM = 0x1000
    CAPS = 0x2000
    MODE = 0x4000
    RESERVED = 0x8000
    CTRL = LCTRL | RCTRL
    SHIFT = LSHIFT | RSHIFT
    ALT = LALT | RALT
    META = LMETA | RMETA


class Hat(IntFlag):
    """Joystick POV hat positions."""

    CENTERED = 0x00
    UP = 0x01
    RIGHT = 0x02
    DOWN = 0x04
    LEFT = 0x08
    RIGHTUP = RIGHT | UP
    RIGHTDOWN = RIGHT | DOWN
    LEFTUP = LEFT | UP
    LEFTDOWN = LEFT | DOWN


_LEVEL_MODS = KeyMod.LSHIFT | KeyMod.LCTRL


def level_shortcut(key: int, mod: int) -> int | None:
    """Return the level selected by Left-Shift + Left-Ctrl + digit 1..9, else None."""
    if Key.K_1 <= int(key) <= Key.K_9 and int(mod) == _LEVEL_MODS:
        return int(key) - Key.K_0
    return None