"""Building blocks for 2D games on pygame: graphics, text, game clock, sound, key codes and byte order."""

__version__ = "2.70.0"
__all__ = ["byteorder", "clock", "graphics", "keys", "sound", "text"]