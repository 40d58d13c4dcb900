"""Buffered text output with alignment, split into drawable lines."""

from __future__ import annotations

from enum import Enum
from typing import Any


class Align(Enum):
    """Horizontal alignment of text drawn from a stream."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class TextStream:
    """Collects written text and hands it back line by line for drawing.

    Text is accumulated by :meth:`write`.  :meth:`take_lines` empties the
    buffer and returns its segments split at newlines: the first segment
    continues the current line, and every later one starts on a new line.
    :meth:`take_complete_lines` only returns lines that have been ended with
    a newline and keeps an unfinished tail buffered; it is used for right
    and centred text, whose position depends on the whole line.
    """

    def __init__(self) -> None:
        self._buffer = ""
        self._align = Align.LEFT

    @property
    def align(self) -> Align:
        return self._align

    @property
    def pending(self) -> str:
        """Text written but not yet taken."""
        return self._buffer

    def write(self, text: Any) -> None:
        """Append the string form of ``text`` to the buffer."""
        self._buffer += str(text)

    def set_align(self, align: Align) -> list[str] | None:
        """Change the alignment.

        Returns None when the alignment stays the same.  Otherwise the
        pending text is taken with :meth:`take_lines`, to be drawn with the
        previous alignment, and returned before the new alignment applies.
        """
        align = Align(align)
        if align is self._align:
            return None
        lines = self.take_lines()
        self._align = align
        return lines

    def take_lines(self) -> list[str]:
        """Empty the buffer and return its newline-separated segments."""
        if not self._buffer:
            return []
        lines = self._buffer.split("\n")
        self._buffer = ""
        return lines

    def take_complete_lines(self) -> list[str]:
        """Return every newline-terminated line, keeping the unfinished rest.

        Each returned line is to be drawn and followed by a move to the
        next line.
        """
        if "\n" not in self._buffer:
            return []
        *complete, rest = self._buffer.split("\n")
        self._buffer = rest
        return complete

    def reset(self) -> None:
        """Discard pending text and restore left alignment."""
        self._buffer = ""
        self._align = Align.LEFT