"""A pausable millisecond game clock driven by a system tick source."""

from __future__ import annotations

import time
from collections.abc import Callable

_UINT32 = 0xFFFFFFFF


def _make_default_ticks() -> Callable[[], int]:
    origin = time.monotonic()

    def ticks() -> int:
        return int((time.monotonic() - origin) * 1000)

    return ticks


class GameClock:
    """Game time in milliseconds that can be reset, suspended and resumed.

    ``ticks`` is a callable returning the system time in milliseconds; by
    default it counts milliseconds since the clock was created.  Times wrap
    around at 32 bits.
    """

    def __init__(self, ticks: Callable[[], int] | None = None) -> None:
        self._ticks = ticks if ticks is not None else _make_default_ticks()
        self._started = 0
        self._paused = 0
        self._running = False

    def system_time(self) -> int:
        """Return the current system time in milliseconds."""
        return int(self._ticks()) & _UINT32

    def game_time(self) -> int:
        """Return the game time: time run since reset, excluding suspensions."""
        now = self.system_time()
        if self._running:
            return (self._paused + now - self._started) & _UINT32
        return self._paused

    def reset(self) -> None:
        """Start counting game time from zero."""
        self._started = self.system_time()
        self._paused = 0
        self._running = True

    def suspend(self) -> None:
        """Freeze the game time; does nothing if already suspended."""
        if not self._running:
            return
        self._paused = self.game_time()
        self._running = False

    def resume(self) -> None:
        """Continue counting after a suspension; does nothing if running."""
        if self._running:
            return
        self._started = self.system_time()
        self._running = True

    def is_running(self) -> bool:
        """Return True unless the clock is suspended."""
        return self._running