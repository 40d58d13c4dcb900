"""Sound effects and players built on the pygame mixer."""

from __future__ import annotations

import math
import os
import threading
from enum import Enum, auto
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

_FREQUENCY = 44100
_SIZE = -16
_CHANNELS = 2
_CHUNK_SIZE = 2048

_SEARCH_DIRS = (Path("."), Path("sounds"))
_cache: dict[Path, pygame.mixer.Sound] = {}


def _ensure_mixer() -> None:
    if not pygame.mixer.get_init():
        pygame.mixer.init(
            frequency=_FREQUENCY, size=_SIZE, channels=_CHANNELS, buffer=_CHUNK_SIZE
        )


def _resolve(filename: str | os.PathLike[str]) -> Path:
    path = Path(filename)
    if path.is_file():
        return path.resolve()
    if not path.is_absolute():
        for directory in _SEARCH_DIRS:
            candidate = directory / path
            if candidate.is_file():
                return candidate.resolve()
    raise FileNotFoundError(f"sound file not found: {filename}")


class Sound:
    """A sound effect, usually loaded from a file.

    Loaded files are cached, so loading the same file twice shares its data.
    """

    def __init__(self, filename: str | os.PathLike[str] | None = None) -> None:
        self._chunk: pygame.mixer.Sound | None = None
        self._filename: str | None = None
        if filename is not None:
            self.load(filename)

    @property
    def filename(self) -> str | None:
        return self._filename

    @property
    def loaded(self) -> bool:
        return self._chunk is not None

    @property
    def chunk(self) -> pygame.mixer.Sound | None:
        """The underlying mixer sound, or None if nothing is loaded."""
        return self._chunk

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Load the sound from a file, looking also in ``sounds/``."""
        path = _resolve(filename)
        _ensure_mixer()
        chunk = _cache.get(path)
        if chunk is None:
            chunk = pygame.mixer.Sound(str(path))
            _cache[path] = chunk
        self._chunk = chunk
        self._filename = os.fspath(filename)

    def unload(self) -> None:
        """Forget the loaded sound."""
        self._chunk = None
        self._filename = None


class PlayMode(Enum):
    """How a player treats a new sound while it may still be playing."""

    TERMINATE_AND_PLAY = auto()
    PLAY_IF_IDLE = auto()
    PLAY_IF_NEW = auto()
    PLAY_ONCE = auto()


class SoundPlayer:
    """Plays one sound at a time on a mixer channel."""

    def __init__(self) -> None:
        _ensure_mixer()
        self._channel: pygame.mixer.Channel | None = None
        self._sound: Sound | None = None
        self._mode = PlayMode.TERMINATE_AND_PLAY
        self._paused = False
        self._volume = 1.0
        self._pan = (1.0, 1.0)
        self._timer: threading.Timer | None = None

    @property
    def mode(self) -> PlayMode:
        return self._mode

    @property
    def channel(self) -> pygame.mixer.Channel | None:
        return self._channel

    def set_mode(self, mode: PlayMode) -> None:
        """Choose how :meth:`play` behaves while a sound is playing."""
        self._mode = PlayMode(mode)

    @staticmethod
    def _same(a: Sound | None, b: Sound | None) -> bool:
        if a is None or b is None:
            return False
        if a is b:
            return True
        return a.filename is not None and a.filename == b.filename

    def play(
        self,
        sound: Sound | str | os.PathLike[str],
        repeat: int = 0,
        fade_in: int = 0,
    ) -> None:
        """Play a sound, repeated ``repeat`` more times (-1 loops forever).

        With ``fade_in`` (ms) the sound fades in and any sound still playing
        fades out over the same time; otherwise it is stopped.
        """
        if not isinstance(sound, Sound):
            sound = Sound(sound)
        if not sound.loaded:
            raise ValueError("cannot play a sound that is not loaded")

        current = self.is_playing()
        if self._mode is PlayMode.PLAY_IF_IDLE and current is not None:
            return
        if self._mode is PlayMode.PLAY_IF_NEW and self._same(current, sound):
            return
        if self._mode is PlayMode.PLAY_ONCE and self._same(self._sound, sound):
            return

        self._cancel_timer()
        if current is not None and self._channel is not None:
            if fade_in > 0:
                self._channel.fadeout(fade_in)
            else:
                self._channel.stop()

        channel = pygame.mixer.find_channel(True)
        channel.play(sound.chunk, loops=repeat, fade_ms=max(0, fade_in))
        self._channel = channel
        self._sound = sound
        self._paused = False
        self._apply_volume()

    def is_playing(self) -> Sound | None:
        """Return the sound now playing (or paused), or None if idle."""
        if self._channel is None or self._sound is None:
            return None
        if self._channel.get_busy() and self._channel.get_sound() is self._sound.chunk:
            return self._sound
        return None

    def last_playing(self) -> Sound | None:
        """Return the sound now or most recently played, or None."""
        return self._sound

    def pause(self) -> None:
        if self.is_playing() is not None:
            self._channel.pause()
            self._paused = True

    def resume(self) -> None:
        if self._paused and self.is_playing() is not None:
            self._channel.unpause()
        self._paused = False

    def is_paused(self) -> bool:
        return self._paused and self.is_playing() is not None

    def volume(self, vol: float) -> None:
        """Set the volume, from 0 (silent) to 1 (maximum)."""
        self._volume = min(1.0, max(0.0, float(vol)))
        self._apply_volume()

    def stop(self) -> None:
        """Stop the sound immediately."""
        self._cancel_timer()
        if self.is_playing() is not None:
            self._channel.stop()
        self._paused = False

    def fade_out(self, ms: int) -> None:
        """Fade the sound out over ``ms`` milliseconds."""
        if self.is_playing() is not None:
            self._channel.fadeout(ms)

    def expire(self, ms: int) -> None:
        """Keep playing for ``ms`` milliseconds, then stop."""
        self._cancel_timer()
        sound = self.is_playing()
        if sound is None:
            return
        channel = self._channel

        def _halt() -> None:
            if channel.get_sound() is sound.chunk:
                channel.stop()

        self._timer = threading.Timer(max(0, ms) / 1000.0, _halt)
        self._timer.daemon = True
        self._timer.start()

    def set_position(self, angle: int, distance: int) -> None:
        """Place the source for stereo playback.

        ``angle`` is in degrees, 0 straight ahead and 90 to the right;
        ``distance`` runs from 0 (closest) to 255 (furthest).
        """
        if not 0 <= distance <= 255:
            raise ValueError(f"distance must be within 0..255, got {distance}")
        pan = math.sin(math.radians(angle % 360))
        attenuation = (255 - distance) / 255
        left = min(1.0, 1.0 - pan) * attenuation
        right = min(1.0, 1.0 + pan) * attenuation
        self._pan = (left, right)
        self._apply_volume()

    def _apply_volume(self) -> None:
        if self._channel is not None:
            left, right = self._pan
            self._channel.set_volume(left * self._volume, right * self._volume)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None