"""AudioService: background music over ``pygame.mixer.music``.

The simulation never touches audio; the game state only forwards the
``toggle_music`` action here. Music on/off persists in settings.

Design:
- Singleton-style via get().
- Mixer init falls back to the SDL dummy driver, and if that also
  fails music control becomes a logged no-op (audio is ancillary).
"""

from __future__ import annotations

import os

import pygame

from lumberjack.logger import get_logger
from lumberjack.settings import settings

log = get_logger("audio")

MUSIC_TRACK = "data/background-music.mp3"


class AudioService:
    _instance: "AudioService | None" = None

    def __init__(self, track: str = MUSIC_TRACK) -> None:
        self.track = track
        self.available = self._init_mixer()
        self._loaded = False
        self._started = False
        self._playing = False

    @classmethod
    def get(cls) -> "AudioService":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @staticmethod
    def _init_mixer() -> bool:
        if not pygame.get_init():
            pygame.init()
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
            return True
        except pygame.error:
            os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
            try:
                pygame.mixer.init()
                return True
            except pygame.error as e:
                log.warn("Audio unavailable; music disabled", e)
                return False

    @property
    def music_on(self) -> bool:
        return settings.music_enabled

    @property
    def playing(self) -> bool:
        return self._playing

    def _load(self) -> bool:
        if self._loaded:
            return True
        if not self.available:
            return False
        try:
            pygame.mixer.music.load(self.track)
        except (pygame.error, FileNotFoundError) as e:
            log.warn("Music file could not be loaded", self.track, e)
            self.available = False
            return False
        pygame.mixer.music.set_volume(settings.music_volume)
        self._loaded = True
        return True

    def start_music(self) -> None:
        """Start the looping track if music is enabled and not already playing."""
        if not settings.music_enabled or self._playing:
            return
        if not self._load():
            return
        if self._started:
            pygame.mixer.music.unpause()
        else:
            pygame.mixer.music.play(-1)
            self._started = True
        self._playing = True
        log.debug("Music started")

    def stop_music(self) -> None:
        if self._playing and self.available:
            pygame.mixer.music.pause()
        self._playing = False

    def toggle_music(self) -> bool:
        """Flip music on/off; returns the new enabled state."""
        settings.music_enabled = not settings.music_enabled
        if settings.music_enabled:
            self.start_music()
        else:
            self.stop_music()
        log.info("Music", "ON" if settings.music_enabled else "OFF")
        return settings.music_enabled


__all__ = ["AudioService"]
