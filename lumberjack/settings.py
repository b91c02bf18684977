import json
import os

import pygame

from lumberjack.constants import CHECKPOINT_POLICIES, DEFAULT_SCREEN_H, DEFAULT_SCREEN_W
from lumberjack.logger import get_logger

log = get_logger("settings")



class Settings:
    SETTINGS_FILE = os.environ.get("LUMBERJACK_SETTINGS_FILE", "data/settings.json")

    def __init__(self, path: str | None = None):
        self.path = path or self.SETTINGS_FILE
        self._music_enabled = True
        self.music_volume = 0.3
        self._clouds_enabled = True
        self._loading_enabled = True
        self._checkpoint_policy = "exact"
        self.screen_w = DEFAULT_SCREEN_W
        self.screen_h = DEFAULT_SCREEN_H
        self._dirty = False
        # Key bindings are pygame key integers, grouped by application state.
        self.key_bindings = {
            "GameState": {
                "left": [pygame.K_LEFT, pygame.K_a],
                "right": [pygame.K_RIGHT, pygame.K_d],
                "jump": [pygame.K_SPACE, pygame.K_UP, pygame.K_w],
                "debug_level_3": [pygame.K_5],
                "restart": [pygame.K_r],
                "full_reset": [pygame.K_f],
                "toggle_music": [pygame.K_m],
                "quit": [pygame.K_ESCAPE],
            },
        }
        self.load_settings()

    @property
    def music_enabled(self) -> bool:
        return self._music_enabled

    @music_enabled.setter
    def music_enabled(self, value: bool) -> None:
        new_val = bool(value)
        if new_val != self._music_enabled:
            self._music_enabled = new_val
            self._dirty = True
            self.flush()

    @property
    def clouds_enabled(self) -> bool:
        return self._clouds_enabled

    @clouds_enabled.setter
    def clouds_enabled(self, value: bool) -> None:
        new_val = bool(value)
        if new_val != self._clouds_enabled:
            self._clouds_enabled = new_val
            self._dirty = True
            self.flush()

    @property
    def loading_enabled(self) -> bool:
        return self._loading_enabled

    @loading_enabled.setter
    def loading_enabled(self, value: bool) -> None:
        new_val = bool(value)
        if new_val != self._loading_enabled:
            self._loading_enabled = new_val
            self._dirty = True
            self.flush()

    @property
    def checkpoint_policy(self) -> str:
        return self._checkpoint_policy

    @checkpoint_policy.setter
    def checkpoint_policy(self, value: str) -> None:
        if value not in CHECKPOINT_POLICIES:
            raise ValueError(f"unknown checkpoint policy {value!r}")
        if value != self._checkpoint_policy:
            self._checkpoint_policy = value
            self._dirty = True
            self.flush()

    @property
    def screen_size(self) -> tuple[int, int]:
        return self.screen_w, self.screen_h

    def load_settings(self):
        """Load settings from the JSON file, regenerating it when missing or corrupt."""
        if os.path.exists(self.path):
            try:
                with open(self.path, "r") as f:
                    data = json.load(f)
                self._music_enabled = bool(data.get("music_enabled", self._music_enabled))
                self.music_volume = float(data.get("music_volume", self.music_volume))
                self._clouds_enabled = bool(data.get("clouds_enabled", self._clouds_enabled))
                self._loading_enabled = bool(data.get("loading_enabled", self._loading_enabled))
                policy = data.get("checkpoint_policy", self._checkpoint_policy)
                if policy in CHECKPOINT_POLICIES:
                    self._checkpoint_policy = policy
                else:
                    log.warn("Ignoring unknown checkpoint policy", policy)
                self.screen_w = int(data.get("screen_w", self.screen_w))
                self.screen_h = int(data.get("screen_h", self.screen_h))

                # Merge per action so bindings added in newer versions keep their defaults.
                loaded_bindings = data.get("key_bindings", {})
                for state, binds in loaded_bindings.items():
                    if state in self.key_bindings:
                        for action, keys in binds.items():
                            self.key_bindings[state][action] = keys
            except (json.JSONDecodeError, IOError, TypeError, ValueError) as e:
                log.warn("Error loading settings; regenerating", e)
                self._dirty = True
                self.flush()
        else:
            self._dirty = True
            self.flush()

    def save_settings(self):
        if self._dirty:
            self.flush()

    def flush(self):
        """Write settings to disk if dirty and clear dirty flag."""
        if not self._dirty:
            return
        data = {
            "music_enabled": self._music_enabled,
            "music_volume": self.music_volume,
            "clouds_enabled": self._clouds_enabled,
            "loading_enabled": self._loading_enabled,
            "checkpoint_policy": self._checkpoint_policy,
            "screen_w": self.screen_w,
            "screen_h": self.screen_h,
            "key_bindings": self.key_bindings,
        }
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump(data, f, indent=4)
            self._dirty = False
            log.debug("Settings flushed")
        except IOError as e:
            log.error("Error saving settings", e)


settings = Settings()
