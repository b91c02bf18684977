"""Application states: loading screen, then the game.

A small stack-based manager drives the top state's ``handle_actions``
/ ``update`` / ``render`` hooks. Usage (see ``app.py``):

    sm = StateManager()
    sm.set(LoadingState())
    while running:
        actions = router.capture(pygame.event.get(), inputs)
        sm.handle_actions(actions)
        sm.update(dt)
        sm.render(screen)

``LoadingState`` shows a four second progress bar (with optional cover
art) and then flags ``done``; the loop swaps in ``GameState``, which
owns the ``World`` and shows the title card until the first key press.
"""

from __future__ import annotations

from typing import List, Sequence

import pygame

from lumberjack.constants import LOADING_MS
from lumberjack.input_router import InputState
from lumberjack.logger import get_logger
from lumberjack.renderer import Renderer
from lumberjack.timer import Clock

_state_log = get_logger("state")

COVER_ART = "data/cover_art.png"


class State:
    """One screen of the application. Subclasses override the hooks they need."""

    name = "State"
    manager: "StateManager | None" = None

    def on_enter(self, previous: "State | None") -> None:
        pass

    def on_exit(self, next_state: "State | None") -> None:
        pass

    def handle_actions(self, actions: Sequence[str]) -> None:
        pass

    def update(self, dt: float) -> None:
        pass

    def render(self, surface: pygame.Surface) -> None:
        pass


class StateManager:
    """State stack; loop callbacks go to the top entry only."""

    def __init__(self) -> None:
        self._states: List[State] = []

    @property
    def current(self) -> State | None:
        if not self._states:
            return None
        return self._states[-1]

    def stack_size(self) -> int:
        return len(self._states)

    def _names(self) -> List[str]:
        return [s.name for s in self._states]

    def push(self, state: State) -> None:
        below = self.current
        state.manager = self
        self._states.append(state)
        state.on_enter(below)
        _state_log.debug("Entered", state.name, self._names())

    def pop(self) -> State | None:
        if not self._states:
            return None
        leaving = self._states.pop()
        leaving.on_exit(self.current)
        _state_log.debug("Left", leaving.name, self._names())
        return leaving

    def set(self, state: State) -> None:
        """Replace the whole stack with ``state``."""
        for leaving in reversed(self._states):
            leaving.on_exit(state)
        self._states = [state]
        state.manager = self
        state.on_enter(None)
        _state_log.debug("Switched to", state.name)

    def handle_actions(self, actions: Sequence[str]) -> None:
        top = self.current
        if top is not None:
            top.handle_actions(actions)

    def update(self, dt: float) -> None:
        top = self.current
        if top is not None:
            top.update(dt)

    def render(self, surface: pygame.Surface) -> None:
        top = self.current
        if top is not None:
            top.render(surface)


class LoadingState(State):
    name = "LoadingState"

    def __init__(self, clock: Clock = pygame.time.get_ticks, duration_ms: int = LOADING_MS) -> None:
        self.clock = clock
        self.duration_ms = duration_ms
        self.started_at: int | None = None
        self.progress = 0.0
        self.done = False
        self.cover: pygame.Surface | None = None
        self._renderer = Renderer()

    def on_enter(self, previous: "State | None") -> None:
        try:
            self.cover = pygame.image.load(COVER_ART)
            _state_log.debug("Cover art loaded")
        except (pygame.error, FileNotFoundError):
            _state_log.info("Cover art missing; loading without it")
            self.cover = None
        self.started_at = self.clock()

    def update(self, dt: float) -> None:
        if self.started_at is None or self.done:
            return
        elapsed = self.clock() - self.started_at
        self.progress = min(elapsed / self.duration_ms, 1.0)
        if self.progress >= 1:
            self.done = True

    def render(self, surface: pygame.Surface) -> None:
        self._renderer.draw_loading(surface, self.progress, self.cover)


class GameState(State):
    name = "GameState"

    def __init__(self, world=None, inputs: InputState | None = None, audio=None) -> None:
        from lumberjack.settings import settings
        from lumberjack.world import World

        if world is None:
            world = World(
                settings.screen_w,
                settings.screen_h,
                clouds_enabled=settings.clouds_enabled,
                checkpoint_policy=settings.checkpoint_policy,
            )
        self._world = world
        self.inputs = inputs if inputs is not None else InputState()
        self._audio = audio
        self.quit_requested = False
        self._renderer = Renderer()

    @property
    def world(self):
        return self._world

    @property
    def audio(self):
        if self._audio is None:
            from lumberjack.audio_service import AudioService

            self._audio = AudioService.get()
        return self._audio

    def handle_actions(self, actions: Sequence[str]) -> None:
        world = self._world
        for act in actions:
            if act == "quit":
                self.quit_requested = True
            elif act == "toggle_music":
                self.audio.toggle_music()
            elif act == "any_key" and not world.session.game_started:
                world.start()
                self.audio.start_music()
            elif act == "debug_level_3":
                world.debug_jump_to_level_3()
            elif act == "restart" and world.session.show_restart:
                world.restart()
            elif act == "full_reset" and world.session.show_restart:
                world.full_reset()

    def update(self, dt: float) -> None:
        self._world.step(self.inputs)

    def render(self, surface: pygame.Surface) -> None:
        self._renderer.render(self._world.snapshot(), surface)


__all__ = ["State", "StateManager", "LoadingState", "GameState"]
