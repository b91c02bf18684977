"""Keyboard capture for the game loop.

Raw pygame events are turned into two things:

* an ``InputState`` holding the logical keys currently held down
  (left / right / jump / debug jump). The simulation reads it once at
  the start of each tick; only the latest up/down state matters.
* a list of one-shot *actions* (``restart``, ``full_reset``,
  ``toggle_music``, ``quit``, ``any_key``) handled by the active
  application state.

Bindings come from ``settings.key_bindings`` so they can be remapped in
the settings file.
"""

from __future__ import annotations

import enum
from typing import Callable, Dict, Iterable, List, Set

import pygame

Action = str
Rule = Callable[[pygame.event.Event], Action | None]


class InputCode(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    JUMP = "jump"
    DEBUG_LEVEL_3 = "debug_level_3"


HELD_ACTIONS = {code.value: code for code in InputCode}
ONE_SHOT_ACTIONS = ("restart", "full_reset", "toggle_music", "quit")


class InputState:
    """Set of logical keys currently held."""

    def __init__(self, pressed: Iterable[InputCode] = ()) -> None:
        self._pressed: Set[InputCode] = set(pressed)

    def press(self, code: InputCode) -> None:
        self._pressed.add(code)

    def release(self, code: InputCode) -> None:
        self._pressed.discard(code)

    def is_pressed(self, code: InputCode) -> bool:
        return code in self._pressed

    def clear(self) -> None:
        self._pressed.clear()

    def __contains__(self, code: InputCode) -> bool:
        return code in self._pressed

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"InputState({sorted(c.value for c in self._pressed)})"


def _key_rule(key: int, action: Action, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return action
        return None

    return _r


class InputRouter:
    """Maps pygame events to held keys and one-shot actions."""

    def __init__(self, bindings: Dict[str, List[int]] | None = None) -> None:
        if bindings is None:
            from lumberjack.settings import settings

            bindings = settings.key_bindings.get("GameState", {})
        self._key_to_code: Dict[int, InputCode] = {}
        self._rules: List[Rule] = []
        for act, keys in bindings.items():
            if act in HELD_ACTIONS:
                for k in keys:
                    self._key_to_code[k] = HELD_ACTIONS[act]
            elif act in ONE_SHOT_ACTIONS:
                self._rules.extend(_key_rule(k, act) for k in keys)

    def capture(self, events: Iterable[pygame.event.Event], state: InputState) -> List[Action]:
        """Update ``state`` from key events and return the one-shot actions seen.

        Every key-down also yields ``any_key`` (used to leave the title
        screen). Duplicate actions within one batch are collapsed.
        """
        actions: List[Action] = []

        def add(a: Action) -> None:
            if a not in actions:
                actions.append(a)

        for e in events:
            if e.type == pygame.QUIT:
                add("quit")
                continue
            if e.type not in (pygame.KEYDOWN, pygame.KEYUP):
                continue
            code = self._key_to_code.get(getattr(e, "key", None))
            if code is not None:
                if e.type == pygame.KEYDOWN:
                    state.press(code)
                else:
                    state.release(code)
            if e.type == pygame.KEYDOWN:
                add("any_key")
                if code is InputCode.DEBUG_LEVEL_3:
                    add("debug_level_3")
            for rule in self._rules:
                a = rule(e)
                if a:
                    add(a)
                    break
        return actions


__all__ = ["InputRouter", "InputState", "InputCode", "Action"]
