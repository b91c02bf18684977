"""Application entry: window, event pump and the state loop.

Starts on the loading screen (unless disabled in settings), then hands
over to the game. One simulation tick runs per displayed frame.
"""

from __future__ import annotations

import pygame

from lumberjack.constants import TARGET_FPS
from lumberjack.input_router import InputRouter, InputState
from lumberjack.logger import get_logger
from lumberjack.settings import settings
from lumberjack.state_manager import GameState, LoadingState, StateManager

log = get_logger("app")


def main():
    pygame.init()
    screen = pygame.display.set_mode(settings.screen_size)
    pygame.display.set_caption("Lumberjack Run")
    clock = pygame.time.Clock()

    sm = StateManager()
    router = InputRouter()
    inputs = InputState()
    if settings.loading_enabled:
        sm.set(LoadingState())
    else:
        sm.set(GameState(inputs=inputs))

    running = True
    while running:
        # Key state is captured once per frame and read by the next tick.
        actions = router.capture(pygame.event.get(), inputs)
        if "quit" in actions:
            running = False
        cur = sm.current
        if isinstance(cur, LoadingState):
            # Keys pressed during loading are not held into the game.
            inputs.clear()
            if cur.done:
                sm.set(GameState(inputs=inputs))
        else:
            sm.handle_actions(actions)

        dt = clock.tick(TARGET_FPS) / 1000.0
        sm.update(dt)
        sm.render(screen)
        pygame.display.flip()

    settings.save_settings()
    log.info("Shutting down")
    pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    main()
