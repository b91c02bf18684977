"""Score, level, checkpoint and run status.

``Session`` owns the progression numbers and the status line shown to
the player. It knows nothing about entities: the world resets the
player and hazards around the transitions defined here.

Checkpoint policies:

``exact``
    every level reached (below the final level) becomes the checkpoint.
``pin_level_3``
    levels 1-2 checkpoint exactly; once level 3 is reached the
    checkpoint stays at level 3 with the score it had on arrival.

Both only ever move the checkpoint forward. The exceptions are
``debug_jump``, which pins it to level 3 even from a later level, and
``full_reset``, which returns it to level 1.
"""

from __future__ import annotations

from dataclasses import dataclass

from lumberjack.constants import (
    CHECKPOINT_POLICIES,
    DEBUG_JUMP_LEVEL,
    DEBUG_JUMP_SCORE,
    FINAL_LEVEL,
    LEVEL_SCORE_STEP,
    PINNED_CHECKPOINT_LEVEL,
    STATUS_CLEAR_MS,
)
from lumberjack.logger import get_logger
from lumberjack.timer import RunTimer

log = get_logger("session")


@dataclass
class Status:
    text: str = ""
    style: str = ""  # "win", "lose" or ""


class Session:
    def __init__(self, timer: RunTimer, checkpoint_policy: str = "exact"):
        if checkpoint_policy not in CHECKPOINT_POLICIES:
            raise ValueError(f"unknown checkpoint policy {checkpoint_policy!r}")
        self.timer = timer
        self.clock = timer.clock
        self.checkpoint_policy = checkpoint_policy
        self.score = 0
        self.level = 1
        self.checkpoint_level = 1
        self.checkpoint_score = 0
        self.game_running = False
        self.game_started = False
        self.won = False
        self.show_restart = False
        self.status = Status()
        self._clear_at: int | None = None

    # --- Status line -----------------------------------------------------
    def set_status(self, text: str, style: str = "", clear_after_ms: int | None = None) -> None:
        """Replace the status line; any pending clear of an older message is cancelled."""
        self.status = Status(text, style)
        self._clear_at = None if clear_after_ms is None else self.clock() + clear_after_ms

    def clear_status(self) -> None:
        self.set_status("")

    @property
    def status_clear_pending(self) -> bool:
        return self._clear_at is not None

    def tick(self) -> None:
        """Run deferred work; called once per frame."""
        if self._clear_at is not None and self.clock() >= self._clear_at:
            self._clear_at = None
            if self.game_running:
                self.status = Status()

    # --- Transitions -----------------------------------------------------
    def begin(self) -> bool:
        """First key press after loading: start play and the run timer."""
        if self.game_started:
            return False
        self.game_started = True
        self.game_running = True
        self.timer.start()
        log.info("Run started")
        return True

    def advance_level(self) -> bool:
        """Move to the next level and award its score.

        Returns True when the final level was reached (the run is over
        and won), False for an ordinary level-up.
        """
        self.level += 1
        self.score += LEVEL_SCORE_STEP * self.level

        if self.level >= FINAL_LEVEL:
            self.timer.stop()
            self.game_running = False
            self.won = True
            self.show_restart = True
            self.set_status(f"LEVEL {FINAL_LEVEL} REACHED! Final Time: {self.timer.text}", "win")
            log.info("Final level reached", self.timer.text, "score", self.score)
            return True

        self._save_checkpoint()
        self.set_status(f"Level {self.level}! Progress Saved!", "win", clear_after_ms=STATUS_CLEAR_MS)
        log.info("Level up", self.level, "score", self.score, "checkpoint", self.checkpoint_level)
        return False

    def _save_checkpoint(self) -> None:
        if self.checkpoint_policy == "pin_level_3" and self.level >= PINNED_CHECKPOINT_LEVEL:
            if self.checkpoint_level < PINNED_CHECKPOINT_LEVEL:
                self.checkpoint_level = PINNED_CHECKPOINT_LEVEL
                self.checkpoint_score = self.score
            return
        if self.level >= self.checkpoint_level:
            self.checkpoint_level = self.level
            self.checkpoint_score = max(self.checkpoint_score, self.score)

    def game_over(self, cause: str = "") -> None:
        self.game_running = False
        self.show_restart = True
        if self.checkpoint_level > 1:
            self.set_status(f"You died! Restarting from Level {self.checkpoint_level}", "lose")
        else:
            self.set_status("You fell in the water! Game Over!", "lose")
        log.info("Game over", cause or "-", "level", self.level, "score", self.score)

    def restart(self) -> None:
        """Resume from the saved checkpoint."""
        self.level = self.checkpoint_level
        self.score = self.checkpoint_score
        self._resume()
        log.info("Restart from checkpoint", self.level, "score", self.score)

    def full_reset(self) -> None:
        self.level = 1
        self.score = 0
        self.checkpoint_level = 1
        self.checkpoint_score = 0
        self.timer.reset()
        self.timer.start()
        self._resume()
        log.info("Full reset")

    def debug_jump(self) -> bool:
        """Skip straight to level 3 with a checkpoint there; ignored unless running."""
        if not self.game_running:
            return False
        self.level = DEBUG_JUMP_LEVEL
        self.score = DEBUG_JUMP_SCORE
        self.checkpoint_level = DEBUG_JUMP_LEVEL
        self.checkpoint_score = DEBUG_JUMP_SCORE
        self.set_status(f"Jumped to Level {DEBUG_JUMP_LEVEL}!", "win", clear_after_ms=STATUS_CLEAR_MS)
        log.debug("Debug jump to level", DEBUG_JUMP_LEVEL)
        return True

    def _resume(self) -> None:
        self.game_running = True
        self.game_started = True
        self.won = False
        self.show_restart = False
        self.clear_status()


__all__ = ["Session", "Status"]
