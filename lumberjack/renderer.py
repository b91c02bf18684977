"""Frame composition for the pygame front end.

Draws a ``WorldSnapshot``; never reads or mutates live simulation
objects. Layer order (bottom -> top):

1. sky, clouds
2. river, ground, banks, island, flag
3. logs, alligators, particles
4. player
5. HUD (score, level, timer, status line, restart hints)
6. overlays (title card, level announcement)

``capture_sequence`` records the executed layers so tests can assert
order without sampling pixels.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pygame

from lumberjack.logger import get_logger
from lumberjack.snapshot import WorldSnapshot

_log = get_logger("renderer")

SKY = (135, 206, 235)
CLOUD = (255, 255, 255)
RIVER = (70, 130, 180)
GROUND = (143, 188, 143)
BANK = (101, 67, 33)
ISLAND_ROCK = (112, 139, 117)
TRUNK = (139, 69, 19)
LEAVES = (34, 139, 34)
FLAG_RED = (255, 0, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GATOR_HEAD = (28, 61, 28)
RIPPLE = (200, 220, 255)
STATUS_COLORS = {"win": (60, 200, 90), "lose": (230, 60, 60), "": WHITE}


def hex_color(value: str) -> pygame.Color:
    return pygame.Color(value)


class Renderer:
    def __init__(self) -> None:
        self._fonts: Dict[int, pygame.font.Font] = {}

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.Font(None, size)
            _log.debug("font cached", size)
        return self._fonts[size]

    def render(
        self,
        snap: WorldSnapshot,
        surface: pygame.Surface,
        capture_sequence: Optional[List[str]] = None,
    ) -> None:
        seq = capture_sequence

        def mark(step: str) -> None:
            if seq is not None:
                seq.append(step)

        self._draw_sky(snap, surface)
        mark("sky")
        self._draw_terrain(snap, surface)
        mark("terrain")
        self._draw_drifters(snap, surface)
        self._draw_particles(snap, surface)
        mark("entities")
        self._draw_player(snap, surface)
        mark("player")
        self._draw_hud(snap, surface)
        mark("hud")
        if not snap.session.game_started:
            self.draw_title(surface)
            mark("title")
        if snap.announcement.active:
            self._draw_announcement(snap, surface)
            mark("announcement")

    # --- Layers ---------------------------------------------------------
    def _draw_sky(self, snap: WorldSnapshot, surface: pygame.Surface) -> None:
        surface.fill(BLACK)
        pygame.draw.rect(surface, SKY, (0, 0, snap.width, snap.river_top))
        for cloud in snap.clouds:
            for part in cloud.parts:
                pygame.draw.rect(
                    surface,
                    CLOUD,
                    (cloud.x + part.offset_x, cloud.y + part.offset_y, part.width, part.height),
                )

    def _draw_terrain(self, snap: WorldSnapshot, surface: pygame.Surface) -> None:
        river_h = snap.river_bottom - snap.river_top
        pygame.draw.rect(surface, RIVER, (0, snap.river_top, snap.width, river_h))
        pygame.draw.rect(surface, GROUND, (0, snap.ground_top, snap.width, snap.height - snap.ground_top))
        pygame.draw.rect(surface, BANK, (0, snap.river_top, snap.bank_width, river_h))
        pygame.draw.rect(surface, BANK, (snap.width - snap.bank_width, snap.river_top, snap.bank_width, river_h))

        isl = snap.island
        pygame.draw.rect(surface, GROUND, isl.rect())
        for dx, dy, size in ((5, 2, 8), (25, 3, 6), (45, 1, 10), (65, 4, 7)):
            pygame.draw.rect(surface, ISLAND_ROCK, (isl.x + dx, isl.y + dy, size, size))
        pygame.draw.rect(surface, TRUNK, (isl.x + 35, isl.y - 15, 4, 15))
        pygame.draw.rect(surface, LEAVES, (isl.x + 30, isl.y - 20, 14, 12))

        flag = snap.flag
        pygame.draw.rect(surface, TRUNK, (flag.x + 2, flag.y, 3, flag.height))
        pygame.draw.rect(surface, FLAG_RED, (flag.x + 5, flag.y, 15, 12))
        pygame.draw.rect(surface, WHITE, (flag.x + 5, flag.y + 3, 15, 2))
        pygame.draw.rect(surface, WHITE, (flag.x + 5, flag.y + 7, 15, 2))

    def _draw_drifters(self, snap: WorldSnapshot, surface: pygame.Surface) -> None:
        for lg in snap.logs:
            pygame.draw.rect(surface, hex_color(lg.color), lg.rect())
            for i in range(0, int(lg.width), 10):
                pygame.draw.rect(surface, BANK, (lg.x + i, lg.y + 2, 2, lg.height - 4))
        for gator in snap.alligators:
            pygame.draw.rect(surface, hex_color(gator.color), gator.rect())
            pygame.draw.rect(surface, GATOR_HEAD, (gator.x, gator.y + 2, 15, gator.height - 4))
            pygame.draw.rect(surface, WHITE, (gator.x + 3, gator.y + 2, 2, 2))
            pygame.draw.rect(surface, WHITE, (gator.x + 8, gator.y + 2, 2, 2))
            for i in range(15, int(gator.width), 8):
                pygame.draw.rect(surface, GATOR_HEAD, (gator.x + i, gator.y + 1, 2, gator.height - 2))

    def _draw_particles(self, snap: WorldSnapshot, surface: pygame.Surface) -> None:
        if not snap.particles:
            return
        layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        for p in snap.particles:
            if p.kind == "splash":
                r, g, b, a = p.color
                color = (r, g, b, int(a * p.opacity))
                pygame.draw.circle(layer, color, (int(p.x), int(p.y)), max(1, int(p.size)))
            elif p.kind == "ripple":
                color = (*RIPPLE, int(255 * max(0.0, p.alpha) * 0.7 * 0.4))
                pygame.draw.circle(layer, color, (int(p.x), int(p.y)), max(1, int(p.radius)), 1)
        surface.blit(layer, (0, 0))

    def _draw_player(self, snap: WorldSnapshot, surface: pygame.Surface) -> None:
        x, y = snap.player.x, snap.player.y
        pygame.draw.rect(surface, (139, 0, 0), (x + 6, y + 15, 8, 12))  # body
        pygame.draw.rect(surface, (253, 188, 180), (x + 7, y + 5, 6, 8))  # head
        pygame.draw.rect(surface, FLAG_RED, (x + 5, y, 10, 8))  # hat
        pygame.draw.rect(surface, (0, 0, 128), (x + 6, y + 25, 3, 5))
        pygame.draw.rect(surface, (0, 0, 128), (x + 11, y + 25, 3, 5))
        pygame.draw.rect(surface, (253, 188, 180), (x + 2, y + 16, 4, 6))
        pygame.draw.rect(surface, (253, 188, 180), (x + 14, y + 16, 4, 6))

    def _draw_hud(self, snap: WorldSnapshot, surface: pygame.Surface) -> None:
        s = snap.session
        small = self.font(24)
        surface.blit(small.render(f"Score: {s.score}", True, BLACK), (8, 8))
        surface.blit(small.render(f"Level: {s.level}", True, BLACK), (8, 28))
        timer = small.render(s.timer_text, True, BLACK)
        surface.blit(timer, (snap.width - timer.get_width() - 8, 8))
        if s.status_text:
            status = self.font(30).render(s.status_text, True, STATUS_COLORS.get(s.status_style, WHITE))
            surface.blit(status, ((snap.width - status.get_width()) // 2, 40))
        if s.show_restart:
            hint = small.render("R: restart from checkpoint   F: full reset", True, BLACK)
            surface.blit(hint, ((snap.width - hint.get_width()) // 2, 70))

    def draw_title(self, surface: pygame.Surface) -> None:
        w, h = surface.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 178))
        surface.blit(overlay, (0, 0))
        lines = [
            "Lumberjack Run",
            "Use Arrow Keys to Move",
            "Spacebar to Jump",
            "Cross the river and reach the flag!",
            "Press any key to start",
        ]
        f = self.font(28)
        for i, line in enumerate(lines):
            img = f.render(line, True, WHITE)
            surface.blit(img, ((w - img.get_width()) // 2, h // 2 - 60 + i * 30 - img.get_height() // 2))

    def _draw_announcement(self, snap: WorldSnapshot, surface: pygame.Surface) -> None:
        ann = snap.announcement
        w, h = surface.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, int(255 * ann.alpha * 0.7)))
        surface.blit(overlay, (0, 0))
        img = self.font(int(64 * ann.scale)).render(ann.text, True, WHITE)
        img.set_alpha(int(255 * ann.alpha))
        surface.blit(img, ((w - img.get_width()) // 2, (h - img.get_height()) // 2))

    def draw_loading(self, surface: pygame.Surface, progress: float, cover: pygame.Surface | None = None) -> None:
        """Black screen, optional cover art, segmented green progress bar and percentage."""
        w, h = surface.get_size()
        surface.fill(BLACK)
        if cover is not None:
            scale = min(400 / cover.get_width(), 200 / cover.get_height())
            art = pygame.transform.smoothscale(
                cover, (int(cover.get_width() * scale), int(cover.get_height() * scale))
            )
            surface.blit(art, ((w - art.get_width()) // 2, (h - art.get_height()) // 2 - 40))

        label = self.font(22).render("LOADING...", True, WHITE)
        surface.blit(label, ((w - label.get_width()) // 2, h - 88))

        bar_w, bar_h = 300, 20
        bx, by = (w - bar_w) // 2, h - 50
        pygame.draw.rect(surface, (51, 51, 51), (bx, by, bar_w, bar_h))
        fill = int(bar_w * progress)
        pygame.draw.rect(surface, (0, 255, 0), (bx, by, fill, bar_h))
        for i in range(0, fill, 10):
            pygame.draw.rect(surface, (0, 170, 0), (bx + i + 8, by + 2, 2, bar_h - 4))
        pygame.draw.rect(surface, WHITE, (bx, by, bar_w, bar_h), 2)

        pct = self.font(18).render(f"{int(progress * 100)}%", True, WHITE)
        surface.blit(pct, ((w - pct.get_width()) // 2, h - 22))


__all__ = ["Renderer"]
