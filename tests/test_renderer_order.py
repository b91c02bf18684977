import pygame
import pytest

from lumberjack.input_router import InputState
from lumberjack.renderer import Renderer
from lumberjack.world import World


@pytest.fixture(scope="module")
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


def test_renderer_layer_order_on_title(pygame_init, rng, clock):
    w = World(800, 400, rng=rng, clock=clock)
    surface = pygame.Surface((800, 400))
    seq = []
    Renderer().render(w.snapshot(), surface, capture_sequence=seq)
    assert seq == ["sky", "terrain", "entities", "player", "hud", "title"]


def test_renderer_layer_order_with_announcement(pygame_init, world):
    world.particles.spawn_splash(200, 300)
    world.next_level()
    surface = pygame.Surface((800, 400))
    seq = []
    Renderer().render(world.snapshot(), surface, capture_sequence=seq)
    assert seq == ["sky", "terrain", "entities", "player", "hud", "announcement"]


def test_renderer_draws_without_sequence(pygame_init, world):
    for _ in range(300):
        world.step(InputState())
    surface = pygame.Surface((800, 400))
    Renderer().render(world.snapshot(), surface)
    # top-left corner is sky
    assert surface.get_at((1, 1))[:3] == (135, 206, 235)


def test_loading_screen_draws(pygame_init):
    surface = pygame.Surface((800, 400))
    cover = pygame.Surface((800, 800))
    Renderer().draw_loading(surface, 0.5, cover)
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)
    # left end of the progress bar is filled green at 50%
    assert surface.get_at((260, 360))[:3] == (0, 255, 0)
