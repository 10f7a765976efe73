import math

import pygame
import pytest

from archer.config import (
    GROUND_COLOR,
    ZOMBIE_COLOR,
    BRUTE_COLOR,
    HP_FILL_COLOR,
    POPUP_DURATION,
    Settings,
)
from archer.renderer import Renderer, rotated_rect
from archer.simulation import Feedback, FeedbackKind
from archer.world import EndReason, World
from archer.zombie import Zombie, ZombieKind


@pytest.fixture
def renderer():
    return Renderer()


def rgb(surface, x, y):
    return tuple(surface.get_at((int(x), int(y))))[:3]


def test_rotated_rect_quarter_turn():
    corners = rotated_rect((10, 10), math.pi / 2, 0, 0, 4, 2)
    expected = [(10, 10), (10, 14), (8, 14), (8, 10)]
    for (x, y), (ex, ey) in zip(corners, expected):
        assert x == pytest.approx(ex) and y == pytest.approx(ey)


def test_render_draws_ground_and_zombies(renderer):
    world = World(Settings())
    world.reset()
    world.add_zombie(Zombie(500, 250, -50))
    world.add_zombie(Zombie(700, 250, -50, health=3, kind=ZombieKind.REINFORCED))
    screen = pygame.Surface((int(world.width), int(world.height)))
    renderer.render(screen, world.snapshot())
    assert rgb(screen, world.width - 5, world.height - 5) == GROUND_COLOR
    assert rgb(screen, 500 + 15, 250 + 20) == ZOMBIE_COLOR
    assert rgb(screen, 700 + 15, 250 + 20) == BRUTE_COLOR
    # Full health bar above the reinforced zombie
    assert rgb(screen, 700, 250 - 35 - 10) == HP_FILL_COLOR


def test_render_end_overlay(renderer):
    world = World()
    world.reset()
    world.state.end(EndReason.CAUGHT)
    screen = pygame.Surface((int(world.width), int(world.height)))
    renderer.render(screen, world.snapshot())
    # The overlay band darkens the sky at the center left edge
    plain = pygame.Surface((int(world.width), int(world.height)))
    renderer.draw_background(plain, world.width, world.height)
    y = world.height / 2 - 50
    assert sum(rgb(screen, 2, y)) <= sum(rgb(plain, 2, y))


def test_popups_expire(renderer):
    renderer.add_feedback(
        [
            Feedback(FeedbackKind.KILL, 100, 100, "+1"),
            Feedback(FeedbackKind.BONUS, 100, 120, "+10s"),
        ]
    )
    assert len(renderer.popups) == 2
    renderer.update(POPUP_DURATION / 2)
    assert len(renderer.popups) == 2
    assert renderer.popups[0].y < 100
    renderer.update(POPUP_DURATION)
    assert renderer.popups == []


def test_clear_feedback(renderer):
    renderer.add_feedback([Feedback(FeedbackKind.KILL, 1, 1, "+1")])
    renderer.clear_feedback()
    assert renderer.popups == []
