"""
Pygame 2D renderer: background, archer, arrows, zombies, HUD, popups and
the end-of-run overlay. Draws only from a Frame snapshot.
"""

from __future__ import annotations
import math
import logging
import pygame
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Tuple

from .config import (
    ARROW_HEAD,
    ARROW_SHAFT_COLOR,
    ARROW_HEAD_COLOR,
    SKY_TOP_COLOR,
    SKY_MID_COLOR,
    SKY_BOTTOM_COLOR,
    GROUND_COLOR,
    GROUND_HEIGHT,
    MUZZLE_COLOR,
    ZOMBIE_COLOR,
    BRUTE_COLOR,
    HP_BACK_COLOR,
    HP_FILL_COLOR,
    HUD_BOX,
    HUD_FONT_SIZE,
    HUD_TEXT_COLOR,
    OVERLAY_FONT_SIZE,
    OVERLAY_TEXT_COLOR,
    KILL_POPUP_COLOR,
    BONUS_POPUP_COLOR,
    POPUP_DURATION,
    POPUP_RISE_SPEED,
)
from .simulation import FeedbackKind
from .zombie import ZombieKind

if TYPE_CHECKING:
    from .simulation import Feedback
    from .world import ArcherView, ArrowView, Frame, ZombieView

logger = logging.getLogger(__name__)

_POPUP_COLORS = {
    FeedbackKind.KILL: KILL_POPUP_COLOR,
    FeedbackKind.BONUS: BONUS_POPUP_COLOR,
}


def _lerp_color(a, b, t):
    return tuple(int(a[i] + (b[i] - a[i]) * t) for i in range(3))


def rotated_rect(
    origin: Tuple[float, float],
    angle: float,
    x0: float,
    y0: float,
    w: float,
    h: float,
) -> List[Tuple[float, float]]:
    """
    Return the corners of the rectangle (x0, y0, w, h), given in a local
    frame rotated by angle around origin, in screen coordinates.
    """
    c, s = math.cos(angle), math.sin(angle)
    ox, oy = origin
    corners = [(x0, y0), (x0 + w, y0), (x0 + w, y0 + h), (x0, y0 + h)]
    return [(ox + px * c - py * s, oy + px * s + py * c) for px, py in corners]


class Popup:
    """Short-lived floating label acknowledging a kill or a bonus."""

    def __init__(self, x: float, y: float, label: str, color) -> None:
        self.x = x
        self.y = y
        self.label = label
        self.color = color
        self.age = 0.0

    def update(self, dt: float) -> None:
        self.age += dt
        self.y -= POPUP_RISE_SPEED * dt

    @property
    def expired(self) -> bool:
        return self.age >= POPUP_DURATION


class Renderer:
    """Draws frames onto a pygame surface. Never mutates game state."""

    def __init__(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.hud_font = pygame.font.Font(None, HUD_FONT_SIZE)
        self.overlay_font = pygame.font.Font(None, OVERLAY_FONT_SIZE)
        self.popups: List[Popup] = []
        # Background is rebuilt only when the playfield size changes
        self._background: Optional[pygame.Surface] = None
        self._background_size: Optional[Tuple[int, int]] = None
        self._text_cache: Dict[Tuple[str, int, Tuple[int, ...]], pygame.Surface] = {}

    def add_feedback(self, feedback: Iterable[Feedback]) -> None:
        for fb in feedback:
            self.popups.append(Popup(fb.x, fb.y, fb.label, _POPUP_COLORS[fb.kind]))

    def update(self, dt: float) -> None:
        """Age popups by dt seconds and drop expired ones."""
        for popup in self.popups:
            popup.update(dt)
        self.popups = [p for p in self.popups if not p.expired]

    def clear_feedback(self) -> None:
        self.popups.clear()

    def render(self, screen: pygame.Surface, frame: Frame) -> None:
        """Render the entire scene for one frame."""
        self.draw_background(screen, frame.width, frame.height)
        for arrow in frame.arrows:
            self.draw_arrow(screen, arrow)
        for zombie in frame.zombies:
            self.draw_zombie(screen, zombie)
        self.draw_archer(screen, frame.archer)
        self.draw_popups(screen)
        self.draw_hud(screen, frame.score, frame.time_left)
        if frame.message:
            self.draw_overlay(screen, frame.width, frame.height, frame.message)

    def draw_background(self, screen: pygame.Surface, width, height) -> None:
        size = (int(width), int(height))
        if self._background is None or self._background_size != size:
            self._background = self._build_background(*size)
            self._background_size = size
        screen.blit(self._background, (0, 0))

    @staticmethod
    def _build_background(width: int, height: int) -> pygame.Surface:
        surface = pygame.Surface((max(1, width), max(1, height)))
        # Sky gradient: top -> mid over 70% of the height, then mid -> bottom
        for row in range(height):
            t = row / max(1, height - 1)
            if t < 0.7:
                color = _lerp_color(SKY_TOP_COLOR, SKY_MID_COLOR, t / 0.7)
            else:
                color = _lerp_color(SKY_MID_COLOR, SKY_BOTTOM_COLOR, (t - 0.7) / 0.3)
            pygame.draw.line(surface, color, (0, row), (width, row))
        surface.fill(GROUND_COLOR, (0, height - GROUND_HEIGHT, width, GROUND_HEIGHT))
        return surface

    def draw_archer(self, screen: pygame.Surface, archer: ArcherView) -> None:
        x, y = archer.x, archer.y
        color = archer.body_color
        # Head, body, arms, legs
        pygame.draw.circle(screen, color, (int(x), int(y - 90)), 12, 3)
        pygame.draw.line(screen, color, (x, y - 78), (x, y - 40), 3)
        pygame.draw.line(screen, color, (x - 18, y - 66), (x + 18, y - 66), 3)
        pygame.draw.line(screen, color, (x, y - 40), (x - 14, y - 8), 3)
        pygame.draw.line(screen, color, (x, y - 40), (x + 14, y - 8), 3)
        # Bow rotated toward the aim
        grip = (x + 8, y - 64)
        pygame.draw.polygon(
            screen, archer.bow_color, rotated_rect(grip, archer.aim_angle, 0, -6, 44, 12)
        )
        pygame.draw.polygon(
            screen, MUZZLE_COLOR, rotated_rect(grip, archer.aim_angle, 34, -3, 10, 6)
        )

    def draw_arrow(self, screen: pygame.Surface, arrow: ArrowView) -> None:
        a = arrow.angle
        length = arrow.length
        tip = (arrow.x + math.cos(a) * length, arrow.y + math.sin(a) * length)
        pygame.draw.line(screen, ARROW_SHAFT_COLOR, (arrow.x, arrow.y), tip, 3)
        back = length - ARROW_HEAD
        head = [
            tip,
            (arrow.x + math.cos(a + 0.28) * back, arrow.y + math.sin(a + 0.28) * back),
            (arrow.x + math.cos(a - 0.28) * back, arrow.y + math.sin(a - 0.28) * back),
        ]
        pygame.draw.polygon(screen, ARROW_HEAD_COLOR, head)

    def draw_zombie(self, screen: pygame.Surface, zombie: ZombieView) -> None:
        left = zombie.x - zombie.w / 2
        top = zombie.y - zombie.h / 2
        body = BRUTE_COLOR if zombie.kind is ZombieKind.REINFORCED else ZOMBIE_COLOR
        screen.fill(body, (left, top, zombie.w, zombie.h))
        # Eye
        screen.fill((255, 255, 255), (zombie.x - 10, zombie.y - 30, 6, 6))
        screen.fill((0, 0, 0), (zombie.x - 8, zombie.y - 28, 2, 2))
        if zombie.kind is ZombieKind.REINFORCED:
            bar_w = 36
            bar_x = zombie.x - bar_w / 2
            screen.fill(HP_BACK_COLOR, (bar_x, top - 12, bar_w, 6))
            screen.fill(HP_FILL_COLOR, (bar_x, top - 12, bar_w * zombie.hp_ratio, 6))

    def draw_popups(self, screen: pygame.Surface) -> None:
        for popup in self.popups:
            text = self._text(self.hud_font, popup.label, popup.color)
            screen.blit(text, text.get_rect(center=(int(popup.x), int(popup.y))))

    def draw_hud(self, screen: pygame.Surface, score: int, time_left: float) -> None:
        box = pygame.Surface(HUD_BOX[2:], pygame.SRCALPHA)
        box.fill((0, 0, 0, 140))
        screen.blit(box, HUD_BOX[:2])
        seconds = max(0, math.ceil(time_left))
        x = HUD_BOX[0] + 16
        screen.blit(self._text(self.hud_font, f"Score: {score}", HUD_TEXT_COLOR), (x, 30))
        screen.blit(self._text(self.hud_font, f"Time: {seconds}s", HUD_TEXT_COLOR), (x, 54))

    def draw_overlay(self, screen: pygame.Surface, width, height, message: str) -> None:
        band = pygame.Surface((int(width), 120), pygame.SRCALPHA)
        band.fill((0, 0, 0, 153))
        screen.blit(band, (0, int(height / 2 - 60)))
        text = self._text(self.overlay_font, message, OVERLAY_TEXT_COLOR)
        screen.blit(text, text.get_rect(center=(int(width / 2), int(height / 2))))

    def _text(self, font: pygame.font.Font, label: str, color) -> pygame.Surface:
        key = (label, id(font), tuple(color))
        surface = self._text_cache.get(key)
        if surface is None:
            surface = font.render(label, True, color)
            # Score and clock labels churn; keep the cache bounded
            if len(self._text_cache) > 256:
                self._text_cache.clear()
            self._text_cache[key] = surface
        return surface

    def shutdown(self) -> None:
        """Release cached surfaces."""
        self._text_cache.clear()
        self._background = None
        logger.debug("Renderer shut down")
