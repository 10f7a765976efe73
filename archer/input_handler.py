"""
Input handling abstraction to decouple Pygame input from game logic.
"""

from __future__ import annotations
import logging
import math
import pygame
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)


def aim_angle(origin: Tuple[float, float], target: Tuple[float, float]) -> float:
    """Return the angle in radians from origin toward target."""
    return math.atan2(target[1] - origin[1], target[0] - origin[0])


class InputHandler:
    """
    Gathers pointer, touch and keyboard events and reduces them to the
    signals the game consumes: an aim angle, an activate trigger, a quit
    request and a new playfield size.
    """

    def __init__(self, size: Tuple[float, float]) -> None:
        self._quit = False
        # One entry per click, tap or space press, holding the aim at that moment
        self._activations: List[Optional[float]] = []
        self._aim: Optional[float] = None
        self._resize: Optional[Tuple[int, int]] = None
        # Touch events arrive normalized to [0, 1]; scale by playfield size
        self.size = size

    def process_events(
        self, aim_origin: Tuple[float, float], events=None
    ) -> None:
        """
        Poll Pygame events (or consume the given ones) and update the
        per-frame signals. aim_origin is the point aim angles are measured
        from.
        """
        self._quit = False
        self._activations = []
        self._aim = None
        self._resize = None
        if events is None:
            events = pygame.event.get()
        for event in events:
            try:
                self._handle(event, aim_origin)
            except (AttributeError, TypeError, ValueError, IndexError):
                logger.debug("Ignoring malformed event %r", event)

    def _handle(self, event, aim_origin: Tuple[float, float]) -> None:
        if event.type == pygame.QUIT:
            self._quit = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self._quit = True
            elif event.key == pygame.K_SPACE:
                self._activations.append(self._aim)
        elif event.type == pygame.MOUSEMOTION:
            self._point(event.pos, aim_origin)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._point(event.pos, aim_origin)
            self._activations.append(self._aim)
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            pos = (float(event.x) * self.size[0], float(event.y) * self.size[1])
            self._point(pos, aim_origin)
            if event.type == pygame.FINGERDOWN:
                self._activations.append(self._aim)
        elif event.type == pygame.VIDEORESIZE:
            w, h = int(event.w), int(event.h)
            if w > 0 and h > 0:
                self._resize = (w, h)
                self.size = (w, h)

    def _point(self, pos, aim_origin: Tuple[float, float]) -> None:
        x, y = float(pos[0]), float(pos[1])
        if not (math.isfinite(x) and math.isfinite(y)):
            raise ValueError("non-finite pointer position")
        self._aim = aim_angle(aim_origin, (x, y))

    def should_quit(self) -> bool:
        """Return True if a quit command was issued this frame."""
        return self._quit

    def activate_pressed(self) -> bool:
        """Return True if click, tap or space occurred this frame."""
        return bool(self._activations)

    def activations(self) -> List[Optional[float]]:
        """
        Return one entry per activation this frame, in order. Each entry is
        the aim angle current when it happened, or None if no pointer
        position was seen yet this frame.
        """
        return list(self._activations)

    def aim(self) -> Optional[float]:
        """Return the latest aim angle this frame, or None if unchanged."""
        return self._aim

    def resized(self) -> Optional[Tuple[int, int]]:
        """Return the new window size if the window was resized this frame."""
        return self._resize
