"""
Arrow/projectile representation for the game.
"""

from __future__ import annotations
import math
from typing import Tuple

from .config import ARROW_SPEED, ARROW_LENGTH


class Arrow:
    """
    Represents an arrow loosed by the archer.
    Attributes:
        x, y: Base (nock end) of the arrow in playfield pixels.
        angle: Heading in radians; fixed for the arrow's lifetime.
        speed: Movement speed in pixels per second.
        length: Distance from the base to the tip.
        alive: Whether the arrow is still in flight.
    """

    def __init__(
        self,
        x: float,
        y: float,
        angle: float,
        speed: float = ARROW_SPEED,
        length: float = ARROW_LENGTH,
    ) -> None:
        self.x = x
        self.y = y
        self.angle = angle
        self.speed = speed
        self.length = length
        # Heading never changes, so the velocity is computed once
        self.dx = math.cos(angle) * speed
        self.dy = math.sin(angle) * speed
        self.alive = True

    def update(self, dt: float) -> None:
        """Move the arrow along its heading."""
        self.x += self.dx * dt
        self.y += self.dy * dt

    def tip(self) -> Tuple[float, float]:
        """
        Return the leading point of the arrow.
        The tip is the arrow's only collision geometry; the shaft never hits.
        """
        return (
            self.x + math.cos(self.angle) * self.length,
            self.y + math.sin(self.angle) * self.length,
        )

    def out_of_bounds(self, width: float, height: float, margin: float) -> bool:
        """Return True once the base has left the playfield plus margin."""
        return (
            self.x < -margin
            or self.x > width + margin
            or self.y < -margin
            or self.y > height + margin
        )

    def position(self) -> Tuple[float, float]:
        """Return current (x, y) base position of the arrow."""
        return (self.x, self.y)

    def __repr__(self):
        return f"<Arrow x={self.x:.1f} y={self.y:.1f} angle={self.angle:.2f}>"
