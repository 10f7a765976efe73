from __future__ import annotations
import math
from typing import Tuple
from .config import (
    ARCHER_X,
    ARCHER_BODY_COLOR,
    ARCHER_BOW_COLOR,
    MUZZLE_OFFSET_X,
    MUZZLE_OFFSET_Y,
    MUZZLE_LEAD,
)


class Archer:
    """Archer state: position, aim and cosmetic colors."""

    def __init__(
        self,
        x: float = ARCHER_X,
        y: float = 0.0,
        aim_angle: float = 0.0,
        body_color: Tuple[int, int, int] = ARCHER_BODY_COLOR,
        bow_color: Tuple[int, int, int] = ARCHER_BOW_COLOR,
    ) -> None:
        """
        Initialize the archer.
        x, y: feet position in playfield pixels.
        aim_angle: aim direction in radians (0 = right, positive = down).
        """
        self.x = x
        self.y = y
        self.aim_angle = aim_angle
        self.body_color = body_color
        self.bow_color = bow_color

    def muzzle(self) -> Tuple[float, float]:
        """Return the point the bow is held at."""
        return (self.x + MUZZLE_OFFSET_X, self.y + MUZZLE_OFFSET_Y)

    def aim_origin(self) -> Tuple[float, float]:
        """Return the point pointer aim is measured from (bow height)."""
        return (self.x, self.y + MUZZLE_OFFSET_Y)

    def arrow_origin(self) -> Tuple[float, float]:
        """Return where a freshly loosed arrow's base starts."""
        mx, my = self.muzzle()
        return (
            mx + math.cos(self.aim_angle) * MUZZLE_LEAD,
            my + math.sin(self.aim_angle) * MUZZLE_LEAD,
        )

    def aim(self, angle: float) -> bool:
        """Set the aim angle. Non-finite values are ignored; returns success."""
        try:
            angle = float(angle)
        except (TypeError, ValueError):
            return False
        if not math.isfinite(angle):
            return False
        self.aim_angle = angle
        return True
