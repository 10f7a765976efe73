"""
Zombie module: defines the Zombie enemy walking toward the archer.
"""

from __future__ import annotations
from enum import Enum

from .config import ZOMBIE_WIDTH, ZOMBIE_HEIGHT, ZOMBIE_HEALTH


class ZombieKind(Enum):
    """Zombie variants; reinforced zombies take several hits."""

    STANDARD = "standard"
    REINFORCED = "reinforced"


class Zombie:
    """Represents a zombie on the playfield."""

    def __init__(
        self,
        x,
        y,
        speed,
        health=ZOMBIE_HEALTH,
        kind=ZombieKind.STANDARD,
        w=ZOMBIE_WIDTH,
        h=ZOMBIE_HEIGHT,
    ):
        # Center position in playfield pixels
        self.x = float(x)
        self.y = float(y)
        # Bounding box used for both collision and drawing
        self.w = float(w)
        self.h = float(h)
        # Signed horizontal speed; negative walks left
        self.speed = float(speed)
        self.kind = kind
        # Health: number of arrow hits to eliminate
        self.max_hp = int(health)
        self.hp = int(health)
        self.alive = True

    def update(self, dt):
        """Walk horizontally for dt seconds."""
        self.x += self.speed * dt

    def leading_edge(self):
        """Left edge of the bounding box, the side facing the archer."""
        return self.x - self.w / 2

    def contains(self, px, py):
        """Return True if the point lies inside the box (edges inclusive)."""
        left = self.x - self.w / 2
        top = self.y - self.h / 2
        return left <= px <= left + self.w and top <= py <= top + self.h

    def take_hit(self):
        """
        Remove one hit point. Marks the zombie dead and returns True when
        this hit was the killing blow.
        """
        self.hp -= 1
        if self.hp <= 0:
            self.hp = 0
            self.alive = False
            return True
        return False

    def hp_ratio(self):
        return max(0.0, self.hp / self.max_hp)

    def __repr__(self):
        return (
            f"<Zombie x={self.x:.2f} y={self.y:.2f} "
            f"hp={self.hp}/{self.max_hp} kind={self.kind.value}>"
        )
