"""
Zombie spawner: timed spawns plus a guaranteed floor population.
"""

from __future__ import annotations
import logging
import random
from typing import Optional, TYPE_CHECKING

from .config import SPAWN_X_OFFSET, Settings
from .zombie import Zombie, ZombieKind

if TYPE_CHECKING:
    from .world import World

logger = logging.getLogger(__name__)


class Spawner:
    """
    Injects zombies at the right edge of the playfield.
    A zombie is spawned every spawn_interval seconds of accumulated time,
    and one extra whenever the live population drops below the floor.
    The random source is injectable so spawn sequences are reproducible.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings or Settings()
        self.rng = rng or random.Random()
        self.timer = 0.0

    def reset(self) -> None:
        """Zero the spawn accumulator for a new run."""
        self.timer = 0.0

    def update(self, world: World, dt: float) -> Optional[Zombie]:
        """
        Advance the spawn timer by dt seconds.
        Returns the spawned zombie when the interval elapsed, else None.
        """
        self.timer += dt
        if self.timer >= self.settings.spawn_interval:
            self.timer = 0.0
            return self.spawn(world)
        return None

    def ensure_floor(self, world: World) -> Optional[Zombie]:
        """Spawn one zombie if the live count is below the floor."""
        if world.zombie_count() < self.settings.zombie_floor:
            return self.spawn(world)
        return None

    def seed(self, world: World) -> None:
        """Populate the field with the floor population."""
        for _ in range(self.settings.zombie_floor):
            self.spawn(world)

    def spawn(self, world: World) -> Zombie:
        """Create one zombie just beyond the right edge and add it to world."""
        s = self.settings
        band = world.height - 2 * s.spawn_margin
        if band > 0:
            y = self.rng.random() * band + s.spawn_margin
        else:
            # Playfield shorter than both margins: walk down the middle
            y = world.height / 2
        if self.rng.random() < s.brute_chance:
            kind = ZombieKind.REINFORCED
            health = s.brute_health
            low, high = s.brute_speed_min, s.brute_speed_max
        else:
            kind = ZombieKind.STANDARD
            health = s.zombie_health
            low, high = s.zombie_speed_min, s.zombie_speed_max
        # Always walks left
        speed = -(low + self.rng.random() * (high - low))
        zombie = Zombie(
            world.width + SPAWN_X_OFFSET,
            y,
            speed,
            health=health,
            kind=kind,
            w=s.zombie_width,
            h=s.zombie_height,
        )
        world.add_zombie(zombie)
        logger.debug("Spawned %r", zombie)
        return zombie
