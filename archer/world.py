from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .arrow import Arrow
from .config import (
    ARCHER_FLOOR_OFFSET,
    ARCHER_MIN_Y,
    ARCHER_BOTTOM_MARGIN,
    MESSAGE_TIME_UP,
    MESSAGE_CAUGHT,
    Settings,
)
from .player import Archer
from .zombie import Zombie, ZombieKind

logger = logging.getLogger(__name__)


class Status(Enum):
    """Session lifecycle: idle -> running -> ended, ended -> running on reset."""

    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class EndReason(Enum):
    TIME_UP = "time_up"
    CAUGHT = "caught"


END_MESSAGES = {
    EndReason.TIME_UP: MESSAGE_TIME_UP,
    EndReason.CAUGHT: MESSAGE_CAUGHT,
}


class SessionState:
    """Score, clock and lifecycle flags of the current run."""

    def __init__(self, time_left: float = 0.0) -> None:
        self.score = 0
        self.kills_since_bonus = 0
        self.time_left = time_left
        self.status = Status.IDLE
        self.end_reason: Optional[EndReason] = None

    @property
    def running(self) -> bool:
        return self.status is Status.RUNNING

    @property
    def ended(self) -> bool:
        return self.status is Status.ENDED

    def start(self, time_limit: float) -> None:
        self.score = 0
        self.kills_since_bonus = 0
        self.time_left = time_limit
        self.status = Status.RUNNING
        self.end_reason = None

    def end(self, reason: EndReason) -> None:
        self.status = Status.ENDED
        self.end_reason = reason


# Read-only snapshot handed to the renderer each frame


@dataclass(frozen=True)
class ArrowView:
    x: float
    y: float
    angle: float
    length: float


@dataclass(frozen=True)
class ZombieView:
    x: float
    y: float
    w: float
    h: float
    hp_ratio: float
    kind: ZombieKind


@dataclass(frozen=True)
class ArcherView:
    x: float
    y: float
    aim_angle: float
    body_color: Tuple[int, int, int]
    bow_color: Tuple[int, int, int]


@dataclass(frozen=True)
class Frame:
    width: float
    height: float
    arrows: Tuple[ArrowView, ...]
    zombies: Tuple[ZombieView, ...]
    archer: ArcherView
    score: int
    time_left: float
    status: Status
    message: Optional[str] = None


class World:
    """
    Entity store and session state for one game.
    Holds the ordered arrow and zombie collections, the archer, the
    score/clock state and the playfield size. Mutated only by the
    simulation step and the session controller.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings()
        self.width = self.settings.width
        self.height = self.settings.height
        self.archer = Archer(y=self.height - ARCHER_FLOOR_OFFSET)
        self.arrows: List[Arrow] = []
        self.zombies: List[Zombie] = []
        self.state = SessionState(time_left=self.settings.time_limit)

    # Entity store operations

    def add_arrow(self, arrow: Arrow) -> None:
        self.arrows.append(arrow)

    def add_zombie(self, zombie: Zombie) -> None:
        self.zombies.append(zombie)

    def live_arrows(self) -> Iterator[Arrow]:
        return (a for a in self.arrows if a.alive)

    def live_zombies(self) -> Iterator[Zombie]:
        return (z for z in self.zombies if z.alive)

    def remove_arrow(self, index: int) -> Arrow:
        """Remove and return the arrow at index."""
        arrow = self.arrows.pop(index)
        arrow.alive = False
        return arrow

    def remove_zombie(self, index: int) -> Zombie:
        """Remove and return the zombie at index."""
        return self.zombies.pop(index)

    def zombie_count(self) -> int:
        return sum(1 for _ in self.live_zombies())

    def clear(self) -> None:
        self.arrows.clear()
        self.zombies.clear()

    # Playfield

    def resize(self, width: float, height: float) -> None:
        """Adopt a new playfield size and keep the archer on screen."""
        if width <= 0 or height <= 0:
            logger.debug("Ignoring invalid playfield size %sx%s", width, height)
            return
        self.width = width
        self.height = height
        self.archer.y = min(
            max(self.archer.y, ARCHER_MIN_Y), height - ARCHER_BOTTOM_MARGIN
        )

    def reset(self) -> None:
        """Clear entities and restart the clock; spawning is left to the caller."""
        self.clear()
        self.archer.y = self.height - ARCHER_FLOOR_OFFSET
        self.state.start(self.settings.time_limit)

    def fire(self) -> Arrow:
        """Loose an arrow from the bow along the current aim."""
        x, y = self.archer.arrow_origin()
        arrow = Arrow(
            x,
            y,
            self.archer.aim_angle,
            speed=self.settings.arrow_speed,
            length=self.settings.arrow_length,
        )
        self.add_arrow(arrow)
        return arrow

    def snapshot(self) -> Frame:
        """Return an immutable view of everything the renderer draws."""
        state = self.state
        message = END_MESSAGES.get(state.end_reason) if state.ended else None
        archer = self.archer
        return Frame(
            width=self.width,
            height=self.height,
            arrows=tuple(
                ArrowView(a.x, a.y, a.angle, a.length) for a in self.live_arrows()
            ),
            zombies=tuple(
                ZombieView(z.x, z.y, z.w, z.h, z.hp_ratio(), z.kind)
                for z in self.live_zombies()
            ),
            archer=ArcherView(
                archer.x,
                archer.y,
                archer.aim_angle,
                archer.body_color,
                archer.bow_color,
            ),
            score=state.score,
            time_left=state.time_left,
            status=state.status,
            message=message,
        )
