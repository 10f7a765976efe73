"""
Per-frame simulation step: spawning, movement, hits, scoring and the
win/lose transitions. Performs no drawing.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

from .config import CATCH_BUFFER, ZOMBIE_ESCAPE_X
from .world import EndReason

if TYPE_CHECKING:
    from .spawner import Spawner
    from .world import World

logger = logging.getLogger(__name__)


class FeedbackKind(Enum):
    KILL = "kill"
    BONUS = "bonus"


@dataclass(frozen=True)
class Feedback:
    """Transient acknowledgment for the renderer (e.g. a "+1" popup)."""

    kind: FeedbackKind
    x: float
    y: float
    label: str


@dataclass
class StepResult:
    feedback: List[Feedback] = field(default_factory=list)
    ended: Optional[EndReason] = None


def clamp_delta(dt: float, max_dt: float) -> float:
    """Bound a frame delta to [0, max_dt] seconds."""
    return max(0.0, min(dt, max_dt))


def step(world: World, spawner: Spawner, dt: float) -> StepResult:
    """
    Advance the world by dt seconds.
    Does nothing unless the session is running. Returns the feedback
    emitted during the step and the end reason if the session ended.
    """
    result = StepResult()
    state = world.state
    if not state.running:
        return result
    dt = max(0.0, dt)

    spawner.update(world, dt)

    state.time_left -= dt
    if state.time_left <= 0:
        state.time_left = 0.0
        _end(world, EndReason.TIME_UP, result)
        return result

    _move_arrows(world, dt)

    catch_x = world.archer.x + CATCH_BUFFER
    # Walk from the end so removals never shift unvisited zombies
    for zi in range(len(world.zombies) - 1, -1, -1):
        zombie = world.zombies[zi]
        if zombie.alive:
            zombie.update(dt)
            if zombie.leading_edge() <= catch_x:
                _end(world, EndReason.CAUGHT, result)
                return result
            _resolve_hit(world, zi, result)
        if not zombie.alive or zombie.x < ZOMBIE_ESCAPE_X:
            world.remove_zombie(zi)

    spawner.ensure_floor(world)
    return result


def _move_arrows(world: World, dt: float) -> None:
    margin = world.settings.arrow_bounds_margin
    for ai in range(len(world.arrows) - 1, -1, -1):
        arrow = world.arrows[ai]
        arrow.update(dt)
        if arrow.out_of_bounds(world.width, world.height, margin):
            world.remove_arrow(ai)


def _resolve_hit(world: World, zi: int, result: StepResult) -> None:
    """Apply at most one arrow hit to the zombie at index zi."""
    zombie = world.zombies[zi]
    for ai, arrow in enumerate(world.arrows):
        tx, ty = arrow.tip()
        if not zombie.contains(tx, ty):
            continue
        world.remove_arrow(ai)
        if zombie.take_hit():
            _score_kill(world, zombie, result)
        return


def _score_kill(world, zombie, result):
    state = world.state
    settings = world.settings
    state.score += 1
    state.kills_since_bonus += 1
    result.feedback.append(
        Feedback(FeedbackKind.KILL, zombie.x, zombie.y - zombie.h / 2, "+1")
    )
    logger.debug("Killed %r, score %d", zombie, state.score)
    if state.kills_since_bonus >= settings.kills_per_bonus:
        state.time_left += settings.bonus_time
        state.kills_since_bonus = 0
        result.feedback.append(
            Feedback(
                FeedbackKind.BONUS,
                zombie.x,
                zombie.y,
                f"+{settings.bonus_time:g}s",
            )
        )
        logger.debug("Time bonus, %.1fs left", state.time_left)


def _end(world: World, reason: EndReason, result: StepResult) -> None:
    world.state.end(reason)
    result.ended = reason
    logger.info(
        "Session ended (%s) with score %d", reason.value, world.state.score
    )
