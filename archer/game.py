from __future__ import annotations
import logging
import random
import pygame
from typing import Optional

from .config import FPS, Settings
from .input_handler import InputHandler
from .renderer import Renderer
from .simulation import StepResult, clamp_delta, step
from .spawner import Spawner
from .world import World

logger = logging.getLogger(__name__)


class Game:
    """Main Game class: owns the session lifecycle and drives the frame loop."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[pygame.time.Clock] = None,
        renderer: Optional[Renderer] = None,
    ) -> None:
        pygame.init()
        self.settings = settings or Settings()
        size = (int(self.settings.width), int(self.settings.height))
        self.screen = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption("Stickman Archer")
        # Clock for frame rate (injectable for testing)
        self.clock = clock or pygame.time.Clock()
        self.fps = FPS
        self.world = World(self.settings)
        self.spawner = Spawner(self.settings, rng)
        self.renderer = renderer or Renderer()
        self.input = InputHandler(size)
        # Timestamp (ms) of the previous tick
        self.last_time = 0
        # Control flag for the main loop
        self.running = True

    @property
    def state(self):
        return self.world.state

    def reset(self, now: Optional[int] = None) -> None:
        """Start a fresh run: clear entities, restore the clock and reseed."""
        self.world.reset()
        self.spawner.reset()
        self.spawner.seed(self.world)
        self.renderer.clear_feedback()
        self.last_time = pygame.time.get_ticks() if now is None else now
        logger.info(
            "Session started: %.0fs on the clock, %d zombies",
            self.state.time_left,
            len(self.world.zombies),
        )

    def activate(self) -> None:
        """Click/tap/space: shoot while running, otherwise (re)start."""
        if self.state.running:
            self.fire()
        else:
            self.reset()

    def fire(self) -> None:
        if self.state.running:
            self.world.fire()

    def aim(self, angle: float) -> None:
        if not self.world.archer.aim(angle):
            logger.debug("Ignoring invalid aim angle %r", angle)

    def tick(self, now: int) -> Optional[StepResult]:
        """
        Advance the simulation to timestamp now (milliseconds).
        The delta against the previous tick is bounded by max_frame_dt.
        """
        if not self.state.running:
            return None
        dt = clamp_delta((now - self.last_time) / 1000.0, self.settings.max_frame_dt)
        self.last_time = now
        return self.advance(dt)

    def advance(self, dt: float) -> StepResult:
        """Run one simulation step of dt seconds and queue its feedback."""
        result = step(self.world, self.spawner, dt)
        self.renderer.add_feedback(result.feedback)
        self.renderer.update(dt)
        if result.ended is not None:
            logger.debug(
                "Game over (%s): score %d", result.ended.value, self.state.score
            )
        return result

    def handle_events(self) -> None:
        """Process input via InputHandler and dispatch aim/activate/quit."""
        self.input.process_events(self.world.archer.aim_origin())
        if self.input.should_quit():
            self.running = False
        size = self.input.resized()
        if size is not None:
            self.world.resize(*size)
        # Each activation fires along the aim it was made with
        for angle in self.input.activations():
            if angle is not None:
                self.aim(angle)
            self.activate()
        angle = self.input.aim()
        if angle is not None:
            self.aim(angle)

    def render(self) -> None:
        """Render the current state snapshot."""
        self.renderer.render(self.screen, self.world.snapshot())
        pygame.display.flip()

    def run(self) -> None:
        """Main loop: handle events, tick, and render."""
        self.reset()
        while self.running:
            self.clock.tick(self.fps)
            self.handle_events()
            self.tick(pygame.time.get_ticks())
            self.render()
        self.renderer.shutdown()
        pygame.quit()
