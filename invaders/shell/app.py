"""
Invaders presentation shell.

Forwards keyboard events to the engine as commands, drives tick() from a
fixed-period scheduler and draws one snapshot per frame. The shell never
changes game state except through engine commands.
"""

import logging
import pygame
from typing import Optional

from ..core.renderer_interface import RendererInterface
from ..game.engine import SimulationEngine, Command
from ..utils.config_loader import Config
from .controls import command_for_key
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)


class GameShell:
    """
    Pygame front end for a SimulationEngine.

    Movement and fire keys are ignored while the round is over; restart is
    always accepted and resumes the tick scheduler.
    """

    def __init__(
        self,
        engine: SimulationEngine,
        renderer: RendererInterface,
        config: Optional[Config] = None,
    ):
        """
        Initialize the shell.

        Args:
            engine: The simulation to drive
            renderer: Renderer that draws engine snapshots
            config: Application config (defaults to Config())
        """
        self.config = config or Config()
        self.engine = engine
        self.renderer = renderer
        self.scheduler = TickScheduler(
            engine,
            interval_ms=self.config.timing.tick_interval_ms,
            max_ticks_per_update=self.config.timing.max_ticks_per_update,
        )
        self.high_score = 0
        self._round_reported = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle one pygame event.

        Args:
            event: The event to handle

        Returns:
            False if the shell should quit, True otherwise
        """
        if event.type == pygame.QUIT:
            return False

        if event.type != pygame.KEYDOWN:
            return True

        if event.key == pygame.K_ESCAPE:
            return False

        command = command_for_key(event.key)
        if command is None:
            return True

        if command == Command.RESTART:
            self.restart()
        elif not self.engine.is_terminal:
            self.engine.execute(command)

        return True

    def restart(self) -> None:
        """Start a new round and resume ticking."""
        self.engine.restart()
        self.scheduler.resume()
        self._round_reported = False

    def update(self, elapsed_ms: float) -> int:
        """
        Advance the simulation clock.

        Args:
            elapsed_ms: Milliseconds since the previous frame

        Returns:
            Number of ticks run
        """
        ticks = self.scheduler.advance(elapsed_ms)

        round_over = self.engine.is_terminal or self.engine.enemies_remaining == 0
        if round_over and not self._round_reported:
            self._report_round()

        return ticks

    def _report_round(self) -> None:
        self._round_reported = True
        score = self.engine.score
        if score > self.high_score:
            self.high_score = score
            logger.info("New high score: %d", score)
        else:
            logger.info("Round over! Score: %d | High score: %d", score, self.high_score)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the current snapshot."""
        self.renderer.render(self.engine.snapshot(), surface)

    def run(self) -> None:
        """Open the window and run until the player quits."""
        display = self.config.display

        pygame.init()
        try:
            screen = pygame.display.set_mode(self.renderer.get_preferred_size())
            pygame.display.set_caption(display.title)
            if display.key_repeat_delay > 0:
                pygame.key.set_repeat(display.key_repeat_delay, display.key_repeat_interval)

            clock = pygame.time.Clock()
            logger.info("Shell started at %d fps, tick every %s ms", display.fps, self.scheduler.interval_ms)

            running = True
            while running:
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break

                elapsed = clock.tick(display.fps)
                self.update(elapsed)
                self.draw(screen)
                pygame.display.flip()
        finally:
            pygame.quit()

        logger.info("Session high score: %d", self.high_score)
