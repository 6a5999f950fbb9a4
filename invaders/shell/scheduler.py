"""
Fixed-period tick scheduler.

The shell feeds it the real time elapsed each frame; it turns that into
whole simulation ticks, stops when the round ends and is resumed after a
restart.
"""

import logging

from ..core.game_interface import GameInterface
from ..game.constants import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


class TickScheduler:
    """
    Drives GameInterface.tick() at a fixed period from frame timings.

    Leftover time below one period carries over to the next frame. When a
    frame runs more than max_ticks_per_update periods late, the backlog is
    dropped rather than replayed.
    """

    def __init__(
        self,
        game: GameInterface,
        interval_ms: float = TICK_INTERVAL_MS,
        max_ticks_per_update: int = 5,
    ):
        """
        Initialize the scheduler.

        Args:
            game: Game whose tick() is driven
            interval_ms: Milliseconds between ticks
            max_ticks_per_update: Most ticks run for a single advance() call
        """
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        if max_ticks_per_update < 1:
            raise ValueError(f"max_ticks_per_update must be at least 1, got {max_ticks_per_update}")

        self.game = game
        self.interval_ms = interval_ms
        self.max_ticks_per_update = max_ticks_per_update
        self._accumulator = 0.0
        self._running = not game.is_terminal
        self.total_ticks = 0

    @property
    def running(self) -> bool:
        return self._running

    def advance(self, elapsed_ms: float) -> int:
        """
        Account for elapsed time and run any ticks that are due.

        Args:
            elapsed_ms: Milliseconds since the previous call

        Returns:
            Number of ticks run
        """
        if not self._running:
            return 0

        self._accumulator += elapsed_ms
        ticks = 0
        while self._accumulator >= self.interval_ms and ticks < self.max_ticks_per_update:
            self._accumulator -= self.interval_ms
            self.game.tick()
            ticks += 1
            if self.game.is_terminal:
                self.stop()
                break

        if self._accumulator >= self.interval_ms:
            logger.debug("Dropping %.1f ms of tick backlog", self._accumulator)
            self._accumulator = 0.0

        self.total_ticks += ticks
        return ticks

    def stop(self) -> None:
        """Suspend ticking and discard pending time."""
        self._running = False
        self._accumulator = 0.0

    def resume(self) -> None:
        """Start ticking again unless the game is still over."""
        if self.game.is_terminal:
            return
        self._running = True
        self._accumulator = 0.0
