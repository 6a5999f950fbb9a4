"""
Invaders Simulation Engine - Pure game logic implementing GameInterface.

The player's cannon fires projectiles at a descending enemy formation.
All state mutation goes through the command operations and tick();
renderers only ever see immutable Snapshot copies.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple
import logging
import threading

from ..core.game_interface import GameInterface
from .constants import (
    ARENA_WIDTH,
    ARENA_HEIGHT,
    PLAYER_STEP,
    PROJECTILE_WIDTH,
    PROJECTILE_HEIGHT,
    PROJECTILE_STEP,
    PROJECTILE_SPAWN_Y,
    ENEMY_STEP,
    ENEMY_DESCENT,
    SCORE_PER_ENEMY,
)
from .entities import Player, EntityGroup, Formation, Position

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    """Horizontal move direction for the player's cannon."""
    LEFT = -1
    RIGHT = 1


class Command(IntEnum):
    """Zero-argument input commands sent by the presentation shell."""
    MOVE_LEFT = 0
    MOVE_RIGHT = 1
    FIRE = 2
    RESTART = 3


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of the simulation for one rendered frame."""
    player_x: float
    projectiles: Tuple[Position, ...]
    enemies: Tuple[Position, ...]
    score: int
    terminal: bool
    direction: int
    frame: int = 0

    @property
    def cleared(self) -> bool:
        """True once every enemy has been destroyed."""
        return not self.enemies


class SimulationEngine(GameInterface):
    """
    Core invaders game logic.

    Owns the player, the projectiles, the enemy formation, the score and
    the terminal flag. A lock serialises commands, ticks and snapshots so
    a command never interleaves with a tick.
    """

    def __init__(self):
        self._lock = threading.Lock()

        # Game state (initialized in restart)
        self._player: Player = Player()
        self._projectiles: EntityGroup = EntityGroup(PROJECTILE_WIDTH, PROJECTILE_HEIGHT)
        self._formation: Formation = Formation()
        self._score: int = 0
        self._terminal: bool = False
        self._frame_count: int = 0

        self._reset_state()

    @property
    def score(self) -> int:
        return self._score

    @property
    def is_terminal(self) -> bool:
        return self._terminal

    @property
    def direction(self) -> int:
        return self._formation.direction

    @property
    def enemies_remaining(self) -> int:
        return len(self._formation)

    def _reset_state(self) -> None:
        self._player = Player()
        self._projectiles = EntityGroup(PROJECTILE_WIDTH, PROJECTILE_HEIGHT)
        self._formation = Formation.grid()
        self._score = 0
        self._terminal = False
        self._frame_count = 0

    def restart(self) -> None:
        """Discard the current round and start a fresh one."""
        with self._lock:
            self._reset_state()
        logger.info("Round restarted")

    def move_player(self, direction: Direction) -> None:
        """
        Shift the cannon one step left or right, clamped to the arena.

        Args:
            direction: Direction.LEFT or Direction.RIGHT
        """
        direction = Direction(direction)
        with self._lock:
            if self._terminal:
                logger.debug("Ignoring move %s after game over", direction.name)
                return
            self._player.shift(direction * PLAYER_STEP)

    def fire(self) -> None:
        """Launch a projectile from the cannon's current centre. No cooldown."""
        with self._lock:
            if self._terminal:
                logger.debug("Ignoring fire after game over")
                return
            self._projectiles.add(
                self._player.center_x - PROJECTILE_WIDTH / 2,
                PROJECTILE_SPAWN_Y,
            )

    def execute(self, command: int) -> None:
        """
        Dispatch an input command.

        Args:
            command: A Command value

        Raises:
            ValueError: If command is not a known Command
        """
        command = Command(command)
        if command == Command.MOVE_LEFT:
            self.move_player(Direction.LEFT)
        elif command == Command.MOVE_RIGHT:
            self.move_player(Direction.RIGHT)
        elif command == Command.FIRE:
            self.fire()
        elif command == Command.RESTART:
            self.restart()
        else:
            raise ValueError(f"Unhandled command: {command!r}")

    def tick(self) -> None:
        """
        Advance the round by one step.

        Order: projectiles fly, the formation marches or descends,
        hits are resolved, then the defense line is checked. Does nothing
        once the round is over.
        """
        with self._lock:
            if self._terminal:
                return

            self._frame_count += 1

            # Projectiles fly up and leave through the top
            self._projectiles.translate(0.0, -PROJECTILE_STEP)
            self._projectiles.discard(self._projectiles.ys <= 0)

            # Formation marches, or flips and drops on boundary contact
            self._formation.advance(ENEMY_STEP, ENEMY_DESCENT, ARENA_WIDTH)

            # Projectiles are not consumed by hits
            hit = self._formation.overlapping(self._projectiles.positions)
            destroyed = self._formation.discard(hit)
            self._score += destroyed * SCORE_PER_ENEMY

            if destroyed and len(self._formation) == 0:
                logger.info("Formation cleared with score %d", self._score)

            if self._formation.bottom_reached(ARENA_HEIGHT):
                self._terminal = True
                logger.info(
                    "Game over at frame %d: formation reached the defense line (score %d)",
                    self._frame_count,
                    self._score,
                )

    def snapshot(self) -> Snapshot:
        """Fresh immutable copy of the current state."""
        with self._lock:
            return Snapshot(
                player_x=self._player.x,
                projectiles=self._projectiles.to_positions(),
                enemies=self._formation.to_positions(),
                score=self._score,
                terminal=self._terminal,
                direction=self._formation.direction,
                frame=self._frame_count,
            )
