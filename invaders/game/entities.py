"""
Entity model for the invaders simulation.

Player state is a small dataclass. Projectiles and enemies live in
EntityGroup instances that keep top-left positions in an (N, 2) numpy array,
so a whole group moves, edge-tests and collides in one vectorised operation.
"""

from dataclasses import dataclass
from typing import Tuple, Optional, Iterable

import numpy as np

from .constants import (
    ARENA_WIDTH,
    PLAYER_START_X,
    PLAYER_Y,
    PLAYER_WIDTH,
    PLAYER_HEIGHT,
    ENEMY_WIDTH,
    ENEMY_HEIGHT,
    ENEMY_ROWS,
    ENEMY_COLUMNS,
    FORMATION_OFFSET,
)


@dataclass(frozen=True)
class Position:
    """Top-left corner of an entity, as exposed to renderers."""
    x: float
    y: float


@dataclass
class Player:
    """The player's cannon. Only x changes; y is fixed at the bottom margin."""
    x: float = PLAYER_START_X
    y: float = PLAYER_Y
    width: int = PLAYER_WIDTH
    height: int = PLAYER_HEIGHT

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def shift(self, dx: float) -> None:
        """Move horizontally, clamped to the arena."""
        self.x = min(max(self.x + dx, 0.0), float(ARENA_WIDTH - self.width))


class EntityGroup:
    """
    A set of same-sized rectangles stored as an (N, 2) float array of
    top-left corners. Member order is preserved across moves and removals.
    """

    def __init__(
        self,
        width: float,
        height: float,
        positions: Optional[Iterable[Tuple[float, float]]] = None,
    ):
        self.width = width
        self.height = height
        if positions is None:
            self.positions = np.empty((0, 2), dtype=np.float64)
        else:
            self.positions = np.array(list(positions), dtype=np.float64).reshape(-1, 2)

    def __len__(self) -> int:
        return len(self.positions)

    @property
    def xs(self) -> np.ndarray:
        return self.positions[:, 0]

    @property
    def ys(self) -> np.ndarray:
        return self.positions[:, 1]

    def add(self, x: float, y: float) -> None:
        """Append one member at the end of the group."""
        self.positions = np.vstack([self.positions, [[x, y]]])

    def translate(self, dx: float, dy: float) -> None:
        """Move every member by the same offset."""
        self.positions += (dx, dy)

    def discard(self, mask: np.ndarray) -> int:
        """Remove members where mask is True. Returns how many were removed."""
        removed = int(np.count_nonzero(mask))
        if removed:
            self.positions = self.positions[~mask]
        return removed

    def overlapping(self, points: np.ndarray) -> np.ndarray:
        """
        Boolean mask of members that strictly contain at least one point.

        A point exactly on any edge of a member does not count.

        Args:
            points: (M, 2) array of x, y coordinates

        Returns:
            Array of shape (N,) with True for every member hit
        """
        if len(self) == 0 or len(points) == 0:
            return np.zeros(len(self), dtype=bool)

        left = self.xs[:, None]
        top = self.ys[:, None]
        px = points[:, 0][None, :]
        py = points[:, 1][None, :]

        inside = (
            (px > left)
            & (px < left + self.width)
            & (py > top)
            & (py < top + self.height)
        )
        return inside.any(axis=1)

    def to_positions(self) -> Tuple[Position, ...]:
        """Immutable copy of the member positions, in order."""
        return tuple(Position(x, y) for x, y in self.positions.tolist())


class Formation(EntityGroup):
    """
    The enemy grid. All members share one horizontal direction
    (+1 right, -1 left) and move in lockstep.
    """

    def __init__(
        self,
        positions: Optional[Iterable[Tuple[float, float]]] = None,
        direction: int = 1,
        width: float = ENEMY_WIDTH,
        height: float = ENEMY_HEIGHT,
    ):
        super().__init__(width, height, positions)
        self.direction = direction

    @classmethod
    def grid(
        cls,
        rows: int = ENEMY_ROWS,
        columns: int = ENEMY_COLUMNS,
        offset: float = FORMATION_OFFSET,
    ) -> "Formation":
        """Create the starting grid in row-major order."""
        positions = [
            (col * ENEMY_WIDTH + offset, row * ENEMY_HEIGHT + offset)
            for row in range(rows)
            for col in range(columns)
        ]
        return cls(positions)

    def leading_edge_reached(self, arena_width: float = ARENA_WIDTH) -> bool:
        """True if any member touches the boundary it is moving towards."""
        if len(self) == 0:
            return False
        if self.direction > 0:
            return bool(np.any(self.xs + self.width >= arena_width))
        return bool(np.any(self.xs <= 0))

    def advance(self, step: float, descent: float, arena_width: float = ARENA_WIDTH) -> bool:
        """
        Move the formation one tick.

        The edge test uses the positions from before this move. On boundary
        contact the direction flips and every member drops by `descent`
        with no sideways motion; otherwise every member moves `step`
        in the current direction.

        Returns:
            True if the formation descended this tick
        """
        if self.leading_edge_reached(arena_width):
            self.direction = -self.direction
            self.translate(0.0, descent)
            return True

        self.translate(self.direction * step, 0.0)
        return False

    def bottom_reached(self, floor: float) -> bool:
        """True if any member's bottom edge is at or below `floor`."""
        return bool(np.any(self.ys + self.height >= floor))
