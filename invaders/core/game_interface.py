"""
Abstract game interface for Invaders.

A game owns all mutable state and exposes discrete commands, a fixed-step
tick and immutable snapshots. Presentation code only talks to this seam.
"""

from abc import ABC, abstractmethod
from typing import Any


class GameInterface(ABC):
    """
    Abstract base class for real-time simulations driven by a shell.

    Commands are applied immediately; tick() advances time by one step.
    """

    @abstractmethod
    def restart(self) -> None:
        """Reset the game to its initial state."""
        pass

    @abstractmethod
    def tick(self) -> None:
        """Advance the simulation by one fixed step."""
        pass

    @abstractmethod
    def execute(self, command: int) -> None:
        """
        Apply a zero-argument input command.

        Args:
            command: The command to apply (game-specific encoding)
        """
        pass

    @abstractmethod
    def snapshot(self) -> Any:
        """
        Get an immutable copy of the current state for rendering.

        Returns:
            Game-specific snapshot object
        """
        pass

    @property
    @abstractmethod
    def is_terminal(self) -> bool:
        """
        Whether the round has ended and only restart() can continue it.

        Returns:
            True once the game is over
        """
        pass
