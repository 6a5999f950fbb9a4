"""
Abstract renderer interface for Invaders.

Renderers draw game snapshots to a pygame surface.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers only read snapshots; they never touch live game state.
    """

    @abstractmethod
    def render(self, snapshot: Any, surface: "pygame.Surface") -> None:
        """
        Render a snapshot to a surface.

        Args:
            snapshot: Immutable state returned by GameInterface.snapshot()
            surface: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in pixels
        """
        pass
