"""
Core abstractions for Invaders.

Provides the interfaces that the simulation and its renderers implement.
"""

from .game_interface import GameInterface
from .renderer_interface import RendererInterface

__all__ = [
    'GameInterface',
    'RendererInterface',
]
