"""
Invaders game module: geometry, entities and the simulation engine.

The pygame renderer lives in invaders.game.renderer and is not imported
here, so the simulation runs headless.
"""

from .engine import SimulationEngine, Snapshot, Command, Direction
from .entities import Position, Player, EntityGroup, Formation

__all__ = [
    "SimulationEngine",
    "Snapshot",
    "Command",
    "Direction",
    "Position",
    "Player",
    "EntityGroup",
    "Formation",
]
