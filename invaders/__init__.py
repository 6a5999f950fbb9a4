# Invaders Source Package
"""
Invaders - a single-round arcade defense simulation.

Modules:
- core: Abstract interfaces for games and renderers
- game: Geometry constants, entities, simulation engine and pygame renderer
- shell: Tick scheduler, key bindings and the pygame presentation loop
- utils: Configuration and logging
"""

__version__ = "1.0.0"
