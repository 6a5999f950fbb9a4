"""
Keyboard bindings for the invaders shell.

Controls:
    Arrow Keys or A/D: Move the cannon
    Space: Fire
    R: Restart
    ESC: Quit (handled by the shell, not bound to a command)
"""

import pygame
from typing import Dict, Optional

from ..game.engine import Command


def key_bindings() -> Dict[int, Command]:
    """Map pygame key codes to engine commands."""
    return {
        pygame.K_LEFT: Command.MOVE_LEFT,
        pygame.K_a: Command.MOVE_LEFT,
        pygame.K_RIGHT: Command.MOVE_RIGHT,
        pygame.K_d: Command.MOVE_RIGHT,
        pygame.K_SPACE: Command.FIRE,
        pygame.K_r: Command.RESTART,
    }


def command_for_key(key: int) -> Optional[Command]:
    """Look up the command bound to a key, or None if unbound."""
    return key_bindings().get(key)
