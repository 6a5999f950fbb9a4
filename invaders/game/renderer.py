"""
Invaders Renderer - Pygame-based visualization implementing RendererInterface.
Plain rectangles on a dark arena, with a score bar above and controls below.
"""

import pygame
from typing import Tuple, Optional

from ..core.renderer_interface import RendererInterface
from .constants import (
    ARENA_WIDTH,
    ARENA_HEIGHT,
    PLAYER_WIDTH,
    PLAYER_HEIGHT,
    PLAYER_Y,
    PROJECTILE_WIDTH,
    PROJECTILE_HEIGHT,
    ENEMY_WIDTH,
    ENEMY_HEIGHT,
)
from .engine import Snapshot


BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
DARK_GREY = (34, 34, 34)
LIGHT_GREY = (200, 200, 200)

BACKGROUND_COLOR = BLACK
ARENA_COLOR = DARK_GREY
BORDER_COLOR = WHITE
PLAYER_COLOR = WHITE
PROJECTILE_COLOR = RED
ENEMY_COLOR = GREEN
ENEMY_BORDER_COLOR = WHITE
TEXT_COLOR = WHITE
HINT_COLOR = LIGHT_GREY
GAME_OVER_COLOR = (255, 100, 100)
CLEARED_COLOR = GREEN

# Bands around the arena, in arena units
HUD_HEIGHT = 40
FOOTER_HEIGHT = 30
BORDER = 2

CONTROLS_HINT = "Left/Right: Move | Space: Shoot | R: Restart | Esc: Quit"


class InvadersRenderer(RendererInterface):
    """
    Renders invaders snapshots using Pygame, implementing RendererInterface.

    Entities are drawn as filled rectangles at their snapshot positions;
    sizes come from the fixed geometry constants.
    """

    def __init__(self, scale: float = 1.0):
        """
        Initialize the renderer.

        Args:
            scale: Window pixels per arena unit
        """
        self._scale = scale
        self._font: Optional[pygame.font.Font] = None
        self._large_font: Optional[pygame.font.Font] = None

    def get_preferred_size(self) -> Tuple[int, int]:
        """Window size needed for the arena plus the HUD and footer bands."""
        width = ARENA_WIDTH + 2 * BORDER
        height = HUD_HEIGHT + ARENA_HEIGHT + 2 * BORDER + FOOTER_HEIGHT
        return (int(width * self._scale), int(height * self._scale))

    def _scale_x(self, x: float) -> int:
        """Scale an arena X coordinate to window pixels."""
        return int((BORDER + x) * self._scale)

    def _scale_y(self, y: float) -> int:
        """Scale an arena Y coordinate to window pixels."""
        return int((HUD_HEIGHT + BORDER + y) * self._scale)

    def _scale_size(self, size: float) -> int:
        """Scale a size value."""
        return max(1, int(size * self._scale))

    def _arena_rect(self, x: float, y: float, width: float, height: float) -> pygame.Rect:
        return pygame.Rect(
            self._scale_x(x),
            self._scale_y(y),
            self._scale_size(width),
            self._scale_size(height),
        )

    def _ensure_fonts(self) -> None:
        if self._font is None:
            self._font = pygame.font.Font(None, self._scale_size(28))
        if self._large_font is None:
            self._large_font = pygame.font.Font(None, self._scale_size(48))

    def render(self, snapshot: Snapshot, surface: pygame.Surface) -> None:
        """
        Render a snapshot to a surface.

        Args:
            snapshot: Snapshot returned by SimulationEngine.snapshot()
            surface: Pygame surface to draw on
        """
        self._ensure_fonts()
        surface.fill(BACKGROUND_COLOR)

        # Arena background and border
        arena = self._arena_rect(0, 0, ARENA_WIDTH, ARENA_HEIGHT)
        pygame.draw.rect(surface, ARENA_COLOR, arena)
        border = pygame.Rect(
            self._scale_x(-BORDER),
            self._scale_y(-BORDER),
            self._scale_size(ARENA_WIDTH + 2 * BORDER),
            self._scale_size(ARENA_HEIGHT + 2 * BORDER),
        )
        pygame.draw.rect(surface, BORDER_COLOR, border, self._scale_size(BORDER))

        self._draw_player(surface, snapshot.player_x)

        for projectile in snapshot.projectiles:
            pygame.draw.rect(
                surface,
                PROJECTILE_COLOR,
                self._arena_rect(projectile.x, projectile.y, PROJECTILE_WIDTH, PROJECTILE_HEIGHT),
            )

        for enemy in snapshot.enemies:
            rect = self._arena_rect(enemy.x, enemy.y, ENEMY_WIDTH, ENEMY_HEIGHT)
            pygame.draw.rect(surface, ENEMY_COLOR, rect)
            pygame.draw.rect(surface, ENEMY_BORDER_COLOR, rect, 1)

        self._draw_hud(surface, snapshot.score)

        if snapshot.terminal:
            self._draw_banner(surface, "GAME OVER", GAME_OVER_COLOR, "Press R to restart")
        elif snapshot.cleared:
            self._draw_banner(surface, "ALL INVADERS DESTROYED", CLEARED_COLOR, "Press R to play again")

    def _draw_player(self, surface: pygame.Surface, player_x: float) -> None:
        """Draw the player's cannon."""
        pygame.draw.rect(
            surface,
            PLAYER_COLOR,
            self._arena_rect(player_x, PLAYER_Y, PLAYER_WIDTH, PLAYER_HEIGHT),
        )

    def _draw_hud(self, surface: pygame.Surface, score: int) -> None:
        """Draw the score above the arena and the controls below it."""
        score_text = self._font.render(f"Score: {score}", True, TEXT_COLOR)
        surface.blit(
            score_text,
            (self._scale_x(0), int(10 * self._scale)),
        )

        hint_text = self._font.render(CONTROLS_HINT, True, HINT_COLOR)
        surface.blit(
            hint_text,
            (self._scale_x(0), self._scale_y(ARENA_HEIGHT + BORDER + 6)),
        )

    def _draw_banner(
        self, surface: pygame.Surface, title: str, color: Tuple[int, int, int], subtitle: str
    ) -> None:
        """Draw a centred end-of-round message over the arena."""
        title_text = self._large_font.render(title, True, color)
        title_rect = title_text.get_rect()
        title_rect.center = (
            self._scale_x(ARENA_WIDTH / 2),
            self._scale_y(ARENA_HEIGHT / 2 - 20),
        )
        surface.blit(title_text, title_rect)

        subtitle_text = self._font.render(subtitle, True, HINT_COLOR)
        subtitle_rect = subtitle_text.get_rect()
        subtitle_rect.center = (
            self._scale_x(ARENA_WIDTH / 2),
            self._scale_y(ARENA_HEIGHT / 2 + 20),
        )
        surface.blit(subtitle_text, subtitle_rect)
