"""
Fixed arena geometry, entity sizes and step sizes.

These are not runtime-configurable; the presentation shell only scales them.
"""

# Arena
ARENA_WIDTH = 600
ARENA_HEIGHT = 400

# Player cannon
PLAYER_WIDTH = 50
PLAYER_HEIGHT = 10
PLAYER_BOTTOM_MARGIN = 10
PLAYER_STEP = 20  # px per move command
PLAYER_START_X = ARENA_WIDTH / 2 - PLAYER_WIDTH / 2
PLAYER_Y = ARENA_HEIGHT - PLAYER_HEIGHT - PLAYER_BOTTOM_MARGIN
PLAYER_MAX_X = ARENA_WIDTH - PLAYER_WIDTH

# Projectiles
PROJECTILE_WIDTH = 5
PROJECTILE_HEIGHT = 10
PROJECTILE_STEP = 10  # px upward per tick
PROJECTILE_SPAWN_Y = ARENA_HEIGHT - PLAYER_HEIGHT

# Enemy formation
ENEMY_WIDTH = 40
ENEMY_HEIGHT = 20
ENEMY_ROWS = 4
ENEMY_COLUMNS = 8
FORMATION_OFFSET = 20  # top-left corner of the initial grid
ENEMY_STEP = 10  # px sideways per tick
ENEMY_DESCENT = 10  # px down on boundary contact

# Round
SCORE_PER_ENEMY = 10
TICK_INTERVAL_MS = 20
