"""
constants.py: Centralized configuration for the game world and the console window.
"""

import pygame

# -------- Window Config --------
TITLE = "Flappy Dragon"
CELL_WIDTH = 12                 # Pixels per console cell
CELL_HEIGHT = 12
FONT_SIZE = 14
TARGET_FPS = 60

# -------- Game World Config (console cells) --------
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50
PLAYER_OFFSET = 5               # Fixed screen column of the player
START_Y = SCREEN_HEIGHT / 2

# -------- Physics Config (cells / second) --------
GRAVITY_ACCEL = 9.8             # Vertical acceleration (cells/s^2)
FLAP_VELOCITY = -15.0           # Velocity set by a flap, not added (cells/s)
FORWARD_VELOCITY = 15.0         # Constant horizontal speed (cells/s)

# -------- Obstacle Config --------
GAP_Y_MIN = 10                  # Gap centre range, upper bound exclusive
GAP_Y_MAX = 40
GAP_SIZE_START = 20             # Gap size at score 0
GAP_SIZE_MIN = 2

# -------- Colours (RGB) --------
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
RED = (255, 0, 0)
NAVY = (0, 0, 128)

# -------- Glyphs --------
PLAYER_GLYPH = "@"
WALL_GLYPH = "|"

# -------- Key bindings --------
KEY_FLAP = pygame.K_SPACE
KEY_PLAY = pygame.K_p
KEY_QUIT = pygame.K_q
