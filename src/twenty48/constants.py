GRID_SIZE = 4
WINNING_VALUE = 2048
INITIAL_TILES = 2

# Spawn draw: randrange(SPAWN_ROLL_SIDES) <= SPAWN_TWO_MAX_ROLL yields a 2, otherwise a 4 (3/4 vs 1/4).
SPAWN_ROLL_SIDES = 4
SPAWN_TWO_MAX_ROLL = 2
SPAWN_LOW_VALUE = 2
SPAWN_HIGH_VALUE = 4

# Raw key symbols as delivered by arcade/pyglet. Kept numeric so input mapping does not import arcade.
KEY_UP = 65362
KEY_DOWN = 65364
KEY_LEFT = 65361
KEY_RIGHT = 65363
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_Q = 113
KEY_ESCAPE = 65307

# Key bounce filter: a repeat of the same key closer than this is dropped.
KEY_BOUNCE_INTERVAL = 0.03

WINDOW_WIDTH = 520
WINDOW_HEIGHT = 640
WINDOW_TITLE = "2048"
TILE_SIZE = 106
TILE_GAP = 12
BOARD_BOTTOM_MARGIN = 24
HEADER_HEIGHT = 110

BOARD_BACKGROUND = (187, 173, 160)
EMPTY_TILE_COLOR = (205, 193, 180)
SPAWN_OUTLINE_COLOR = (255, 255, 255)
DARK_TEXT = (119, 110, 101)
LIGHT_TEXT = (249, 246, 242)
TILE_COLORS = {
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}
SUPER_TILE_COLOR = (60, 58, 50)

# Built-in arcade resources used for audio cues.
CUE_SOUNDS = {
    "move_no_merge": ":resources:sounds/rockHit2.wav",
    "move_with_merge": ":resources:sounds/coin1.wav",
    "illegal_move": ":resources:sounds/error2.wav",
    "win": ":resources:sounds/upgrade1.wav",
    "lose": ":resources:sounds/gameover1.wav",
}
CUE_VOLUME = 0.5
