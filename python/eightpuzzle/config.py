"""Fixed puzzle geometry and runtime defaults."""

from __future__ import annotations

GRID_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
BLANK = 0
SYMBOLS: tuple[int, ...] = tuple(range(CELL_COUNT))

# Tiles 1-8 row-major, blank bottom-right.
GOAL: tuple[int, ...] = tuple(range(1, CELL_COUNT)) + (BLANK,)

# Blank offsets as (d_row, d_col), in the order neighbours are emitted.
BLANK_MOVES: tuple[tuple[int, int], ...] = (
    (-1, 0),  # up
    (1, 0),  # down
    (0, -1),  # left
    (0, 1),  # right
)

# Random-walk length used when generating a solvable board.
SCRAMBLE_MOVES = CELL_COUNT * 100

DEFAULT_LOG_LEVEL = "warning"
LOG_LEVEL_ENVVAR = "EIGHTPUZZLE_LOG_LEVEL"
