"""Board model for the 3×3 sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from eightpuzzle.config import BLANK, CELL_COUNT, GRID_SIZE


class Direction(StrEnum):
    """Where a *tile* slides; the blank moves the opposite way."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the visual puzzle grid.

    Tiles are stored as a 2D list of ints, row-major. 0 represents the blank.
    """

    tiles: list[list[int]]
    blank_pos: tuple[int, int]

    @property
    def size(self) -> int:
        return GRID_SIZE

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != CELL_COUNT:
            raise ValueError(
                f"Expected {CELL_COUNT} tiles for a {GRID_SIZE}×{GRID_SIZE} board, "
                f"got {len(flat)}."
            )
        tiles: list[list[int]] = []
        blank_pos: tuple[int, int] = (0, 0)
        for r in range(GRID_SIZE):
            row = list(flat[r * GRID_SIZE : (r + 1) * GRID_SIZE])
            for c, v in enumerate(row):
                if v == BLANK:
                    blank_pos = (r, c)
            tiles.append(row)
        return cls(tiles=tiles, blank_pos=blank_pos)

    def to_flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    # -- queries --------------------------------------------------------------

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        expected = 1
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if r == GRID_SIZE - 1 and c == GRID_SIZE - 1:
                    return self.tiles[r][c] == BLANK
                if self.tiles[r][c] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        val = self.tiles[row][col]
        if val == BLANK:
            return row == GRID_SIZE - 1 and col == GRID_SIZE - 1
        return divmod(val - 1, GRID_SIZE) == (row, col)

    def copy(self) -> Board:
        return Board(
            tiles=[row[:] for row in self.tiles],
            blank_pos=self.blank_pos,
        )


def is_adjacent(a: int, b: int) -> bool:
    """True if flat cell indices *a* and *b* share an edge."""
    ar, ac = divmod(a, GRID_SIZE)
    br, bc = divmod(b, GRID_SIZE)
    return abs(ar - br) + abs(ac - bc) == 1
