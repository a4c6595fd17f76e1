"""Core gameplay logic: processes moves and checks win condition."""

from __future__ import annotations

from eightpuzzle.config import GRID_SIZE
from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.models.board import Board, Direction, is_adjacent

# The offset points to the tile that will slide into the blank.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down  → blank shifts up
# LEFT → tile at (br, bc+1) moves left  → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right → blank shifts left
_OFFSETS = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, board: Board | None = None) -> None:
        self.board = board if board is not None else GameGenerator.shuffle()
        self.moves = 0

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a session over a copy of *board*."""
        return cls(board.copy())

    # -- movement (direction = where the *tile* moves) ------------------------

    def move(self, direction: Direction) -> bool:
        """Slide a tile in *direction* into the adjacent blank.

        E.g. ``Direction.UP`` moves the tile **below** the blank upward.
        Returns True if the move was valid.
        """
        br, bc = self.board.blank_pos
        dr, dc = _OFFSETS[direction]
        return self.move_tile(br + dr, bc + dc)

    def move_tile(self, row: int, col: int) -> bool:
        """Move the tile at (row, col) into the adjacent blank.

        Returns False, leaving the board untouched, unless the tile is on the
        grid and shares an edge with the blank.
        """
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            return False
        br, bc = self.board.blank_pos
        if not is_adjacent(row * GRID_SIZE + col, br * GRID_SIZE + bc):
            return False

        tiles = self.board.tiles
        tiles[br][bc], tiles[row][col] = tiles[row][col], tiles[br][bc]
        self.board.blank_pos = (row, col)
        self.moves += 1
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.board.is_solved()
