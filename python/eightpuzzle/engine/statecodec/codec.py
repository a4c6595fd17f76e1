"""Conversion between boards and fixed-width state keys.

A state key is a tuple of nine ints, a permutation of ``0..8`` read
row-major, with ``0`` standing for the blank. Text forms are always exactly
nine characters wide, so a board whose first cell is blank keeps its
leading ``0``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from eightpuzzle.config import BLANK, CELL_COUNT, SYMBOLS
from eightpuzzle.errors import InvalidBoardError
from eightpuzzle.models.board import Board

StateKey = tuple[int, ...]

_SEPARATORS = re.compile(r"[\s,/|]+")


class StateCodec:
    """Stateless codec: all methods are static."""

    @staticmethod
    def validate(board: Sequence[int]) -> None:
        """Raise :class:`InvalidBoardError` unless *board* is a permutation of 0..8."""
        if isinstance(board, (str, bytes)):
            raise InvalidBoardError(
                "Board must be a sequence of ints; use StateCodec.from_text() for text."
            )
        if not isinstance(board, Sequence):
            raise InvalidBoardError(
                f"Board must be a sequence of {CELL_COUNT} ints, got {type(board).__name__}."
            )
        if len(board) != CELL_COUNT:
            raise InvalidBoardError(
                f"Expected {CELL_COUNT} cells, got {len(board)}."
            )
        for v in board:
            if isinstance(v, bool) or not isinstance(v, int):
                raise InvalidBoardError(f"Cell value {v!r} is not an integer.")
        if sorted(board) != list(SYMBOLS):
            raise InvalidBoardError(
                f"Board {list(board)} is not a permutation of 0..{CELL_COUNT - 1}."
            )

    @staticmethod
    def encode(board: Sequence[int]) -> StateKey:
        StateCodec.validate(board)
        return tuple(board)

    @staticmethod
    def decode(key: StateKey) -> list[int]:
        return list(key)

    @staticmethod
    def blank_position(key: StateKey) -> int:
        return key.index(BLANK)

    # -- text boundary --------------------------------------------------------

    @staticmethod
    def to_text(key: StateKey) -> str:
        """Return the nine-character form, e.g. ``"012345678"``."""
        return "".join(str(v) for v in key)

    @staticmethod
    def from_text(value: str | int) -> StateKey:
        """Parse a key typed by a user.

        Accepts ``"123456780"``, ``"1,2,3,4,5,6,7,8,0"``, ``"123 456 780"`` or
        an int. Ints are zero-padded to nine digits, so ``12345678`` reads as
        ``(0, 1, 2, 3, 4, 5, 6, 7, 8)``.
        """
        if isinstance(value, bool):
            raise InvalidBoardError(f"Cannot read a board from {value!r}.")
        if isinstance(value, int):
            if value < 0:
                raise InvalidBoardError(f"Cannot read a board from {value!r}.")
            text = f"{value:0{CELL_COUNT}d}"
        else:
            text = value.strip()

        # Every symbol is a single digit, so separators carry no information.
        digits = _SEPARATORS.sub("", text)
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidBoardError(f"Board text {value!r} contains non-digits.")
        return StateCodec.encode([int(ch) for ch in digits])

    # -- board boundary -------------------------------------------------------

    @staticmethod
    def from_board(board: Board) -> StateKey:
        return StateCodec.encode(board.to_flat())

    @staticmethod
    def to_board(key: StateKey) -> Board:
        return Board.from_flat(StateCodec.decode(key))

    # -- components -----------------------------------------------------------

    @staticmethod
    def parity(key: StateKey) -> int:
        """Inversion parity of the non-blank tiles: 0 for even, 1 for odd.

        On a grid of odd width every blank move preserves this value, so two
        keys share a component exactly when their parities match.
        """
        tiles = [v for v in key if v != BLANK]
        inversions = 0
        for i, a in enumerate(tiles):
            for b in tiles[i + 1 :]:
                if a > b:
                    inversions += 1
        return inversions % 2
