"""Eight puzzle solver façade."""

from __future__ import annotations

from collections.abc import Sequence

from eightpuzzle.config import BLANK, GOAL, GRID_SIZE
from eightpuzzle.engine.graphbuilder import GraphBuilder, Topology
from eightpuzzle.engine.search import SearchEngine
from eightpuzzle.engine.statecodec import StateCodec, StateKey
from eightpuzzle.models.board import Board, Direction

# Blank index delta -> direction the displaced tile slides.
_TILE_DIRECTION = {
    GRID_SIZE: Direction.UP,
    -GRID_SIZE: Direction.DOWN,
    1: Direction.LEFT,
    -1: Direction.RIGHT,
}


class PuzzleSolver:
    """The single entry point collaborators use to query the core.

    Holds a reference to a topology built elsewhere; it never builds or
    mutates one itself except through :meth:`create`.
    """

    def __init__(self, topology: Topology) -> None:
        self.topology = topology
        self._engine = SearchEngine(topology)

    @classmethod
    def create(cls) -> PuzzleSolver:
        """Build the topology and wrap it. Call once per process."""
        return cls(GraphBuilder.build())

    # -- core query -----------------------------------------------------------

    def solve(
        self, start: Sequence[int], goal: Sequence[int] = GOAL
    ) -> list[list[int]] | None:
        """Return boards from *start* to *goal* inclusive, or ``None``.

        Raises :class:`~eightpuzzle.errors.InvalidBoardError` before searching
        if either arrangement is malformed.
        """
        path = self.solve_keys(start, goal)
        if path is None:
            return None
        return [StateCodec.decode(key) for key in path]

    def solve_keys(
        self, start: Sequence[int], goal: Sequence[int] = GOAL
    ) -> list[StateKey] | None:
        """Like :meth:`solve` but returns state keys.

        Both arguments are validated first, so malformed input raises
        :class:`~eightpuzzle.errors.InvalidBoardError` and never reaches the search.
        """
        return self._engine.shortest_path(StateCodec.encode(start), StateCodec.encode(goal))

    # -- board helpers (used by the frontends) --------------------------------

    def solve_moves(self, board: Board, goal: Sequence[int] = GOAL) -> list[Direction] | None:
        """Return tile moves that take *board* to *goal*, or ``None`` if unreachable.

        An already-solved board yields ``[]``.
        """
        path = self.solve_keys(board.to_flat(), goal)
        if path is None:
            return None
        return directions_from_path(path)

    def hint(self, board: Board) -> Direction | None:
        """Return the first move of a shortest solution, or ``None`` if solved / unsolvable."""
        moves = self.solve_moves(board)
        return moves[0] if moves else None

    def hint_tile(self, board: Board) -> int | None:
        """Return the number of the tile to slide into the blank next."""
        path = self.solve_keys(board.to_flat())
        if not path or len(path) < 2:
            return None
        return path[0][StateCodec.blank_position(path[1])]

    @staticmethod
    def is_solvable(board: Board | Sequence[int], goal: Sequence[int] = GOAL) -> bool:
        """Return True if *board* and *goal* lie in the same parity component.

        Only a shortcut for callers; :meth:`solve` never consults it.
        """
        if isinstance(board, Board):
            key = StateCodec.from_board(board)
        else:
            key = StateCodec.encode(board)
        return StateCodec.parity(key) == StateCodec.parity(StateCodec.encode(goal))


def directions_from_path(path: Sequence[StateKey]) -> list[Direction]:
    """Translate consecutive keys into the tile moves that connect them."""
    moves: list[Direction] = []
    for a, b in zip(path, path[1:]):
        delta = b.index(BLANK) - a.index(BLANK)
        moves.append(_TILE_DIRECTION[delta])
    return moves
