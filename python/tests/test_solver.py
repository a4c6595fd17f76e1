"""PuzzleSolver façade.

Every returned solution is replayed through the real game engine to prove
the move list is legal and ends on the goal.
"""

from __future__ import annotations

import random

import pytest

from eightpuzzle.config import GOAL
from eightpuzzle.engine.gamegenerator import GameGenerator
from eightpuzzle.engine.gameplay import GamePlay
from eightpuzzle.engine.gamesolver import PuzzleSolver, directions_from_path
from eightpuzzle.engine.statecodec import StateCodec
from eightpuzzle.errors import InvalidBoardError
from eightpuzzle.models.board import Board, Direction


def _random_solvable(seed: int) -> list[int]:
    return list(GameGenerator.scramble(moves=60, rng=random.Random(seed)))


def _assert_replays(solver: PuzzleSolver, flat: list[int]) -> None:
    board = Board.from_flat(flat)
    moves = solver.solve_moves(board)

    assert moves is not None, f"Solvable board {flat} returned no solution"
    assert all(isinstance(m, Direction) for m in moves)

    game = GamePlay.from_board(board)
    for i, direction in enumerate(moves):
        ok = game.move(direction)
        assert ok, f"Move {i} ({direction.value}) was invalid at blank {game.board.blank_pos}"

    assert game.is_won, f"Board not solved after {len(moves)} moves"


# -- solve() ------------------------------------------------------------------


def test_reflexive_query(solver: PuzzleSolver, goal: list[int]) -> None:
    assert solver.solve(goal, goal) == [goal]


def test_default_goal_is_solved_arrangement(solver: PuzzleSolver, goal: list[int]) -> None:
    start = [1, 2, 3, 4, 5, 6, 7, 0, 8]
    assert solver.solve(start) == [start, goal]


def test_path_is_list_of_boards(solver: PuzzleSolver) -> None:
    path = solver.solve([1, 2, 3, 4, 0, 5, 7, 8, 6])
    assert path is not None
    assert all(isinstance(b, list) and len(b) == 9 for b in path)
    assert len(path) == 3


def test_accepts_tuples(solver: PuzzleSolver) -> None:
    assert solver.solve((1, 2, 3, 4, 5, 6, 7, 8, 0), GOAL) == [list(GOAL)]


def test_no_path_returns_none(solver: PuzzleSolver) -> None:
    assert solver.solve([2, 1, 3, 4, 5, 6, 7, 8, 0]) is None


def test_blank_first_start(solver: PuzzleSolver) -> None:
    start = [0, 1, 2, 3, 4, 5, 6, 7, 8]
    path = solver.solve(start, [1, 0, 2, 3, 4, 5, 6, 7, 8])
    assert path == [start, [1, 0, 2, 3, 4, 5, 6, 7, 8]]


@pytest.mark.parametrize(
    "bad",
    [[1, 2, 3], [1, 2, 3, 4, 5, 6, 7, 8, 8], [1, 2, 3, 4, 5, 6, 7, 8, 9]],
)
def test_invalid_start_fails_fast(solver: PuzzleSolver, bad: list[int]) -> None:
    with pytest.raises(InvalidBoardError):
        solver.solve(bad)


def test_invalid_goal_fails_fast(solver: PuzzleSolver, goal: list[int]) -> None:
    with pytest.raises(InvalidBoardError):
        solver.solve(goal, [0] * 9)


def test_solve_agrees_with_parity(solver: PuzzleSolver) -> None:
    rng = random.Random(3)
    for _ in range(10):
        board = GameGenerator.shuffle(rng)
        result = solver.solve(board.to_flat())
        assert (result is not None) == PuzzleSolver.is_solvable(board)


# -- replay through GamePlay --------------------------------------------------


@pytest.mark.parametrize("seed", range(8))
def test_solution_replays_to_goal(solver: PuzzleSolver, seed: int) -> None:
    _assert_replays(solver, _random_solvable(seed))


def test_solved_board_needs_no_moves(solver: PuzzleSolver) -> None:
    assert solver.solve_moves(GameGenerator.solved()) == []


def test_unsolvable_board_has_no_moves(solver: PuzzleSolver) -> None:
    assert solver.solve_moves(Board.from_flat([2, 1, 3, 4, 5, 6, 7, 8, 0])) is None


# -- hints --------------------------------------------------------------------


def test_hint_is_first_move(solver: PuzzleSolver) -> None:
    board = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert solver.hint(board) is Direction.LEFT
    assert solver.hint_tile(board) == 8


def test_hint_on_solved_board(solver: PuzzleSolver) -> None:
    board = GameGenerator.solved()
    assert solver.hint(board) is None
    assert solver.hint_tile(board) is None


def test_hint_on_unsolvable_board(solver: PuzzleSolver) -> None:
    board = Board.from_flat([2, 1, 3, 4, 5, 6, 7, 8, 0])
    assert solver.hint(board) is None
    assert solver.hint_tile(board) is None


# -- helpers ------------------------------------------------------------------


def test_directions_from_path() -> None:
    path = [
        (1, 2, 3, 4, 0, 5, 6, 7, 8),
        (1, 0, 3, 4, 2, 5, 6, 7, 8),  # blank up: tile 2 slides down
        (0, 1, 3, 4, 2, 5, 6, 7, 8),  # blank left: tile 1 slides right
        (4, 1, 3, 0, 2, 5, 6, 7, 8),  # blank down: tile 4 slides up
        (4, 1, 3, 2, 0, 5, 6, 7, 8),  # blank right: tile 2 slides left
    ]
    assert directions_from_path(path) == [
        Direction.DOWN,
        Direction.RIGHT,
        Direction.UP,
        Direction.LEFT,
    ]


def test_is_solvable_accepts_sequences() -> None:
    assert PuzzleSolver.is_solvable(list(GOAL))
    assert not PuzzleSolver.is_solvable([2, 1, 3, 4, 5, 6, 7, 8, 0])
    assert PuzzleSolver.is_solvable(StateCodec.to_board(GOAL))


def test_create_builds_topology_once(monkeypatch: pytest.MonkeyPatch, topology) -> None:
    calls = []

    def fake_build():
        calls.append(1)
        return topology

    monkeypatch.setattr("eightpuzzle.engine.gamesolver.solver.GraphBuilder.build", fake_build)
    solver = PuzzleSolver.create()
    assert solver.topology is topology
    solver.solve(list(GOAL))
    solver.solve([1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert calls == [1]


# -- key-level entry point ----------------------------------------------------


def test_solve_keys_accepts_a_list(solver: PuzzleSolver) -> None:
    assert solver.solve_keys([1, 2, 3, 4, 5, 6, 7, 0, 8]) == [
        (1, 2, 3, 4, 5, 6, 7, 0, 8),
        GOAL,
    ]


@pytest.mark.parametrize(
    ("start", "goal"),
    [
        ((1, 2, 3), GOAL),
        ((1, 2, 3, 4, 5, 6, 7, 8, 8), GOAL),
        (GOAL, (0, 1, 2)),
        (None, GOAL),
    ],
    ids=["short-start", "repeated-symbol", "short-goal", "none-start"],
)
def test_solve_keys_rejects_malformed_keys(solver: PuzzleSolver, start, goal) -> None:
    with pytest.raises(InvalidBoardError):
        solver.solve_keys(start, goal)
