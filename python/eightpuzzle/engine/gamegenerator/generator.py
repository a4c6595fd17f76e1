"""Produces starting boards for the 3×3 puzzle."""

from __future__ import annotations

import random

from eightpuzzle.config import GOAL, SCRAMBLE_MOVES
from eightpuzzle.engine.graphbuilder import GraphBuilder
from eightpuzzle.engine.statecodec import StateCodec, StateKey
from eightpuzzle.models.board import Board


class GameGenerator:
    """Creates boards either by random walk (solvable) or blind shuffle."""

    @staticmethod
    def solved() -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return StateCodec.to_board(GOAL)

    @staticmethod
    def shuffle(rng: random.Random | None = None) -> Board:
        """Return a uniformly random arrangement of all nine symbols.

        No solvability check is made: about half of these boards cannot
        reach the goal, and the solver reports that as no path.
        """
        rng = rng or random.Random()
        flat = list(GOAL)
        rng.shuffle(flat)
        return Board.from_flat(flat)

    @staticmethod
    def scramble(
        key: StateKey = GOAL,
        moves: int = SCRAMBLE_MOVES,
        rng: random.Random | None = None,
    ) -> StateKey:
        """Random walk of *moves* blank moves from *key*, never undoing the previous one."""
        rng = rng or random.Random()
        prev: StateKey | None = None
        for _ in range(moves):
            candidates = list(GraphBuilder.neighbors(key))
            if prev in candidates and len(candidates) > 1:
                candidates.remove(prev)
            prev, key = key, rng.choice(candidates)
        return key

    @staticmethod
    def generate(rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board that is not already solved."""
        rng = rng or random.Random()
        while True:
            key = GameGenerator.scramble(rng=rng)
            if key != GOAL:
                return StateCodec.to_board(key)
