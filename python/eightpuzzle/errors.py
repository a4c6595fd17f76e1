"""Exception hierarchy for the puzzle core."""

from __future__ import annotations


class PuzzleError(Exception):
    """Base class for every error raised by :mod:`eightpuzzle`."""


class InvalidBoardError(PuzzleError, ValueError):
    """An arrangement is not a permutation of the nine puzzle symbols."""


class TopologyError(PuzzleError, RuntimeError):
    """A state reached during search is missing from the topology.

    The topology is built exhaustively, so this always means a programming
    error rather than bad input.
    """
