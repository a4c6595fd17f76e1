"""Eight puzzle solver: exhaustive state graph plus breadth-first search."""

from eightpuzzle.config import GOAL
from eightpuzzle.errors import InvalidBoardError, PuzzleError, TopologyError

__all__ = ["GOAL", "InvalidBoardError", "PuzzleError", "TopologyError"]
