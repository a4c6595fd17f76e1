from eightpuzzle.models.board import Board, Direction, is_adjacent

__all__ = ["Board", "Direction", "is_adjacent"]
