from eightpuzzle.engine.gamesolver.solver import PuzzleSolver, directions_from_path

__all__ = ["PuzzleSolver", "directions_from_path"]
