from eightpuzzle.engine.search.bfs import SearchEngine

__all__ = ["SearchEngine"]
