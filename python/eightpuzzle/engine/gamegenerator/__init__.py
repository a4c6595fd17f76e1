from eightpuzzle.engine.gamegenerator.generator import GameGenerator

__all__ = ["GameGenerator"]
