"""Puzzle engine: state codec, graph construction, search and gameplay."""
