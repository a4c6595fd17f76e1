"""Shared fixtures.

The state graph takes a few seconds to enumerate, so it is built once per
test session and handed to every test that needs it.
"""

from __future__ import annotations

import pytest

from eightpuzzle.config import GOAL
from eightpuzzle.engine.gamesolver import PuzzleSolver
from eightpuzzle.engine.graphbuilder import GraphBuilder, Topology


@pytest.fixture(scope="session")
def topology() -> Topology:
    return GraphBuilder.build()


@pytest.fixture(scope="session")
def solver(topology: Topology) -> PuzzleSolver:
    return PuzzleSolver(topology)


@pytest.fixture
def goal() -> list[int]:
    return list(GOAL)
