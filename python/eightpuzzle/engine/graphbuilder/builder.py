"""Eager enumeration of the 8-puzzle state graph."""

from __future__ import annotations

import itertools
import logging
from time import perf_counter

from eightpuzzle.config import BLANK, BLANK_MOVES, CELL_COUNT, GRID_SIZE, SYMBOLS
from eightpuzzle.engine.graphbuilder.topology import Topology
from eightpuzzle.engine.statecodec import StateKey

logger = logging.getLogger(__name__)


def _blank_targets() -> tuple[tuple[int, ...], ...]:
    """For each blank index, the cell indices it may swap with."""
    targets: list[tuple[int, ...]] = []
    for i in range(CELL_COUNT):
        r, c = divmod(i, GRID_SIZE)
        cells: list[int] = []
        for dr, dc in BLANK_MOVES:
            nr, nc = r + dr, c + dc
            if 0 <= nr < GRID_SIZE and 0 <= nc < GRID_SIZE:
                cells.append(nr * GRID_SIZE + nc)
        targets.append(tuple(cells))
    return tuple(targets)


_TARGETS = _blank_targets()


class GraphBuilder:
    """Builds the complete :class:`Topology` in one pass."""

    @staticmethod
    def neighbors(key: StateKey) -> tuple[StateKey, ...]:
        """Return every key reachable from *key* by one blank move."""
        z = key.index(BLANK)
        out: dict[StateKey, None] = {}
        for j in _TARGETS[z]:
            lst = list(key)
            lst[z], lst[j] = lst[j], lst[z]
            out[tuple(lst)] = None
        return tuple(out)

    @staticmethod
    def build() -> Topology:
        """Enumerate all 9! arrangements and their one-move neighbours.

        Pure and deterministic. This is the dominant cost of the whole
        system, so the elapsed time is logged.
        """
        t0 = perf_counter()
        adjacency: dict[StateKey, tuple[StateKey, ...]] = {}
        for key in itertools.permutations(SYMBOLS):
            adjacency[key] = GraphBuilder.neighbors(key)

        topology = Topology(adjacency)
        logger.info(
            "Built topology: %d nodes, %d edges in %.2fs",
            len(topology),
            topology.edge_count,
            perf_counter() - t0,
        )
        return topology
