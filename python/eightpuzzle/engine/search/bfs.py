"""Breadth-first shortest-path search over a prebuilt topology."""

from __future__ import annotations

import logging
from collections import deque

from eightpuzzle.engine.graphbuilder import Topology
from eightpuzzle.engine.statecodec import StateKey
from eightpuzzle.errors import TopologyError

logger = logging.getLogger(__name__)


class SearchEngine:
    """Single-source BFS over a shared, read-only :class:`Topology`.

    Visited marks and parent links live in a dict local to each call, so an
    engine can be reused any number of times, including after a search that
    raised.

    Neighbours are expanded in topology order. When several shortest paths
    exist, which one comes back depends on that order; its length does not.
    """

    def __init__(self, topology: Topology) -> None:
        self.topology = topology

    def shortest_path(self, start: StateKey, goal: StateKey) -> list[StateKey] | None:
        """Return the path ``[start, ..., goal]`` or ``None`` if unreachable."""
        topology = self.topology
        for key in (start, goal):
            if key not in topology:
                raise TopologyError(f"State {key!r} is not in the topology.")

        # Membership in ``parent`` is the visited mark.
        parent: dict[StateKey, StateKey | None] = {start: None}
        q = deque([start])
        expanded = 0
        while q:
            current = q.popleft()
            if current == goal:
                path = self._reconstruct(parent, goal)
                logger.debug(
                    "BFS reached goal: %d moves, %d expanded, %d visited",
                    len(path) - 1,
                    expanded,
                    len(parent),
                )
                return path
            expanded += 1
            for neighbor in topology.neighbors(current):
                if neighbor in parent:
                    continue
                parent[neighbor] = current
                q.append(neighbor)

        logger.debug("BFS exhausted component after %d states; no path", expanded)
        return None

    @staticmethod
    def _reconstruct(
        parent: dict[StateKey, StateKey | None], goal: StateKey
    ) -> list[StateKey]:
        path: list[StateKey] = []
        step: StateKey | None = goal
        while step is not None:
            path.append(step)
            step = parent[step]
        path.reverse()
        return path
