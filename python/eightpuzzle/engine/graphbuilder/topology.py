"""Immutable adjacency over every puzzle state."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from eightpuzzle.engine.statecodec import StateKey
from eightpuzzle.errors import TopologyError


class Topology(Mapping[StateKey, tuple[StateKey, ...]]):
    """Read-only mapping from a state key to the keys one blank move away.

    Neighbour tuples contain no duplicates and keep the order in which the
    builder produced them (blank up, down, left, right).
    """

    __slots__ = ("_adjacency", "_edge_count")

    def __init__(self, adjacency: dict[StateKey, tuple[StateKey, ...]]) -> None:
        self._adjacency = MappingProxyType(adjacency)
        self._edge_count = sum(len(nbrs) for nbrs in adjacency.values())

    # -- Mapping protocol -----------------------------------------------------

    def __getitem__(self, key: StateKey) -> tuple[StateKey, ...]:
        return self._adjacency[key]

    def __iter__(self) -> Iterator[StateKey]:
        return iter(self._adjacency)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __repr__(self) -> str:
        return f"Topology(nodes={len(self)}, edges={self._edge_count})"

    # -- queries --------------------------------------------------------------

    def neighbors(self, key: StateKey) -> tuple[StateKey, ...]:
        """Return the neighbours of *key*; a missing key is a fatal error."""
        try:
            return self._adjacency[key]
        except KeyError:
            raise TopologyError(f"State {key!r} is not in the topology.") from None

    def degree(self, key: StateKey) -> int:
        return len(self.neighbors(key))

    @property
    def edge_count(self) -> int:
        """Number of directed edges (each undirected move counted twice)."""
        return self._edge_count

    def degree_histogram(self) -> dict[int, int]:
        """Map degree -> number of states having it."""
        return dict(sorted(Counter(len(n) for n in self._adjacency.values()).items()))
