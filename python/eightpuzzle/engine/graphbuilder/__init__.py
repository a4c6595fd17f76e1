from eightpuzzle.engine.graphbuilder.builder import GraphBuilder
from eightpuzzle.engine.graphbuilder.topology import Topology

__all__ = ["GraphBuilder", "Topology"]
