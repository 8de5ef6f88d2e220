"""
algorithms/graphs/
------------------
Graph traversal and shortest-path generators.
"""

from algorithms.graphs.bfs      import bfs
from algorithms.graphs.dfs      import dfs
from algorithms.graphs.dijkstra import dijkstra, DijkstraResult

__all__ = ["bfs", "dfs", "dijkstra", "DijkstraResult"]
