"""
graph.py — Graph Container
===========================
Single source of truth for a graph.  Traversal generators and the renderer
both talk to this object.

Responsibilities:
  1. CRUD on nodes & edges                  (add / remove / get)
  2. Adjacency queries                      (neighbors, edges)
  3. Import from adjacency-list text        (text → graph)
  4. Serialisation round-trip               (to_dict / from_dict)

Design decisions:
  - Nodes stored in a dict keyed by id for O(1) lookup.
  - `adjacency[node_id] → [GraphEdge, …]` in insertion order.  Traversals
    sort neighbour ids themselves; the container never reorders.
  - `directed` / `weighted` are fixed at construction.  In undirected mode
    add_edge also inserts the reciprocal edge.
  - Self-loops and duplicate edges are silently ignored (checked before
    insert), as are edges touching unknown nodes.
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Union

from structures.errors import InvalidContainerError


@dataclass
class GraphNode:
    id:    str
    value: Union[str, float]
    x:     float = 0.0
    y:     float = 0.0

    def to_dict(self) -> dict:
        return {"id": self.id, "value": self.value, "x": self.x, "y": self.y}


@dataclass
class GraphEdge:
    source: str
    target: str
    weight: Optional[float] = None

    @property
    def cost(self) -> float:
        """Weight used by shortest-path search; an unweighted edge costs 1."""
        return 1 if self.weight is None else self.weight

    def to_dict(self) -> dict:
        return {"source": self.source, "target": self.target, "weight": self.weight}


class Graph:
    """
    Attributes:
        nodes     : {node_id: GraphNode}
        adjacency : {node_id: [GraphEdge, …]}
        directed  : bool – graph-level directedness
        weighted  : bool – whether weights are meaningful
    """

    def __init__(self, directed: bool = False, weighted: bool = False):
        self.nodes:     Dict[str, GraphNode]       = {}
        self.adjacency: Dict[str, List[GraphEdge]] = {}
        self.directed:  bool = directed
        self.weighted:  bool = weighted

    # ==================================================================
    # NODE CRUD
    # ==================================================================
    def add_node(self, node_id: str, value: Union[str, float, None] = None, x: float = 0.0, y: float = 0.0) -> GraphNode:
        if node_id in self.nodes:
            return self.nodes[node_id]
        node = GraphNode(id=node_id, value=node_id if value is None else value, x=x, y=y)
        self.nodes[node_id] = node
        self.adjacency[node_id] = []
        return node

    def remove_node(self, node_id: str) -> None:
        if node_id not in self.nodes:
            return
        del self.nodes[node_id]
        del self.adjacency[node_id]
        # drop every edge pointing at this node
        for nid, edges in self.adjacency.items():
            self.adjacency[nid] = [e for e in edges if e.target != node_id]

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        return self.nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self.nodes

    # ==================================================================
    # EDGE CRUD
    # ==================================================================
    def add_edge(self, source: str, target: str, weight: Optional[float] = None) -> bool:
        """Add source→target (and target→source if undirected).  Returns False on a no-op."""
        if source not in self.nodes or target not in self.nodes:
            return False
        if source == target:
            return False
        if self.has_edge(source, target):
            return False
        if weight is None and self.weighted:
            weight = 1
        self.adjacency[source].append(GraphEdge(source, target, weight))
        if not self.directed:
            self.adjacency[target].append(GraphEdge(target, source, weight))
        return True

    def remove_edge(self, source: str, target: str) -> None:
        if source in self.adjacency:
            self.adjacency[source] = [e for e in self.adjacency[source] if e.target != target]
        if not self.directed and target in self.adjacency:
            self.adjacency[target] = [e for e in self.adjacency[target] if e.target != source]

    def has_edge(self, source: str, target: str) -> bool:
        return any(e.target == target for e in self.adjacency.get(source, []))

    def get_edge(self, source: str, target: str) -> Optional[GraphEdge]:
        for e in self.adjacency.get(source, []):
            if e.target == target:
                return e
        return None

    # ==================================================================
    # ADJACENCY QUERIES
    # ==================================================================
    def neighbors(self, node_id: str) -> List[str]:
        """Neighbour ids in edge-insertion order."""
        return [e.target for e in self.adjacency.get(node_id, [])]

    def edges(self, node_id: str) -> List[GraphEdge]:
        return list(self.adjacency.get(node_id, []))

    def degree(self, node_id: str) -> int:
        return len(self.adjacency.get(node_id, []))

    def clear(self) -> None:
        self.nodes.clear()
        self.adjacency.clear()

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def edge_list(self) -> List[GraphEdge]:
        """Every edge once (undirected reciprocals collapsed)."""
        seen = set()
        out = []
        for edges in self.adjacency.values():
            for e in edges:
                key = (e.source, e.target) if self.directed else frozenset((e.source, e.target))
                if key in seen:
                    continue
                seen.add(key)
                out.append(e)
        return out

    def to_dict(self) -> dict:
        return {
            "directed": self.directed,
            "weighted": self.weighted,
            "nodes":    [n.to_dict() for n in self.nodes.values()],
            "edges":    [e.to_dict() for e in self.edge_list()],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Graph":
        g = cls(directed=data.get("directed", False), weighted=data.get("weighted", False))
        try:
            for nd in data.get("nodes", []):
                nid = str(nd["id"])
                g.add_node(nid, nd.get("value", nid), nd.get("x", 0.0), nd.get("y", 0.0))
            for ed in data.get("edges", []):
                g.add_edge(str(ed["source"]), str(ed["target"]), ed.get("weight"))
        except (KeyError, TypeError) as e:
            raise InvalidContainerError(f"malformed graph: {e}") from e
        return g

    # ---------- Import from Adjacency List (text) ----------
    @classmethod
    def from_adjacency_list(
        cls,
        text: str,
        directed: bool = False,
        weighted: bool = False,
        canvas_w: float = 800,
        canvas_h: float = 500,
    ) -> "Graph":
        """
        Parse a simple text adjacency list.

        Supported formats (one node per line):
            A: B C D            → A connects to B, C, D
            A: B(3) C(7)        → A→B weight 3, A→C weight 7
            0 -> 1,2,3          → alternate arrow syntax

        Nodes are laid out in a circle.
        """
        adjacency: Dict[str, List[Tuple[str, Optional[float]]]] = {}

        for line in text.strip().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if ":" in line:
                parts = line.split(":", 1)
            elif "->" in line:
                parts = line.split("->", 1)
            else:
                continue

            src = parts[0].strip()
            adjacency.setdefault(src, [])

            for token in parts[1].replace(",", " ").split():
                # parse optional weight: "B(3)" or "B"
                if "(" in token and token.endswith(")"):
                    tgt, w_str = token[:-1].split("(", 1)
                    try:
                        w: Optional[float] = float(w_str)
                    except ValueError as e:
                        raise InvalidContainerError(f"bad weight in '{token}'") from e
                else:
                    tgt, w = token, None
                adjacency.setdefault(tgt, [])
                adjacency[src].append((tgt, w))

        g = cls(directed=directed, weighted=weighted)
        labels = list(adjacency)
        for (x, y), label in zip(circle_layout(len(labels), canvas_w, canvas_h), labels):
            g.add_node(label, label, x, y)
        for src, targets in adjacency.items():
            for tgt, w in targets:
                g.add_edge(src, tgt, w if weighted else None)
        return g

    # ==================================================================
    # UTILITY
    # ==================================================================
    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edge_list())

    def node_ids(self) -> List[str]:
        return list(self.nodes.keys())

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, nodes={self.node_count()}, edges={self.edge_count()})"


def circle_layout(n: int, canvas_w: float = 800, canvas_h: float = 500) -> List[Tuple[float, float]]:
    """Evenly spaced display coordinates on a circle."""
    cx, cy = canvas_w / 2, canvas_h / 2
    radius = min(canvas_w, canvas_h) * 0.35
    return [
        (cx + radius * math.cos(2 * math.pi * i / n), cy + radius * math.sin(2 * math.pi * i / n))
        for i in range(n)
    ]
