"""
Edge-list implementation of the Graph interface.

The graph is a set of vertex labels plus a flat list of immutable Edge
records. Every edge-touching operation scans the list: O(E).
"""

from dataclasses import dataclass
from typing import Dict, Generic, List, Set
import logging

from graph import Graph, L, validate_label, validate_weight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge(Generic[L]):
    """
    Immutable directed edge source -> target with a positive weight.

    Changing an edge means replacing it; construction rejects None endpoints
    and non-positive weights, so an invalid Edge never exists.
    """

    source: L
    target: L
    weight: int

    def __post_init__(self) -> None:
        validate_label(self.source)
        validate_label(self.target)
        validate_weight(self.weight, allow_zero=False)

    def __str__(self) -> str:
        return f"{self.source} -> {self.target} ({self.weight})"


class EdgeListGraph(Graph[L]):
    """
    Directed, weighted graph backed by a label set and a list of edges.
    """

    def __init__(self) -> None:
        self._vertices: Set[L] = set()
        self._edges: List[Edge[L]] = []
        self._after_mutation()

    # --- Mutation API -----------------------------------------------------------

    def add_vertex(self, label: L) -> bool:
        validate_label(label)
        if label in self._vertices:
            return False
        self._vertices.add(label)
        self._after_mutation()
        return True

    def set_edge(self, source: L, target: L, weight: int) -> int:
        validate_label(source)
        validate_label(target)
        validate_weight(weight, allow_zero=True)

        previous = 0
        for i, edge in enumerate(self._edges):
            if edge.source == source and edge.target == target:
                previous = edge.weight
                del self._edges[i]
                break

        if weight > 0:
            self._vertices.add(source)
            self._vertices.add(target)
            self._edges.append(Edge(source, target, weight))

        self._after_mutation()
        return previous

    def remove_vertex(self, label: L) -> bool:
        validate_label(label)
        if label not in self._vertices:
            return False

        # Decide every edge's fate before touching either collection.
        kept = [e for e in self._edges if e.source != label and e.target != label]
        dropped = len(self._edges) - len(kept)

        self._edges = kept
        self._vertices.remove(label)
        logger.debug("Removed vertex %r and %d incident edge(s)", label, dropped)
        self._after_mutation()
        return True

    # --- Queries ------------------------------------------------------------------

    def vertices(self) -> Set[L]:
        return set(self._vertices)  # defensive copy

    def sources(self, target: L) -> Dict[L, int]:
        validate_label(target)
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: L) -> Dict[L, int]:
        validate_label(source)
        return {e.target: e.weight for e in self._edges if e.source == source}

    def edge_count(self) -> int:
        return len(self._edges)

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def check_invariants(self) -> None:
        seen = set()
        for edge in self._edges:
            if not isinstance(edge, Edge):
                raise AssertionError(f"Edge list holds a non-Edge: {edge!r}")
            if edge.source not in self._vertices:
                raise AssertionError(f"Edge source not in vertices: {edge}")
            if edge.target not in self._vertices:
                raise AssertionError(f"Edge target not in vertices: {edge}")
            if edge.weight <= 0:
                raise AssertionError(f"Non-positive edge weight stored: {edge}")
            pair = (edge.source, edge.target)
            if pair in seen:
                raise AssertionError(f"Duplicate edge for {pair!r}")
            seen.add(pair)
        if None in self._vertices:
            raise AssertionError("None stored as a vertex label")

    def __str__(self) -> str:
        # Labels need not be mutually orderable; repr gives a total order.
        labels = sorted(self._vertices, key=repr)
        lines = ["Graph:", f"  Vertices: {labels}", "  Edges:"]
        if not self._edges:
            lines.append("    (none)")
        lines.extend(f"    {edge}" for edge in self._edges)
        return "\n".join(lines) + "\n"
