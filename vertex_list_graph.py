"""
Vertex-list implementation of the Graph interface.

Each vertex is a mutable Vertex record that owns its outgoing edges as a
target -> weight mapping. targets() is a single lookup; sources() has to ask
every vertex, since there is no reverse index.
"""

from typing import Dict, Generic, Set
import logging

from graph import Graph, L, validate_label, validate_weight

logger = logging.getLogger(__name__)


class Vertex(Generic[L]):
    """
    Mutable vertex record: a label plus its outgoing edges.

    The edge map is never handed out; outgoing() returns a copy. A Vertex
    never creates other vertices, so the owning graph is responsible for
    making sure every target it is given exists.
    """

    def __init__(self, label: L) -> None:
        validate_label(label)
        self._label = label
        self._outgoing: Dict[L, int] = {}

    @property
    def label(self) -> L:
        return self._label

    def set_edge_to(self, target: L, weight: int) -> int:
        """
        Add, update or (with weight 0) remove the edge to target.

        Returns the previous weight, or 0 if there was no edge.
        """
        validate_label(target)
        validate_weight(weight, allow_zero=True)
        if weight > 0:
            previous = self._outgoing.get(target, 0)
            self._outgoing[target] = weight
        else:
            previous = self._outgoing.pop(target, 0)
        return previous

    def remove_edge_to(self, target: L) -> None:
        self._outgoing.pop(target, None)

    def weight_to(self, target: L) -> int:
        """Weight of the edge to target, or 0 if there is none."""
        return self._outgoing.get(target, 0)

    def outgoing(self) -> Dict[L, int]:
        return dict(self._outgoing)  # defensive copy

    def check_invariants(self) -> None:
        if self._label is None:
            raise AssertionError("Vertex label is None")
        for target, weight in self._outgoing.items():
            if target is None:
                raise AssertionError(f"Vertex {self._label!r} has an edge to None")
            if isinstance(weight, bool) or not isinstance(weight, int) or weight <= 0:
                raise AssertionError(
                    f"Vertex {self._label!r} stores invalid weight {weight!r} "
                    f"to {target!r}"
                )

    def __repr__(self) -> str:
        return f"Vertex({self._label!r}, out={len(self._outgoing)})"

    def __str__(self) -> str:
        if not self._outgoing:
            return str(self._label)
        edges = ", ".join(f"{t}({w})" for t, w in self._outgoing.items())
        return f"{self._label} -> {{{edges}}}"


class VertexListGraph(Graph[L]):
    """
    Directed, weighted graph backed by a label -> Vertex mapping.
    """

    def __init__(self) -> None:
        self._vertices: Dict[L, Vertex[L]] = {}
        self._after_mutation()

    # --- Mutation API -----------------------------------------------------------

    def add_vertex(self, label: L) -> bool:
        validate_label(label)
        if label in self._vertices:
            return False
        self._vertices[label] = Vertex(label)
        self._after_mutation()
        return True

    def set_edge(self, source: L, target: L, weight: int) -> int:
        validate_label(source)
        validate_label(target)
        validate_weight(weight, allow_zero=True)

        vertex = self._vertices.get(source)
        if weight == 0:
            if vertex is None:
                return 0
            previous = vertex.set_edge_to(target, 0)
        else:
            if vertex is None:
                vertex = self._vertices[source] = Vertex(source)
            if target not in self._vertices:
                self._vertices[target] = Vertex(target)
            previous = vertex.set_edge_to(target, weight)

        self._after_mutation()
        return previous

    def remove_vertex(self, label: L) -> bool:
        validate_label(label)
        if self._vertices.pop(label, None) is None:
            return False

        # Incoming edges live in the surviving vertices.
        dropped = 0
        for vertex in self._vertices.values():
            if vertex.weight_to(label):
                vertex.remove_edge_to(label)
                dropped += 1
        logger.debug("Removed vertex %r and %d incoming edge(s)", label, dropped)
        self._after_mutation()
        return True

    # --- Queries ------------------------------------------------------------------

    def vertices(self) -> Set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        validate_label(target)
        result: Dict[L, int] = {}
        for label, vertex in self._vertices.items():
            weight = vertex.weight_to(target)
            if weight > 0:
                result[label] = weight
        return result

    def targets(self, source: L) -> Dict[L, int]:
        validate_label(source)
        vertex = self._vertices.get(source)
        if vertex is None:
            return {}
        return vertex.outgoing()

    def edge_count(self) -> int:
        return sum(len(v.outgoing()) for v in self._vertices.values())

    def __contains__(self, label: object) -> bool:
        return label in self._vertices

    def __len__(self) -> int:
        return len(self._vertices)

    def check_invariants(self) -> None:
        for label, vertex in self._vertices.items():
            if not isinstance(vertex, Vertex):
                raise AssertionError(f"Vertex map holds a non-Vertex: {vertex!r}")
            if vertex.label != label:
                raise AssertionError(
                    f"Vertex {vertex.label!r} is stored under label {label!r}"
                )
            vertex.check_invariants()
            for target in vertex.outgoing():
                if target not in self._vertices:
                    raise AssertionError(
                        f"Edge {label!r} -> {target!r} points at a missing vertex"
                    )

    def __str__(self) -> str:
        lines = ["Graph:"]
        if not self._vertices:
            lines.append("  (empty)")
        lines.extend(f"  {vertex}" for vertex in self._vertices.values())
        return "\n".join(lines) + "\n"
