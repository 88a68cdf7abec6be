"""
Directed, weighted graph abstraction.

Vertices are labels of any hashable, immutable, comparable type.
Edges are directed: source -> target with a positive int weight.
A weight of 0 means "no edge"; it is never stored.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, Hashable, Set, TypeVar
import logging
import os

logger = logging.getLogger(__name__)

L = TypeVar("L", bound=Hashable)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _initial_invariant_checking() -> bool:
    raw = os.environ.get("DIGRAPH_CHECK_INVARIANTS")
    if raw is None:
        return __debug__
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.warning(
        "Ignoring unrecognised DIGRAPH_CHECK_INVARIANTS=%r; using %s", raw, __debug__
    )
    return __debug__


# Global policy used by all graphs; re-checks invariants after every mutation.
CHECK_INVARIANTS: bool = _initial_invariant_checking()


def set_invariant_checking(enabled: bool) -> None:
    """Turn post-mutation invariant checking on or off for all graphs."""
    global CHECK_INVARIANTS
    CHECK_INVARIANTS = bool(enabled)


def invariant_checking_enabled() -> bool:
    return CHECK_INVARIANTS


def validate_label(label: object) -> None:
    """
    Reject labels that can never name a vertex.

    Raises:
        ValueError: label is None.
        TypeError: label is unhashable.
    """
    if label is None:
        raise ValueError("Vertex labels cannot be None")
    try:
        hash(label)
    except TypeError:
        raise TypeError(
            f"Vertex label must be hashable, got {type(label).__name__}"
        ) from None


def validate_weight(weight: object, *, allow_zero: bool) -> None:
    """
    Reject weights outside the contract.

    Zero is accepted only when ``allow_zero`` is set (it means "remove the edge").

    Raises:
        TypeError: weight is not an int (bools are rejected too).
        ValueError: weight is negative, or zero when zero is not allowed.
    """
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise TypeError(f"Edge weight must be an int, got {type(weight).__name__}")
    if weight < 0:
        raise ValueError(f"Edge weight cannot be negative, got {weight}")
    if weight == 0 and not allow_zero:
        raise ValueError("Edge weight must be positive")


class Graph(ABC, Generic[L]):
    """
    Mutable directed, weighted graph over labeled vertices.

    Invariants, after every operation:
        1. vertex labels are pairwise distinct;
        2. every edge's endpoints are vertices of the graph;
        3. at most one edge per (source, target) pair;
        4. every stored weight is > 0.

    Every query returns a fresh container; callers can never reach internal
    storage through a return value. Not thread-safe.
    """

    # --- Mutation API ---------------------------------------------------------

    @abstractmethod
    def add_vertex(self, label: L) -> bool:
        """
        Add a vertex with no edges.

        Returns True if the vertex was added, False if it was already present.
        """
        raise NotImplementedError

    @abstractmethod
    def set_edge(self, source: L, target: L, weight: int) -> int:
        """
        Add, update or remove the edge source -> target.

        weight > 0 creates missing endpoints, then adds the edge or replaces
        its weight. weight == 0 removes the edge if present and never creates
        vertices. Negative weights raise ValueError and leave the graph as is.

        Returns the weight before this call, or 0 if there was no such edge.
        """
        raise NotImplementedError

    @abstractmethod
    def remove_vertex(self, label: L) -> bool:
        """
        Remove a vertex and every edge into or out of it.

        Returns True if the vertex existed, False otherwise.
        """
        raise NotImplementedError

    # --- Queries ----------------------------------------------------------------

    @abstractmethod
    def vertices(self) -> Set[L]:
        """Return a copy of the set of vertex labels."""
        raise NotImplementedError

    @abstractmethod
    def sources(self, target: L) -> Dict[L, int]:
        """
        Incoming edges of target.

        Returns: dict[source, weight]; empty if target is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def targets(self, source: L) -> Dict[L, int]:
        """
        Outgoing edges of source.

        Returns: dict[target, weight]; empty if source is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def check_invariants(self) -> None:
        """
        Verify the representation against the graph invariants.

        Raises AssertionError naming the first broken invariant.
        """
        raise NotImplementedError

    @abstractmethod
    def edge_count(self) -> int:
        """Number of edges currently stored."""
        raise NotImplementedError

    # --- Shared conveniences, defined purely on the abstract API -----------------

    def __contains__(self, label: object) -> bool:
        return label in self.vertices()

    def __len__(self) -> int:
        return len(self.vertices())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(V={len(self)}, E={self.edge_count()})"

    def _after_mutation(self) -> None:
        if CHECK_INVARIANTS:
            self.check_invariants()
