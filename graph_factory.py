"""
Registry of Graph representations and an empty-graph factory.

Client code asks for a graph by kind name and then only talks to the Graph
interface, so representations can be swapped without touching callers.
"""

from typing import List, Mapping, MutableMapping, Type
import logging

from graph import Graph
from edge_list_graph import EdgeListGraph
from vertex_list_graph import VertexListGraph

logger = logging.getLogger(__name__)

DEFAULT_KIND = "edges"


class GraphRegistry:
    """Maps kind names to Graph implementations."""

    def __init__(self) -> None:
        self._kinds: MutableMapping[str, Type[Graph]] = {}

    def register(self, name: str, graph_type: Type[Graph]) -> None:
        """
        Register ``graph_type`` under ``name``.

        Raises ValueError if ``name`` is taken or ``graph_type`` is not a Graph.
        """
        if name in self._kinds:
            raise ValueError(f"Graph kind '{name}' is already registered.")
        if not (isinstance(graph_type, type) and issubclass(graph_type, Graph)):
            raise ValueError(f"{graph_type!r} is not a Graph implementation.")
        self._kinds[name] = graph_type

    def create(self, name: str) -> Graph:
        """Return a new, empty graph of the kind registered under ``name``."""
        try:
            graph_type = self._kinds[name]
        except KeyError:
            raise ValueError(
                f"Unknown graph kind '{name}'; expected one of {self.kinds()}"
            ) from None
        logger.debug("Creating empty %s graph (%s)", name, graph_type.__name__)
        return graph_type()

    def kinds(self) -> List[str]:
        return sorted(self._kinds)

    def all(self) -> Mapping[str, Type[Graph]]:
        """Return a copy of all registered kinds."""
        return dict(self._kinds)


registry = GraphRegistry()
registry.register("edges", EdgeListGraph)
registry.register("vertices", VertexListGraph)


def empty_graph(kind: str = DEFAULT_KIND) -> Graph:
    """Create an empty graph; ``kind`` is "edges" or "vertices"."""
    return registry.create(kind)
