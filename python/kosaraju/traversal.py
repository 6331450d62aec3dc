from enum import Enum, auto
from typing import Iterator, List, Set

from .directedgraph import DirectedGraph
from .graph import Vertex, Edge

class Traversal(Enum):
    """
    Direction of a depth-first walk.

    FORWARD follows outgoing edges to their heads, BACKWARD follows incoming
    edges to their tails, which is a forward walk of the transpose graph.
    """
    FORWARD = auto()
    BACKWARD = auto()

    def edges_of(self, graph: DirectedGraph, v: Vertex) -> List[Edge]:
        if self is Traversal.FORWARD:
            return graph.outgoing_edges(v)
        return graph.incoming_edges(v)

    def next_vertex(self, graph: DirectedGraph, e: Edge) -> Vertex:
        if self is Traversal.FORWARD:
            return graph.head(e)
        return graph.tail(e)

    def neighbours(self, graph: DirectedGraph, v: Vertex) -> Iterator[Vertex]:
        for e in self.edges_of(graph, v):
            yield self.next_vertex(graph, e)

    def reverse(self) -> 'Traversal':
        if self is Traversal.FORWARD:
            return Traversal.BACKWARD
        return Traversal.FORWARD

def reachable(
    graph: DirectedGraph,
    start: Vertex,
    direction: Traversal = Traversal.FORWARD
) -> Set[int]:
    """Labels of all vertices reachable from start, start included."""
    seen = {start.index}
    stack = [start]

    while stack:
        v = stack.pop()
        for w in direction.neighbours(graph, v):
            if w.index not in seen:
                seen.add(w.index)
                stack.append(w)

    return {graph.vertex_at(i).label for i in seen}
