from typing import Iterable, Optional, List, Dict, Tuple

from .constants import Constants
from .graph import Graph, Vertex, Edge, VertexFactory
import math

class CyclicGraphError(Exception):
    """Exception raised when a cycle is detected in the directed graph."""
    pass

class DirectedGraph(Graph):
    """
    Directed graph over a vertex arena.

    Each vertex keeps the indices of its outgoing edges (it is the tail) and
    of its incoming edges (it is the head), so both the graph and its
    transpose can be walked without copying.
    """

    def __init__(
        self,
        vertices: Optional[Iterable[int]] = None,
        edges: Optional[Iterable[Tuple[int, int]]] = None,
        vertex_factory: Optional[VertexFactory] = Vertex
    ):

        super().__init__(vertex_factory)

        if vertices:
            for label in vertices:
                self.get_or_create_vertex(label)

        if edges:
            for tail, head in edges:
                self.connect(tail, head)

    def __str__(self) -> str:
        # Generate a list of the edges in string format
        edges = ""
        for e in self._edges:
            edges += f"{self.tail(e)} -> {self.head(e)}\n"
        return edges

    def latex(
        self,
        radius: float = Constants.LATEX_RADIUS
    ) -> str:

        """Generate LaTeX representation of the directed graph using TikZ.

        Args:
            radius: Radius of the circle on which nodes are arranged (default: 1.5)
        """
        latex_str = "\\begin{tikzpicture}[->,>=Stealth,shorten >=1pt,auto,node distance=3cm, thick,main node/.style={circle,draw,font=\\sffamily\\Large\\bfseries}]\n"

        # Add vertices arranged on a circle, ascending by label
        num_vertices = self.vertex_count()
        for i, v in enumerate(self.vertices()):
            angle = 360 * i / num_vertices
            x = radius * math.cos(math.radians(angle))
            y = radius * math.sin(math.radians(angle))
            latex_str += f"\\node[main node] ({v.label}) at ({x:.2f},{y:.2f}) {{$ {v} $}};\n"

        # Add edges, self-loops need an explicit loop direction
        for e in self._edges:
            tail, head = self.tail(e), self.head(e)
            if tail is head:
                latex_str += f"\\path ({tail.label}) edge [loop above] ({head.label});\n"
            else:
                latex_str += f"\\path ({tail.label}) edge ({head.label});\n"

        latex_str += "\\end{tikzpicture}\n"
        return latex_str

    def add_edge(self, tail: Vertex, head: Vertex) -> Edge:
        if tail is None or head is None:
            raise ValueError("Both vertices are required")

        for v in (tail, head):
            if not self.owns(v):
                raise ValueError(f"Vertex {v.label} not in graph")

        e = Edge(index=len(self._edges), tail=tail.index, head=head.index)
        self._edges.append(e)
        tail.outgoing.append(e.index)
        head.incoming.append(e.index)
        return e

    def connect(self, tail: int, head: int) -> Edge:
        """Add an edge between two labels, creating missing vertices."""
        if tail is None or head is None:
            raise ValueError("Both vertices are required")
        return self.add_edge(self.get_or_create_vertex(tail), self.get_or_create_vertex(head))

    def tail(self, e: Edge) -> Vertex:
        return self._vertices[e.tail]

    def head(self, e: Edge) -> Vertex:
        return self._vertices[e.head]

    def opposite(self, e: Edge, v: Vertex) -> Vertex:
        return self._vertices[e.opposite(v.index)]

    def outgoing_edges(self, v: Vertex) -> List[Edge]:
        return [self._edges[i] for i in v.outgoing]

    def incoming_edges(self, v: Vertex) -> List[Edge]:
        return [self._edges[i] for i in v.incoming]

    def successors(self, v: Vertex) -> List[Vertex]:
        return [self._vertices[self._edges[i].head] for i in v.outgoing]

    def predecessors(self, v: Vertex) -> List[Vertex]:
        return [self._vertices[self._edges[i].tail] for i in v.incoming]

    def get_edge(self, tail: Vertex, head: Vertex) -> Optional[Edge]:
        """Return the first edge from tail to head, or None."""
        for i in tail.outgoing:
            if self._edges[i].head == head.index:
                return self._edges[i]
        return None

    def has_edge(self, tail: Vertex, head: Vertex) -> bool:
        """Check if an edge exists from tail to head."""
        return self.get_edge(tail, head) is not None

    def replace_vertex(self, e: Edge, old: Vertex, new: Vertex):
        """Move one endpoint of an edge to another vertex of this graph.

        A self-loop only moves its tail, the head stays on the old vertex.
        """
        if not (0 <= e.index < len(self._edges) and self._edges[e.index] is e):
            raise ValueError(f"Edge {e.index} not in graph")
        if old is None or not self.owns(old):
            raise ValueError("Replaced vertex must belong to the graph")
        if new is None or not self.owns(new):
            raise ValueError("Replacement vertex must belong to the graph")

        was_tail = e.tail == old.index
        e.replace(old.index, new.index)

        if was_tail:
            old.outgoing.remove(e.index)
            new.outgoing.append(e.index)
        else:
            old.incoming.remove(e.index)
            new.incoming.append(e.index)

    def get_out_degree(self) -> Dict[int, int]:
        """Compute out-degree for each vertex label"""
        return {v.label: len(v.outgoing) for v in self.vertices()}

    def get_in_degree(self) -> Dict[int, int]:
        """Compute in-degree for each vertex label"""
        return {v.label: len(v.incoming) for v in self.vertices()}

    def topological_sort(self) -> List[int]:
        """Return vertex labels in a topological order, smallest label first on ties"""

        in_degree = self.get_in_degree()

        # Kahn's algorithm for topological sort
        queue = [label for label in self._labels if in_degree[label] == 0]
        topo_order = []

        while queue:
            # Sort for deterministic output
            queue.sort()
            current = queue.pop(0)
            topo_order.append(current)

            # Reduce in-degree for neighbors
            for target in self.successors(self.vertex(current)):
                in_degree[target.label] -= 1
                if in_degree[target.label] == 0:
                    queue.append(target.label)

        # Check if graph has a cycle
        if len(topo_order) != self.vertex_count():
            raise CyclicGraphError("Graph contains a cycle")

        return topo_order
