from bisect import insort
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

@dataclass(eq=False)
class Vertex:
    index: int
    label: int
    outgoing: List[int] = field(default_factory=list)
    incoming: List[int] = field(default_factory=list)

    @property
    def edges(self) -> List[int]:
        """Indices of all incident edges, a self-loop counted once."""
        outgoing = set(self.outgoing)
        return self.outgoing + [e for e in self.incoming if e not in outgoing]

    def __repr__(self) -> str:
        return f"Vertex(index={self.index}, label={self.label})"

    def __str__(self) -> str:
        return f"{self.label}"

@dataclass(eq=False)
class Edge:
    index: int
    tail: int
    head: int

    def __post_init__(self):
        if self.tail is None or self.head is None:
            raise ValueError("Both vertices are required")

    @property
    def first(self) -> int:
        return self.tail

    @property
    def second(self) -> int:
        return self.head

    def contains(self, a: int, b: int) -> bool:
        """Check if both vertex indices are endpoints, in either order."""
        ends = (self.tail, self.head)
        return a in ends and b in ends

    def opposite(self, v: int) -> int:
        if v == self.tail:
            return self.head
        if v == self.head:
            return self.tail
        raise ValueError(f"Vertex {v} is not an endpoint of edge {self.index}")

    def replace(self, old: int, new: int):
        """Replace an endpoint in place, the tail stays the tail."""
        if new is None:
            raise ValueError("Both vertices are required")
        if old == self.tail:
            self.tail = new
        elif old == self.head:
            self.head = new
        else:
            raise ValueError(f"Vertex {old} is not an endpoint of edge {self.index}")

    def __repr__(self) -> str:
        return f"Edge(index={self.index}, tail={self.tail}, head={self.head})"

    def __str__(self) -> str:
        """Arena indices of the endpoints, not labels; DirectedGraph prints labels."""
        return f"{self.tail} -------> {self.head}"

VertexFactory = Callable[[int, int], Vertex]

class Graph():
    """
    Vertex arena shared by graph variants.

    Vertices live in a flat list and are addressed by their index; labels
    map to indices and are kept sorted for deterministic iteration.
    """

    def __init__(self, vertex_factory: Optional[VertexFactory] = Vertex):
        if vertex_factory is None:
            raise ValueError("Vertex factory needs to be specified")

        self.vertex_factory: VertexFactory = vertex_factory
        self._vertices: List[Vertex] = []
        self._index: Dict[int, int] = {}
        self._labels: List[int] = []
        self._edges: List[Edge] = []

    def add_vertex(self, v: Vertex):
        if v.label in self._index:
            raise ValueError(f"Vertex with label {v.label} already exists")
        if v.index != len(self._vertices):
            raise ValueError(f"Vertex index {v.index} does not match arena slot {len(self._vertices)}")

        self._vertices.append(v)
        self._index[v.label] = v.index
        insort(self._labels, v.label)

    def get_or_create_vertex(self, label: int) -> Vertex:
        index = self._index.get(label)
        if index is not None:
            return self._vertices[index]

        v = self.vertex_factory(len(self._vertices), label)
        self.add_vertex(v)
        return v

    def has_vertex(self, label: int) -> bool:
        return label in self._index

    def vertex(self, label: int) -> Vertex:
        return self._vertices[self._index[label]]

    def vertex_at(self, index: int) -> Vertex:
        return self._vertices[index]

    def owns(self, v: Vertex) -> bool:
        """Check that a vertex handle belongs to this graph."""
        return 0 <= v.index < len(self._vertices) and self._vertices[v.index] is v

    def vertices(self) -> List[Vertex]:
        return [self._vertices[self._index[label]] for label in self._labels]

    def vertices_descending(self) -> List[Vertex]:
        return [self._vertices[self._index[label]] for label in reversed(self._labels)]

    def edges(self) -> List[Edge]:
        return list(self._edges)

    def edge(self, index: int) -> Edge:
        return self._edges[index]

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        return len(self._edges)
