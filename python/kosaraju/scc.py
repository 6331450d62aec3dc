import logging
from enum import Enum, auto
from typing import Dict, List, Optional, Sequence, Set

from .constants import Constants
from .directedgraph import DirectedGraph
from .graph import Vertex
from .traversal import Traversal

logger = logging.getLogger(__name__)

class Phase(Enum):
    IDLE = auto()
    PASS1_RUNNING = auto()
    PASS1_DONE = auto()
    PASS2_RUNNING = auto()
    DONE = auto()

class SearchState:
    """Per-run scratch arrays indexed by vertex index."""

    def __init__(self, size: int):
        self.size = size
        self.visited: List[bool] = [False] * size
        self.finish: List[int] = [Constants.NO_FINISH] * size
        self.counter = 0

    def reset(self, full: bool = False):
        """Clear visited flags; with full, forget the finish order too."""
        self.visited = [False] * self.size
        if full:
            self.finish = [Constants.NO_FINISH] * self.size
            self.counter = 0

class Kosaraju:
    """
    Two-pass strongly connected components search.

    Pass 1 walks the graph in the first_pass direction and numbers vertices
    in post-order. Pass 2 walks the opposite direction, taking roots by
    decreasing finish index; each walk collects exactly one component.

    With the default first_pass=BACKWARD, components come out sink-first,
    i.e. every edge between two components points to one emitted earlier.
    FORWARD emits them source-first.
    """

    def __init__(
        self,
        graph: DirectedGraph,
        first_pass: Traversal = Traversal.BACKWARD,
        state: Optional[SearchState] = None
    ):
        self.graph = graph
        self.first_pass = first_pass
        self.state = state if state is not None else SearchState(graph.vertex_count())
        self.phase = Phase.IDLE
        self._finished: List[Vertex] = []

        if self.state.size != graph.vertex_count():
            raise ValueError(
                f"Search state holds {self.state.size} vertices, graph has {graph.vertex_count()}"
            )

    @property
    def finish_order(self) -> List[Vertex]:
        """Vertices by increasing finish index of the last Pass 1."""
        return list(self._finished)

    def _explore(self, root: Vertex, direction: Traversal, reached: List[Vertex]):
        """
        Depth-first walk from root over unvisited vertices.

        Uses an explicit stack of (vertex, pending edges) so the depth of the
        graph never touches the interpreter recursion limit. Vertices are
        appended to reached in post-order.
        """
        graph = self.graph
        visited = self.state.visited

        visited[root.index] = True
        stack = [(root, iter(direction.edges_of(graph, root)))]

        while stack:
            vertex, pending = stack[-1]
            for e in pending:
                nxt = direction.next_vertex(graph, e)
                if not visited[nxt.index]:
                    visited[nxt.index] = True
                    stack.append((nxt, iter(direction.edges_of(graph, nxt))))
                    break
            else:
                stack.pop()
                reached.append(vertex)

    def compute_finish_order(self) -> List[Vertex]:
        """Pass 1: assign post-order finish indices, seeding roots by ascending label."""
        if self.state.size != self.graph.vertex_count():
            raise ValueError(
                f"Search state holds {self.state.size} vertices, graph has {self.graph.vertex_count()}"
            )

        self.phase = Phase.PASS1_RUNNING
        self.state.reset(full=True)
        self._finished = []

        for v in self.graph.vertices():
            if self.state.visited[v.index]:
                continue

            start = len(self._finished)
            self._explore(v, self.first_pass, self._finished)
            for finished in self._finished[start:]:
                self.state.finish[finished.index] = self.state.counter
                self.state.counter += 1

        self.phase = Phase.PASS1_DONE
        logger.debug(f"Pass 1 ({self.first_pass.name}) finished {len(self._finished)} vertices")
        return self.finish_order

    def extract_components(self) -> List[Set[int]]:
        """Pass 2: collect one component per root, roots by decreasing finish index."""
        if self.phase is not Phase.PASS1_DONE:
            raise RuntimeError(f"Finish order not computed, engine is {self.phase.name}")

        # Finish indices survive the transition, only visited flags are cleared
        self.state.reset()
        self.phase = Phase.PASS2_RUNNING

        direction = self.first_pass.reverse()
        components: List[Set[int]] = []

        for root in reversed(self._finished):
            if self.state.visited[root.index]:
                continue

            reached: List[Vertex] = []
            self._explore(root, direction, reached)
            components.append({v.label for v in reached})

        self.phase = Phase.DONE
        logger.debug(f"Pass 2 ({direction.name}) extracted {len(components)} components")
        return components

    def run(self) -> List[Set[int]]:
        self.compute_finish_order()
        return self.extract_components()

def strongly_connected_components(
    graph: DirectedGraph,
    first_pass: Traversal = Traversal.BACKWARD
) -> List[Set[int]]:
    """
    Return the strongly connected components of graph as sets of labels.

    The default first pass walks the transpose, so components come out
    sink-first: every edge between two components points to one listed
    earlier. Pass first_pass=Traversal.FORWARD for source-first order.
    """
    return Kosaraju(graph, first_pass=first_pass).run()

def component_index(components: Sequence[Set[int]]) -> Dict[int, int]:
    """Map each vertex label to the position of its component."""
    return {label: i for i, component in enumerate(components) for label in component}

def condensation(graph: DirectedGraph, components: Sequence[Set[int]]) -> DirectedGraph:
    """
    Contract every component to a single vertex.

    Vertex i of the result stands for components[i]; there is one edge per
    ordered pair of distinct components joined by at least one edge.
    """
    index = component_index(components)
    dag = DirectedGraph(vertices=range(len(components)))
    seen = set()

    for e in graph.edges():
        pair = (index[graph.tail(e).label], index[graph.head(e).label])
        if pair[0] != pair[1] and pair not in seen:
            seen.add(pair)
            dag.connect(*pair)

    return dag

def format_components(components: Sequence[Set[int]]) -> str:
    lines = ""
    for component in components:
        lines += "{" + ", ".join(str(label) for label in sorted(component)) + "}\n"
    return lines
