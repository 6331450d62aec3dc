import random
from typing import Optional

from .constants import Constants
from .directedgraph import DirectedGraph


class GraphGenerator:
    @classmethod
    def generate_random_graph(
        cls,
        vertex_count: int = Constants.DEFAULT_VERTEX_COUNT,
        edge_count: int = Constants.DEFAULT_EDGE_COUNT,
        acyclic: bool = False,
        cyclic: bool = False,
        self_loops: bool = False,
        seed: Optional[int] = None,
        max_attempts: int = None
    ) -> DirectedGraph:

        """
        Generate a random directed graph with labels 1..vertex_count.
        Args:
            vertex_count: Number of vertices in the graph
            edge_count: Number of distinct edges to add to the graph
            acyclic: Only add edges that keep the graph a DAG
            cyclic: Start from a random cycle so the graph is never a DAG
            self_loops: Allow edges from a vertex to itself (ignored when acyclic)
            seed: Seed for a private random generator, for reproducible graphs
            max_attempts: Maximum attempts to generate the desired graph structure
        Returns:
            A DirectedGraph with exactly edge_count edges
        """

        if cyclic and acyclic:
            raise ValueError("Graph cannot be both cyclic and acyclic")

        rng = random.Random(seed)
        graph = DirectedGraph(vertices=range(1, vertex_count + 1))

        added_edges = 0

        if cyclic:
            # Create a random cycle to guarantee cyclicity
            # Choose a random subset of vertices for the cycle (at least 2)
            if vertex_count < 2 or edge_count < 2:
                raise ValueError("A cyclic graph needs at least 2 vertices and 2 edges")

            cycle_length = min(rng.randint(2, vertex_count), edge_count)
            cycle_vertices = rng.sample(range(1, vertex_count + 1), cycle_length)

            # Add edges to form a cycle
            for i in range(cycle_length):
                src = cycle_vertices[i]
                dst = cycle_vertices[(i + 1) % cycle_length]
                graph.connect(src, dst)

            added_edges = cycle_length

        # Edges of an acyclic graph always go up in a random ranking of the vertices
        rank = list(range(1, vertex_count + 1))
        rng.shuffle(rank)
        position = {label: i for i, label in enumerate(rank)}

        max_attempts = edge_count * Constants.MAX_ATTEMPTS_FACTOR if max_attempts is None else max_attempts  # Prevent infinite loops
        attempts = 0

        while added_edges < edge_count and attempts < max_attempts:
            attempts += 1
            src = graph.vertex(rng.randint(1, vertex_count))
            dst = graph.vertex(rng.randint(1, vertex_count))

            if src is dst and (acyclic or not self_loops):
                continue

            # Check if edge already exists
            if graph.has_edge(src, dst):
                continue

            if acyclic and position[src.label] > position[dst.label]:
                src, dst = dst, src
                if graph.has_edge(src, dst):
                    continue

            graph.add_edge(src, dst)
            added_edges += 1

        if added_edges < edge_count:
            raise RuntimeError(f"Failed to generate graph with {edge_count} edges within {max_attempts} attempts")

        return graph

    @classmethod
    def generate_cycle(cls, length: int, start: int = 1) -> DirectedGraph:
        """Simple directed cycle start -> start+1 -> ... -> start."""
        labels = list(range(start, start + length))
        graph = DirectedGraph(vertices=labels)
        for i, label in enumerate(labels):
            graph.connect(label, labels[(i + 1) % length])
        return graph

    @classmethod
    def generate_path(cls, length: int, start: int = 1) -> DirectedGraph:
        """Simple directed path over length vertices."""
        labels = list(range(start, start + length))
        graph = DirectedGraph(vertices=labels)
        for src, dst in zip(labels, labels[1:]):
            graph.connect(src, dst)
        return graph
