from .graph import Graph, Vertex, Edge
from .directedgraph import DirectedGraph, CyclicGraphError
from .traversal import Traversal, reachable
from .scc import Kosaraju, Phase, SearchState, strongly_connected_components, condensation, component_index, format_components
from .graph_generator import GraphGenerator
