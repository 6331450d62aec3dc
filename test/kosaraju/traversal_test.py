import unittest

from kosaraju import DirectedGraph, Traversal, reachable

class TraversalTest(unittest.TestCase):
    def setUp(self):
        self.g = DirectedGraph(edges=[(1, 2), (2, 3), (4, 2)])

    def test_forward_follows_outgoing_edges_to_head(self):
        two = self.g.vertex(2)
        edges = Traversal.FORWARD.edges_of(self.g, two)
        self.assertEqual(edges, self.g.outgoing_edges(two))
        self.assertEqual([Traversal.FORWARD.next_vertex(self.g, e).label for e in edges], [3])

    def test_backward_follows_incoming_edges_to_tail(self):
        two = self.g.vertex(2)
        edges = Traversal.BACKWARD.edges_of(self.g, two)
        self.assertEqual(edges, self.g.incoming_edges(two))
        self.assertEqual([Traversal.BACKWARD.next_vertex(self.g, e).label for e in edges], [1, 4])

    def test_neighbours(self):
        two = self.g.vertex(2)
        self.assertEqual([v.label for v in Traversal.FORWARD.neighbours(self.g, two)], [3])
        self.assertEqual([v.label for v in Traversal.BACKWARD.neighbours(self.g, two)], [1, 4])

    def test_reverse(self):
        self.assertIs(Traversal.FORWARD.reverse(), Traversal.BACKWARD)
        self.assertIs(Traversal.BACKWARD.reverse(), Traversal.FORWARD)

    def test_exactly_two_directions(self):
        self.assertEqual(len(Traversal), 2)

    def test_reachable(self):
        self.assertEqual(reachable(self.g, self.g.vertex(1)), {1, 2, 3})
        self.assertEqual(reachable(self.g, self.g.vertex(3)), {3})
        self.assertEqual(reachable(self.g, self.g.vertex(3), Traversal.BACKWARD), {1, 2, 3, 4})

    def test_reachable_on_cycle_terminates(self):
        g = DirectedGraph(edges=[(1, 2), (2, 1), (2, 2)])
        self.assertEqual(reachable(g, g.vertex(1)), {1, 2})

if __name__ == "__main__":
    unittest.main()
