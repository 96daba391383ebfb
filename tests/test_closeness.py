import unittest
import warnings
from itertools import combinations

from netcentral.centrality import closeness
from netcentral.errors import DisconnectedGraphWarning
from netcentral.graph import Edge, Graph, Node, from_edge_list


SCENARIO_EDGES = [(1, 2, 2), (1, 3, 1), (2, 4, 1), (3, 4, 2), (3, 5, 1), (5, 2, 2)]


class TestCloseness(unittest.TestCase):
    def assertScores(self, got, expected):
        self.assertEqual(set(got), set(expected))
        for k, v in expected.items():
            self.assertAlmostEqual(got[k], v, places=9, msg=str(k))

    def test_complete_graph_is_one(self):
        g = from_edge_list(list(combinations("abcd", 2)))
        self.assertScores(closeness(g), dict.fromkeys("abcd", 1.0))

    def test_scenario(self):
        g = from_edge_list(SCENARIO_EDGES)
        self.assertScores(closeness(g), {1: 4 / 6, 2: 0.8, 3: 0.8, 4: 4 / 6, 5: 4 / 6})

    def test_weighted(self):
        g = from_edge_list([("a", "b", 1), ("b", "c", 1), ("a", "c", 3)])
        self.assertScores(closeness(g), dict.fromkeys("abc", 1.0))
        self.assertScores(closeness(g, weighted=True), {"a": 2 / 3, "b": 1.0, "c": 2 / 3})

    def test_directed_modes(self):
        g = from_edge_list([("a", "b"), ("b", "c")], directed=True)
        self.assertScores(closeness(g), {"a": 2 / 3, "b": 1.0, "c": 0.0})
        self.assertScores(closeness(g, mode="in"), {"a": 0.0, "b": 1.0, "c": 2 / 3})
        self.assertScores(closeness(g, mode="all"), {"a": 2 / 3, "b": 1.0, "c": 2 / 3})

    def test_disconnected_default_warns(self):
        g = from_edge_list([("a", "b"), ("b", "c"), ("d", "e")])
        with self.assertWarns(DisconnectedGraphWarning):
            got = closeness(g)
        self.assertScores(got, {"a": 2 / 3, "b": 1.0, "c": 2 / 3, "d": 1.0, "e": 1.0})

    def test_disconnected_largest_component(self):
        g = from_edge_list([("a", "b"), ("b", "c"), ("d", "e")])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            got = closeness(g, component="largest")
        self.assertEqual(caught, [])
        self.assertScores(got, {"a": 2 / 3, "b": 1.0, "c": 2 / 3})

    def test_explicit_all_does_not_warn(self):
        g = Graph([Node(id="a"), Node(id="b"), Node(id="c")], [Edge("a", "b")])
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            got = closeness(g, component="all")
        self.assertEqual(caught, [])
        self.assertScores(got, {"a": 1.0, "b": 1.0, "c": 0.0})

    def test_bad_arguments(self):
        g = from_edge_list([("a", "b")])
        with self.assertRaises(ValueError):
            closeness(g, component="biggest")
        with self.assertRaises(ValueError):
            closeness(g, mode="sideways")


if __name__ == "__main__":
    unittest.main()
