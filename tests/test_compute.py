import unittest

from netcentral.centrality import MEASURES, compute_centralities, rank
from netcentral.graph import from_edge_list


SCENARIO_EDGES = [(1, 2, 2), (1, 3, 1), (2, 4, 1), (3, 4, 2), (3, 5, 1), (5, 2, 2)]


class TestComputeCentralities(unittest.TestCase):
    def test_all_measures_per_node(self):
        scores = compute_centralities(from_edge_list(SCENARIO_EDGES))
        self.assertEqual(list(scores), [1, 2, 3, 4, 5])
        for vals in scores.values():
            self.assertEqual(tuple(vals), MEASURES)
        self.assertEqual(scores[2]["degree"], 5)
        self.assertAlmostEqual(scores[2]["betweenness"], 1.5)
        self.assertAlmostEqual(scores[2]["closeness"], 0.8)

    def test_subset_and_unknown(self):
        g = from_edge_list(SCENARIO_EDGES)
        scores = compute_centralities(g, ["degree"])
        self.assertEqual(scores[1], {"degree": 3})
        with self.assertRaises(ValueError):
            compute_centralities(g, ["pagerank"])

    def test_largest_component_leaves_none(self):
        g = from_edge_list([("a", "b"), ("b", "c"), ("d", "e")])
        scores = compute_centralities(g, ["closeness"], closeness_component="largest")
        self.assertIsNone(scores["d"]["closeness"])
        self.assertAlmostEqual(scores["b"]["closeness"], 1.0)

    def test_rank(self):
        g = from_edge_list([("a", "b"), ("b", "c"), ("d", "e")])
        scores = compute_centralities(g, ["closeness", "degree"], closeness_component="largest")
        ranked = rank(scores, "closeness")
        self.assertEqual(ranked[0][0], "b")
        self.assertEqual({nid for nid, _ in ranked[-2:]}, {"d", "e"})
        self.assertEqual([nid for nid, _ in rank(scores, "degree", top=1)], ["b"])


if __name__ == "__main__":
    unittest.main()
