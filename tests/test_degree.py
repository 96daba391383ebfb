import unittest

from netcentral.centrality import degree
from netcentral.graph import from_edge_list


SCENARIO_EDGES = [(1, 2, 2), (1, 3, 1), (2, 4, 1), (3, 4, 2), (3, 5, 1), (5, 2, 2)]


class TestDegree(unittest.TestCase):
    def test_scenario_vector(self):
        g = from_edge_list(SCENARIO_EDGES)
        self.assertEqual(degree(g), {1: 3, 2: 5, 3: 4, 4: 3, 5: 3})

    def test_sum_is_twice_edges_undirected(self):
        g = from_edge_list(SCENARIO_EDGES)
        self.assertEqual(sum(degree(g).values()), 2 * g.total_weight())
        self.assertEqual(sum(degree(g, weighted=False).values()), 2 * g.number_of_edges())

    def test_directed_in_out_split(self):
        g = from_edge_list(SCENARIO_EDGES, directed=True)
        ins = degree(g, mode="in")
        outs = degree(g, mode="out")
        both = degree(g)
        self.assertEqual(sum(ins.values()), g.total_weight())
        self.assertEqual(sum(outs.values()), g.total_weight())
        self.assertEqual(outs[1], 3)
        self.assertEqual(ins[1], 0)
        self.assertEqual(ins[2], 4)
        for nid in g.nodes:
            self.assertEqual(both[nid], ins[nid] + outs[nid])

    def test_parallel_edges_and_loops(self):
        g = from_edge_list([("a", "b"), ("a", "b"), ("a", "a")])
        self.assertEqual(degree(g), {"a": 4, "b": 2})

    def test_normalized(self):
        g = from_edge_list([("c", "a"), ("c", "b"), ("c", "d")])
        d = degree(g, normalized=True)
        self.assertAlmostEqual(d["c"], 1.0)
        self.assertAlmostEqual(d["a"], 1 / 3)

    def test_bad_mode(self):
        with self.assertRaises(ValueError):
            degree(from_edge_list([("a", "b")]), mode="both")


if __name__ == "__main__":
    unittest.main()
