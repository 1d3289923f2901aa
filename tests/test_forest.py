import os
import sys

import networkx as nx

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from girth import back_edges, spanning_forest
from utils import Graph


def test_forest_takes_edges_in_insertion_order():
    # K5 plus a path on 4 vertices
    H = nx.disjoint_union(nx.complete_graph(5), nx.path_graph(4))
    G = Graph.from_networkx(H)
    forest = spanning_forest(G)
    # star around 0 first, then every path edge
    assert [e.id for e in forest] == [0, 1, 2, 3, 10, 11, 12]


def test_forest_skips_edges_closing_a_cycle():
    G = Graph.from_edges([(0, 1), (2, 3), (1, 0), (1, 3), (0, 2), (4, 5)])
    forest = spanning_forest(G)
    assert [e.id for e in forest] == [0, 1, 3, 5]


def test_forest_size_matches_components():
    H = nx.disjoint_union(nx.petersen_graph(), nx.complete_graph(4))
    H.add_node(100)
    G = Graph.from_networkx(H)
    forest = spanning_forest(G)
    components = nx.number_connected_components(H)
    assert len(forest) == G.num_vertices - components
    assert nx.is_forest(nx.Graph([(e.u, e.v) for e in forest]))


def test_back_edges_complement_forest():
    G = Graph.from_networkx(nx.complete_graph(5))
    forest = spanning_forest(G)
    back = back_edges(G, forest)
    assert len(forest) + len(back) == G.num_edges
    assert not {e.id for e in forest} & {e.id for e in back}
    # the star around 0 comes first in insertion order
    assert all(0 in (e.u, e.v) for e in forest)


def test_parallel_edge_is_back_edge():
    G = Graph.from_edges([(0, 1), (0, 1)])
    forest = spanning_forest(G)
    assert [e.id for e in forest] == [0]
    assert [e.id for e in back_edges(G, forest)] == [1]


def test_tree_has_no_back_edges():
    G = Graph.from_networkx(nx.path_graph(6))
    assert back_edges(G, spanning_forest(G)) == []
