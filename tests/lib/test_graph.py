import pytest

from tspgraph.lib.graph import Edge, Graph


def test_init_empty_graph():
    """A newly initialized graph has no vertices or edges."""
    g = Graph()
    assert len(g) == 0
    assert g.vertex_count == 0
    assert g.edge_count() == 0
    assert g.name_to_index == {}
    assert g.index_to_name == {}
    assert not g.directed
    assert g.weighted


def test_insert_vertex_assigns_dense_indices():
    """Vertices get consecutive indices in order of first insertion."""
    g = Graph()
    assert g.insert_vertex("A") == 0
    assert g.insert_vertex("B") == 1
    assert g.insert_vertex("C") == 2
    assert g.name_to_index == {"A": 0, "B": 1, "C": 2}
    assert g.index_to_name == {0: "A", 1: "B", 2: "C"}
    assert g.adjacency == [[], [], []]


def test_insert_vertex_idempotent():
    """Inserting the same name twice changes nothing."""
    g = Graph()
    g.insert_vertex("A")
    g.insert_edge("A", "B", 1.0)
    before = (dict(g.name_to_index), dict(g.index_to_name), g.vertex_count)

    assert g.insert_vertex("A") == 0
    assert (dict(g.name_to_index), dict(g.index_to_name), g.vertex_count) == before
    assert list(g.neighbors(0)) == [Edge(1, 1.0)]


def test_mapping_is_bijection():
    g = Graph()
    for name in ["X", "Y", "Z", "Y", "X"]:
        g.insert_vertex(name)
    assert g.vertex_count == 3
    for index in range(g.vertex_count):
        assert g.name_to_index[g.index_to_name[index]] == index


def test_insert_edge_auto_inserts_endpoints():
    g = Graph(directed=True)
    g.insert_edge("A", "B", 2.5)
    assert "A" in g and "B" in g
    assert g.index_of("A") == 0
    assert g.index_of("B") == 1


def test_directed_edge_is_one_way():
    g = Graph(directed=True)
    g.insert_edge("A", "B", 2.0)
    assert list(g.neighbors(0)) == [Edge(1, 2.0)]
    assert list(g.neighbors(1)) == []


def test_undirected_edge_is_symmetric():
    """An undirected edge appears in both lists with the same weight."""
    g = Graph(directed=False)
    g.insert_edge("A", "B", 7.0)
    assert list(g.neighbors(0)) == [Edge(1, 7.0)]
    assert list(g.neighbors(1)) == [Edge(0, 7.0)]


def test_undirected_self_loop_inserted_once():
    g = Graph(directed=False)
    g.insert_edge("A", "A", 3.0)
    assert g.vertex_count == 1
    assert list(g.neighbors(0)) == [Edge(0, 3.0)]
    assert g.edge_count() == 1


def test_parallel_edges_are_kept():
    """There is no duplicate-edge detection."""
    g = Graph(directed=True)
    g.insert_edge("A", "B", 1.0)
    g.insert_edge("A", "B", 1.0)
    g.insert_edge("A", "B", 4.0)
    assert list(g.neighbors(0)) == [Edge(1, 1.0), Edge(1, 1.0), Edge(1, 4.0)]


def test_neighbors_preserve_insertion_order():
    g = Graph(directed=True)
    g.insert_edge("A", "D", 1.0)
    g.insert_edge("A", "B", 1.0)
    g.insert_edge("A", "C", 1.0)
    names = [g.name_of(e.neighbor) for e in g.neighbors(g.index_of("A"))]
    assert names == ["D", "B", "C"]


def test_unweighted_graph_drops_weights():
    g = Graph(weighted=False)
    g.insert_edge("A", "B", 5.0)
    edge = next(g.neighbors(0))
    assert edge.weight is None
    assert edge.cost == 1.0


def test_lookup_errors():
    g = Graph()
    g.insert_vertex("A")
    with pytest.raises(KeyError, match="does not exist"):
        g.index_of("B")
    with pytest.raises(KeyError, match="does not exist"):
        g.name_of(5)
    with pytest.raises(KeyError, match="does not exist"):
        g.neighbors(1)


def test_edge_weight():
    g = Graph(directed=True)
    g.insert_edge("A", "B", 2.0)
    g.insert_edge("A", "B", 9.0)
    assert g.edge_weight(0, 1) == 2.0
    assert g.edge_weight(1, 0) is None


def test_edges_reports_undirected_edges_once():
    g = Graph(directed=False)
    g.insert_edge("A", "B", 1.0)
    g.insert_edge("B", "C", 2.0)
    g.insert_edge("C", "C", 3.0)
    g.insert_edge("A", "B", 1.0)
    assert sorted(g.edges()) == [(0, 1, 1.0), (0, 1, 1.0), (1, 2, 2.0), (2, 2, 3.0)]
    # Adjacency still holds the mirrored entries
    assert g.edge_count() == 7


def test_edges_directed_reports_every_entry():
    g = Graph(directed=True)
    g.insert_edge("A", "B", 1.0)
    g.insert_edge("B", "A", 1.0)
    assert list(g.edges()) == [(0, 1, 1.0), (1, 0, 1.0)]


def test_names_and_repr():
    g = Graph(directed=True, weighted=False)
    g.insert_edge("A", "B")
    assert g.names() == ["A", "B"]
    assert repr(g) == "Graph(directed, unweighted, vertices=2, edges=1)"
