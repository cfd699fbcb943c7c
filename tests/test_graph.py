from dsakit.graph import Graph


def test_undirected_edges_go_both_ways():
    g = Graph()
    g.add_edge(1, 2, False)
    g.add_edge(1, 3, False)
    assert g.neighbours(1) == [2, 3]
    assert g.neighbours(2) == [1]
    assert g.neighbours(3) == [1]
    assert len(g) == 3


def test_directed_edge_one_way():
    g = Graph()
    g.add_edge(1, 2, True)
    assert g.neighbours(1) == [2]
    assert g.neighbours(2) == []
    assert 2 not in g


def test_unknown_vertex_has_no_neighbours():
    assert Graph().neighbours(42) == []


def test_neighbours_is_a_copy():
    g = Graph()
    g.add_edge(1, 2, False)
    g.neighbours(1).append(99)
    assert g.neighbours(1) == [2]


def test_format_simple():
    g = Graph()
    g.add_edge(1, 2, False)
    assert g.format() == "1 -> 2\n2 -> 1"


def test_format_one_line_per_vertex():
    g = Graph()
    edges = [(0, 1), (1, 2), (2, 3), (3, 0)]
    for u, v in edges:
        g.add_edge(u, v, False)
    lines = g.format().splitlines()
    assert len(lines) == len(g)
    assert lines[0].startswith("0 ->")
    assert Graph().format() == ""