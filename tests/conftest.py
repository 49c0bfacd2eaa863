"""Shared graph builders."""
import pytest

from vf2_matching.graph import Graph


def make_graph(vlbs, edges, gid=0):
    """Build a Graph from vertex labels and (frm, to, elb) triples."""
    g = Graph(gid)
    for vlb in vlbs:
        g.add_vertex(vlb)
    for frm, to, elb in edges:
        g.add_edge(frm, to, elb)
    return g


def permuted(g, perm, gid=None):
    """Return a copy of `g` where vertex v becomes perm[v]."""
    vlbs = [None] * g.get_num_vertices()
    for v, vlb in enumerate(g.vlbs):
        vlbs[perm[v]] = vlb
    edges = [(perm[e.frm], perm[e.to], e.elb) for e in g.edges]
    return make_graph(vlbs, edges, g.gid if gid is None else gid)


@pytest.fixture
def triangle():
    return make_graph(['A', 'A', 'A'], [(0, 1, 'x'), (1, 2, 'x'), (2, 0, 'x')])


@pytest.fixture
def triangle_plus_b():
    return make_graph(['A', 'A', 'A', 'B'],
                      [(0, 1, 'x'), (1, 2, 'x'), (2, 0, 'x')])
