"""Reading and writing of graph database files.

A database is a sequence of graphs, each introduced by a `t # gid` line and
followed by `v vid vlb` and `e frm to elb` lines. A `t # -1` line ends the
database.
"""
import codecs

from .graph import Graph


def _parse_error(file_name, lineno, line, reason):
    return ValueError('{}:{}: {}: {!r}'.format(file_name, lineno, reason, line))


def read_graphs(file_name, max_ngraphs=float('inf')):
    """Read at most `max_ngraphs` graphs from `file_name`.

    Vertex and edge labels are kept as the tokens read. Vertex ids must be
    dense and listed in order, and edges may only reference vertices already
    read.
    """
    graphs = list()
    with codecs.open(file_name, 'r', 'utf-8') as f:
        lines = [line.strip() for line in f.readlines()]
    tgraph = None
    for lineno, line in enumerate(lines, 1):
        if not line:
            continue
        cols = line.split()
        if cols[0] == 't':
            if tgraph is not None:
                graphs.append(tgraph)
                tgraph = None
            if cols[-1] == '-1' or len(graphs) >= max_ngraphs:
                break
            tgraph = Graph(int(cols[-1]) if len(cols) > 1 else len(graphs))
        elif cols[0] == 'v':
            if tgraph is None:
                raise _parse_error(file_name, lineno, line, 'vertex before graph')
            if len(cols) != 3:
                raise _parse_error(file_name, lineno, line, 'malformed vertex')
            if int(cols[1]) != tgraph.get_num_vertices():
                raise _parse_error(file_name, lineno, line,
                                   'vertex ids must be dense and ordered')
            tgraph.add_vertex(cols[2])
        elif cols[0] == 'e':
            if tgraph is None:
                raise _parse_error(file_name, lineno, line, 'edge before graph')
            if len(cols) != 4:
                raise _parse_error(file_name, lineno, line, 'malformed edge')
            frm, to = int(cols[1]), int(cols[2])
            nv = tgraph.get_num_vertices()
            if not (0 <= frm < nv and 0 <= to < nv):
                raise _parse_error(file_name, lineno, line, 'unknown vertex')
            tgraph.add_edge(frm, to, cols[3])
        else:
            raise _parse_error(file_name, lineno, line, 'unknown record')
    # adapt to input files that do not end with 't # -1'
    if tgraph is not None:
        graphs.append(tgraph)
    return graphs


def write_graphs(graphs, file_name):
    """Write `graphs` to `file_name`, terminated by `t # -1`."""
    with codecs.open(file_name, 'w', 'utf-8') as f:
        for g in graphs:
            f.write('t # {}\n'.format(g.gid))
            for vid, vlb in enumerate(g.vlbs):
                f.write('v {} {}\n'.format(vid, vlb))
            for e in g.edges:
                f.write('e {} {} {}\n'.format(e.frm, e.to, e.elb))
        f.write('t # -1\n')
