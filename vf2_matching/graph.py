"""Definitions of Edge and Graph."""
import networkx as nx


VACANT_EDGE_ID = -1
VACANT_VERTEX_ID = -1
VACANT_EDGE_LABEL = -1
VACANT_VERTEX_LABEL = -1
VACANT_GRAPH_ID = -1


class Edge(object):
    """Edge class."""

    def __init__(self,
                 eid=VACANT_EDGE_ID,
                 frm=VACANT_VERTEX_ID,
                 to=VACANT_VERTEX_ID,
                 elb=VACANT_EDGE_LABEL):
        """Initialize Edge instance.

        Args:
            eid: edge id.
            frm: source vertex id.
            to: destination vertex id.
            elb: edge label.
        """
        self.eid = eid
        self.frm = frm
        self.to = to
        self.elb = elb

    def __repr__(self):
        """Represent Edge in string way."""
        return '(eid={}, frm={}, to={}, elb={})'.format(
            self.eid, self.frm, self.to, self.elb
        )


class Graph(object):
    """Labeled directed multigraph.

    Vertices are dense, zero-based ids appended by `add_vertex`. Every edge
    is kept (parallel edges are not merged) and threaded into two per-vertex
    lists, `out_edges` by source and `in_edges` by destination. `succ` and
    `pred` hold the distinct neighbours of each vertex.

    The graph is read-only once populated and may be shared by any number of
    searches.
    """

    def __init__(self, gid=VACANT_GRAPH_ID):
        """Initialize Graph instance."""
        self.gid = gid
        self.vlbs = list()
        self.edges = list()
        self.out_edges = list()
        self.in_edges = list()
        self.succ = list()
        self.pred = list()

    def get_num_vertices(self):
        """Return number of vertices in the graph."""
        return len(self.vlbs)

    def get_num_edges(self):
        """Return number of edges in the graph."""
        return len(self.edges)

    def add_vertex(self, vlb):
        """Append a vertex labeled `vlb` and return its id."""
        self.vlbs.append(vlb)
        self.out_edges.append(list())
        self.in_edges.append(list())
        self.succ.append(set())
        self.pred.append(set())
        return len(self.vlbs) - 1

    def add_edge(self, frm, to, elb):
        """Append an edge `frm` -> `to` labeled `elb` and return its id."""
        e = Edge(len(self.edges), frm, to, elb)
        # Fail on a bad id before mutating anything.
        out_edges, in_edges = self.out_edges[frm], self.in_edges[to]
        self.edges.append(e)
        out_edges.append(e)
        in_edges.append(e)
        self.succ[frm].add(to)
        self.pred[to].add(frm)
        return e.eid

    def has_edge(self, frm, to, elb=None):
        """Check if an edge `frm` -> `to` exists, labeled `elb` if given."""
        for e in self.out_edges[frm]:
            if e.to == to and (elb is None or e.elb == elb):
                return True
        return False

    def edge_labels(self, frm, to):
        """Return the labels of all edges `frm` -> `to`, one per edge."""
        return [e.elb for e in self.out_edges[frm] if e.to == to]

    def display(self):
        """Print the graph in the graph database format."""
        lines = ['t # {}'.format(self.gid)]
        for vid, vlb in enumerate(self.vlbs):
            lines.append('v {} {}'.format(vid, vlb))
        for e in self.edges:
            lines.append('e {} {} {}'.format(e.frm, e.to, e.elb))
        display_str = '\n'.join(lines)
        print(display_str)
        return display_str

    def to_networkx(self):
        """Build a networkx MultiDiGraph with `label` attributes."""
        gnx = nx.MultiDiGraph(gid=self.gid)
        for vid, vlb in enumerate(self.vlbs):
            gnx.add_node(vid, label=vlb)
        for e in self.edges:
            gnx.add_edge(e.frm, e.to, label=e.elb)
        return gnx

    @classmethod
    def from_networkx(cls, gnx, gid=VACANT_GRAPH_ID,
                      node_label='label', edge_label='label'):
        """Build a Graph from a networkx (multi)digraph.

        Nodes are renumbered in `gnx.nodes` order. Missing label attributes
        become VACANT_VERTEX_LABEL / VACANT_EDGE_LABEL.
        """
        g = cls(gid)
        vids = dict()
        for node, data in gnx.nodes(data=True):
            vids[node] = g.add_vertex(data.get(node_label, VACANT_VERTEX_LABEL))
        for frm, to, data in gnx.edges(data=True):
            g.add_edge(vids[frm], vids[to],
                       data.get(edge_label, VACANT_EDGE_LABEL))
        return g

    def plot(self):
        """Visualize the graph."""
        try:
            import matplotlib.pyplot as plt
        except Exception as e:
            print('Can not plot graph: {}'.format(e))
            return
        gnx = nx.DiGraph(self.to_networkx())
        vlbs = {vid: vlb for vid, vlb in enumerate(self.vlbs)}
        elbs = dict()
        for e in self.edges:
            elbs.setdefault((e.frm, e.to), []).append(str(e.elb))
        elbs = {k: ','.join(v) for k, v in elbs.items()}
        fsize = (min(16, 1 * len(self.vlbs)), min(16, 1 * len(self.vlbs)))
        plt.figure(3, figsize=fsize)
        pos = nx.spring_layout(gnx, seed=0)
        nx.draw_networkx(gnx, pos, arrows=True, with_labels=True, labels=vlbs)
        nx.draw_networkx_edge_labels(gnx, pos, edge_labels=elbs)
        plt.show()
