"""Partial mapping state of the VF2 search."""
import enum

from .candidates import gen_candidate_pairs

NULL_VID = -1


class MatchMode(enum.Enum):
    """Cardinality policy of the look-ahead rules."""

    EXACT = 'iso'
    SUBGRAPH = 'subiso'


class State(object):
    """Possible state of the search.

    Attributes:
        g1, g2: pattern and target graph, shared read-only.
        mode: MatchMode, exact or subgraph isomorphism.
        pattern_size, target_size: vertex counts of `g1` and `g2`.
        core_1, core_2: core_1[n] is the target vertex paired with pattern
            vertex n, or NULL_VID; core_2 is the inverse.
        m1, m2: mapped pattern / target vertices.
        in_1, in_2: unmapped vertices that are the origin of an edge ending
            in a mapped vertex.
        out_1, out_2: unmapped vertices that are the destination of an edge
            starting from a mapped vertex.
    """

    def __init__(self, g1, g2, mode=MatchMode.EXACT):
        """Initialize an empty State instance."""
        self.g1 = g1
        self.g2 = g2
        self.mode = MatchMode(mode)
        self.pattern_size = g1.get_num_vertices()
        self.target_size = g2.get_num_vertices()
        self.core_1 = [NULL_VID] * self.pattern_size
        self.core_2 = [NULL_VID] * self.target_size
        self.m1, self.m2 = set(), set()
        self.in_1, self.in_2 = set(), set()
        self.out_1, self.out_2 = set(), set()

    @property
    def subisomorphism(self):
        return self.mode is MatchMode.SUBGRAPH

    def copy(self):
        """Return an independent copy; the graphs stay shared."""
        s = State.__new__(State)
        s.g1, s.g2, s.mode = self.g1, self.g2, self.mode
        s.pattern_size, s.target_size = self.pattern_size, self.target_size
        s.core_1, s.core_2 = list(self.core_1), list(self.core_2)
        s.m1, s.m2 = set(self.m1), set(self.m2)
        s.in_1, s.in_2 = set(self.in_1), set(self.in_2)
        s.out_1, s.out_2 = set(self.out_1), set(self.out_2)
        return s

    def extend(self, n, m):
        """Return a new state with the pair (n, m) added to the mapping."""
        s = self.copy()
        s.add_new_pair(n, m)
        return s

    def add_new_pair(self, n, m):
        """Add the pair (n, m) in place and update the frontier sets."""
        self.m1.add(n)
        self.m2.add(m)
        self.core_1[n] = m
        self.core_2[m] = n
        for u in self.g1.pred[n]:
            if self.core_1[u] == NULL_VID:
                self.in_1.add(u)
        for u in self.g2.pred[m]:
            if self.core_2[u] == NULL_VID:
                self.in_2.add(u)
        for u in self.g1.succ[n]:
            if self.core_1[u] == NULL_VID:
                self.out_1.add(u)
        for u in self.g2.succ[m]:
            if self.core_2[u] == NULL_VID:
                self.out_2.add(u)
        self.in_1.discard(n)
        self.out_1.discard(n)
        self.in_2.discard(m)
        self.out_2.discard(m)

    def candidate_pairs(self):
        return gen_candidate_pairs(self)

    def is_complete(self):
        return len(self.m1) == self.pattern_size

    def mapping(self):
        """Return the witness mapping, mapping()[n] = core_1[n]."""
        return list(self.core_1)

    def display(self):
        """Print the mapping relationship."""
        lines = ['{} mapping relationship found:'.format(
            'Subgraph isomorphism' if self.subisomorphism else 'Isomorphism')]
        for n, m in enumerate(self.core_1):
            lines.append('{} {}'.format(n, m))
        display_str = '\n'.join(lines)
        print(display_str)
        return display_str

    def __repr__(self):
        return 'State(mode={}, mapped={}/{})'.format(
            self.mode.name, len(self.m1), self.pattern_size)
