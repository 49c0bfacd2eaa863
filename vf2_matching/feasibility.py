"""Feasibility rules of VF2."""
import collections

from .state import NULL_VID


def intersection_size(a, b):
    """Return the size of the intersection of two sets."""
    if len(a) > len(b):
        a, b = b, a
    return sum(1 for k in a if k in b)


class FeasibilityChecker(object):
    """Semantic and syntactic feasibility of a candidate pair.

    Every check takes the current state and a candidate (n, m), n a pattern
    vertex and m a target vertex, both unmapped. The syntactic rules are:

    pred, succ: consistency of the partial mapping obtained by adding (n, m).
    in, out: pruning, a 1-look-ahead over the frontier sets.
    new: pruning, a 2-look-ahead over the vertices not yet reached.

    In exact mode a look-ahead term must be equal on both sides, in subgraph
    mode the pattern side must not exceed the target side.
    """

    def __init__(self, g1, g2):
        """Initialize FeasibilityChecker instance."""
        self.g1 = g1
        self.g2 = g2

    def is_feasible(self, state, n, m):
        return (self.check_sem_rules(state, n, m) and
                self.check_syn_rules(state, n, m))

    def check_sem_rules(self, state, n, m):
        # Edge labels are checked by the pred and succ rules.
        return self.g1.vlbs[n] == self.g2.vlbs[m]

    def check_syn_rules(self, state, n, m):
        return (self.check_pred_rule(state, n, m) and
                self.check_succ_rule(state, n, m) and
                self.check_in_rule(state, n, m) and
                self.check_out_rule(state, n, m) and
                self.check_new_rule(state, n, m))

    def _compatible(self, state, card_1, card_2):
        if state.subisomorphism:
            return card_1 <= card_2
        return card_1 == card_2

    def _edges_compatible(self, state, frm_1, to_1, frm_2, to_2):
        """Compare the labels of the edges frm_1 -> to_1 and frm_2 -> to_2.

        In exact mode both sides carry the same labels with the same
        multiplicities, in subgraph mode every pattern label is present in
        the target.
        """
        labels_1 = self.g1.edge_labels(frm_1, to_1)
        labels_2 = self.g2.edge_labels(frm_2, to_2)
        if state.subisomorphism:
            return set(labels_1) <= set(labels_2)
        return collections.Counter(labels_1) == collections.Counter(labels_2)

    def check_pred_rule(self, state, n, m):
        """Check the mapped predecessors of n and m.

        Every mapped predecessor vid of n needs edges core_1[vid] -> m with
        compatible labels, and every mapped predecessor of m must correspond
        to a predecessor of n. A self-loop on n is checked against m itself.
        """
        for vid in self.g1.pred[n]:
            map_vid = m if vid == n else state.core_1[vid]
            if map_vid == NULL_VID:
                continue
            if not self._edges_compatible(state, vid, n, map_vid, m):
                return False
        for v2 in self.g2.pred[m]:
            v1 = n if v2 == m else state.core_2[v2]
            if v1 == NULL_VID:
                continue
            if v1 not in self.g1.pred[n]:
                return False
        return True

    def check_succ_rule(self, state, n, m):
        """Check the mapped successors of n and m, see check_pred_rule."""
        for vid in self.g1.succ[n]:
            map_vid = m if vid == n else state.core_1[vid]
            if map_vid == NULL_VID:
                continue
            if not self._edges_compatible(state, n, vid, m, map_vid):
                return False
        for v2 in self.g2.succ[m]:
            v1 = n if v2 == m else state.core_2[v2]
            if v1 == NULL_VID:
                continue
            if v1 not in self.g1.succ[n]:
                return False
        return True

    def check_in_rule(self, state, n, m):
        card_succ_1 = intersection_size(state.in_1, self.g1.succ[n])
        card_succ_2 = intersection_size(state.in_2, self.g2.succ[m])
        if not self._compatible(state, card_succ_1, card_succ_2):
            return False
        # The predecessor term is only checked for subgraph isomorphism.
        if state.subisomorphism:
            card_pred_1 = intersection_size(state.in_1, self.g1.pred[n])
            card_pred_2 = intersection_size(state.in_2, self.g2.pred[m])
            if card_pred_1 > card_pred_2:
                return False
        return True

    def check_out_rule(self, state, n, m):
        card_succ_1 = intersection_size(state.out_1, self.g1.succ[n])
        card_succ_2 = intersection_size(state.out_2, self.g2.succ[m])
        if not self._compatible(state, card_succ_1, card_succ_2):
            return False
        card_pred_1 = intersection_size(state.out_1, self.g1.pred[n])
        card_pred_2 = intersection_size(state.out_2, self.g2.pred[m])
        return self._compatible(state, card_pred_1, card_pred_2)

    def check_new_rule(self, state, n, m):
        card_pred_1 = self._count_new(state.core_1, state.in_1, state.out_1,
                                      self.g1.pred[n])
        card_pred_2 = self._count_new(state.core_2, state.in_2, state.out_2,
                                      self.g2.pred[m])
        if not self._compatible(state, card_pred_1, card_pred_2):
            return False
        card_succ_1 = self._count_new(state.core_1, state.in_1, state.out_1,
                                      self.g1.succ[n])
        card_succ_2 = self._count_new(state.core_2, state.in_2, state.out_2,
                                      self.g2.succ[m])
        return self._compatible(state, card_succ_1, card_succ_2)

    @staticmethod
    def _count_new(core, in_set, out_set, neighbours):
        """Count neighbours that are unmapped and outside both frontiers."""
        return sum(1 for v in neighbours
                   if core[v] == NULL_VID and
                   v not in in_set and v not in out_set)
