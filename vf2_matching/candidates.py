"""Computation of the candidate pairs set P(s)."""


def gen_candidate_pairs(state):
    """Return the list of pairs (n, m) candidate for inclusion in `state`.

    Priority: the out-frontiers if both are non-empty, else the
    in-frontiers if both are non-empty, else every unmapped vertex. One side
    is fixed to its largest vertex and the other side ranges over the chosen
    set in ascending order.

    For isomorphism the fixed vertex is on the target side: every target
    vertex has to be covered, so the largest one must pair with some pattern
    vertex of the same set. For subgraph isomorphism a target vertex may stay
    uncovered, so the fixed vertex is taken on the pattern side instead.
    """
    if state.out_1 and state.out_2:
        set_1, set_2 = state.out_1, state.out_2
    elif state.in_1 and state.in_2:
        set_1, set_2 = state.in_1, state.in_2
    else:
        set_1 = [n for n in range(state.pattern_size) if n not in state.m1]
        set_2 = [m for m in range(state.target_size) if m not in state.m2]
        if not set_1 or not set_2:
            return []

    if state.subisomorphism:
        max_vid1 = max(set_1)
        return [(max_vid1, m) for m in sorted(set_2)]
    max_vid2 = max(set_2)
    return [(n, max_vid2) for n in sorted(set_1)]
