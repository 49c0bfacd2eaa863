"""Entry points: isomorphism and subgraph isomorphism tests."""
import collections
import logging

from .search import SearchDriver
from .state import MatchMode
from .state import NULL_VID
from .state import State

logger = logging.getLogger(__name__)


def _counts_allow(g1, g2, mode):
    nv1, nv2 = g1.get_num_vertices(), g2.get_num_vertices()
    ne1, ne2 = g1.get_num_edges(), g2.get_num_edges()
    if mode is MatchMode.SUBGRAPH:
        return nv1 <= nv2 and ne1 <= ne2
    return nv1 == nv2 and ne1 == ne2


def match(g1, g2, mode=MatchMode.EXACT, max_states=None):
    """Match pattern `g1` against target `g2`.

    Returns:
        The witness mapping as a list, mapping[n] being the target vertex of
        pattern vertex n, or None when there is no match. Graphs whose
        vertex or edge counts rule out a match are rejected without search.

    Raises:
        ValueError: `mode` is not a MatchMode or one of its values.
        SearchBudgetExceeded: more than `max_states` states were visited.
    """
    mode = MatchMode(mode)
    if not _counts_allow(g1, g2, mode):
        logger.debug('graphs %s and %s rejected by the size check',
                     g1.gid, g2.gid)
        return None
    driver = SearchDriver(g1, g2, max_states=max_states)
    state = driver.run(State(g1, g2, mode))
    if state is None:
        return None
    return state.mapping()


def isomorphic(g1, g2, max_states=None):
    """Check if `g1` and `g2` are isomorphic."""
    return match(g1, g2, MatchMode.EXACT, max_states) is not None


def sub_isomorphic(g1, g2, max_states=None):
    """Check if `g1` is isomorphic to a subgraph of `g2`."""
    return match(g1, g2, MatchMode.SUBGRAPH, max_states) is not None


def check_mapping(g1, g2, mapping, mode=MatchMode.EXACT):
    """Verify a witness mapping of `g1` into `g2`.

    The mapping must be injective and label preserving, and every edge of
    `g1` must be present with its label in `g2`. In exact mode the mapping
    must also be a bijection under which both graphs have the same edges,
    parallel edges counted with their multiplicity.
    """
    mode = MatchMode(mode)
    if len(mapping) != g1.get_num_vertices():
        return False
    if any(m == NULL_VID for m in mapping):
        return False
    if len(set(mapping)) != len(mapping):
        return False
    for n, m in enumerate(mapping):
        if g1.vlbs[n] != g2.vlbs[m]:
            return False
    mapped = collections.Counter(
        (mapping[e.frm], mapping[e.to], e.elb) for e in g1.edges)
    present = collections.Counter((e.frm, e.to, e.elb) for e in g2.edges)
    if mode is MatchMode.SUBGRAPH:
        return set(mapped) <= set(present)
    return (g1.get_num_vertices() == g2.get_num_vertices() and
            mapped == present)
