"""Depth-first backtracking search over VF2 states."""
import logging

from .feasibility import FeasibilityChecker

logger = logging.getLogger(__name__)


class SearchBudgetExceeded(RuntimeError):
    """Raised when a search visits more states than its budget allows."""

    def __init__(self, max_states):
        super(SearchBudgetExceeded, self).__init__(
            'search exceeded the budget of {} states'.format(max_states))
        self.max_states = max_states


class SearchDriver(object):
    """Find the first complete state reachable from a root state.

    The search is a depth-first walk with an explicit stack, so deep
    patterns need no interpreter recursion. A child state is an extended copy
    of its parent and backtracking just drops it.
    """

    def __init__(self, g1, g2, max_states=None):
        """Initialize SearchDriver instance.

        Args:
            g1: pattern graph.
            g2: target graph.
            max_states: optional cap on the number of visited states.
        """
        self.checker = FeasibilityChecker(g1, g2)
        self.max_states = max_states
        self.num_states = 0
        self.num_checks = 0

    def run(self, state):
        """Return the first complete state found, or None."""
        self.num_states = 0
        self.num_checks = 0
        result = self._solve(state)
        logger.debug('%s after %d states and %d feasibility checks',
                     'found' if result is not None else 'exhausted',
                     self.num_states, self.num_checks)
        return result

    def _visit(self, state):
        self.num_states += 1
        if self.max_states is not None and self.num_states > self.max_states:
            raise SearchBudgetExceeded(self.max_states)
        return state.is_complete()

    def _solve(self, state):
        if self._visit(state):
            return state
        # One entry per search depth: a state and its untried candidates.
        stack = [(state, iter(state.candidate_pairs()))]
        while stack:
            state, pairs = stack[-1]
            for n, m in pairs:
                self.num_checks += 1
                if not self.checker.is_feasible(state, n, m):
                    continue
                child = state.extend(n, m)
                if self._visit(child):
                    return child
                stack.append((child, iter(child.candidate_pairs())))
                break
            else:
                stack.pop()
        return None
