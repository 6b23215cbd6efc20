from collections import defaultdict

from nfa2dfa.constants import EPSILON_SYMBOLS
from nfa2dfa.states import as_state


def is_epsilon(symbol):
    """True for the empty symbol and the lambda glyph."""
    return symbol.strip() in EPSILON_SYMBOLS


def find_next_states(state, symbol, transitions):
    """
    Union of the next states of every transition leaving `state` on `symbol`.

    Duplicates are dropped; the order is the order in which the targets are
    stored in `transitions`.
    """
    state = as_state(state)
    result = []
    for t in transitions:
        if t.state == state and t.symbol == symbol:
            for next_state in t.next_states:
                if next_state not in result:
                    result.append(next_state)
    return result


class TransitionIndex:
    """Lookup table (state, symbol) -> next states, built once from a transition list."""

    def __init__(self, transitions):
        self._table = defaultdict(list)
        for t in transitions:
            targets = self._table[(t.state, t.symbol)]
            for next_state in t.next_states:
                if next_state not in targets:
                    targets.append(next_state)

    def next_states(self, state, symbol):
        return list(self._table.get((as_state(state), symbol), ()))

    def has_transition(self, state, symbol):
        return bool(self._table.get((as_state(state), symbol)))
