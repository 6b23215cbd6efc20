"""
Turning raw, form-style text into an :class:`Automaton`.
"""
from nfa2dfa.automaton import Automaton, Transition
from nfa2dfa.constants import COMPOSITE_OPEN, COMPOSITE_CLOSE, EPSILON
from nfa2dfa.errors import InvalidInputError
from nfa2dfa.index import is_epsilon


class TransitionRow:
    """One transition row as typed by the user: source, symbol, comma-separated next states."""

    def __init__(self, state, symbol, next_states):
        self.state = state
        self.symbol = symbol
        self.next_states = next_states


def _split_names(text):
    return [name.strip() for name in (text or '').split(',') if name.strip()]


def _check_name(name):
    if COMPOSITE_OPEN in name or COMPOSITE_CLOSE in name:
        raise InvalidInputError(
            f'State names cannot contain the "{COMPOSITE_OPEN}" or "{COMPOSITE_CLOSE}" character: {name!r}')


def build_automaton(initial_state, final_states_text, rows):
    """
    Validate the form fields and build the automaton they describe.

    An empty symbol means a lambda transition. Rows missing a source or a
    target are skipped. States are collected in the order they appear.
    """
    initial_state = (initial_state or '').strip()
    final_states = _split_names(final_states_text)

    if not initial_state:
        raise InvalidInputError("An initial state is required")
    if not final_states:
        raise InvalidInputError("At least one final state is required")
    for name in [initial_state] + final_states:
        _check_name(name)

    states = [initial_state]
    alphabet = []
    transitions = []

    for row in rows:
        state = (row.state or '').strip()
        next_states = _split_names(row.next_states)
        if not state or not next_states:
            continue
        for name in [state] + next_states:
            _check_name(name)

        symbol = (row.symbol or '').strip() or EPSILON
        transitions.append(Transition(state, next_states, symbol))

        if not is_epsilon(symbol) and symbol not in alphabet:
            alphabet.append(symbol)
        for name in [state] + next_states:
            if name not in states:
                states.append(name)

    if not transitions:
        raise InvalidInputError("At least one transition is required")

    for name in final_states:
        if name not in states:
            states.append(name)

    return Automaton(initial_state, final_states, states, alphabet, transitions)
