"""
Epsilon (lambda) closures and elimination of epsilon transitions.
"""
import logging
from collections import defaultdict

from nfa2dfa.automaton import Automaton, Transition
from nfa2dfa.index import TransitionIndex, is_epsilon
from nfa2dfa.states import as_state

logger = logging.getLogger(__name__)


def _epsilon_targets(transitions):
    targets = defaultdict(list)
    for t in transitions:
        if t.is_epsilon:
            targets[t.state].extend(t.next_states)
    return targets


def _closure(state, epsilon_targets):
    stack = [state]
    closure = [state]
    visited = {state}

    while stack:
        current_state = stack.pop()
        for next_state in epsilon_targets.get(current_state, ()):
            if next_state not in visited:
                visited.add(next_state)
                closure.append(next_state)
                stack.append(next_state)
    return closure


def epsilon_closure(state, transitions):
    """
    States reachable from `state` using only epsilon transitions, `state`
    itself included. Cycles of epsilon transitions are followed once.
    """
    return _closure(as_state(state), _epsilon_targets(transitions))


def eliminate_epsilon(nfa):
    """
    Build an equivalent automaton without epsilon transitions.

    Returns `nfa` itself when it has no epsilon transitions. Otherwise every
    state gets exactly one transition per alphabet symbol, whose next states
    are the epsilon closures of the symbol successors of the state's closure.
    That set may be empty. The input automaton is left untouched.
    """
    if not nfa.has_epsilon_transitions():
        return nfa

    epsilon_targets = _epsilon_targets(nfa.transitions)
    index = TransitionIndex(t for t in nfa.transitions if not is_epsilon(t.symbol))
    closures = {}

    def closure_of(state):
        if state not in closures:
            closures[state] = _closure(state, epsilon_targets)
        return closures[state]

    new_transitions = []
    for state in nfa.states:
        state_closure = closure_of(state)
        logger.debug("Lambda-closure of %s: %s", state, state_closure)

        for symbol in nfa.alphabet:
            symbol_next_states = set()
            for closure_state in state_closure:
                for next_state in index.next_states(closure_state, symbol):
                    symbol_next_states.update(closure_of(next_state))

            next_states = sorted(symbol_next_states)
            logger.debug("NFA closure: %s -> %s = %s", state, symbol, next_states)
            new_transitions.append(Transition(state, next_states, symbol))

    final_states = list(nfa.final_states)
    # A lambda path from the initial state to a final state accepts the empty word
    initial_closure = closure_of(nfa.initial_state)
    if nfa.initial_state not in final_states and any(s in final_states for s in initial_closure):
        final_states.append(nfa.initial_state)

    return Automaton(
        nfa.initial_state,
        final_states,
        list(nfa.states),
        list(nfa.alphabet),
        new_transitions,
    )
