"""
Presentation data for automata: Graphviz digraphs and transition tables.
"""
import graphviz
import pandas as pd

from nfa2dfa.constants import EPSILON, NO_TRANSITION
from nfa2dfa.index import TransitionIndex
from nfa2dfa.states import display_name

INITIAL_MARKER = 'start'


def node_ids(automaton):
    """
    Map every state to a Graphviz node id.

    Ids are positional (n0, n1, ...) over the sorted states; names only ever
    appear in labels, so a state called TRAP or start never shares a node
    with the trap state or the initial marker.
    """
    states = set(automaton.states)
    states.add(automaton.initial_state)
    for t in automaton.transitions:
        states.add(t.state)
        states.update(t.next_states)
    return {state: f"n{i}" for i, state in enumerate(sorted(states))}


def to_digraph(automaton, title=None):
    """Create a graphical representation of the automaton using Graphviz."""
    ids = node_ids(automaton)
    dot = graphviz.Digraph(comment=title) if title else graphviz.Digraph()
    dot.attr(rankdir='LR')  # Left to right layout
    dot.attr(size='8,5')

    # Initial state pointer
    dot.node(INITIAL_MARKER, shape='point')

    for state in sorted(automaton.states):
        shape = 'doublecircle' if automaton.is_final(state) else 'circle'
        dot.node(ids[state], label=display_name(state), shape=shape)

    dot.edge(INITIAL_MARKER, ids[automaton.initial_state])

    for t in automaton.transitions:
        label = EPSILON if t.is_epsilon else t.symbol
        for next_state in t.next_states:
            dot.edge(ids[t.state], ids[next_state], label=label)

    return dot


def to_dot(automaton, title=None):
    """DOT source of :func:`to_digraph`; equal automata give equal text."""
    return to_digraph(automaton, title).source


def transition_table(automaton, mark_states=False):
    """
    One row per state and one column per symbol. Each cell holds the first
    next state, or ``-`` when there is none.
    """
    index = TransitionIndex(automaton.transitions)
    alphabet = list(automaton.alphabet)
    rows = []

    for state in automaton.states:
        label = display_name(state)
        if mark_states:
            if state == automaton.initial_state:
                label += " (Start)"
            if automaton.is_final(state):
                label += " (Final)"

        row = [label]
        for symbol in alphabet:
            next_states = index.next_states(state, symbol)
            row.append(display_name(next_states[0]) if next_states else NO_TRANSITION)
        rows.append(row)

    return pd.DataFrame(rows, columns=["State"] + alphabet)
