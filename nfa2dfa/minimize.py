"""
DFA minimization by merging equivalent states.

Two states are merged when they agree on acceptance and have the same next
states on every symbol. The surviving state of a pair is the second one,
unless the first is the initial state; the initial state and the trap state
are never removed.

Three modes are available:

- ``single``: one pass over every pair of states
- ``converge``: single passes repeated until nothing more merges
- ``partition``: partition refinement, giving the minimal DFA
"""
import logging

from nfa2dfa.automaton import Transition
from nfa2dfa.constants import DEFAULT_MINIMIZE_MODE, MINIMIZE_MODES
from nfa2dfa.index import TransitionIndex
from nfa2dfa.states import TRAP

logger = logging.getLogger(__name__)


def equivalent_states(dfa, p, q, index=None):
    """True when `p` and `q` agree on acceptance and on the stored next states of every symbol."""
    if dfa.is_final(p) != dfa.is_final(q):
        return False
    if index is None:
        index = TransitionIndex(dfa.transitions)
    return all(index.next_states(p, symbol) == index.next_states(q, symbol) for symbol in dfa.alphabet)


def _merge(dfa, remove, replace):
    """Remove `remove` from `dfa`, redirecting its incoming transitions to `replace`."""
    logger.debug("Merging %s into %s", remove, replace)

    dfa.states = [s for s in dfa.states if s != remove]

    transitions = []
    for t in dfa.transitions:
        if t.state == remove:
            continue
        if remove in t.next_states:
            t = Transition(t.state, [replace if n == remove else n for n in t.next_states], t.symbol)
        transitions.append(t)
    dfa.transitions = transitions

    dfa.final_states = [s for s in dfa.final_states if s != remove]


def _single_pass(dfa):
    """One nested scan over the states; returns the number of merges done."""
    merges = 0
    index = TransitionIndex(dfa.transitions)

    for p in list(dfa.states):
        for q in list(dfa.states):
            # p may have been merged away during this inner scan
            if p not in dfa.states:
                break
            if p == q or q not in dfa.states:
                continue
            if not equivalent_states(dfa, p, q, index):
                continue

            remove, replace = p, q
            if remove == dfa.initial_state:
                remove, replace = replace, remove

            logger.debug("The two states are equal [%s = %s]", remove, replace)
            if remove == TRAP:
                logger.debug("Trap state will not be removed.")
                continue

            _merge(dfa, remove, replace)
            index = TransitionIndex(dfa.transitions)
            merges += 1

    return merges


def _refine_partition(dfa):
    """Split the states into classes of equivalent states."""
    index = TransitionIndex(dfa.transitions)
    final_states = [s for s in dfa.states if dfa.is_final(s)]
    non_final_states = [s for s in dfa.states if not dfa.is_final(s)]
    partitions = [p for p in (final_states, non_final_states) if p]

    # Repeatedly refine the partition until no more refinements are possible
    prev_partition_count = 0
    while len(partitions) != prev_partition_count:
        prev_partition_count = len(partitions)
        block_of = {state: idx for idx, partition in enumerate(partitions) for state in partition}
        new_partitions = []

        for partition in partitions:
            if len(partition) <= 1:
                new_partitions.append(partition)
                continue

            # Group states by the blocks their transitions lead to
            transition_groups = {}
            for state in partition:
                signature = tuple(
                    tuple(block_of.get(target) for target in index.next_states(state, symbol))
                    for symbol in dfa.alphabet
                )
                transition_groups.setdefault(signature, []).append(state)

            new_partitions.extend(transition_groups.values())

        partitions = new_partitions

    return partitions


def _partition_merge(dfa):
    merges = 0
    for partition in _refine_partition(dfa):
        if len(partition) <= 1:
            continue

        if dfa.initial_state in partition:
            representative = dfa.initial_state
        elif TRAP in partition:
            representative = TRAP
        else:
            representative = min(partition)

        for state in partition:
            if state == representative:
                continue
            if state == TRAP or state == dfa.initial_state:
                logger.debug("%s will not be removed.", state)
                continue
            _merge(dfa, state, representative)
            merges += 1
    return merges


def minimize_dfa(dfa, mode=DEFAULT_MINIMIZE_MODE):
    """
    Merge equivalent states of `dfa` in place and return it.

    `dfa` is expected to store exactly one next state per transition, as
    produced by :func:`nfa2dfa.construction.generate_dfa`.
    """
    if mode not in MINIMIZE_MODES:
        raise ValueError(f"Unknown minimization mode {mode!r}, expected one of {', '.join(MINIMIZE_MODES)}")

    original_count = len(dfa.states)

    if mode == 'single':
        _single_pass(dfa)
    elif mode == 'converge':
        while _single_pass(dfa):
            pass
    else:
        _partition_merge(dfa)

    logger.info("DFA minimization (%s) complete: reduced from %d to %d states",
                mode, original_count, len(dfa.states))
    return dfa
