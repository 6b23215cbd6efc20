"""
NFA to DFA conversion by subset construction.

>>> from nfa2dfa.automaton import Automaton, Transition
>>> nfa = Automaton('A', ['C'], ['A', 'B', 'C'], ['0', '1'], [
...     Transition('A', ['A', 'B'], '0'),
...     Transition('A', ['A'], '1'),
...     Transition('B', ['C'], '1'),
... ])
>>> result = generate_dfa(nfa)
>>> result.automaton.states
[A, {A,B}, {A,C}]
>>> result.automaton.final_states
[{A,C}]
>>> result.completed_steps
3
"""
import logging

from nfa2dfa.automaton import Automaton, Transition
from nfa2dfa.closure import eliminate_epsilon
from nfa2dfa.index import TransitionIndex
from nfa2dfa.states import TRAP, combine_states, decompose

logger = logging.getLogger(__name__)


class ConstructionResult:
    """
    Outcome of a (possibly step-limited) subset construction.

    `steps` counts the states taken off the worklist. `completed_steps` is
    the same number when the construction ran to the end and None when it
    was interrupted by the step limit.
    """

    def __init__(self, automaton, steps, interrupted):
        self.automaton = automaton
        self.steps = steps
        self.interrupted = interrupted

    @property
    def completed_steps(self):
        return None if self.interrupted else self.steps

    def __repr__(self):
        return f"ConstructionResult({self.automaton!r}, steps={self.steps}, interrupted={self.interrupted})"


def generate_dfa(nfa, step_limit=None):
    """
    Convert `nfa` into a DFA using subset construction.

    Unreachable state/symbol pairs go to the trap state, which is created on
    first use and loops to itself on every symbol. With `step_limit`, the
    construction stops when the `step_limit`-th state is taken off the
    worklist, before processing it, and returns the partial DFA.
    """
    if step_limit is not None and (isinstance(step_limit, bool) or not isinstance(step_limit, int) or step_limit < 1):
        raise ValueError(f"step_limit must be a positive integer or None, got {step_limit!r}")

    nfa = eliminate_epsilon(nfa)
    index = TransitionIndex(nfa.transitions)

    dfa_states = [nfa.initial_state]
    discovered = {nfa.initial_state}
    dfa_transitions = []
    stack = [nfa.initial_state]
    step_counter = 0
    interrupted = False

    while stack:
        state = stack.pop()
        logger.debug("Popped state: %s", state)

        step_counter += 1
        if step_counter == step_limit:
            interrupted = True
            break

        members = decompose(state)

        for symbol in nfa.alphabet:
            next_states_union = []
            for s in members:
                for n in index.next_states(s, symbol):
                    if n not in next_states_union:
                        next_states_union.append(n)

            combined = combine_states(next_states_union)

            if combined is not None:
                logger.debug("%s, %s -> %s", state, symbol, combined)
                dfa_transitions.append(Transition(state, [combined], symbol))

                if combined not in discovered:
                    discovered.add(combined)
                    dfa_states.append(combined)
                    stack.append(combined)
            else:
                if TRAP not in discovered:
                    logger.debug("Trap state needed for %s, %s", state, symbol)
                    for a in nfa.alphabet:
                        dfa_transitions.append(Transition(TRAP, [TRAP], a))
                    discovered.add(TRAP)
                    dfa_states.append(TRAP)

                dfa_transitions.append(Transition(state, [TRAP], symbol))

    nfa_finals = set(nfa.final_states)
    dfa_final_states = [s for s in dfa_states if any(m in nfa_finals for m in decompose(s))]

    if interrupted:
        logger.debug("Construction interrupted at step %d", step_counter)
    else:
        logger.info("DFA built in %d steps: %d states, %d final", step_counter, len(dfa_states), len(dfa_final_states))

    dfa = Automaton(
        nfa.initial_state,
        dfa_final_states,
        dfa_states,
        list(nfa.alphabet),
        dfa_transitions,
    )
    return ConstructionResult(dfa, step_counter, interrupted)
