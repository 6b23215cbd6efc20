"""
NFA to DFA conversion and DFA minimization.

The pipeline is: epsilon elimination, subset construction, minimization.

>>> from nfa2dfa import Automaton, Transition, generate_dfa, minimize_dfa
>>> nfa = Automaton('A', ['C'], ['A', 'B', 'C'], ['1'], [
...     Transition('A', ['B'], 'λ'),
...     Transition('B', ['C'], '1'),
... ])
>>> dfa = minimize_dfa(generate_dfa(nfa).automaton)
>>> [str(s) for s in dfa.final_states]
['C']
"""
from nfa2dfa.automaton import Automaton, Transition
from nfa2dfa.closure import epsilon_closure, eliminate_epsilon
from nfa2dfa.construction import ConstructionResult, generate_dfa
from nfa2dfa.errors import InvalidInputError
from nfa2dfa.forms import TransitionRow, build_automaton
from nfa2dfa.index import TransitionIndex, find_next_states, is_epsilon
from nfa2dfa.minimize import equivalent_states, minimize_dfa
from nfa2dfa.replay import ConstructionReplay
from nfa2dfa.simulate import nfa_accepts, run_dfa
from nfa2dfa.states import (
    TRAP, CompositeState, SimpleState, State, as_state, combine_states, decompose, display_name, is_composite,
)
from nfa2dfa.views import node_ids, to_digraph, to_dot, transition_table
