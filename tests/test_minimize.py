from itertools import product

import pytest

from nfa2dfa import Automaton, Transition, equivalent_states, generate_dfa, minimize_dfa, nfa_accepts, run_dfa
from nfa2dfa.index import TransitionIndex
from nfa2dfa.states import TRAP, SimpleState


def make_dfa(initial, finals, rows, alphabet=('a', 'b')):
    """Build a DFA from (state, symbol, next_state) rows."""
    states = []
    for state, _, next_state in rows:
        for s in (state, next_state):
            if s not in states:
                states.append(s)
    transitions = [Transition(s, [n], a) for s, a, n in rows]
    return Automaton(initial, finals, states, list(alphabet), transitions)


def names(states):
    return [str(s) for s in states]


@pytest.fixture
def chain_dfa():
    # X1/Y1 only become equivalent once X2 and Y2 have been merged
    dfa = make_dfa('S', ['F'], [
        ('S', 'a', 'X1'), ('S', 'b', 'Y1'),
        ('X1', 'a', 'X2'), ('X1', 'b', 'X2'),
        ('Y1', 'a', 'Y2'), ('Y1', 'b', 'Y2'),
        ('X2', 'a', 'F'), ('X2', 'b', 'F'),
        ('Y2', 'a', 'F'), ('Y2', 'b', 'F'),
        ('F', 'a', 'F'), ('F', 'b', 'F'),
    ])
    dfa.states = [SimpleState(n) for n in ('X1', 'Y1', 'X2', 'Y2', 'S', 'F')]
    return dfa


def test_equivalent_states_are_merged_and_edges_rewritten():
    dfa = make_dfa('S', [], [
        ('S', 'a', 'P'), ('S', 'b', 'Q'),
        ('P', 'a', 'S'), ('P', 'b', 'S'),
        ('Q', 'a', 'S'), ('Q', 'b', 'S'),
    ])
    result = minimize_dfa(dfa)

    assert result is dfa
    assert names(dfa.states) == ['S', 'Q']
    index = TransitionIndex(dfa.transitions)
    assert index.next_states('S', 'a') == [SimpleState('Q')]
    assert index.next_states('S', 'b') == [SimpleState('Q')]
    assert not any(t.state == SimpleState('P') for t in dfa.transitions)


def test_different_acceptance_is_never_merged():
    dfa = make_dfa('S', ['Q'], [
        ('S', 'a', 'P'), ('S', 'b', 'Q'),
        ('P', 'a', 'S'), ('P', 'b', 'S'),
        ('Q', 'a', 'S'), ('Q', 'b', 'S'),
    ])
    assert not equivalent_states(dfa, 'P', 'Q')
    minimize_dfa(dfa)
    assert names(dfa.states) == ['S', 'P', 'Q']
    assert names(dfa.final_states) == ['Q']


def test_initial_state_survives_merge():
    dfa = make_dfa('I', ['Z'], [
        ('I', 'a', 'Z'), ('I', 'b', 'Z'),
        ('X', 'a', 'Z'), ('X', 'b', 'Z'),
        ('Z', 'a', 'Z'), ('Z', 'b', 'Z'),
    ])
    minimize_dfa(dfa)
    assert names(dfa.states) == ['I', 'Z']
    assert dfa.initial_state == SimpleState('I')


def test_merged_final_state_leaves_final_set():
    dfa = make_dfa('S', ['P', 'Q'], [
        ('S', 'a', 'P'), ('S', 'b', 'Q'),
        ('P', 'a', 'S'), ('P', 'b', 'S'),
        ('Q', 'a', 'S'), ('Q', 'b', 'S'),
    ])
    minimize_dfa(dfa)
    assert names(dfa.final_states) == ['Q']


def test_trap_state_is_never_removed():
    dfa = make_dfa('D', [], [
        ('D', 'a', TRAP), ('D', 'b', TRAP),
        (TRAP, 'a', TRAP), (TRAP, 'b', TRAP),
    ])
    dfa.states = [TRAP, SimpleState('D')]
    dfa.initial_state = SimpleState('S')
    dfa.states.append(SimpleState('S'))
    dfa.transitions += [Transition('S', ['D'], 'a'), Transition('S', ['D'], 'b')]

    minimize_dfa(dfa)
    assert TRAP in dfa.states
    assert SimpleState('D') not in dfa.states
    assert TransitionIndex(dfa.transitions).next_states('S', 'a') == [TRAP]


@pytest.mark.parametrize('mode', ['single', 'converge', 'partition'])
def test_initial_state_equivalent_to_trap_keeps_both(mode):
    dfa = make_dfa('I', [], [
        ('I', 'a', TRAP), ('I', 'b', TRAP),
        (TRAP, 'a', TRAP), (TRAP, 'b', TRAP),
    ])
    minimize_dfa(dfa, mode=mode)
    assert dfa.states == [SimpleState('I'), TRAP]


def test_dead_state_merges_into_trap_after_construction():
    nfa = Automaton('A', ['B'], ['A', 'B', 'D'], ['a'], [
        Transition('A', ['B'], 'a'),
        Transition('B', ['D'], 'a'),
    ])
    dfa = generate_dfa(nfa).automaton
    assert names(dfa.states) == ['A', 'B', 'D', 'TRAP']

    minimize_dfa(dfa)
    assert dfa.states == [SimpleState('A'), SimpleState('B'), TRAP]
    assert TransitionIndex(dfa.transitions).next_states('B', 'a') == [TRAP]


def test_single_pass_leaves_late_equivalences(chain_dfa):
    minimize_dfa(chain_dfa, mode='single')
    assert names(chain_dfa.states) == ['X1', 'Y1', 'Y2', 'S', 'F']


def test_converge_repeats_until_stable(chain_dfa):
    minimize_dfa(chain_dfa, mode='converge')
    assert names(chain_dfa.states) == ['Y1', 'Y2', 'S', 'F']


def test_partition_is_minimal(chain_dfa):
    minimize_dfa(chain_dfa, mode='partition')
    assert names(chain_dfa.states) == ['X1', 'X2', 'S', 'F']


def test_partition_merges_self_loop_equivalents():
    dfa = make_dfa('S', ['S'], [
        ('S', 'a', 'P'), ('S', 'b', 'Q'),
        ('P', 'a', 'P'), ('P', 'b', 'P'),
        ('Q', 'a', 'Q'), ('Q', 'b', 'Q'),
    ])
    minimize_dfa(dfa, mode='converge')
    assert len(dfa.states) == 3

    minimize_dfa(dfa, mode='partition')
    assert names(dfa.states) == ['S', 'P']


def test_unknown_mode(chain_dfa):
    with pytest.raises(ValueError):
        minimize_dfa(chain_dfa, mode='hopcroft')


@pytest.mark.parametrize('mode', ['single', 'converge', 'partition'])
def test_minimization_preserves_language(mode):
    nfa = Automaton('q0', ['q2'], ['q0', 'q1', 'q2'], ['a', 'b'], [
        Transition('q0', ['q0', 'q1'], 'a'),
        Transition('q0', ['q0'], 'b'),
        Transition('q1', ['q2'], 'b'),
        Transition('q2', ['q2'], 'a'),
        Transition('q2', ['q2'], 'b'),
    ])
    dfa = minimize_dfa(generate_dfa(nfa).automaton, mode=mode)

    for length in range(6):
        for letters in product('ab', repeat=length):
            word = ''.join(letters)
            accepted, _ = run_dfa(dfa, word)
            assert accepted == nfa_accepts(nfa, word), word
