import pytest

from nfa2dfa import Automaton, Transition


@pytest.fixture
def ending_01_nfa():
    """Binary strings ending with '01'."""
    return Automaton('A', ['C'], ['A', 'B', 'C'], ['0', '1'], [
        Transition('A', ['A'], '0'),
        Transition('A', ['B'], '0'),
        Transition('A', ['A'], '1'),
        Transition('B', ['C'], '1'),
    ])


@pytest.fixture
def lambda_nfa():
    return Automaton('A', ['C'], ['A', 'B', 'C'], ['1'], [
        Transition('A', ['B'], 'λ'),
        Transition('B', ['C'], '1'),
    ])
