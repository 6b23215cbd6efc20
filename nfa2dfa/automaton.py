import warnings

from nfa2dfa.constants import EPSILON
from nfa2dfa.index import is_epsilon
from nfa2dfa.states import as_state


def _unique(items):
    """Drop duplicates while keeping the first occurrence order."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def _as_collection(value, what):
    """Coerce a single value into a one-element list, warning about the shape."""
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=str)
    if isinstance(value, (list, tuple)):
        return list(value)
    warnings.warn(f"Expected {what} to be a collection, got {type(value).__name__}", stacklevel=3)
    return [value]


class Transition:
    """A transition from one state to a set of next states on a symbol."""

    def __init__(self, state, next_states, symbol):
        if isinstance(state, (list, tuple, set, frozenset)):
            raise TypeError("Expected a single state for a transition source")
        if not isinstance(symbol, str):
            raise TypeError(f"Expected a string symbol, got {type(symbol).__name__}")

        self.state = as_state(state)
        self.next_states = tuple(as_state(s) for s in _as_collection(next_states, "next states"))
        self.symbol = symbol

    @property
    def is_epsilon(self):
        return is_epsilon(self.symbol)

    def __eq__(self, other):
        if not isinstance(other, Transition):
            return NotImplemented
        return (self.state, self.next_states, self.symbol) == (other.state, other.next_states, other.symbol)

    def __hash__(self):
        return hash((self.state, self.next_states, self.symbol))

    def __repr__(self):
        symbol = EPSILON if self.is_epsilon else self.symbol
        targets = ', '.join(str(s) for s in self.next_states)
        return f"δ({self.state}, {symbol}) → [{targets}]"


class Automaton:
    """
    A finite automaton: initial state, final states, states, alphabet and an
    ordered list of transitions.

    The same class holds NFAs (several next states per transition, epsilon
    transitions) and DFAs (exactly one next state per state and symbol).
    """

    def __init__(self, initial_state, final_states, states, alphabet, transitions):
        if isinstance(initial_state, (list, tuple, set, frozenset)):
            raise TypeError("Expected a single initial state")

        self.initial_state = as_state(initial_state)
        self.final_states = _unique(as_state(s) for s in _as_collection(final_states, "final states"))
        self.states = _unique(as_state(s) for s in _as_collection(states, "states"))

        symbols = _as_collection(alphabet, "alphabet")
        for symbol in symbols:
            if not isinstance(symbol, str):
                raise TypeError(f"Expected a string symbol, got {type(symbol).__name__}")
        # Epsilon is never an input symbol
        self.alphabet = _unique(s for s in symbols if not is_epsilon(s))

        self.transitions = _as_collection(transitions, "transitions")
        for t in self.transitions:
            if not isinstance(t, Transition):
                raise TypeError(f"Expected a Transition, got {type(t).__name__}")

    def is_final(self, state):
        return as_state(state) in self.final_states

    def has_epsilon_transitions(self):
        return any(t.is_epsilon for t in self.transitions)

    def copy(self):
        """Shallow copy with fresh collections; transitions are immutable and shared."""
        return Automaton(
            self.initial_state,
            list(self.final_states),
            list(self.states),
            list(self.alphabet),
            list(self.transitions),
        )

    def describe(self):
        """Return a plain-text summary of the automaton."""
        lines = [
            f"States: {', '.join(str(s) for s in self.states)}",
            f"Alphabet: {', '.join(self.alphabet)}",
            f"Start State: {self.initial_state}",
            f"Final States: {', '.join(str(s) for s in self.final_states)}",
            "Transitions:",
        ]
        lines.extend(f"  {t!r}" for t in self.transitions)
        return '\n'.join(lines)

    def __repr__(self):
        return (f"Automaton(initial={self.initial_state}, states={len(self.states)}, "
                f"finals={len(self.final_states)}, transitions={len(self.transitions)})")
