"""
State identifiers used by the automata.

A DFA built by subset construction names its states after sets of NFA
states. Instead of encoding those sets as bracketed strings, each state is
one of three variants:

- ``SimpleState``: an original, user supplied state
- ``CompositeState``: a sorted, duplicate-free set of simple states
- ``TRAP``: the synthesized sink state

All variants compare by value, hash consistently and sort deterministically
(simple states first, then composites, then the trap).

>>> combine_states(['B', 'A', 'B'])
{A,B}
>>> combine_states(['A'])
A
>>> combine_states([]) is None
True
"""
from functools import total_ordering

from nfa2dfa.constants import COMPOSITE_OPEN, COMPOSITE_CLOSE, COMPOSITE_SEPARATOR, TRAP_NAME


@total_ordering
class State:
    """Base class of the state variants; ordered by variant, then by name."""
    _rank = 0

    def _key(self):
        raise NotImplementedError

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return str(self)


class SimpleState(State):
    """A single state of the original automaton."""
    _rank = 0

    def __init__(self, name):
        if not isinstance(name, str):
            raise TypeError(f"Expected a state name (str), got {type(name).__name__}")
        self.name = name

    def _key(self):
        return (self._rank, (self.name,))

    def __str__(self):
        return self.name


class CompositeState(State):
    """A set of simple states acting as one DFA state."""
    _rank = 1

    def __init__(self, members):
        members = set(members)
        if not all(isinstance(m, SimpleState) for m in members):
            raise TypeError("Composite states are built from simple states only")
        if len(members) < 2:
            raise ValueError("A composite state needs at least two members")
        members = tuple(sorted(members, key=lambda s: s.name))
        self.members = members

    def _key(self):
        return (self._rank, tuple(m.name for m in self.members))

    def __str__(self):
        inner = COMPOSITE_SEPARATOR.join(m.name for m in self.members)
        return f"{COMPOSITE_OPEN}{inner}{COMPOSITE_CLOSE}"


class TrapState(State):
    """The sink state added when a state/symbol pair has no successor."""
    _rank = 2

    def _key(self):
        return (self._rank, ())

    def __str__(self):
        return TRAP_NAME


TRAP = TrapState()


def as_state(value):
    """
    Coerce a state name into a state object.

    A bracketed name such as ``{A,B}`` must list at least two distinct
    members; ``{A}`` is rejected rather than read as ``A``.
    """
    if isinstance(value, State):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected a single state (str), got {type(value).__name__}")
    if value.startswith(COMPOSITE_OPEN) and value.endswith(COMPOSITE_CLOSE):
        names = value[1:-1].split(COMPOSITE_SEPARATOR)
        combined = combine_states(name for name in names if name)
        if combined is None:
            raise ValueError(f"Empty composite state: {value!r}")
        if not isinstance(combined, CompositeState):
            raise ValueError(f"Composite state with a single member: {value!r}")
        return combined
    return SimpleState(value)


def is_composite(state):
    return isinstance(as_state(state), CompositeState)


def decompose(state):
    """Return the simple states a state stands for."""
    state = as_state(state)
    if isinstance(state, CompositeState):
        return state.members
    return (state,)


def combine_states(states):
    """
    Combine a collection of states into a single state.

    ``None`` entries are ignored and composites are flattened. Returns the
    only member when one remains and ``None`` when nothing remains, which
    callers treat as "no transition". The trap state only survives when it
    is the sole input, since it accepts nothing.
    """
    members = set()
    saw_trap = False
    for state in states:
        if state is None:
            continue
        state = as_state(state)
        if isinstance(state, TrapState):
            saw_trap = True
        elif isinstance(state, CompositeState):
            members.update(state.members)
        else:
            members.add(state)

    if not members:
        return TRAP if saw_trap else None
    if len(members) == 1:
        return next(iter(members))
    return CompositeState(members)


def display_name(state):
    """Name used in graphs and tables: {A,B} is shown as AB."""
    state = as_state(state)
    if isinstance(state, CompositeState):
        return ''.join(m.name for m in state.members)
    return str(state)
