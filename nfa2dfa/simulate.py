from nfa2dfa.closure import epsilon_closure
from nfa2dfa.index import TransitionIndex, is_epsilon


def run_dfa(dfa, word):
    """
    Run `dfa` on `word`.

    Returns ``(accepted, trace)`` where trace lists the steps taken. A symbol
    outside the alphabet or without a next state rejects the word.
    """
    index = TransitionIndex(dfa.transitions)
    current_state = dfa.initial_state
    trace = [f"Start state: {current_state}"]

    for symbol in word:
        if symbol not in dfa.alphabet:
            trace.append(f"Error: Symbol '{symbol}' is not in the alphabet")
            return False, trace
        next_states = index.next_states(current_state, symbol)
        if not next_states:
            trace.append(f"Error: No transition defined for state {current_state} with symbol '{symbol}'")
            return False, trace
        next_state = next_states[0]
        trace.append(f"  Input '{symbol}': {current_state} -> {next_state}")
        current_state = next_state

    accepted = dfa.is_final(current_state)
    trace.append(f"Ended in {'accepting' if accepted else 'non-accepting'} state: {current_state}")
    return accepted, trace


def nfa_accepts(nfa, word):
    """Set-based simulation of an NFA, following epsilon transitions."""
    index = TransitionIndex(t for t in nfa.transitions if not is_epsilon(t.symbol))

    def closure(states):
        result = set()
        for state in states:
            result.update(epsilon_closure(state, nfa.transitions))
        return result

    current = closure([nfa.initial_state])
    for symbol in word:
        current = closure([n for s in current for n in index.next_states(s, symbol)])
        if not current:
            return False
    return any(nfa.is_final(s) for s in current)
