"""
Step-by-step replay of a subset construction.

A front-end animates the construction by calling :func:`generate_dfa` with
step limits 1, 2, ... The last step, ``completed_steps + 1``, never
interrupts and yields the full DFA, which is when the minimized DFA can be
shown as well.
"""
from nfa2dfa.construction import generate_dfa


class ConstructionReplay:

    def __init__(self, nfa):
        self.nfa = nfa
        self.full = generate_dfa(nfa)
        self.completed_steps = self.full.completed_steps

    def step_numbers(self):
        return range(1, self.completed_steps + 2)

    def is_final_step(self, step):
        return step == self.completed_steps + 1

    def at(self, step):
        """Construction result after `step` steps."""
        if step not in self.step_numbers():
            raise ValueError(f"Step must be between 1 and {self.completed_steps + 1}, got {step}")
        return generate_dfa(self.nfa, step)
