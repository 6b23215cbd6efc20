class InvalidInputError(ValueError):
    """Raised when a raw automaton description cannot be turned into an automaton."""
