"""Reserved literals shared by the automaton modules."""

# Epsilon (lambda) transitions are written with an empty symbol or this glyph
EPSILON = 'λ'
EPSILON_SYMBOLS = ('', EPSILON)

# Composite states render as {A,B}
COMPOSITE_OPEN = '{'
COMPOSITE_CLOSE = '}'
COMPOSITE_SEPARATOR = ','

TRAP_NAME = 'TRAP'

# Table cell for a state/symbol pair without successor
NO_TRANSITION = '-'

MINIMIZE_MODES = ('single', 'converge', 'partition')
DEFAULT_MINIMIZE_MODE = 'single'
