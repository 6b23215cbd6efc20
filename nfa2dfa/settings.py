"""
Runtime settings read from the environment.
"""
import logging
import os

LOG_LEVEL_ENV = "NFA2DFA_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def log_level(environ=None, default=DEFAULT_LOG_LEVEL):
    """
    Logging level named by ``NFA2DFA_LOG_LEVEL``.

    Unknown names fall back to `default` so a typo never stops the app.

    >>> log_level({'NFA2DFA_LOG_LEVEL': 'debug'})
    'DEBUG'
    >>> log_level({'NFA2DFA_LOG_LEVEL': 'chatty'})
    'WARNING'
    """
    if environ is None:
        environ = os.environ
    name = environ.get(LOG_LEVEL_ENV, default).strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        logging.getLogger(__name__).warning("Unknown log level %r, using %s", name, default)
        return default
    return name
