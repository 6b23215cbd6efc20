import logging

from nfa2dfa.settings import LOG_LEVEL_ENV, log_level


def test_default_level():
    assert log_level({}) == 'WARNING'


def test_level_is_case_insensitive():
    assert log_level({LOG_LEVEL_ENV: ' debug '}) == 'DEBUG'


def test_unknown_level_falls_back(caplog):
    with caplog.at_level(logging.WARNING, logger='nfa2dfa.settings'):
        assert log_level({LOG_LEVEL_ENV: 'verbose'}) == 'WARNING'
    assert 'VERBOSE' in caplog.text


def test_level_is_accepted_by_logging():
    logging.getLogger('nfa2dfa.test').setLevel(log_level({LOG_LEVEL_ENV: 'info'}))
    assert logging.getLogger('nfa2dfa.test').level == logging.INFO
