import pytest

from dfa_engine import DFA


def binary_config(**overrides):
    """Two-state DFA over {0,1} accepting strings that end in '0'."""
    config = {
        "states": ["q0", "q1"],
        "alphabet": ["0", "1"],
        "transitions": {
            "q0": {"0": "q1", "1": "q0"},
            "q1": {"0": "q1", "1": "q0"},
        },
        "start_state": "q0",
        "accepting_states": ["q1"],
    }
    config.update(overrides)
    return config


@pytest.fixture
def ends_in_zero():
    return DFA(binary_config())


@pytest.fixture
def contains_ab():
    return DFA({
        "states": ["q0", "q1", "q2"],
        "alphabet": ["a", "b"],
        "transitions": {
            "q0": {"a": "q1", "b": "q0"},
            "q1": {"a": "q1", "b": "q2"},
            "q2": {"a": "q2", "b": "q2"},
        },
        "start_state": "q0",
        "accepting_states": ["q2"],
    })
