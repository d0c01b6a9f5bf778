import pytest
from pydantic import ValidationError

from dfa_engine import DFAConfig, DFAResult, ExecutionStep


def test_config_drops_duplicate_labels_in_order():
    config = DFAConfig(
        states=["q1", "q0", "q1"],
        alphabet=["b", "a", "b"],
        transitions={},
        start_state="q0",
        accepting_states=["q1", "q1"],
    )
    assert config.states == ["q1", "q0"]
    assert config.alphabet == ["b", "a"]
    assert config.accepting_states == ["q1"]


def test_config_accepts_accept_states_alias():
    config = DFAConfig.model_validate({
        "states": ["q0"],
        "alphabet": ["a"],
        "transitions": {"q0": {"a": "q0"}},
        "start_state": "q0",
        "accept_states": ["q0"],
    })
    assert config.accepting_states == ["q0"]


def test_accepting_states_default_to_empty():
    config = DFAConfig(states=["q0"], alphabet=[], transitions={}, start_state="q0")
    assert config.accepting_states == []


def test_config_is_frozen():
    config = DFAConfig(states=["q0"], alphabet=[], transitions={}, start_state="q0")
    with pytest.raises(ValidationError):
        config.start_state = "q1"


def test_config_requires_start_state():
    with pytest.raises(ValidationError):
        DFAConfig(states=["q0"], alphabet=[], transitions={})


def test_result_values():
    assert DFAResult.ACCEPTED.value == "accepted"
    assert DFAResult("rejected") is DFAResult.REJECTED


def test_step_is_frozen():
    step = ExecutionStep(from_state="q0", symbol="a", to_state="q1")
    with pytest.raises(ValidationError):
        step.to_state = "q2"
