from itertools import product

import pytest

from dfa_engine import DFA
from dfa_engine.library import (
    MAX_DIVISOR,
    contains,
    count_parity,
    divisible_by,
    ends_with,
    starts_with,
)


def all_strings(alphabet, max_len=5):
    for n in range(max_len + 1):
        for chars in product(alphabet, repeat=n):
            yield "".join(chars)


# --- Checked against Python's own string predicates ---
@pytest.mark.parametrize("target", ["0", "01", "110", "00"])
def test_ends_with_matches_str_endswith(target):
    dfa = DFA(ends_with(target, ["0", "1"]))
    for s in all_strings("01"):
        assert dfa.accepts(s) is s.endswith(target), s


@pytest.mark.parametrize("target", ["ab", "aba", "bb"])
def test_contains_matches_substring(target):
    dfa = DFA(contains(target, ["a", "b"]))
    for s in all_strings("ab"):
        assert dfa.accepts(s) is (target in s), s


@pytest.mark.parametrize("target", ["b", "ab"])
def test_starts_with_matches_str_startswith(target):
    dfa = DFA(starts_with(target, ["a", "b"]))
    for s in all_strings("ab"):
        assert dfa.accepts(s) is s.startswith(target), s


@pytest.mark.parametrize("divisor", [1, 2, 3, 5])
def test_divisible_by_binary(divisor):
    dfa = DFA(divisible_by(divisor))
    assert dfa.accepts("") is False
    for s in all_strings("01"):
        if s:
            assert dfa.accepts(s) is (int(s, 2) % divisor == 0), s


def test_divisible_by_with_letter_alphabet():
    dfa = DFA(divisible_by(3, ["a", "b"]))
    assert dfa.accepts("bb") is True    # 11 = 3
    assert dfa.accepts("ba") is False   # 10 = 2


def test_count_parity():
    even = DFA(count_parity("1", True, ["0", "1"]))
    odd = DFA(count_parity("1", False, ["0", "1"]))
    for s in all_strings("01"):
        assert even.accepts(s) is (s.count("1") % 2 == 0)
        assert odd.accepts(s) is (s.count("1") % 2 == 1)


# --- Shapes of the reference automata ---
def test_ends_with_zero_is_the_two_state_machine():
    config = ends_with("0", ["0", "1"])
    assert config.states == ["q0", "q1"]
    assert config.transitions == {
        "q0": {"0": "q1", "1": "q0"},
        "q1": {"0": "q1", "1": "q0"},
    }
    assert config.accepting_states == ["q1"]


def test_contains_ab_has_three_states():
    config = contains("ab", ["a", "b"])
    assert config.states == ["q0", "q1", "q2"]
    assert config.transitions["q2"] == {"a": "q2", "b": "q2"}


def test_token_targets():
    dfa = DFA(ends_with(["go", "stop"], ["go", "stop"]))
    assert dfa.accepts(["stop", "go", "stop"])
    assert not dfa.accepts(["go", "stop", "stop"])


# --- Argument errors ---
def test_empty_target_raises():
    with pytest.raises(ValueError):
        ends_with("", ["0", "1"])


def test_target_outside_alphabet_raises():
    with pytest.raises(ValueError):
        contains("abc", ["a", "b"])


def test_empty_alphabet_raises():
    with pytest.raises(ValueError):
        starts_with("a", [])


def test_divisor_bounds():
    with pytest.raises(ValueError):
        divisible_by(0)
    with pytest.raises(ValueError):
        divisible_by(MAX_DIVISOR + 1)
    with pytest.raises(ValueError):
        divisible_by(3, ["0", "1", "2"])


def test_parity_symbol_must_be_in_alphabet():
    with pytest.raises(ValueError):
        count_parity("2", True, ["0", "1"])


def test_factories_are_exported_from_package():
    import dfa_engine
    from dfa_engine import library

    for name in ["contains", "count_parity", "divisible_by", "ends_with", "starts_with"]:
        assert name in dfa_engine.__all__
        assert getattr(dfa_engine, name) is getattr(library, name)
