"""
Ready-made DFA configurations for common regular languages.

Each factory returns a DFAConfig that passes DFA() validation. Chain states
are named q0..qN; starts_with also uses an absorbing "q_dead" state.
"""

from typing import Dict, List, Sequence, Tuple

from .models import DFAConfig

MAX_DIVISOR = 100
MAX_TARGET_LENGTH = 50


def _check_alphabet(alphabet: Sequence[str]) -> List[str]:
    symbols = list(dict.fromkeys(alphabet))
    if not symbols:
        raise ValueError("Alphabet must not be empty")
    return symbols


def _check_target(target: Sequence[str], alphabet: List[str]) -> Tuple[str, ...]:
    pattern = tuple(target)
    if not pattern:
        raise ValueError("Target must not be empty")
    if len(pattern) > MAX_TARGET_LENGTH:
        raise ValueError(f"Target is too long (Max: {MAX_TARGET_LENGTH} symbols)")
    unknown = [s for s in pattern if s not in alphabet]
    if unknown:
        raise ValueError(f"Target uses symbols outside the alphabet: {unknown}")
    return pattern


def _chain(length: int) -> List[str]:
    return [f"q{i}" for i in range(length + 1)]


def _fallback(pattern: Tuple[str, ...], matched: int, symbol: str) -> int:
    """
    Length of the longest suffix of pattern[:matched] + symbol that is also a
    prefix of pattern.
    """
    candidate = pattern[:matched] + (symbol,)
    while candidate and pattern[:len(candidate)] != candidate:
        candidate = candidate[1:]
    return len(candidate)


def _matcher_transitions(
    pattern: Tuple[str, ...], alphabet: List[str], chain: List[str], include_last: bool
) -> Dict[str, Dict[str, str]]:
    transitions: Dict[str, Dict[str, str]] = {}
    last = len(chain) if include_last else len(chain) - 1
    for i in range(last):
        transitions[chain[i]] = {
            symbol: chain[_fallback(pattern, i, symbol)] for symbol in alphabet
        }
    return transitions


def ends_with(target: Sequence[str], alphabet: Sequence[str]) -> DFAConfig:
    """Strings whose last symbols are `target`."""
    symbols = _check_alphabet(alphabet)
    pattern = _check_target(target, symbols)
    chain = _chain(len(pattern))

    transitions = _matcher_transitions(pattern, symbols, chain, include_last=True)
    return DFAConfig(
        states=chain,
        alphabet=symbols,
        transitions=transitions,
        start_state=chain[0],
        accepting_states=[chain[-1]],
    )


def contains(target: Sequence[str], alphabet: Sequence[str]) -> DFAConfig:
    """Strings with `target` somewhere inside them."""
    symbols = _check_alphabet(alphabet)
    pattern = _check_target(target, symbols)
    chain = _chain(len(pattern))
    final_state = chain[-1]

    transitions = _matcher_transitions(pattern, symbols, chain, include_last=False)
    # Trap accept
    transitions[final_state] = {c: final_state for c in symbols}
    return DFAConfig(
        states=chain,
        alphabet=symbols,
        transitions=transitions,
        start_state=chain[0],
        accepting_states=[final_state],
    )


def starts_with(target: Sequence[str], alphabet: Sequence[str]) -> DFAConfig:
    """Strings whose first symbols are `target`."""
    symbols = _check_alphabet(alphabet)
    pattern = _check_target(target, symbols)
    chain = _chain(len(pattern))
    final_state = chain[-1]

    transitions: Dict[str, Dict[str, str]] = {}
    for i, state in enumerate(chain[:-1]):
        transitions[state] = {c: "q_dead" for c in symbols}
        transitions[state][pattern[i]] = chain[i + 1]
    transitions[final_state] = {c: final_state for c in symbols}
    transitions["q_dead"] = {c: "q_dead" for c in symbols}

    return DFAConfig(
        states=chain + ["q_dead"],
        alphabet=symbols,
        transitions=transitions,
        start_state=chain[0],
        accepting_states=[final_state],
    )


def divisible_by(divisor: int, alphabet: Sequence[str] = ("0", "1")) -> DFAConfig:
    """
    Binary numbers divisible by `divisor`, most significant bit first.
    alphabet[0] is read as 0 and alphabet[1] as 1. The empty string has no
    value and is rejected, so the start state is a separate non-accepting
    copy of the remainder-0 state.
    """
    symbols = _check_alphabet(alphabet)
    if len(symbols) != 2:
        raise ValueError(f"Divisibility needs a two-symbol alphabet, got {symbols}")
    if divisor < 1:
        raise ValueError("Divisor must be at least 1")
    if divisor > MAX_DIVISOR:
        raise ValueError(f"Divisor too large (Max: {MAX_DIVISOR})")

    zero_char, one_char = symbols
    remainders = [f"q{r}" for r in range(divisor)]
    transitions: Dict[str, Dict[str, str]] = {}
    for r in range(divisor):
        transitions[f"q{r}"] = {
            zero_char: f"q{(r * 2) % divisor}",
            one_char: f"q{(r * 2 + 1) % divisor}",
        }
    transitions["q_start"] = dict(transitions["q0"])

    return DFAConfig(
        states=["q_start"] + remainders,
        alphabet=symbols,
        transitions=transitions,
        start_state="q_start",
        accepting_states=["q0"],
    )


def count_parity(symbol: str, even: bool, alphabet: Sequence[str]) -> DFAConfig:
    """Strings with an even (or odd) number of `symbol`."""
    symbols = _check_alphabet(alphabet)
    if symbol not in symbols:
        raise ValueError(f"Symbol {symbol!r} is not in the alphabet {symbols}")

    transitions: Dict[str, Dict[str, str]] = {"even": {}, "odd": {}}
    for char in symbols:
        if char == symbol:
            transitions["even"][char] = "odd"
            transitions["odd"][char] = "even"
        else:
            transitions["even"][char] = "even"
            transitions["odd"][char] = "odd"

    return DFAConfig(
        states=["even", "odd"],
        alphabet=symbols,
        transitions=transitions,
        start_state="even",
        accepting_states=["even"] if even else ["odd"],
    )
