"""
DFA engine: construction-time validation and deterministic execution.
"""

import logging
from types import MappingProxyType
from typing import Any, FrozenSet, List, Mapping, Optional, Sequence, Tuple, Union

import structlog

from .errors import DFAValidationError
from .models import DFAConfig, DFAResult, ExecutionStep, ExecutionTrace

# Routed through stdlib logging so nothing is emitted until handlers exist.
log = structlog.wrap_logger(logging.getLogger(__name__))

InputSymbols = Union[str, Sequence[Any]]


class DFA:
    """
    A validated deterministic finite automaton.

    The constructor either returns a DFA whose transition table is total over
    states x alphabet, or raises DFAValidationError. Instances are immutable
    and can be shared between threads.
    """

    __slots__ = ("_states", "_state_set", "_alphabet", "_alphabet_set",
                 "_transitions", "_start_state", "_accepting_states")

    def __init__(self, config: Union[DFAConfig, Mapping[str, Any]]):
        if not isinstance(config, DFAConfig):
            config = DFAConfig.model_validate(config)

        self._states: Tuple[str, ...] = tuple(config.states)
        self._state_set: FrozenSet[str] = frozenset(self._states)
        self._alphabet: Tuple[str, ...] = tuple(config.alphabet)
        self._alphabet_set: FrozenSet[str] = frozenset(self._alphabet)
        self._start_state: str = config.start_state
        self._accepting_states: FrozenSet[str] = frozenset(config.accepting_states)

        try:
            self._validate(config)
        except DFAValidationError as e:
            log.warning("dfa_validation_failed", **e.to_dict())
            raise

        # Only the declared domain is kept.
        self._transitions: Mapping[str, Mapping[str, str]] = MappingProxyType({
            state: MappingProxyType({
                symbol: config.transitions[state][symbol] for symbol in self._alphabet
            })
            for state in self._states
        })

        log.debug(
            "dfa_constructed",
            states=len(self._states),
            symbols=len(self._alphabet),
            start_state=self._start_state,
            accepting=len(self._accepting_states),
        )

    def _validate(self, config: DFAConfig) -> None:
        # 1. Start state belongs to Q
        if self._start_state not in self._state_set:
            raise DFAValidationError.unknown_start_state(self._start_state)

        # 2. F is a subset of Q
        for state in config.accepting_states:
            if state not in self._state_set:
                raise DFAValidationError.unknown_accepting_state(state)

        # 3-5. δ is total and closed over Q
        for state in self._states:
            state_transitions = config.transitions.get(state)
            if state_transitions is None:
                raise DFAValidationError.missing_state_transitions(state)

            for symbol in self._alphabet:
                target = state_transitions.get(symbol)
                if target is None:
                    raise DFAValidationError.missing_symbol_transition(state, symbol)
                if target not in self._state_set:
                    raise DFAValidationError.unknown_target_state(state, symbol, target)

    # --- Read-only accessors ---

    @property
    def states(self) -> Tuple[str, ...]:
        return self._states

    @property
    def alphabet(self) -> Tuple[str, ...]:
        return self._alphabet

    @property
    def start_state(self) -> str:
        return self._start_state

    @property
    def accepting_states(self) -> FrozenSet[str]:
        return self._accepting_states

    def transition(self, state: str, symbol: str) -> Optional[str]:
        """Destination of (state, symbol), or None outside the declared domain."""
        state_transitions = self._transitions.get(state)
        if state_transitions is None:
            return None
        return state_transitions.get(symbol)

    def to_config(self) -> DFAConfig:
        """Rebuild an equivalent DFAConfig."""
        return DFAConfig(
            states=list(self._states),
            alphabet=list(self._alphabet),
            transitions={s: dict(t) for s, t in self._transitions.items()},
            start_state=self._start_state,
            accepting_states=[s for s in self._states if s in self._accepting_states],
        )

    # --- Execution ---

    def _classify(self, state: str) -> DFAResult:
        return DFAResult.ACCEPTED if state in self._accepting_states else DFAResult.REJECTED

    def _is_symbol(self, symbol: Any) -> bool:
        # Non-string elements (ints from bytes, unhashable values) are never symbols.
        return isinstance(symbol, str) and symbol in self._alphabet_set

    def run(self, input: InputSymbols) -> DFAResult:
        """
        Classify the input. A symbol outside the alphabet rejects the whole
        run; it is never an error.
        """
        current_state = self._start_state

        for position, symbol in enumerate(input):
            if not self._is_symbol(symbol):
                log.debug("dfa_symbol_rejected", symbol=symbol, position=position)
                return DFAResult.REJECTED
            current_state = self._transitions[current_state][symbol]

        return self._classify(current_state)

    def run_with_trace(self, input: InputSymbols) -> ExecutionTrace:
        """
        Same semantics as run(), recording one ExecutionStep per consumed
        symbol. On an unknown symbol the trace stops at the state held before
        it and the symbol itself produces no step.
        """
        steps: List[ExecutionStep] = []
        current_state = self._start_state
        echoed = input if isinstance(input, str) else tuple(input)

        for position, symbol in enumerate(echoed):
            if not self._is_symbol(symbol):
                log.debug("dfa_symbol_rejected", symbol=symbol, position=position)
                return ExecutionTrace(
                    input=echoed,
                    start_state=self._start_state,
                    steps=steps,
                    final_state=current_state,
                    result=DFAResult.REJECTED,
                )

            next_state = self._transitions[current_state][symbol]
            steps.append(ExecutionStep(from_state=current_state, symbol=symbol, to_state=next_state))
            current_state = next_state

        return ExecutionTrace(
            input=echoed,
            start_state=self._start_state,
            steps=steps,
            final_state=current_state,
            result=self._classify(current_state),
        )

    def accepts(self, input: InputSymbols) -> bool:
        return self.run(input) is DFAResult.ACCEPTED

    def __repr__(self) -> str:
        return (
            f"DFA(states={list(self._states)}, alphabet={list(self._alphabet)}, "
            f"start_state={self._start_state!r}, "
            f"accepting_states={sorted(self._accepting_states)})"
        )
