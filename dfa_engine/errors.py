"""
Error types for the DFA engine.

DFAError is the base automaton error. DFAValidationError is raised while a
DFA is being constructed and names the structural check that failed.
"""

from enum import Enum
from typing import Optional


class ValidationErrorKind(str, Enum):
    """Which construction-time check rejected the definition."""
    UNKNOWN_START_STATE = "UNKNOWN_START_STATE"
    UNKNOWN_ACCEPTING_STATE = "UNKNOWN_ACCEPTING_STATE"
    MISSING_STATE_TRANSITIONS = "MISSING_STATE_TRANSITIONS"
    MISSING_SYMBOL_TRANSITION = "MISSING_SYMBOL_TRANSITION"
    UNKNOWN_TARGET_STATE = "UNKNOWN_TARGET_STATE"


class DFAError(Exception):
    """Base class for every automaton error."""
    pass


class DFAValidationError(DFAError):
    """Raised when a DFA definition is not a well-formed total function."""

    def __init__(
        self,
        kind: ValidationErrorKind,
        message: str,
        state: Optional[str] = None,
        symbol: Optional[str] = None,
        target: Optional[str] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.state = state
        self.symbol = symbol
        self.target = target

    @classmethod
    def unknown_start_state(cls, state: str) -> "DFAValidationError":
        return cls(
            ValidationErrorKind.UNKNOWN_START_STATE,
            f'Start state "{state}" is not in the set of states',
            state=state,
        )

    @classmethod
    def unknown_accepting_state(cls, state: str) -> "DFAValidationError":
        return cls(
            ValidationErrorKind.UNKNOWN_ACCEPTING_STATE,
            f'Accepting state "{state}" is not in the set of states',
            state=state,
        )

    @classmethod
    def missing_state_transitions(cls, state: str) -> "DFAValidationError":
        return cls(
            ValidationErrorKind.MISSING_STATE_TRANSITIONS,
            f'State "{state}" has no transitions defined',
            state=state,
        )

    @classmethod
    def missing_symbol_transition(cls, state: str, symbol: str) -> "DFAValidationError":
        return cls(
            ValidationErrorKind.MISSING_SYMBOL_TRANSITION,
            f'Missing transition for state "{state}" on symbol "{symbol}"',
            state=state,
            symbol=symbol,
        )

    @classmethod
    def unknown_target_state(cls, state: str, symbol: str, target: str) -> "DFAValidationError":
        return cls(
            ValidationErrorKind.UNKNOWN_TARGET_STATE,
            f'Transition from "{state}" on "{symbol}" leads to unknown state "{target}"',
            state=state,
            symbol=symbol,
            target=target,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for structured logging."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "state": self.state,
            "symbol": self.symbol,
            "target": self.target,
        }
