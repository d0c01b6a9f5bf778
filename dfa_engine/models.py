"""
Data models for the DFA engine.

DFA = (Q, Σ, δ, q₀, F)

    Q  = states
    Σ  = alphabet
    δ  = transitions: Q × Σ → Q
    q₀ = start_state
    F  = accepting_states
"""

from enum import Enum
from typing import Any, Dict, List, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class DFAResult(str, Enum):
    """Classification of one run."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class DFAConfig(BaseModel):
    """
    Caller-supplied description of a DFA.
    Only field types are checked here; structural checks happen in DFA().
    """
    model_config = ConfigDict(frozen=True)

    states: List[str] = Field(..., description="Q: list of state labels")
    alphabet: List[str] = Field(..., description="Σ: input symbols")
    transitions: Dict[str, Dict[str, str]] = Field(
        ..., description="δ: map of state -> symbol -> next_state"
    )
    start_state: str = Field(..., description="q₀")
    accepting_states: List[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("accepting_states", "accept_states"),
        description="F: accepting states",
    )

    @field_validator("states", "alphabet", "accepting_states")
    @classmethod
    def drop_duplicates(cls, v: List[str]) -> List[str]:
        # First-seen order is kept; it drives validation order.
        return list(dict.fromkeys(v))


class ExecutionStep(BaseModel):
    """One transition taken during a run."""
    model_config = ConfigDict(frozen=True)

    from_state: str
    symbol: str
    to_state: str


class ExecutionTrace(BaseModel):
    """
    Record of a single traced run.
    Built fresh for every call and owned by the caller.
    """
    input: Union[str, Tuple[Any, ...]]
    start_state: str
    steps: List[ExecutionStep] = Field(default_factory=list)
    final_state: str
    result: DFAResult

    @property
    def accepted(self) -> bool:
        return self.result is DFAResult.ACCEPTED

    @property
    def path(self) -> List[str]:
        """States visited, start state first."""
        return [self.start_state] + [step.to_state for step in self.steps]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary for logging or export."""
        return {
            "input": self.input if isinstance(self.input, str) else list(self.input),
            "start_state": self.start_state,
            "steps": [
                {"from_state": s.from_state, "symbol": s.symbol, "to_state": s.to_state}
                for s in self.steps
            ],
            "final_state": self.final_state,
            "result": self.result.value,
        }
