"""
Verdict Schema

The outcome of evaluating an input string against an automaton graph.
Each case carries only the fields that are meaningful for it, and callers
key behaviour off which fields are present:

- InvalidVerdict:  {"valid": false}
- RejectedVerdict: {"valid": true, "accepted": false}
- AcceptedVerdict: {"valid": true, "accepted": true, "acceptedStateLabel": ...}
"""

from typing import Any, Dict, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class InvalidVerdict(BaseModel):
    """The graph is not a valid DFA. No traversal was attempted."""
    valid: Literal[False] = False

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class RejectedVerdict(BaseModel):
    """Valid DFA, but the input dead-ended or stopped on a non-final state."""
    valid: Literal[True] = True
    accepted: Literal[False] = False

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class AcceptedVerdict(BaseModel):
    """Valid DFA that accepted the input on a final state."""
    model_config = ConfigDict(populate_by_name=True)

    valid: Literal[True] = True
    accepted: Literal[True] = True
    accepted_state_label: str = Field(alias="acceptedStateLabel")

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


Verdict = Union[InvalidVerdict, RejectedVerdict, AcceptedVerdict]


def build_verdict(
    valid: bool,
    accepted: Optional[bool] = None,
    accepted_state_label: Optional[str] = None,
) -> Verdict:
    """
    Pick the verdict case from progressively supplied outcome fields.

    Args:
        valid: Whether the graph passed the determinism check
        accepted: Traversal outcome, only meaningful for a valid graph
        accepted_state_label: Label of the final state the input ended on

    Returns:
        Verdict: One of InvalidVerdict, RejectedVerdict, AcceptedVerdict
    """
    if not valid:
        return InvalidVerdict()

    if not accepted:
        return RejectedVerdict()

    if accepted_state_label is None:
        raise ValueError("Accepted verdict requires the accepting state's label")

    return AcceptedVerdict(accepted_state_label=accepted_state_label)
