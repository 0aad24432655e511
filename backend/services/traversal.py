"""
Traversal Simulator

Walks a validated DFA from the start state, one input symbol at a time.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from schemas.automaton import State, Transition

# The editor always assigns id "1" to the first state it creates
START_STATE_ID = "1"


@dataclass
class Traversal:
    end_state_id: str
    consumed: int
    halted: bool = False
    path: List[Tuple[str, str, str]] = field(default_factory=list)
    end_state: Optional[State] = None

    @property
    def accepted(self) -> bool:
        return not self.halted and self.end_state is not None and self.end_state.is_final


def index_transitions(transitions: List[Transition]) -> Dict[Tuple[str, str], str]:
    """Map (from, label) to the destination of the first matching transition."""
    index: Dict[Tuple[str, str], str] = {}
    for t in transitions:
        index.setdefault((t.from_, t.label), t.to)
    return index


def simulate(
    input_string: str,
    states: List[State],
    transitions: List[Transition],
    start_state_id: str = START_STATE_ID,
) -> Traversal:
    """
    Consume input_string left to right from start_state_id.

    Stops at the first symbol without an outgoing transition; the remaining
    symbols are not consumed and the traversal is marked halted.
    """
    index = index_transitions(transitions)
    current = start_state_id
    path: List[Tuple[str, str, str]] = []

    for symbol in input_string:
        next_state = index.get((current, symbol))
        if next_state is None:
            return Traversal(end_state_id=current, consumed=len(path), halted=True, path=path)
        path.append((current, symbol, next_state))
        current = next_state

    end_state = next((s for s in states if s.id == current), None)
    return Traversal(end_state_id=current, consumed=len(path), path=path, end_state=end_state)
