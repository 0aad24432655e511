# schemas/automaton.py
from __future__ import annotations
from typing import List, Optional, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

# ---------- Graph Models ----------

class State(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    label: str = ""
    is_final: bool = Field(default=False, alias="isFinal")

    # Presentation only, ignored by the engine
    x: Optional[float] = None
    y: Optional[float] = None

    @field_validator("is_final", mode="before")
    @classmethod
    def _null_is_not_final(cls, value):
        return False if value is None else value

class Transition(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    from_: str = Field(alias="from")
    to: str
    label: str

    # Curve hint from the editor, carried through untouched
    smooth: Optional[Dict[str, Any]] = None

class AutomatonGraph(BaseModel):
    states: List[State] = Field(default_factory=list)
    transitions: List[Transition] = Field(default_factory=list)

    def get_state(self, state_id: str) -> Optional[State]:
        return next((s for s in self.states if s.id == state_id), None)

    def referenced_state_ids(self) -> List[str]:
        """Ids used as transition endpoints, in first-seen order."""
        seen: Dict[str, None] = {}
        for t in self.transitions:
            seen.setdefault(t.from_, None)
            seen.setdefault(t.to, None)
        return list(seen)

# ---------- Request Models ----------

class EvaluateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    input_string: str = Field(alias="inputString")
    graph: Optional[Dict[str, Any]] = None
    network: Optional[Dict[str, Any]] = None

class NormalizeRequest(BaseModel):
    graph: Optional[Dict[str, Any]] = None
    network: Optional[Dict[str, Any]] = None
