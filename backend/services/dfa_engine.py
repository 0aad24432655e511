"""
DFA Evaluation Engine

Normalizes a drawn automaton, checks that it is deterministic and runs an
input string through it. Every call works on its own snapshot of the graph.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from schemas.automaton import AutomatonGraph
from schemas.verdict import Verdict, build_verdict
from services.determinism_validator import find_conflicts, is_valid_dfa
from services.edge_normalizer import count_normalized_transitions, normalize_transitions
from services.state_id import StateIdGenerator, default_id_generator
from services.traversal import START_STATE_ID, simulate

logger = logging.getLogger(__name__)


class InvalidInputType(TypeError):
    """Raised when the supplied value is not an automaton graph"""
    pass


class EvaluationLimitError(ValueError):
    """Raised when an input string or graph exceeds the configured bounds"""
    pass


def coerce_graph(data: Any) -> AutomatonGraph:
    """
    Accept an AutomatonGraph, a mapping with "states" and "transitions" keys,
    or any object exposing both as attributes.

    Raises:
        InvalidInputType: If data does not have the graph shape
    """
    if isinstance(data, AutomatonGraph):
        return data

    if isinstance(data, Mapping):
        if "states" not in data or "transitions" not in data:
            raise InvalidInputType("Graph must provide 'states' and 'transitions'")
        raw = {"states": data["states"], "transitions": data["transitions"]}
    elif hasattr(data, "states") and hasattr(data, "transitions"):
        raw = {"states": data.states, "transitions": data.transitions}
    else:
        raise InvalidInputType(
            f"Expected an automaton graph, got {type(data).__name__}"
        )

    try:
        return AutomatonGraph.model_validate(raw, from_attributes=True)
    except ValidationError as e:
        raise InvalidInputType(f"Invalid automaton graph: {e}") from e


class DFAEngine:
    """
    Evaluates input strings against user drawn automata.

    Args:
        id_generator: Id source for synthetic states and transitions
        max_input_length: Reject longer input strings (None for no bound)
        max_transitions: Reject graphs that normalize to more transitions (None for no bound)
    """

    def __init__(
        self,
        id_generator: Optional[StateIdGenerator] = None,
        max_input_length: Optional[int] = None,
        max_transitions: Optional[int] = None,
    ):
        self.id_generator = id_generator or default_id_generator()
        self.max_input_length = max_input_length
        self.max_transitions = max_transitions

    def normalize(self, graph: Any) -> AutomatonGraph:
        """Return a normalized copy of the graph; the caller's graph is untouched."""
        snapshot = copy.deepcopy(coerce_graph(graph))
        self._check_limits(snapshot)
        snapshot.transitions = normalize_transitions(snapshot.transitions, self.id_generator)
        return snapshot

    def evaluate(self, input_string: str, graph: Any) -> Verdict:
        """
        Evaluate input_string against the automaton.

        Args:
            input_string: Symbols to feed, one character per step
            graph: AutomatonGraph or a value with the same shape

        Returns:
            Verdict: InvalidVerdict, RejectedVerdict or AcceptedVerdict

        Raises:
            InvalidInputType: If graph or input_string has the wrong type
            EvaluationLimitError: If a configured bound is exceeded
        """
        if not isinstance(input_string, str):
            raise InvalidInputType(
                f"Input string must be str, got {type(input_string).__name__}"
            )
        graph = coerce_graph(graph)

        if self.max_input_length is not None and len(input_string) > self.max_input_length:
            raise EvaluationLimitError(
                f"Input string has {len(input_string)} symbols (limit {self.max_input_length})"
            )

        normalized = self.normalize(graph)

        if not is_valid_dfa(normalized.transitions):
            conflicts = find_conflicts(normalized.transitions)
            logger.info(f"Graph is not a valid DFA: {'; '.join(conflicts)}")
            return build_verdict(False)

        traversal = simulate(
            input_string, normalized.states, normalized.transitions, START_STATE_ID
        )
        logger.debug(
            f"Traversal consumed {traversal.consumed}/{len(input_string)} symbols, "
            f"ended on '{traversal.end_state_id}' (halted={traversal.halted})"
        )

        if not traversal.accepted:
            return build_verdict(True, False)
        return build_verdict(True, True, traversal.end_state.label)

    def _check_limits(self, graph: AutomatonGraph) -> None:
        if self.max_transitions is None:
            return
        count = count_normalized_transitions(graph.transitions)
        if count > self.max_transitions:
            raise EvaluationLimitError(
                f"Graph normalizes to {count} transitions (limit {self.max_transitions})"
            )


_default_engine = DFAEngine()


def evaluate(input_string: str, graph: Any) -> Verdict:
    """Evaluate with a shared engine using random synthetic ids."""
    return _default_engine.evaluate(input_string, graph)
