"""
Determinism Validator

A DFA maps every (state, symbol) pair to at most one next state.
Completeness is not checked: a missing transition just rejects during traversal.
"""

from typing import Dict, List, Tuple

from schemas.automaton import Transition


def find_conflicts(transitions: List[Transition]) -> List[str]:
    """
    Describe every (state, symbol) pair that has more than one outgoing transition.
    Expects normalized (single character) transitions.
    """
    errs: List[str] = []
    by_key: Dict[Tuple[str, str], List[Transition]] = {}

    for t in transitions:
        by_key.setdefault((t.from_, t.label), []).append(t)

    for (state_id, symbol), group in by_key.items():
        if len(group) > 1:
            targets = ", ".join(f"'{t.to}'" for t in group)
            errs.append(
                f"State '{state_id}' has {len(group)} transitions on '{symbol}' (to {targets})"
            )

    return errs


def is_deterministic(transitions: List[Transition]) -> bool:
    """True if all transitions have a unique (from, label) combination."""
    seen = set()
    for t in transitions:
        key = (t.from_, t.label)
        if key in seen:
            return False
        seen.add(key)
    return True


def is_valid_dfa(transitions: List[Transition]) -> bool:
    """
    Check that the normalized network is a valid DFA.
    For a given state and a given input symbol there should be only one edge.
    """
    return is_deterministic(transitions)
