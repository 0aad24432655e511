"""
Edge Normalizer

Rewrites edge labels so that every transition consumes exactly one character.

case 1 (comma separated labels):
    q1 --a,b--> q2   becomes   q1 --a--> q2,  q1 --b--> q2

case 2 (multi character labels):
    q1 --ab--> q2    becomes   q1 --a--> qx,  qx --b--> q2   (qx synthetic)

Synthetic states only exist as transition endpoints; no State record is created for them.
"""

import logging
from typing import List, Optional

from schemas.automaton import Transition
from services.state_id import StateIdGenerator, default_id_generator

logger = logging.getLogger(__name__)


def needs_expansion(transition: Transition) -> bool:
    """
    ['a']      => keep
    ['a', 'b'] => expand
    ['ab']     => expand
    """
    sub_labels = transition.label.split(",")
    return len(sub_labels) > 1 or len(sub_labels[0]) != 1


def expand_transition(transition: Transition, id_generator: StateIdGenerator) -> List[Transition]:
    """
    Expand one transition into single-character transitions.

    Each comma separated sub-label becomes its own chain from the original
    source to the original target. Sub-labels that are empty after trimming
    produce nothing.

    Args:
        transition: Transition with a compound or multi-character label
        id_generator: Source of ids for the new transitions and synthetic states

    Returns:
        List[Transition]: Replacement transitions, in sub-label order
    """
    replacements: List[Transition] = []

    for sub_label in transition.label.split(","):
        sub_label = sub_label.strip()
        previous_to = transition.from_

        for index, char in enumerate(sub_label):
            if index + 1 == len(sub_label):
                to = transition.to
            else:
                to = id_generator.new_state_id()

            replacements.append(Transition(
                id=id_generator.new_transition_id(),
                from_=previous_to,
                to=to,
                label=char,
            ))
            previous_to = to

    return replacements


def count_normalized_transitions(transitions: List[Transition]) -> int:
    """Number of transitions normalize_transitions would produce, without building them."""
    total = 0
    for transition in transitions:
        if needs_expansion(transition):
            total += sum(len(sub_label.strip()) for sub_label in transition.label.split(","))
        else:
            total += 1
    return total


def normalize_transitions(
    transitions: List[Transition],
    id_generator: Optional[StateIdGenerator] = None,
) -> List[Transition]:
    """
    Build a fresh transition list in which every label has length 1.

    Transitions that already carry a single character are passed through
    unchanged; the input list is never modified.
    """
    id_generator = id_generator or default_id_generator()
    normalized: List[Transition] = []
    expanded_count = 0

    for transition in transitions:
        if needs_expansion(transition):
            normalized.extend(expand_transition(transition, id_generator))
            expanded_count += 1
        else:
            normalized.append(transition)

    logger.debug(
        f"Normalized {len(transitions)} transitions into {len(normalized)} "
        f"({expanded_count} expanded)"
    )
    return normalized
