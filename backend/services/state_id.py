"""
Synthetic State ID Service

Provides id generation for the states and transitions introduced when
multi-character or comma-separated edge labels are expanded.
Production uses random 128-bit UUIDs; tests inject a fixed sequence.
"""

import itertools
import threading
import uuid
from typing import Iterator


class StateIdGenerator:
    """
    Source of fresh ids for synthetic states and transitions.
    Subclasses must return an id that never repeats for the lifetime of the generator.
    """

    def new_state_id(self) -> str:
        raise NotImplementedError

    def new_transition_id(self) -> str:
        raise NotImplementedError


class UUIDStateIdGenerator(StateIdGenerator):
    """Random uuid4 ids. Safe to share between concurrent evaluations."""

    def new_state_id(self) -> str:
        return str(uuid.uuid4())

    def new_transition_id(self) -> str:
        return str(uuid.uuid4())


class SequentialStateIdGenerator(StateIdGenerator):
    """
    Deterministic ids in the format q1, q2, ... for states and t1, t2, ... for transitions.

    Args:
        state_prefix: Prefix for synthetic state ids
        transition_prefix: Prefix for generated transition ids
        start: First sequence number
    """

    def __init__(self, state_prefix: str = "q", transition_prefix: str = "t", start: int = 1):
        self.state_prefix = state_prefix
        self.transition_prefix = transition_prefix
        self._states: Iterator[int] = itertools.count(start)
        self._transitions: Iterator[int] = itertools.count(start)
        self._lock = threading.Lock()

    def new_state_id(self) -> str:
        with self._lock:
            return f"{self.state_prefix}{next(self._states)}"

    def new_transition_id(self) -> str:
        with self._lock:
            return f"{self.transition_prefix}{next(self._transitions)}"


def default_id_generator() -> StateIdGenerator:
    return UUIDStateIdGenerator()
