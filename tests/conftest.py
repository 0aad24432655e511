import pytest

from schemas.automaton import AutomatonGraph, State, Transition
from services.dfa_engine import DFAEngine
from services.state_id import SequentialStateIdGenerator


def make_graph(states, transitions):
    """states: (id, label, is_final) tuples; transitions: (id, from, to, label) tuples"""
    return AutomatonGraph(
        states=[State(id=i, label=label, is_final=final) for i, label, final in states],
        transitions=[Transition(id=i, from_=src, to=dst, label=label) for i, src, dst, label in transitions],
    )


@pytest.fixture
def id_generator():
    return SequentialStateIdGenerator()


@pytest.fixture
def engine(id_generator):
    return DFAEngine(id_generator=id_generator)


@pytest.fixture
def single_step_graph():
    return make_graph(
        [("1", "start", False), ("2", "accept", True)],
        [("e1", "1", "2", "a")],
    )


@pytest.fixture
def ends_with_b_graph():
    # accepts strings over {a, b} that end with b
    return make_graph(
        [("1", "q0", False), ("2", "q1", True)],
        [
            ("e1", "1", "1", "a"),
            ("e2", "1", "2", "b"),
            ("e3", "2", "1", "a"),
            ("e4", "2", "2", "b"),
        ],
    )


@pytest.fixture(name="make_graph")
def make_graph_fixture():
    return make_graph
