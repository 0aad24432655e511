from schemas.automaton import Transition
from services.determinism_validator import find_conflicts, is_deterministic, is_valid_dfa


def edge(id, src, dst, label):
    return Transition(id=id, from_=src, to=dst, label=label)


def test_unique_from_and_label_is_deterministic():
    transitions = [edge("e1", "1", "2", "a"), edge("e2", "1", "3", "b"), edge("e3", "2", "2", "a")]

    assert is_deterministic(transitions)
    assert is_valid_dfa(transitions)
    assert find_conflicts(transitions) == []


def test_duplicate_from_and_label_is_not_deterministic():
    transitions = [edge("e1", "1", "2", "a"), edge("e2", "1", "3", "a")]

    assert not is_valid_dfa(transitions)


def test_identical_self_loops_conflict():
    transitions = [edge("e1", "1", "1", "a"), edge("e2", "1", "1", "a")]

    assert not is_valid_dfa(transitions)
    assert find_conflicts(transitions) == ["State '1' has 2 transitions on 'a' (to '1', '1')"]


def test_same_label_from_different_states_is_fine():
    transitions = [edge("e1", "1", "2", "a"), edge("e2", "2", "1", "a")]

    assert is_valid_dfa(transitions)


def test_incomplete_automaton_is_still_valid():
    assert is_valid_dfa([edge("e1", "1", "2", "a")])
    assert is_valid_dfa([])


def test_conflicts_reported_once_per_pair():
    transitions = [
        edge("e1", "1", "2", "a"),
        edge("e2", "1", "3", "a"),
        edge("e3", "1", "4", "a"),
        edge("e4", "2", "1", "b"),
        edge("e5", "2", "2", "b"),
    ]

    conflicts = find_conflicts(transitions)

    assert len(conflicts) == 2
    assert conflicts[0].startswith("State '1' has 3 transitions on 'a'")
    assert conflicts[1].startswith("State '2' has 2 transitions on 'b'")
