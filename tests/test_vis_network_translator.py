import pytest

from services.dfa_engine import InvalidInputType
from translators import VisNetworkTranslator


@pytest.fixture
def translator():
    return VisNetworkTranslator()


@pytest.fixture
def network():
    return {
        "nodes": [
            {"id": "1", "label": "start", "x": -184, "y": -41},
            {"id": "2", "label": "q1", "final": True, "x": 20, "y": 10},
        ],
        "edges": [
            {"id": "1", "from": "1", "to": "2", "label": "ab",
             "smooth": {"type": "curvedCW", "roundness": 0.2}},
            {"from": 2, "to": 2, "label": "b"},
        ],
    }


def test_to_graph_maps_editor_fields(translator, network):
    graph = translator.to_graph(network)

    assert [(s.id, s.label, s.is_final) for s in graph.states] == [
        ("1", "start", False),
        ("2", "q1", True),
    ]
    first, second = graph.transitions
    assert (first.id, first.from_, first.to, first.label) == ("1", "1", "2", "ab")
    assert first.smooth == {"type": "curvedCW", "roundness": 0.2}
    # numeric ids are stringified and missing edge ids are generated
    assert (second.id, second.from_, second.to) == ("edge-2-2-1", "2", "2")


def test_to_graph_rejects_non_network(translator):
    with pytest.raises(InvalidInputType):
        translator.to_graph({"states": [], "transitions": []})


def test_to_graph_rejects_edge_without_endpoints(translator):
    with pytest.raises(InvalidInputType):
        translator.to_graph({"nodes": [], "edges": [{"id": "e1", "label": "a"}]})


def test_translate_round_trips_editor_fields(translator, network):
    result = translator.translate(translator.to_graph(network))

    assert result["nodes"][0] == {"id": "1", "label": "start", "x": -184, "y": -41}
    assert result["nodes"][1]["final"] is True
    assert result["edges"][0]["smooth"] == {"type": "curvedCW", "roundness": 0.2}
    assert "smooth" not in result["edges"][1]


def test_translate_adds_placeholder_for_synthetic_states(translator, network, engine):
    normalized = engine.normalize(translator.to_graph(network))

    result = translator.translate(normalized)

    synthetic = [n for n in result["nodes"] if n.get("synthetic")]
    assert synthetic == [{"id": "q1", "label": "", "synthetic": True}]
    assert all(len(e["label"]) == 1 for e in result["edges"])


def test_zero_values_are_stringified_not_dropped(translator, engine):
    network = {
        "nodes": [{"id": 1, "label": 0}, {"id": 2, "label": "end", "final": True}],
        "edges": [{"id": 0, "from": 1, "to": 2, "label": 0}],
    }

    graph = translator.to_graph(network)

    assert graph.states[0].label == "0"
    assert graph.transitions[0].id == "0"
    assert graph.transitions[0].label == "0"
    assert engine.evaluate("0", graph).to_response() == {
        "valid": True,
        "accepted": True,
        "acceptedStateLabel": "end",
    }


@pytest.mark.parametrize("flag, expected", [("false", False), ("true", True), (None, False), (0, False)])
def test_final_flag_parsed_like_canonical_graph(translator, flag, expected):
    graph = translator.to_graph({"nodes": [{"id": "1", "final": flag}], "edges": []})

    assert graph.states[0].is_final is expected


def test_unparseable_final_flag_is_rejected(translator):
    with pytest.raises(InvalidInputType):
        translator.to_graph({"nodes": [{"id": "1", "final": "maybe"}], "edges": []})
