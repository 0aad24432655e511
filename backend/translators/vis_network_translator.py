"""
vis-network Translator

Converts between the editor's vis-network payload and the canonical AutomatonGraph.

Editor node: {"id": "1", "label": "start", "final": true, "x": -184, "y": -41}
Editor edge: {"id": "1", "from": "1", "to": "2", "label": "a",
              "smooth": {"type": "curvedCW", "roundness": 0.2}}
"""

from typing import Dict, List, Any
from pydantic import ValidationError

from schemas.automaton import AutomatonGraph, State, Transition
from services.dfa_engine import InvalidInputType


class VisNetworkTranslator:
    """
    Deterministic translator between vis-network JSON and AutomatonGraph.
    No styling or layout is produced here; the editor owns presentation.
    """

    def to_graph(self, network: Dict[str, Any]) -> AutomatonGraph:
        """
        Convert an editor network to an AutomatonGraph.

        Args:
            network: Dict with "nodes" and "edges" lists

        Returns:
            AutomatonGraph with states and transitions

        Raises:
            InvalidInputType: If the payload is not a network
        """
        if not isinstance(network, dict) or "nodes" not in network or "edges" not in network:
            raise InvalidInputType("Network must provide 'nodes' and 'edges'")

        states = [self._convert_node(node) for node in network["nodes"]]

        transitions = []
        for position, edge in enumerate(network["edges"]):
            transitions.append(self._convert_edge(edge, position))

        return AutomatonGraph(states=states, transitions=transitions)

    def translate(self, graph: AutomatonGraph) -> Dict[str, Any]:
        """
        Convert an AutomatonGraph to the editor network format.

        Synthetic states referenced by transitions get placeholder nodes so
        the editor can draw an expanded graph.
        """
        nodes: List[Dict[str, Any]] = [self._to_node(state) for state in graph.states]

        known_ids = {state.id for state in graph.states}
        for state_id in graph.referenced_state_ids():
            if state_id not in known_ids:
                nodes.append({"id": state_id, "label": "", "synthetic": True})
                known_ids.add(state_id)

        edges = [self._to_edge(t) for t in graph.transitions]

        return {"nodes": nodes, "edges": edges}

    def _convert_node(self, node: Dict[str, Any]) -> State:
        """Convert editor node to State"""
        try:
            return State(
                id=str(node["id"]),
                label="" if node.get("label") is None else str(node["label"]),
                is_final=node.get("final", node.get("isFinal")),
                x=node.get("x"),
                y=node.get("y"),
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise InvalidInputType(f"Invalid network node {node!r}: {e}") from e

    def _convert_edge(self, edge: Dict[str, Any], position: int) -> Transition:
        """Convert editor edge to Transition"""
        try:
            source = str(edge["from"])
            target = str(edge["to"])
            return Transition(
                id=f"edge-{source}-{target}-{position}" if edge.get("id") is None else str(edge["id"]),
                from_=source,
                to=target,
                label="" if edge.get("label") is None else str(edge["label"]),
                smooth=edge.get("smooth"),
            )
        except (KeyError, TypeError, AttributeError, ValidationError) as e:
            raise InvalidInputType(f"Invalid network edge {edge!r}: {e}") from e

    def _to_node(self, state: State) -> Dict[str, Any]:
        node: Dict[str, Any] = {"id": state.id, "label": state.label}
        if state.is_final:
            node["final"] = True
        if state.x is not None and state.y is not None:
            node["x"] = state.x
            node["y"] = state.y
        return node

    def _to_edge(self, transition: Transition) -> Dict[str, Any]:
        edge: Dict[str, Any] = {
            "id": transition.id,
            "from": transition.from_,
            "to": transition.to,
            "label": transition.label,
        }
        if transition.smooth:
            edge["smooth"] = transition.smooth
        return edge
