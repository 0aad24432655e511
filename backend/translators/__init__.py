"""
Deterministic Translator Layer

Converts between the editor's vis-network payload and the canonical AutomatonGraph.
"""

from .vis_network_translator import VisNetworkTranslator

__all__ = ['VisNetworkTranslator']
