"""Agent SDK — build robots for the lab game."""

from medlab.agent.actions import Action, ActionKind, connect_molecule, connect_sample, goto
from medlab.agent.base import TurnBot
from medlab.agent.state import MAX_CARRIED_SAMPLES, AgentState, Inventory

__all__ = [
    "Action",
    "ActionKind",
    "AgentState",
    "Inventory",
    "MAX_CARRIED_SAMPLES",
    "TurnBot",
    "connect_molecule",
    "connect_sample",
    "goto",
]
