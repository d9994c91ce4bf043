"""Medlab — shared protocol library for the lab game robots."""

from medlab.agent import (
    MAX_CARRIED_SAMPLES,
    Action,
    ActionKind,
    AgentState,
    Inventory,
    TurnBot,
    connect_molecule,
    connect_sample,
    goto,
)
from medlab.client.stream import CommandWriter, TurnReader
from medlab.helpers.factory import (
    format_action,
    parse_agent_line,
    parse_available_line,
    parse_project,
    parse_task_line,
)
from medlab.models.errors import MalformedSnapshot
from medlab.models.resources import RESOURCE_ORDER, Location, Ownership, ResourceKind
from medlab.models.snapshot import AgentStatus, CostVector, Project, Task, WorldSnapshot

__all__ = [
    # Client
    "CommandWriter",
    "TurnReader",
    # Agent SDK
    "Action",
    "ActionKind",
    "AgentState",
    "Inventory",
    "MAX_CARRIED_SAMPLES",
    "TurnBot",
    "connect_molecule",
    "connect_sample",
    "goto",
    # Models
    "AgentStatus",
    "CostVector",
    "Location",
    "MalformedSnapshot",
    "Ownership",
    "Project",
    "RESOURCE_ORDER",
    "ResourceKind",
    "Task",
    "WorldSnapshot",
    # Helpers
    "format_action",
    "parse_agent_line",
    "parse_available_line",
    "parse_project",
    "parse_task_line",
]
