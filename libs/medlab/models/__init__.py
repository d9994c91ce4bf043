from medlab.models.errors import MalformedSnapshot
from medlab.models.resources import RESOURCE_ORDER, Location, Ownership, ResourceKind
from medlab.models.snapshot import AgentStatus, CostVector, Project, Task, WorldSnapshot

__all__ = [
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
]
