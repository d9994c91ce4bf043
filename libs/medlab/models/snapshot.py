"""Snapshot models — one turn's parsed facts, read-only.

All models are frozen. `WorldSnapshot.create()` is the checked
constructor: any validation failure surfaces as MalformedSnapshot.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from medlab.models.errors import MalformedSnapshot
from medlab.models.resources import RESOURCE_ORDER, Location, Ownership, ResourceKind


class CostVector(BaseModel):
    """One non-negative count per molecule type."""

    model_config = {"frozen": True}

    a: int = Field(ge=0, default=0)
    b: int = Field(ge=0, default=0)
    c: int = Field(ge=0, default=0)
    d: int = Field(ge=0, default=0)
    e: int = Field(ge=0, default=0)

    @classmethod
    def of(cls, counts: Sequence[int]) -> "CostVector":
        """Build from five counts in A..E order."""
        if len(counts) != len(RESOURCE_ORDER):
            raise ValueError(f"Expected {len(RESOURCE_ORDER)} counts, got {len(counts)}")
        return cls(**{kind.lower(): count for kind, count in zip(RESOURCE_ORDER, counts)})

    def __getitem__(self, kind: ResourceKind) -> int:
        return getattr(self, kind.lower())

    def as_list(self) -> list[int]:
        return [self[kind] for kind in RESOURCE_ORDER]

    @property
    def total(self) -> int:
        return sum(self.as_list())


class Task(BaseModel):
    """A sample: the unit of work carried, diagnosed and researched."""

    model_config = {"frozen": True}

    id: int
    owner: Ownership
    health: int = 0
    cost: CostVector = Field(default_factory=CostVector)
    rank: int = 0
    expertise_gain: ResourceKind | None = None

    @property
    def total_cost(self) -> int:
        return self.cost.total


class AgentStatus(BaseModel):
    """One robot's line of the turn input."""

    model_config = {"frozen": True}

    location: Location
    eta: int = 0
    health: int = 0
    storage: CostVector = Field(default_factory=CostVector)
    expertise: CostVector = Field(default_factory=CostVector)


class Project(BaseModel):
    """A science project: expertise required per molecule type."""

    model_config = {"frozen": True}

    expertise: CostVector


class WorldSnapshot(BaseModel):
    """Everything the server tells us in one turn."""

    model_config = {"frozen": True}

    me: AgentStatus
    opponent: AgentStatus | None = None
    available: CostVector = Field(default_factory=CostVector)
    tasks: tuple[Task, ...] = ()

    @classmethod
    def create(
        cls,
        *,
        me: AgentStatus | dict[str, Any],
        tasks: Iterable[Task | dict[str, Any]] = (),
        opponent: AgentStatus | dict[str, Any] | None = None,
        available: CostVector | dict[str, Any] | None = None,
    ) -> "WorldSnapshot":
        """Validate and build a snapshot.

        Raises:
            MalformedSnapshot: If any field (location, owner, counts) is invalid.
        """
        data: dict[str, Any] = {"me": me, "opponent": opponent, "tasks": tuple(tasks)}
        if available is not None:
            data["available"] = available
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise MalformedSnapshot(str(e)) from e

    @property
    def location(self) -> Location:
        return self.me.location

    @property
    def health(self) -> int:
        return self.me.health

    @property
    def storage(self) -> CostVector:
        return self.me.storage

    @property
    def owned_tasks(self) -> list[Task]:
        """Tasks carried by us, in snapshot order."""
        return [t for t in self.tasks if t.owner == Ownership.SELF]

    @property
    def shared_tasks(self) -> list[Task]:
        """Tasks sitting in the cloud, in snapshot order."""
        return [t for t in self.tasks if t.owner == Ownership.SHARED]
