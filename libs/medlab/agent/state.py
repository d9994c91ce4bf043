"""AgentState — the robot's belief for the current turn.

Rebuilt from every snapshot: the server is authoritative, so nothing here
survives from one turn to the next.
"""

from dataclasses import dataclass, field

from medlab.models.errors import MalformedSnapshot
from medlab.models.resources import RESOURCE_ORDER, Location, ResourceKind
from medlab.models.snapshot import CostVector, Task, WorldSnapshot

MAX_CARRIED_SAMPLES = 3


@dataclass
class Inventory:
    """Molecule counts plus the samples we carry."""

    molecules: dict[ResourceKind, int] = field(
        default_factory=lambda: {kind: 0 for kind in RESOURCE_ORDER}
    )
    samples: list[Task] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.samples) > MAX_CARRIED_SAMPLES:
            raise MalformedSnapshot(
                f"Cannot carry {len(self.samples)} samples (max {MAX_CARRIED_SAMPLES})"
            )
        for kind in RESOURCE_ORDER:
            self.molecules.setdefault(kind, 0)

    # --- Helpers ---

    def count(self, kind: ResourceKind) -> int:
        """Return how many molecules of a type we hold."""
        return self.molecules.get(kind, 0)

    def set_counts(self, storage: CostVector) -> None:
        for kind in RESOURCE_ORDER:
            self.molecules[kind] = storage[kind]

    def add_molecule(self, kind: ResourceKind) -> None:
        """Record one molecule taken from the molecules module."""
        self.molecules[kind] = self.count(kind) + 1

    def can_afford(self, task: Task) -> bool:
        """Check if current molecules cover a sample's full cost."""
        return all(self.count(kind) >= task.cost[kind] for kind in RESOURCE_ORDER)

    def all_affordable(self) -> bool:
        """Check every carried sample against the same, undiminished counts.

        Molecules are not reserved per sample, so two samples may both
        count the same molecule.
        """
        return all(self.can_afford(task) for task in self.samples)

    def committed_cost(self) -> int:
        """Sum of the total costs of every carried sample."""
        return sum(task.total_cost for task in self.samples)

    def required(self, kind: ResourceKind) -> int:
        """Molecules of one type needed across every carried sample."""
        return sum(task.cost[kind] for task in self.samples)

    def is_full(self) -> bool:
        return len(self.samples) >= MAX_CARRIED_SAMPLES

    def summary(self) -> str:
        return " ".join(str(self.count(kind)) for kind in RESOURCE_ORDER)


@dataclass
class AgentState:
    """Local model of our robot for one turn."""

    position: Location = Location.START
    health: int = 0
    inventory: Inventory = field(default_factory=Inventory)

    @classmethod
    def from_snapshot(cls, snapshot: WorldSnapshot) -> "AgentState":
        """Rebuild the belief from a turn's snapshot."""
        inventory = Inventory(samples=snapshot.owned_tasks)
        inventory.set_counts(snapshot.storage)
        return cls(
            position=snapshot.location,
            health=snapshot.health,
            inventory=inventory,
        )

    @property
    def samples(self) -> list[Task]:
        return self.inventory.samples

    def move_to(self, module: Location) -> None:
        self.position = module
