"""Researcher strategy — pure function, no I/O.

One action per turn, decided in this order:
1. At the LABORATORY: research the first carried sample we can afford,
   else go fetch samples (none carried) or molecules (some carried).
2. Elsewhere, while a cloud sample fits our limits: go to DIAGNOSIS and
   take it.
3. Otherwise, if some carried sample is short of molecules: go to
   MOLECULES and take the first missing type (A..E).
4. Otherwise: go to the LABORATORY and research.
"""

from medlab.agent.actions import Action, connect_molecule, connect_sample, goto
from medlab.agent.state import MAX_CARRIED_SAMPLES, AgentState
from medlab.models.resources import RESOURCE_ORDER, Location, Ownership, ResourceKind
from medlab.models.snapshot import Task, WorldSnapshot

# Upper bound on the summed total cost of every sample we carry
MAX_COMMITTED_COST = 10

# Molecule requested when nothing is found missing
DEFAULT_MOLECULE = ResourceKind.A


def query_next_sample(state: AgentState, tasks: list[Task]) -> Task | None:
    """Pick the next cloud sample to take, or None.

    Tasks are sorted by total cost, highest first (stable), and the last
    cloud sample in that order is the candidate. It is taken only if the
    committed cost stays within MAX_COMMITTED_COST.
    """
    if len(state.samples) >= MAX_CARRIED_SAMPLES:
        return None

    committed = state.inventory.committed_cost()
    ranked = sorted(tasks, key=lambda t: t.total_cost, reverse=True)
    candidate = next((t for t in reversed(ranked) if t.owner == Ownership.SHARED), None)
    if candidate is None or committed + candidate.total_cost > MAX_COMMITTED_COST:
        return None
    return candidate


def first_missing_molecule(state: AgentState) -> ResourceKind:
    """First type (A..E) whose summed need across carried samples exceeds stock."""
    inventory = state.inventory
    for kind in RESOURCE_ORDER:
        if inventory.required(kind) > inventory.count(kind):
            return kind
    return DEFAULT_MOLECULE


def _process_sample(state: AgentState) -> Action:
    if state.position != Location.LABORATORY or not state.samples:
        return goto(Location.LABORATORY)
    return connect_sample(state.samples[0].id)


def _research(state: AgentState) -> Action:
    for sample in state.samples:
        if state.inventory.can_afford(sample):
            return connect_sample(sample.id)
    if not state.samples:
        return goto(Location.DIAGNOSIS)
    # Carried samples we cannot afford: go back for molecules
    return goto(Location.MOLECULES)


def decide(state: AgentState, snapshot: WorldSnapshot) -> Action:
    """Researcher decision logic — returns the action for this turn."""
    # 1. At the laboratory
    if state.position == Location.LABORATORY:
        return _research(state)

    # 2. Take another sample from the cloud
    candidate = query_next_sample(state, list(snapshot.tasks))
    if candidate is not None:
        if state.position != Location.DIAGNOSIS:
            return goto(Location.DIAGNOSIS)
        return connect_sample(candidate.id)

    # 3. Gather missing molecules
    if not state.inventory.all_affordable():
        molecule = first_missing_molecule(state)
        if state.position != Location.MOLECULES:
            return goto(Location.MOLECULES)
        return connect_molecule(molecule)

    # 4. Research
    return _process_sample(state)
