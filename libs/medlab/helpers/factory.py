"""Factory functions for parsing input lines and formatting commands."""

from pydantic import ValidationError

from medlab.agent.actions import Action, ActionKind
from medlab.models.errors import MalformedSnapshot
from medlab.models.resources import Location, Ownership, ResourceKind
from medlab.models.snapshot import AgentStatus, CostVector, Project, Task

AGENT_LINE_FIELDS = 13
TASK_LINE_FIELDS = 10
NO_EXPERTISE_GAIN = "0"


def _ints(tokens: list[str]) -> list[int]:
    return [int(token) for token in tokens]


def _split(line: str, expected: int, what: str) -> list[str]:
    tokens = line.split()
    if len(tokens) != expected:
        raise ValueError(f"Expected {expected} tokens in {what} line, got {len(tokens)}: {line!r}")
    return tokens


def _counts(values: list[int]) -> CostVector:
    try:
        return CostVector.of(values)
    except ValidationError as e:
        raise MalformedSnapshot(str(e)) from e


def parse_project(line: str) -> Project:
    """Parse a science project line: `a b c d e`."""
    tokens = _split(line, 5, "project")
    return Project(expertise=_counts(_ints(tokens)))


def parse_agent_line(line: str) -> AgentStatus:
    """Parse a robot line.

    Format: `<module> <eta> <score> <storageA..E> <expertiseA..E>`

    Raises:
        ValueError: On a wrong token count or a non-integer field.
        MalformedSnapshot: On an unknown module token or negative counts.
    """
    tokens = _split(line, AGENT_LINE_FIELDS, "robot")
    location = Location.from_token(tokens[0])
    eta, health = _ints(tokens[1:3])
    return AgentStatus(
        location=location,
        eta=eta,
        health=health,
        storage=_counts(_ints(tokens[3:8])),
        expertise=_counts(_ints(tokens[8:13])),
    )


def parse_available_line(line: str) -> CostVector:
    """Parse the shared molecule availability line: `a b c d e`."""
    return _counts(_ints(_split(line, 5, "availability")))


def parse_task_line(line: str) -> Task:
    """Parse a sample line.

    Format: `<id> <carriedBy> <rank> <expertiseGain> <health> <costA..E>`
    """
    tokens = _split(line, TASK_LINE_FIELDS, "sample")
    sample_id = int(tokens[0])
    owner = Ownership.from_token(tokens[1])
    rank = int(tokens[2])
    gain = None if tokens[3] == NO_EXPERTISE_GAIN else ResourceKind.from_token(tokens[3])
    return Task(
        id=sample_id,
        owner=owner,
        rank=rank,
        expertise_gain=gain,
        health=int(tokens[4]),
        cost=_counts(_ints(tokens[5:10])),
    )


def format_action(action: Action) -> str:
    """Render an Action as its output line (without newline).

    Raises:
        ValueError: If the action is missing its target.
    """
    if action.kind == ActionKind.GOTO:
        if action.module is None:
            raise ValueError("GOTO action needs a module")
        return f"GOTO {action.module.value}"

    if action.molecule is not None:
        return f"CONNECT {action.molecule.value}"
    if action.sample_id is not None:
        return f"CONNECT {action.sample_id}"
    raise ValueError("CONNECT action needs a sample_id or a molecule")
