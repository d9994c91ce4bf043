"""Action model — decouples strategy decisions from I/O execution."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from medlab.models.resources import Location, ResourceKind


class ActionKind(StrEnum):
    """The two commands a robot can issue."""

    GOTO = "GOTO"
    CONNECT = "CONNECT"


@dataclass(frozen=True)
class Action:
    """The single action returned by a strategy's decide() function.

    GOTO carries `module`; CONNECT carries either `sample_id` or `molecule`.
    """

    kind: ActionKind
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def molecule(self) -> ResourceKind | None:
        return self.params.get("molecule")

    @property
    def sample_id(self) -> int | None:
        return self.params.get("sample_id")

    @property
    def module(self) -> Location | None:
        return self.params.get("module")


def goto(module: Location) -> Action:
    return Action(kind=ActionKind.GOTO, params={"module": module})


def connect_sample(sample_id: int) -> Action:
    return Action(kind=ActionKind.CONNECT, params={"sample_id": sample_id})


def connect_molecule(kind: ResourceKind) -> Action:
    return Action(kind=ActionKind.CONNECT, params={"molecule": kind})
