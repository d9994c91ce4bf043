"""Closed enums for the wire tokens of the game protocol.

Every enum maps to and from its exact wire token. Unknown tokens fail
fast with MalformedSnapshot instead of falling back to a default.
"""

from enum import IntEnum, StrEnum

from medlab.models.errors import MalformedSnapshot


class ResourceKind(StrEnum):
    """The five molecule types. Declaration order is the scan order A..E."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"

    @classmethod
    def from_token(cls, token: str) -> "ResourceKind":
        try:
            return cls(token)
        except ValueError:
            raise MalformedSnapshot(f"Unknown molecule type: {token!r}") from None


class Location(StrEnum):
    """The four modules the robot can stand at."""

    START = "START_POS"
    DIAGNOSIS = "DIAGNOSIS"
    MOLECULES = "MOLECULES"
    LABORATORY = "LABORATORY"

    @classmethod
    def from_token(cls, token: str) -> "Location":
        try:
            return cls(token)
        except ValueError:
            raise MalformedSnapshot(f"Unknown module: {token!r}") from None


class Ownership(IntEnum):
    """Who carries a sample: `carriedBy` on the wire."""

    SELF = 0
    OTHER = 1
    SHARED = -1

    @classmethod
    def from_token(cls, token: str | int) -> "Ownership":
        try:
            return cls(int(token))
        except ValueError:
            raise MalformedSnapshot(f"Unknown sample owner: {token!r}") from None


RESOURCE_ORDER: tuple[ResourceKind, ...] = tuple(ResourceKind)
