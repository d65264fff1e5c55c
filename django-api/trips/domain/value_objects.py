"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class EntityId:
    """Positive integer identifier assigned by the remote system of record."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"{type(self).__name__} must be an integer")
        if self.value <= 0:
            raise ValueError(f"{type(self).__name__} must be positive")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=int(value))

    def __str__(self) -> str:
        return str(self.value)


class DestinationId(EntityId):
    """Unique identifier for a Destination."""


class PeriodId(EntityId):
    """Unique identifier for a Period."""


class SessionId(EntityId):
    """Unique identifier for a Session."""


class EmployeeId(EntityId):
    """Unique identifier for an Employee."""


class InscriptionId(EntityId):
    """Unique identifier for an Inscription."""


class SelectionResultId(EntityId):
    """Unique identifier for a SelectionResult."""


@dataclass(frozen=True)
class Capacity:
    """Strictly positive number of seats offered by a destination."""

    value: int

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError("Capacity must be positive")

    def __str__(self) -> str:
        return str(self.value)
