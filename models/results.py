"""Tagged outcomes for request parsing and allocation."""

from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True)
class ValidCount:
    count: int


@dataclass(frozen=True)
class InvalidCount:
    reason: str


@dataclass
class Allocated:
    rooms: List[int] = field(default_factory=list)
    strategy: str = ""

    @property
    def count(self) -> int:
        return len(self.rooms)


@dataclass(frozen=True)
class Insufficient:
    requested: int
    available: int

    @property
    def message(self) -> str:
        if self.available == 0:
            return "No rooms are available."
        return (
            f"Could not find {self.requested} rooms to book "
            f"({self.available} free)."
        )


CountResult = Union[ValidCount, InvalidCount]
AllocationResult = Union[Allocated, Insufficient]
