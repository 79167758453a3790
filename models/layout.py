from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from config.defaults import ROOM_NUMBER_BASE


def floor_of(room: int) -> int:
    """Floor number encoded in the hundreds of a room number."""
    return room // ROOM_NUMBER_BASE


def index_on_floor(room: int) -> int:
    """Zero-based position of a room within its floor."""
    return room % ROOM_NUMBER_BASE - 1


@dataclass(frozen=True)
class Floor:
    floor_number: int
    rooms: Tuple[int, ...]

    @property
    def room_count(self) -> int:
        return len(self.rooms)


@dataclass(frozen=True)
class HotelLayout:
    """Static building topology: floors ascending, rooms in physical order."""
    floors: Tuple[Floor, ...]
    _room_set: frozenset = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        ordered = tuple(
            Floor(f.floor_number, tuple(sorted(f.rooms)))
            for f in sorted(self.floors, key=lambda f: f.floor_number)
        )
        object.__setattr__(self, "floors", ordered)
        object.__setattr__(
            self, "_room_set", frozenset(r for f in ordered for r in f.rooms)
        )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "HotelLayout":
        """Build a layout from per-floor lists of room numbers."""
        floors = [Floor(floor_of(row[0]), tuple(row)) for row in rows if row]
        return cls(tuple(floors))

    def all_rooms(self) -> List[int]:
        return [room for f in self.floors for room in f.rooms]

    def floor_numbers(self) -> List[int]:
        return [f.floor_number for f in self.floors]

    def rooms_on(self, floor_number: int) -> Tuple[int, ...]:
        for f in self.floors:
            if f.floor_number == floor_number:
                return f.rooms
        return ()

    def floor_of(self, room: int) -> int:
        return floor_of(room)

    def index_on_floor(self, room: int) -> int:
        return index_on_floor(room)

    @property
    def total_rooms(self) -> int:
        return len(self._room_set)

    @property
    def max_rooms_per_floor(self) -> int:
        return max((f.room_count for f in self.floors), default=0)

    def __contains__(self, room: int) -> bool:
        return room in self._room_set
