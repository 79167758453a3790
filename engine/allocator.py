"""Room selection: contiguous-run search, cross-floor fallback, random bulk booking."""

import random
from typing import AbstractSet, Dict, List, Optional

from models.layout import HotelLayout
from models.results import Allocated, AllocationResult, Insufficient
from config.defaults import (
    RANDOM_MIN_ROOMS, RANDOM_MAX_ROOMS,
    STRATEGY_CONTIGUOUS, STRATEGY_CROSS_FLOOR, STRATEGY_RANDOM,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def available_rooms(layout: HotelLayout, booked: AbstractSet[int]) -> List[int]:
    """Layout rooms not in the booked set, in layout order."""
    return [room for room in layout.all_rooms() if room not in booked]


def group_by_floor(layout: HotelLayout, rooms: List[int]) -> Dict[int, List[int]]:
    """Partition rooms by floor; each floor's list is sorted ascending."""
    by_floor: Dict[int, List[int]] = {}
    for room in rooms:
        by_floor.setdefault(layout.floor_of(room), []).append(room)
    return {floor: sorted(by_floor[floor]) for floor in sorted(by_floor)}


def is_contiguous(layout: HotelLayout, rooms: List[int]) -> bool:
    """True when the rooms' in-floor positions form an unbroken run."""
    indices = sorted(layout.index_on_floor(r) for r in rooms)
    return all(b == a + 1 for a, b in zip(indices, indices[1:]))


def find_contiguous_run(
    layout: HotelLayout,
    by_floor: Dict[int, List[int]],
    count: int,
) -> List[int]:
    """First window of `count` physically adjacent free rooms, lowest floor first."""
    for floor in sorted(by_floor):
        floor_rooms = by_floor[floor]
        for start in range(len(floor_rooms) - count + 1):
            window = floor_rooms[start:start + count]
            if is_contiguous(layout, window):
                return window
    return []


def fill_across_floors(by_floor: Dict[int, List[int]], count: int) -> List[int]:
    """Greedy fill from consecutive floors, retrying from each starting floor."""
    floors = sorted(by_floor)
    for i in range(len(floors)):
        collected: List[int] = []
        for floor in floors[i:]:
            if len(collected) >= count:
                break
            collected.extend(by_floor[floor][:count - len(collected)])

        if len(collected) >= count:
            return collected[:count]
    return []


def _select_contiguous(
    layout: HotelLayout,
    booked: AbstractSet[int],
    count: int,
):
    """Run both phases. Returns (rooms, strategy, available_count)."""
    available = available_rooms(layout, booked)
    if count <= 0 or count > len(available):
        return [], None, len(available)

    by_floor = group_by_floor(layout, available)

    # Phase 1: consecutive rooms on a single floor
    run = find_contiguous_run(layout, by_floor, count)
    if run:
        logger.debug("Contiguous run for %d rooms on floor %d: %s",
                     count, layout.floor_of(run[0]), run)
        return run, STRATEGY_CONTIGUOUS, len(available)

    # Phase 2: merge floors greedily
    merged = fill_across_floors(by_floor, count)
    if merged:
        logger.debug("No contiguous run for %d rooms; cross-floor fill: %s", count, merged)
        return merged, STRATEGY_CROSS_FLOOR, len(available)

    return [], None, len(available)


def allocate_contiguous(
    layout: HotelLayout,
    booked: AbstractSet[int],
    count: int,
) -> List[int]:
    """Choose `count` free rooms preferring one contiguous run; [] if impossible.

    Never returns a partial result. The caller validates `count` beforehand.
    """
    rooms, _, _ = _select_contiguous(layout, booked, count)
    return rooms


def allocate_contiguous_result(
    layout: HotelLayout,
    booked: AbstractSet[int],
    count: int,
) -> AllocationResult:
    """Same selection as allocate_contiguous, reported as Allocated or Insufficient."""
    rooms, strategy, available = _select_contiguous(layout, booked, count)
    if not rooms:
        return Insufficient(requested=count, available=available)
    return Allocated(rooms=rooms, strategy=strategy)


def allocate_random(
    layout: HotelLayout,
    booked: AbstractSet[int],
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Pick between RANDOM_MIN_ROOMS and RANDOM_MAX_ROOMS free rooms uniformly at random."""
    rng = rng or random.Random()
    available = available_rooms(layout, booked)
    if not available:
        return []

    target = rng.randint(RANDOM_MIN_ROOMS, RANDOM_MAX_ROOMS)
    target = min(target, len(available))

    shuffled = list(available)
    rng.shuffle(shuffled)
    selected = shuffled[:target]
    logger.debug("Random booking drew %d of %d free rooms", target, len(available))
    return selected


def allocate_random_result(
    layout: HotelLayout,
    booked: AbstractSet[int],
    rng: Optional[random.Random] = None,
) -> AllocationResult:
    rooms = allocate_random(layout, booked, rng)
    if not rooms:
        return Insufficient(requested=RANDOM_MIN_ROOMS, available=0)
    return Allocated(rooms=rooms, strategy=STRATEGY_RANDOM)
