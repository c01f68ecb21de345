# app/services/layout_assigner.py
from __future__ import annotations

from datetime import datetime, time
from typing import Callable, Dict, List, Sequence, Tuple

from app.schemas.layout import LayoutKind, MeetingPlacement
from app.schemas.meeting import MeetingRecord
from app.services.formatting import SLOT_MINUTES

DEFAULT_GRID_START_HOUR = 10

# Groups larger than this are not subdivided; members render at full width.
MAX_DIVIDED_GROUP_SIZE = 4

_LAYOUT_KINDS: Dict[int, LayoutKind] = {
    1: LayoutKind.SINGLE,
    2: LayoutKind.DUAL_HORIZONTAL,
    3: LayoutKind.TRIPLE,
    4: LayoutKind.QUAD,
}


def meetings_overlap(a: MeetingRecord, b: MeetingRecord) -> bool:
    """
    Whether two meetings of the same day collide.

    - Both with slot indices: inclusive slot ranges intersect.
    - Otherwise: half-open time intervals intersect, so a meeting ending
      exactly when another starts does not overlap it.
    """
    if a.has_slots and b.has_slots:
        return (
            a.start_slot_index <= b.end_slot_index  # type: ignore[operator]
            and a.end_slot_index >= b.start_slot_index  # type: ignore[operator]
        )
    return a.start_time < b.end_time and a.end_time > b.start_time


def _sort_key(records: Sequence[MeetingRecord]) -> Callable[[MeetingRecord], Tuple]:
    # Slots and timestamps are not comparable with each other, so slots are
    # only used for ordering when every meeting of the day carries them.
    if records and all(r.has_slots for r in records):
        return lambda r: (r.start_slot_index, r.end_slot_index)
    return lambda r: (r.start_time, r.end_time)


def _group_indices(records: Sequence[MeetingRecord]) -> List[List[int]]:
    """
    Connected components of the overlap relation, as lists of input indices.

    Each group is seeded with the earliest unassigned meeting and absorbs
    every unassigned meeting that overlaps any member, repeating until
    nothing joins. Members keep start order (tie: end order).

    This is O(n^2) per day, fine for the handful of meetings a day holds.
    A sort-and-sweep over interval ends is the replacement if that changes.
    """
    key = _sort_key(records)
    order = sorted(range(len(records)), key=lambda i: key(records[i]))
    rank = {index: pos for pos, index in enumerate(order)}

    assigned: set[int] = set()
    groups: List[List[int]] = []

    for seed in order:
        if seed in assigned:
            continue
        assigned.add(seed)
        members = [seed]

        grew = True
        while grew:
            grew = False
            for candidate in order:
                if candidate in assigned:
                    continue
                if any(meetings_overlap(records[m], records[candidate]) for m in members):
                    members.append(candidate)
                    assigned.add(candidate)
                    grew = True

        members.sort(key=rank.__getitem__)
        groups.append(members)

    return groups


def group_overlapping_meetings(records: Sequence[MeetingRecord]) -> List[List[MeetingRecord]]:
    """
    Partition one day's meetings into overlap-connected groups.

    Meetings that do not overlap directly still share a group when a third
    meeting overlaps both (A-B, B-C puts A, B and C together).
    """
    return [[records[i] for i in group] for group in _group_indices(records)]


def layout_kind_for(group_size: int) -> LayoutKind:
    """
    1 -> single, 2 -> dual-horizontal, 3 -> triple, 4 -> quad.

    Five or more overlapping meetings fall back to single: every member is
    drawn at full width on top of the others.
    """
    if group_size < 1:
        raise ValueError("group_size must be at least 1")
    return _LAYOUT_KINDS.get(group_size, LayoutKind.SINGLE)


def width_share_for(group_size: int) -> float:
    if group_size > MAX_DIVIDED_GROUP_SIZE:
        return 1.0
    return 1.0 / group_size


def vertical_placement(
    record: MeetingRecord,
    grid_start_hour: int = DEFAULT_GRID_START_HOUR,
) -> Tuple[float, float]:
    """
    (top offset, height) in slot-height units.

    Slot indices win when both are present: slot 1 is the first grid row
    and the end slot is inclusive. Otherwise the wall-clock offset from
    `grid_start_hour` is divided into 15-minute rows.
    """
    if record.has_slots:
        start_slot = record.start_slot_index - 1  # type: ignore[operator]
        end_slot = record.end_slot_index - 1  # type: ignore[operator]
        return float(start_slot), float(end_slot - start_slot + 1)

    anchor = datetime.combine(record.start_time.date(), time(hour=grid_start_hour))
    start_minutes = (record.start_time - anchor).total_seconds() / 60
    duration_minutes = (record.end_time - record.start_time).total_seconds() / 60
    return start_minutes / SLOT_MINUTES, duration_minutes / SLOT_MINUTES


def assign_layout(
    records: Sequence[MeetingRecord],
    grid_start_hour: int = DEFAULT_GRID_START_HOUR,
) -> List[MeetingPlacement]:
    """
    Compute a MeetingPlacement for every meeting of a single day.

    Placements are returned in the same order as `records`. Within a group
    every member gets a distinct position, 0 being the earliest start.
    """
    placements: Dict[int, MeetingPlacement] = {}

    for group_index, group in enumerate(_group_indices(records)):
        size = len(group)
        kind = layout_kind_for(size)
        width = width_share_for(size)
        divided = 1 < size <= MAX_DIVIDED_GROUP_SIZE

        for position, index in enumerate(group):
            record = records[index]
            top, height = vertical_placement(record, grid_start_hour)
            placements[index] = MeetingPlacement(
                meeting_id=record.id,
                group_index=group_index,
                group_size=size,
                position=position,
                layout_kind=kind,
                width_share=width,
                left_share=position * width if divided else 0.0,
                top_offset_units=top,
                height_units=height,
            )

    return [placements[i] for i in range(len(records))]
