"""
room_map.py
===========
Construction and inspection of the mansion map.

The map is a fixed, hand-authored binary tree of Room objects. Nothing here
orders or balances rooms: build_map() wires each node exactly where the
layout places it.
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Mapping, Optional

from models import Room, Unclaimed

logger = logging.getLogger("detective_quest.room_map")


def create_room(name: str, clue: Optional[str] = None) -> Room:
    """
    Create a room with no neighbours.

    Args:
        name: Display name of the room.
        clue: Clue hidden in the room, or None if there is nothing to find.

    Returns:
        A Room whose slot is Unclaimed(clue), or CLAIMED when clue is None.
    """
    room = Room(name=name)
    if clue is not None:
        room.slot = Unclaimed(clue)
    return room


def build_map(layout: Mapping) -> Room:
    """
    Turn a nested layout mapping into linked rooms.

    Each layout node needs a "name" and may carry "clue", "left" and
    "right". Children are attached exactly as written.

    Raises:
        ValueError: if a layout node has no name.
    """
    name = layout.get("name")
    if not name:
        raise ValueError(f"Room layout node without a name: {dict(layout)!r}")

    room = create_room(name, layout.get("clue"))
    if layout.get("left") is not None:
        room.left = build_map(layout["left"])
    if layout.get("right") is not None:
        room.right = build_map(layout["right"])
    return room


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room of the map in pre-order (room, left, right)."""
    if root is None:
        return
    yield root
    yield from iter_rooms(root.left)
    yield from iter_rooms(root.right)


def count_rooms(root: Optional[Room]) -> int:
    return sum(1 for _ in iter_rooms(root))


def remaining_clues(root: Optional[Room]) -> List[str]:
    """Clues still unclaimed anywhere in the map."""
    return [room.slot.clue for room in iter_rooms(root) if room.has_clue]
