"""
case_data.py
============
All narrative content for the Detective Quest mansion case.

Centralising story data here means you can swap out the whole mystery
(rooms, clues, suspects) without touching the map, index, engine or UI code.

To create a new case:
    1. Replace MANSION_LAYOUT with your own hand-authored room tree.
    2. Replace CLUE_SUSPECTS so every clue placed in a room names a suspect.
    3. Keep the dict shapes identical so nothing else breaks.
"""

from __future__ import annotations

from typing import Dict, List


# ---------------------------------------------------------------------------
# Mansion map
# ---------------------------------------------------------------------------

MANSION_LAYOUT: Dict = {
    "name": "Entrance Hall",
    "clue": None,
    "left": {
        "name": "Living Room",
        "clue": "Candlestick",
        "left": {
            "name": "Bedroom",
            "clue": "Poison",
        },
        "right": {
            "name": "Winter Garden",
            "clue": "Dagger",
        },
    },
    "right": {
        "name": "Library",
        "clue": "Rope",
        "left": {
            "name": "Kitchen",
            "clue": "Wrench",
        },
    },
}
"""
Hand-authored binary tree of rooms, rooted at the entrance.

Each node is a mapping with a required "name", an optional "clue" and
optional "left" / "right" child nodes. room_map.build_map() turns it into
linked Room objects; the shape is used as-is, never re-ordered.
"""


# ---------------------------------------------------------------------------
# Clue → suspect knowledge base
# ---------------------------------------------------------------------------

CLUE_SUSPECTS: Dict[str, str] = {
    "Candlestick": "Col. Mustard",
    "Rope":        "Mrs. White",
    "Poison":      "Col. Mustard",
    "Dagger":      "Prof. Plum",
    "Wrench":      "Mrs. White",
}
"""
Which suspect each clue incriminates.

Loaded into a HashIndex once per game session. Several clues may point at
the same suspect; that is what lets an accusation reach the evidence
threshold.
"""

SUSPECT_NAMES: List[str] = sorted(set(CLUE_SUSPECTS.values()))
"""Suspect names offered as examples at the accusation prompt."""
