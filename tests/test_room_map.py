import pytest

from case_data import CLUE_SUSPECTS, MANSION_LAYOUT
from models import CLAIMED, Command, Unclaimed
from room_map import build_map, count_rooms, create_room, iter_rooms, remaining_clues


def test_create_room_with_and_without_clue():
    study = create_room("Study", "Candlestick")
    hall = create_room("Hall")
    assert study.slot == Unclaimed("Candlestick")
    assert study.has_clue
    assert hall.slot is CLAIMED
    assert not hall.has_clue
    assert study.left is None and study.right is None


def test_take_clue_consumes_once():
    study = create_room("Study", "Candlestick")
    assert study.take_clue() == "Candlestick"
    assert study.slot is CLAIMED
    assert study.take_clue() is None


def test_build_map_wires_children_as_written(scenario_layout):
    root = build_map(scenario_layout)
    assert root.name == "Hall"
    assert root.child(Command.LEFT).name == "Study"
    assert root.child(Command.RIGHT).name == "Library"
    assert root.child(Command.EXIT) is None
    assert root.left.left is None and root.left.right is None


def test_mansion_layout_shape():
    root = build_map(MANSION_LAYOUT)
    assert [room.name for room in iter_rooms(root)] == [
        "Entrance Hall",
        "Living Room",
        "Bedroom",
        "Winter Garden",
        "Library",
        "Kitchen",
    ]
    assert count_rooms(root) == 6
    assert root.right.right is None


def test_every_hidden_clue_names_a_suspect():
    root = build_map(MANSION_LAYOUT)
    for clue in remaining_clues(root):
        assert clue in CLUE_SUSPECTS


def test_remaining_clues_shrinks_as_clues_are_taken(scenario_layout):
    root = build_map(scenario_layout)
    assert sorted(remaining_clues(root)) == ["Candlestick", "Rope"]
    root.left.take_clue()
    assert remaining_clues(root) == ["Rope"]


def test_build_map_rejects_nameless_rooms():
    with pytest.raises(ValueError):
        build_map({"name": "Hall", "left": {"clue": "Rope"}})
