import pytest

from config import GameConfig, VerdictConfig
from game_engine import DetectiveQuestGame
from models import Command, MoveOutcome


@pytest.fixture()
def game(scenario_layout, scenario_index):
    return DetectiveQuestGame(layout=scenario_layout, index=scenario_index)


def test_starts_at_root_with_empty_notebook(game):
    assert game.current_room.name == "Hall"
    assert game.collected_clues() == []
    assert game.visit_current_room() is None


def test_visiting_a_clue_room_collects_exactly_once(game):
    assert game.move(Command.LEFT) is MoveOutcome.MOVED
    assert game.visit_current_room() == "Candlestick"
    assert game.visit_current_room() is None
    assert game.collected_clues() == ["Candlestick"]
    assert game.state.rooms_visited == ["Study"]


def test_blocked_move_keeps_player_in_place(game):
    game.move(Command.LEFT)
    assert game.move(Command.LEFT) is MoveOutcome.BLOCKED
    assert game.move(Command.RIGHT) is MoveOutcome.BLOCKED
    assert game.current_room.name == "Study"
    assert game.state.blocked_attempts == 2
    assert game.state.moves == 1


def test_invalid_input_is_distinct_from_blocked(game):
    assert game.handle_input("up") is MoveOutcome.INVALID
    assert game.handle_input("") is MoveOutcome.INVALID
    assert game.current_room.name == "Hall"
    assert game.state.blocked_attempts == 0


def test_clues_command_does_not_move(game):
    assert game.handle_input("clues") is MoveOutcome.LISTED
    assert game.current_room.name == "Hall"


def test_exit_ends_exploration(game):
    assert game.handle_input("exit") is MoveOutcome.EXITED
    assert game.state.exploration_over
    with pytest.raises(RuntimeError):
        game.move(Command.LEFT)


def test_single_clue_is_insufficient(game):
    game.visit_current_room()
    game.move(Command.LEFT)
    game.visit_current_room()
    game.move(Command.EXIT)
    report = game.make_accusation("Col. Mustard")
    assert report.match_count == 1
    assert report.outcome == "insufficient_evidence"
    assert not report.upheld
    assert game.last_verdict is report


def test_two_clues_for_same_suspect_confirm(mansion_index):
    game = DetectiveQuestGame(index=mansion_index)
    for command in (Command.LEFT, Command.LEFT):
        game.visit_current_room()
        game.move(command)
    game.visit_current_room()
    assert game.collected_clues() == ["Candlestick", "Poison"]
    report = game.make_accusation("Col. Mustard")
    assert report.match_count == 2
    assert report.upheld


def test_no_clues_cannot_accuse(game):
    game.visit_current_room()
    game.move(Command.EXIT)
    report = game.make_accusation("Col. Mustard")
    assert report.outcome == "no_clues"
    assert game.state.accusation_made


def test_accusing_unrelated_suspect(game):
    game.move(Command.RIGHT)
    game.visit_current_room()
    report = game.make_accusation("Col. Mustard")
    assert report.match_count == 0
    assert report.outcome == "insufficient_evidence"


def test_threshold_comes_from_config(scenario_layout, scenario_index):
    config = GameConfig(verdict=VerdictConfig(evidence_threshold=1))
    game = DetectiveQuestGame(layout=scenario_layout, index=scenario_index, config=config)
    game.move(Command.LEFT)
    game.visit_current_room()
    assert game.make_accusation("Col. Mustard").upheld


def test_default_game_builds_its_own_index():
    game = DetectiveQuestGame()
    assert game.index.lookup("Wrench") == "Mrs. White"
    assert game.index.bucket_count == 10


def test_reset_restores_clues(game):
    game.move(Command.LEFT)
    game.visit_current_room()
    game.make_accusation("Col. Mustard")
    index = game.index

    game.reset()
    assert game.current_room.name == "Hall"
    assert game.collected_clues() == []
    assert game.last_verdict is None
    assert not game.state.exploration_over
    assert game.index is index

    game.move(Command.LEFT)
    assert game.visit_current_room() == "Candlestick"
