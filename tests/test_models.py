from config import CommandConfig
from models import Command, normalize_token, parse_command


def test_normalize_token():
    assert normalize_token("  Left\n") == "left"
    assert normalize_token(None) == ""


def test_parse_command_tokens():
    assert parse_command("l") is Command.LEFT
    assert parse_command("LEFT") is Command.LEFT
    assert parse_command(" r ") is Command.RIGHT
    assert parse_command("right") is Command.RIGHT
    assert parse_command("x") is Command.EXIT
    assert parse_command("quit") is Command.EXIT
    assert parse_command("c") is Command.CLUES


def test_parse_command_unknown():
    for raw in ["", "up", "back", "z", "left right"]:
        assert parse_command(raw) is Command.UNKNOWN


def test_parse_command_uses_given_tokens():
    commands = CommandConfig(left_tokens=frozenset({"e"}), right_tokens=frozenset({"d"}))
    assert parse_command("e", commands) is Command.LEFT
    assert parse_command("d", commands) is Command.RIGHT
    assert parse_command("l", commands) is Command.UNKNOWN
