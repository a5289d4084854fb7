"""
cli.py
======
Command-line interface for Detective Quest.

Provides the interactive console session. All game logic is delegated to
DetectiveQuestGame; this module only handles I/O.

Usage:
    python cli.py
    detective-quest            (console script, after `pip install .`)

Commands while exploring:
    l / left     - go to the room on the left
    r / right    - go to the room on the right
    c / clues    - list the clues collected so far
    x / exit     - stop exploring and make an accusation (also q / quit)

Set DETECTIVE_QUEST_LOG_LEVEL (environment or .env file) to INFO or DEBUG
to see engine logs on stderr.
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv

from case_data import SUSPECT_NAMES
from config import LOG_CONFIG
from game_engine import DetectiveQuestGame
from models import Command, MoveOutcome, parse_command
from ui_helpers import (
    format_banner,
    format_clue_list,
    format_prompt,
    format_room,
    format_verdict,
)

logger = logging.getLogger("detective_quest.cli")


def explore(game: DetectiveQuestGame) -> None:
    """
    Run the exploration loop until the player exits or input runs out.

    Each pass searches the current room (collecting its clue the first
    time), then reads one movement command.
    """
    while True:
        clue = game.visit_current_room()
        print("\n" + format_room(game.current_room.name, clue))

        try:
            raw = input(format_prompt())
        except EOFError:
            print()
            logger.info("End of input while exploring - going to the trial.")
            game.move(Command.EXIT)
            break

        command = parse_command(raw, game.config.commands)
        outcome = game.move(command)

        if outcome is MoveOutcome.EXITED:
            print("\nExploration over. Time for the trial!")
            break
        if outcome is MoveOutcome.BLOCKED:
            print(f"There is no path to the {command.value}.")
        elif outcome is MoveOutcome.INVALID:
            print("Invalid choice.")
        elif outcome is MoveOutcome.LISTED:
            clues = game.collected_clues()
            if clues:
                print(format_clue_list(clues, game.config.verdict.clue_marker))
            else:
                print("Your notebook is still empty.")


def accuse(game: DetectiveQuestGame) -> None:
    """
    Show the collected clues, read the accusation and print the verdict.

    With an empty notebook there is nothing to show and no prompt: the
    verdict is the "cannot accuse" outcome straight away.
    """
    clues = game.collected_clues()
    if not clues:
        print("\n" + format_verdict(game.make_accusation("")))
        return

    print("\n--- COLLECTED CLUES ---")
    print(format_clue_list(clues, game.config.verdict.clue_marker))

    try:
        accused = input(f"\nWho do you accuse? (e.g. {', '.join(SUSPECT_NAMES)}) ")
    except EOFError:
        print()
        accused = ""

    report = game.make_accusation(accused.strip())
    print("\n" + format_verdict(report))


def run_cli() -> None:
    """
    Main console session: banner, exploration, accusation.
    """
    game = DetectiveQuestGame()
    print(format_banner())
    explore(game)
    accuse(game)


def configure_logging() -> None:
    """
    Configure logging at the entry point so every detective_quest.* logger
    emits to stderr. The level comes from DETECTIVE_QUEST_LOG_LEVEL, read
    after loading a .env file if one exists.
    """
    load_dotenv()
    level_name = os.environ.get(LOG_CONFIG.env_var, LOG_CONFIG.level).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format=LOG_CONFIG.format,
        datefmt=LOG_CONFIG.datefmt,
    )


def main() -> int:
    configure_logging()
    try:
        run_cli()
    except KeyboardInterrupt:
        print("\nThanks for playing!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
