"""
game_engine.py
==============
Core game engine for Detective Quest.

Contains:
  DetectiveQuestGame - the single orchestrating class that owns the mansion
                       map, the clue notebook and the clue → suspect index
                       for one session, and exposes a small API consumed by
                       both the console (cli.py) and the Streamlit page
                       (app.py).

Public API summary:
    game = DetectiveQuestGame()
    game.current_room                → Room
    game.visit_current_room()        → clue str | None
    game.move(command)               → MoveOutcome
    game.handle_input(raw)           → MoveOutcome
    game.collected_clues()           → [clue, ...] ascending
    game.make_accusation(name)       → VerdictReport
    game.reset()                     → None

Movement is forward-only: from any room the player can go left or right,
never back up. Exploration ends only when the player exits.

Logging
-------
Every significant event is emitted through the standard ``logging`` module
under the name ``detective_quest.game_engine``. Configure level and
destination once at the entry point (see cli.py / app.py).
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from case_data import CLUE_SUSPECTS, MANSION_LAYOUT
from clue_tree import ClueCollection
from config import GAME_CONFIG, GameConfig
from hash_index import HashIndex
from models import Command, ExplorationState, MoveOutcome, Room, VerdictReport, parse_command
from room_map import build_map, count_rooms, remaining_clues
from verdict import build_report

logger = logging.getLogger("detective_quest.game_engine")


class DetectiveQuestGame:
    """
    Main game engine.

    Attributes:
        config:       GameConfig in effect for this session.
        index:        Clue → suspect HashIndex, read-only during play.
        map_root:     Entrance room of the mansion.
        current_room: Room the player is standing in.
        clues:        ClueCollection of everything picked up so far.
        state:        ExplorationState (moves, visited rooms, phase flags).
        last_verdict: VerdictReport from make_accusation(), else None.
    """

    def __init__(
        self,
        layout: Mapping = MANSION_LAYOUT,
        index: Optional[HashIndex] = None,
        config: GameConfig = GAME_CONFIG,
    ) -> None:
        self.config = config
        self._layout = layout

        if index is None:
            index = HashIndex.from_pairs(CLUE_SUSPECTS, config.index.bucket_count)
        self.index = index

        self.clues = ClueCollection()
        self.state = ExplorationState()
        self.last_verdict: Optional[VerdictReport] = None
        self._build_map()

        logger.info(
            "DetectiveQuestGame initialised - rooms=%d, clues_hidden=%d, index=%r",
            count_rooms(self.map_root),
            len(remaining_clues(self.map_root)),
            self.index,
        )

    def _build_map(self) -> None:
        self.map_root: Room = build_map(self._layout)
        self.current_room: Room = self.map_root

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    def visit_current_room(self) -> Optional[str]:
        """
        Search the room the player is standing in.

        A clue still in the room is moved into the notebook and the room is
        marked as claimed, so searching it again finds nothing.

        Returns:
            The clue found, or None.
        """
        room = self.current_room
        self.state.mark_visited(room.name)

        clue = room.take_clue()
        if clue is None:
            return None

        self.clues.add(clue)
        logger.info(
            "Clue collected in %s: %r (notebook now holds %d)",
            room.name,
            clue,
            len(self.clues),
        )
        return clue

    def move(self, command: Command) -> MoveOutcome:
        """
        Apply a navigation command.

        Args:
            command: Decoded player command.

        Returns:
            MOVED when the player walked into a neighbouring room,
            BLOCKED when that neighbour does not exist, INVALID for
            Command.UNKNOWN, LISTED for Command.CLUES and EXITED for
            Command.EXIT.

        Raises:
            RuntimeError: if exploration is already over.
        """
        if self.state.exploration_over:
            raise RuntimeError("Exploration is over; no more moves are allowed.")

        if command is Command.EXIT:
            self.state.exploration_over = True
            logger.info(
                "Exploration ended after %d move(s); %d clue(s) collected.",
                self.state.moves,
                len(self.clues),
            )
            return MoveOutcome.EXITED

        if command is Command.CLUES:
            return MoveOutcome.LISTED

        if command is Command.UNKNOWN:
            logger.debug("Unrecognised command while in %s.", self.current_room.name)
            return MoveOutcome.INVALID

        target = self.current_room.child(command)
        if target is None:
            self.state.blocked_attempts += 1
            logger.info(
                "No path %s from %s.", command.value, self.current_room.name
            )
            return MoveOutcome.BLOCKED

        logger.debug(
            "Moved %s: %s -> %s", command.value, self.current_room.name, target.name
        )
        self.current_room = target
        self.state.moves += 1
        return MoveOutcome.MOVED

    def handle_input(self, raw: Optional[str]) -> MoveOutcome:
        """Decode a raw line typed by the player and apply it."""
        return self.move(parse_command(raw, self.config.commands))

    def collected_clues(self) -> List[str]:
        """Every clue picked up so far, in ascending order."""
        return self.clues.to_list()

    # ------------------------------------------------------------------
    # Accusation
    # ------------------------------------------------------------------

    def make_accusation(self, accused: str) -> VerdictReport:
        """
        Judge an accusation against the collected clues.

        Ends exploration if the player had not exited yet.

        Args:
            accused: Suspect name, compared verbatim with the index values.

        Returns:
            The VerdictReport, also kept in `last_verdict`.
        """
        if self.state.accusation_made:
            logger.warning(
                "make_accusation() called again - previous accused=%r, new=%r.",
                self.last_verdict.accused if self.last_verdict else None,
                accused,
            )

        self.state.exploration_over = True
        self.state.accusation_made = True
        self.last_verdict = build_report(
            self.clues,
            self.index,
            accused,
            self.config.verdict.evidence_threshold,
        )
        return self.last_verdict

    # ------------------------------------------------------------------
    # Session management
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Start a fresh session on the same case.

        Rebuilds the map (restoring every clue), empties the notebook and
        clears progress. The index is kept: it never changes during play.
        """
        logger.info("Game reset requested - rebuilding map and clearing clues.")
        self._build_map()
        self.clues.clear()
        self.state.reset()
        self.last_verdict = None
