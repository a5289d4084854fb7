"""
models.py
=========
Shared data models for Detective Quest.

Contains:
  - Unclaimed / Claimed : The two states of a room's clue slot.
  - Room                : A node of the mansion map (binary tree).
  - Command             : Navigation command decoded from raw player input.
  - parse_command()     : Raw input line → Command.
  - MoveOutcome         : Result of applying a Command to the explorer.
  - ExplorationState    : Mutable dataclass tracking per-session progress.
  - VerdictReport       : Pydantic schema describing the judged accusation.

Keeping these in one module gives a single source of truth for the data
shapes used across room_map.py, game_engine.py, verdict.py and both UIs.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Union

from pydantic import BaseModel

from config import COMMAND_CONFIG, CommandConfig


# ---------------------------------------------------------------------------
# Clue slot variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Unclaimed:
    """A clue still waiting in its room."""
    clue: str


@dataclass(frozen=True)
class Claimed:
    """Nothing left to find: the clue was taken, or the room never had one."""


CLAIMED = Claimed()

ClueSlot = Union[Unclaimed, Claimed]


# ---------------------------------------------------------------------------
# Mansion room
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Room:
    """
    One room of the mansion map.

    The map is a hand-authored binary tree: each room owns at most a left and
    a right child, and the structure never changes after it is built. Only
    the clue slot mutates, once, from Unclaimed to Claimed.

    Attributes:
        name:  Display name shown when the player enters.
        slot:  Unclaimed(clue) while the clue is still here, else CLAIMED.
        left:  Room reached with the "left" command, if any.
        right: Room reached with the "right" command, if any.
    """

    name:  str
    slot:  ClueSlot       = CLAIMED
    left:  Optional[Room] = None
    right: Optional[Room] = None

    @property
    def has_clue(self) -> bool:
        return isinstance(self.slot, Unclaimed)

    def child(self, direction: Command) -> Optional[Room]:
        """Return the neighbouring room for LEFT / RIGHT, or None."""
        if direction is Command.LEFT:
            return self.left
        if direction is Command.RIGHT:
            return self.right
        return None

    def take_clue(self) -> Optional[str]:
        """
        Remove and return the clue held by this room.

        Returns:
            The clue string on the first call for a room that holds one,
            None on every later call (the slot is now CLAIMED).
        """
        if not self.has_clue:
            return None
        clue = self.slot.clue
        self.slot = CLAIMED
        return clue


# ---------------------------------------------------------------------------
# Commands and outcomes
# ---------------------------------------------------------------------------

class Command(enum.Enum):
    """Navigation command typed at the movement prompt."""

    LEFT    = "left"
    RIGHT   = "right"
    EXIT    = "exit"
    CLUES   = "clues"
    UNKNOWN = "unknown"


def normalize_token(raw: Optional[str]) -> str:
    """
    Lowercase and strip a line typed at the movement prompt.

    Example:
        >>> normalize_token("  Left\\n")
        'left'
    """
    return (raw or "").strip().lower()


def parse_command(raw: Optional[str], commands: CommandConfig = COMMAND_CONFIG) -> Command:
    """
    Decode a raw line into a Command.

    Anything that is not one of the configured tokens becomes
    Command.UNKNOWN; whether a known direction is actually open is decided
    by the engine.
    """
    token = normalize_token(raw)
    if token in commands.left_tokens:
        return Command.LEFT
    if token in commands.right_tokens:
        return Command.RIGHT
    if token in commands.exit_tokens:
        return Command.EXIT
    if token in commands.clue_tokens:
        return Command.CLUES
    return Command.UNKNOWN


class MoveOutcome(enum.Enum):
    """
    What happened when a Command was applied.

    BLOCKED (a valid direction with no room behind it) is kept separate from
    INVALID (a token that is not a command at all) so the front-ends can word
    their feedback differently.
    """

    MOVED   = "moved"
    BLOCKED = "blocked"
    INVALID = "invalid"
    EXITED  = "exited"
    LISTED  = "listed"


# ---------------------------------------------------------------------------
# Exploration state
# ---------------------------------------------------------------------------

@dataclass
class ExplorationState:
    """
    Mutable snapshot of the player's progress through the mansion.

    Owned by DetectiveQuestGame and mutated in place. The front-ends read it
    for status displays.

    Attributes:
        moves:            Successful moves between rooms.
        rooms_visited:    Room names in first-visit order, no repeats.
        blocked_attempts: Moves towards a missing room.
        exploration_over: True once the player chose to exit.
        accusation_made:  True once make_accusation() has been called.
    """

    moves:            int       = 0
    rooms_visited:    List[str] = field(default_factory=list)
    blocked_attempts: int       = 0
    exploration_over: bool      = False
    accusation_made:  bool      = False

    def mark_visited(self, room_name: str) -> None:
        if room_name not in self.rooms_visited:
            self.rooms_visited.append(room_name)

    def reset(self) -> None:
        """Reset all mutable fields to their initial values for a new game."""
        self.moves            = 0
        self.rooms_visited    = []
        self.blocked_attempts = 0
        self.exploration_over = False
        self.accusation_made  = False


# ---------------------------------------------------------------------------
# Verdict report
# ---------------------------------------------------------------------------

class VerdictReport(BaseModel):
    """
    Validated outcome of the final accusation.

    Fields:
        accused:     Name typed by the player, compared verbatim.
        match_count: Collected clues whose suspect equals `accused`.
        outcome:     "confirmed" when the evidence threshold is met,
                     "insufficient_evidence" when it is not, and
                     "no_clues" when nothing was collected at all.
        clues:       Every collected clue, ascending.
    """

    accused: str
    match_count: int = 0
    outcome: Literal["confirmed", "insufficient_evidence", "no_clues"]
    clues: List[str] = []

    @property
    def upheld(self) -> bool:
        return self.outcome == "confirmed"
