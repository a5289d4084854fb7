"""
config.py
=========
Central configuration module for Detective Quest.

All tunable constants (hash table size, evidence threshold, accepted command
tokens and log formatting) live here so they can be adjusted without touching
game logic.

Usage:
    from config import GAME_CONFIG, INDEX_CONFIG, VERDICT_CONFIG, COMMAND_CONFIG
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet


# ---------------------------------------------------------------------------
# Clue → suspect index
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexConfig:
    """
    Sizing of the clue → suspect hash table.

    Attributes:
        bucket_count: Number of chained buckets. The table never resizes, so
                      every lookup for a given clue lands in the same bucket
                      for the whole session.
    """
    bucket_count: int = 10


# ---------------------------------------------------------------------------
# Verdict rules
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VerdictConfig:
    """
    Parameters for judging the final accusation.

    Attributes:
        evidence_threshold: Minimum number of collected clues that must point
                            at the accused for the accusation to be upheld.
        clue_marker:        Prefix printed before each clue in listings.
    """
    evidence_threshold: int = 2
    clue_marker:        str = "- "


# ---------------------------------------------------------------------------
# Navigation commands
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CommandConfig:
    """
    Raw tokens accepted at the movement prompt (compared lowercase, stripped).

    Attributes:
        left_tokens:  Move to the left-hand room.
        right_tokens: Move to the right-hand room.
        exit_tokens:  Stop exploring and go to the accusation.
        clue_tokens:  Show the clues collected so far.
    """
    left_tokens:  FrozenSet[str] = field(default_factory=lambda: frozenset({"l", "left"}))
    right_tokens: FrozenSet[str] = field(default_factory=lambda: frozenset({"r", "right"}))
    exit_tokens:  FrozenSet[str] = field(default_factory=lambda: frozenset({"x", "exit", "q", "quit"}))
    clue_tokens:  FrozenSet[str] = field(default_factory=lambda: frozenset({"c", "clues"}))


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LogConfig:
    """
    Logging defaults applied by the entry points (cli.py, app.py).

    Attributes:
        level:       Default level name; the console overrides it with the
                     DETECTIVE_QUEST_LOG_LEVEL environment variable.
        env_var:     Name of that environment variable.
        format:      logging.basicConfig format string.
        datefmt:     logging.basicConfig date format.
    """
    level:   str = "WARNING"
    env_var: str = "DETECTIVE_QUEST_LOG_LEVEL"
    format:  str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class GameConfig:
    """Bundle of every config section, injected into DetectiveQuestGame."""
    index:    IndexConfig   = field(default_factory=IndexConfig)
    verdict:  VerdictConfig = field(default_factory=VerdictConfig)
    commands: CommandConfig = field(default_factory=CommandConfig)
    logging:  LogConfig     = field(default_factory=LogConfig)


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

INDEX_CONFIG   = IndexConfig()
VERDICT_CONFIG = VerdictConfig()
COMMAND_CONFIG = CommandConfig()
LOG_CONFIG     = LogConfig()

GAME_CONFIG = GameConfig(
    index=INDEX_CONFIG,
    verdict=VERDICT_CONFIG,
    commands=COMMAND_CONFIG,
    logging=LOG_CONFIG,
)
