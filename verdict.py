"""
verdict.py
==========
Deterministic, side-effect-free judgement of the final accusation.

Kept apart from the game engine so it can be unit-tested on its own and
tuned through VerdictConfig in config.py without touching game or UI code.
"""

from __future__ import annotations

import logging
from typing import Iterable, Tuple

from config import VERDICT_CONFIG
from hash_index import HashIndex
from models import VerdictReport

logger = logging.getLogger("detective_quest.verdict")


def count_matches(clues: Iterable[str], index: HashIndex, accused: str) -> int:
    """
    Count the clues that incriminate `accused`.

    Every clue is resolved through the index; clues the index does not know
    count for nobody. Names are compared verbatim.

    Args:
        clues:   Collected clues, in any order.
        index:   The session's clue → suspect table.
        accused: Name typed by the player.

    Returns:
        Number of clues whose suspect equals `accused`.
    """
    count = 0
    for clue in clues:
        suspect = index.lookup(clue)
        if suspect is not None and suspect == accused:
            count += 1
    return count


def judge(
    clues:     Iterable[str],
    index:     HashIndex,
    accused:   str,
    threshold: int = VERDICT_CONFIG.evidence_threshold,
) -> Tuple[bool, int]:
    """
    Decide whether the accusation stands.

    Returns:
        (upheld, match_count) where upheld is match_count >= threshold.

    Examples:
        Two clues for Col. Mustard, accusing him   → (True, 2)
        One clue for Col. Mustard, accusing him    → (False, 1)
        Accusing someone no clue points at         → (False, 0)
    """
    matches = count_matches(clues, index, accused)
    return matches >= threshold, matches


def build_report(
    clues:     Iterable[str],
    index:     HashIndex,
    accused:   str,
    threshold: int = VERDICT_CONFIG.evidence_threshold,
) -> VerdictReport:
    """
    Judge the accusation and package the result for display.

    An empty clue list short-circuits to the "no_clues" outcome whatever
    name was given.
    """
    clue_list = list(clues)
    if not clue_list:
        logger.info("Accusation of %r with no clues collected.", accused)
        return VerdictReport(accused=accused, match_count=0, outcome="no_clues", clues=[])

    upheld, matches = judge(clue_list, index, accused, threshold)
    logger.info(
        "Verdict - accused=%r, matches=%d/%d, upheld=%s",
        accused,
        matches,
        threshold,
        upheld,
    )
    return VerdictReport(
        accused=accused,
        match_count=matches,
        outcome="confirmed" if upheld else "insufficient_evidence",
        clues=clue_list,
    )
