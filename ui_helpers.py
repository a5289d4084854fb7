"""
ui_helpers.py
=============
Stateless presentation helpers shared by the console (cli.py) and the
Streamlit page (app.py).

These functions turn game data into text but carry no game state of their
own. Keeping them out of the front-ends means they can be imported and
tested without a terminal or a Streamlit session.

Contains:
  - format_banner()     : welcome text
  - format_room()       : room name + clue found / nothing new
  - format_clue_list()  : ascending clue listing with markers
  - format_verdict()    : verdict report → text
  - build_css()         : CSS injected into the Streamlit page
"""

from __future__ import annotations

from typing import Iterable, Optional

from config import VERDICT_CONFIG
from models import VerdictReport


RULE = "-" * 40


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------

def format_banner() -> str:
    return "\n".join([
        "=" * 60,
        "   DETECTIVE QUEST",
        "=" * 60,
        "Welcome, detective! Explore the mansion, collect the clues",
        "and find out who is guilty.",
    ])


def format_room(room_name: str, clue: Optional[str]) -> str:
    """Text shown each time the player stands in a room."""
    lines = [RULE, f"You are in: {room_name}"]
    if clue is not None:
        lines.append(f"You found a clue: {clue}")
    else:
        lines.append("Nothing new here...")
    return "\n".join(lines)


def format_prompt() -> str:
    return "\nWhere to next? (l)eft, (r)ight, (c)lues or e(x)it to the trial? "


def format_clue_list(clues: Iterable[str], marker: str = VERDICT_CONFIG.clue_marker) -> str:
    """One clue per line, each prefixed with `marker`, in the order given."""
    return "\n".join(f"{marker}{clue}" for clue in clues)


def format_verdict(report: VerdictReport) -> str:
    """
    Render a VerdictReport as the closing text of the game.

    Returns:
        A multi-line string: the heading, the finding for the accused and
        the success or failure line.
    """
    if report.outcome == "no_clues":
        return (
            "You did not collect any clues. You cannot make an accusation.\n"
            "--- GAME OVER ---"
        )

    lines = ["--- VERDICT ---"]
    if report.upheld:
        lines.append(
            f"The investigation points to {report.accused} "
            f"with {report.match_count} strong clue(s)."
        )
        lines.append("Accusation confirmed! You solved the mystery!")
    else:
        lines.append(
            f"You accused {report.accused}, but found only "
            f"{report.match_count} clue(s) against them."
        )
        lines.append("Insufficient evidence! The real culprit got away...")
    lines.append("--- GAME OVER ---")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Streamlit styling
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the CSS string injected into the Streamlit page.

    Returns:
        A raw CSS string (without <style> tags; the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    /* ── Global dark background ── */
    html, body, .stApp, .main, .block-container {
        background: linear-gradient(180deg, #0a0a0a 0%, #141414 60%, #0d0d0d 100%) !important;
        color: #c0c0c0 !important;
    }

    /* ── Sidebar ── */
    [data-testid="stSidebar"], section[data-testid="stSidebar"] > div {
        background: #0d0d0d !important;
        border-right: 1px solid #222 !important;
    }
    [data-testid="stSidebar"] p,
    [data-testid="stSidebar"] li,
    [data-testid="stSidebar"] h3 { color: #c0c0c0 !important; }

    /* ── Typography ── */
    .main-header {
        text-align: center; color: #8B0000;
        font-family: 'Special Elite', cursive;
        text-shadow: 2px 2px 4px #000; letter-spacing: 3px;
    }
    .sub-header {
        text-align: center; color: #666;
        font-family: 'Courier Prime', monospace; font-style: italic;
    }

    /* ── Room card ── */
    .room-card {
        background: linear-gradient(145deg, #1a1a1a, #2d2d2d);
        padding: 25px; border-radius: 5px;
        border-left: 4px solid #8B0000; border-top: 1px solid #333;
        box-shadow: 0 4px 15px rgba(0,0,0,0.5);
        font-family: 'Courier Prime', monospace;
    }
    .room-card h3 { color: #8B0000; font-family: 'Special Elite', cursive; letter-spacing: 2px; }

    /* ── Buttons ── */
    .stButton > button {
        background: linear-gradient(145deg, #2d2d2d, #1a1a1a);
        color: #c0c0c0; border: 1px solid #444;
        font-family: 'Courier Prime', monospace; transition: all 0.3s ease;
    }
    .stButton > button:hover { border-color: #8B0000; color: #8B0000; }

"""
