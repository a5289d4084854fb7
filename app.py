"""
app.py
======
Streamlit web UI for Detective Quest.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark-noir theme).
  - Manage session state initialisation and reset.
  - Render the sidebar (notebook of collected clues, exploration status).
  - Render the main panel (current room, movement buttons, accusation form,
    verdict).

This file contains only UI logic. All game logic lives in game_engine.py,
the map in room_map.py, narrative data in case_data.py and shared text
helpers in ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Logging configuration
#
# basicConfig is a no-op after the first call, so Streamlit's reruns of this
# script do not stack handlers. All detective_quest.* loggers propagate here.
# ---------------------------------------------------------------------------
from config import LOG_CONFIG

logging.basicConfig(
    level=logging.INFO,
    format=LOG_CONFIG.format,
    datefmt=LOG_CONFIG.datefmt,
)
logger = logging.getLogger("detective_quest.app")

from case_data import SUSPECT_NAMES
from game_engine import DetectiveQuestGame
from models import Command, MoveOutcome
from room_map import remaining_clues
from ui_helpers import build_css, format_clue_list, format_verdict


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Detective Quest",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def _new_game() -> DetectiveQuestGame:
    game = DetectiveQuestGame()
    st.session_state.last_clue = game.visit_current_room()
    return game


def init_session_state() -> None:
    """
    Initialise all Streamlit session state variables on first run.

    The entrance room is searched as soon as the game is created; after
    that a room is only searched when the player walks into it, so
    Streamlit's reruns never re-trigger clue collection.
    """
    defaults: dict = {
        "last_clue":    None,
        "feedback":     None,
        "verdict_text": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value
    if "game" not in st.session_state:
        st.session_state.game = _new_game()


def reset_game() -> None:
    """Start a new investigation with a freshly built mansion."""
    st.session_state.feedback     = None
    st.session_state.verdict_text = None
    st.session_state.game         = _new_game()
    logger.info("Streamlit session started a new game.")


# ============================================================
# ACTIONS
# ============================================================

def _go(command: Command) -> None:
    """Apply a movement button press and search the room reached."""
    game: DetectiveQuestGame = st.session_state.game
    outcome = game.move(command)
    st.session_state.feedback = None

    if outcome is MoveOutcome.MOVED:
        st.session_state.last_clue = game.visit_current_room()
    elif outcome is MoveOutcome.BLOCKED:
        st.session_state.last_clue = None
        st.session_state.feedback  = f"There is no path to the {command.value}."


def _accuse(accused: str) -> None:
    report = st.session_state.game.make_accusation(accused.strip())
    st.session_state.verdict_text = format_verdict(report)


# ============================================================
# SIDEBAR
# ============================================================

def render_sidebar() -> None:
    """Notebook of collected clues plus exploration statistics."""
    game: DetectiveQuestGame = st.session_state.game

    st.sidebar.markdown("### 🗒️ NOTEBOOK")
    clues = game.collected_clues()
    if clues:
        st.sidebar.markdown(format_clue_list(clues, game.config.verdict.clue_marker))
    else:
        st.sidebar.markdown("*No clues yet.*")

    st.sidebar.markdown("---")
    st.sidebar.markdown(f"**Moves:** {game.state.moves}")
    st.sidebar.markdown(f"**Rooms searched:** {len(game.state.rooms_visited)}")
    st.sidebar.markdown(f"**Dead ends hit:** {game.state.blocked_attempts}")
    st.sidebar.markdown(f"**Clues still hidden:** {len(remaining_clues(game.map_root))}")

    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 NEW GAME", use_container_width=True, key="new_game"):
        reset_game()
        st.rerun()


# ============================================================
# MAIN PANEL
# ============================================================

def render_room() -> None:
    """Current room card and the three movement buttons."""
    game: DetectiveQuestGame = st.session_state.game
    room = game.current_room

    st.markdown(f"""
    <div class="room-card">
        <h3>🚪 {room.name}</h3>
    </div>
    """, unsafe_allow_html=True)

    if st.session_state.last_clue is not None:
        st.success(f"You found a clue: {st.session_state.last_clue}")
    else:
        st.info("Nothing new here...")
    if st.session_state.feedback:
        st.warning(st.session_state.feedback)

    col1, col2, col3 = st.columns(3)
    if col1.button("⬅️ Left", use_container_width=True, key="go_left"):
        _go(Command.LEFT)
        st.rerun()
    if col2.button("➡️ Right", use_container_width=True, key="go_right"):
        _go(Command.RIGHT)
        st.rerun()
    if col3.button("⚖️ Go to the trial", use_container_width=True, type="primary", key="go_trial"):
        game.move(Command.EXIT)
        st.rerun()


def render_accusation_form() -> None:
    """Clue list and accusation input, shown once exploration is over."""
    game: DetectiveQuestGame = st.session_state.game
    clues = game.collected_clues()

    if not clues:
        _accuse("")
        return

    st.markdown("#### --- COLLECTED CLUES ---")
    st.markdown(format_clue_list(clues, game.config.verdict.clue_marker))

    with st.form("accusation"):
        accused = st.text_input(
            "Who do you accuse?",
            key="accused",
            placeholder=f"e.g. {', '.join(SUSPECT_NAMES)}",
        )
        if st.form_submit_button("Accuse", type="primary"):
            _accuse(accused)
            st.rerun()


def main() -> None:
    init_session_state()

    st.markdown('<h1 class="main-header">DETECTIVE QUEST</h1>', unsafe_allow_html=True)
    st.markdown(
        '<p class="sub-header">Explore the mansion, collect the clues '
        'and find out who is guilty.</p>',
        unsafe_allow_html=True,
    )

    render_sidebar()

    game: DetectiveQuestGame = st.session_state.game
    if not game.state.exploration_over:
        render_room()
        return

    if st.session_state.verdict_text is None:
        render_accusation_form()
    if st.session_state.verdict_text is not None:
        st.text(st.session_state.verdict_text)


if __name__ == "__main__":
    main()
