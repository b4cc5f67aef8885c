# app.py - Streamlit front end for Fruit Memory Match
# ------------------------------------------------------------------------
# Sixteen face-down fruit tiles. Tap two to flip them; a pair stays face-up
# and scores 10 points, anything else flips back after a short peek.
# The clock, score, moves and accuracy are shown above the board and again
# in the "You Win!" summary.
#
# Run:  streamlit run streamlit_app.py

from __future__ import annotations

import logging
import time

import streamlit as st

from .config import HIDDEN_FACE, PAGE_ICON, PAGE_TITLE, Config
from .engine import TileFace
from .game import MatchGame

logger = logging.getLogger(__name__)

TILE_CSS = """
<style>
/* tiles only: every tile button has a key starting with tile_ */
div[class*="st-key-tile_"] button {
    font-size: 40px !important;
    height: 92px !important;
    min-height: 92px !important;
    line-height: 1 !important;
}
div[class*="st-key-tile_"] button p {
    font-size: 40px !important;
    margin: 0 !important;
}
</style>
"""


# ---------------------- State -------------------------

def configure_logging(config: Config) -> None:
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def init_state(config: Config) -> MatchGame:
    ss = st.session_state
    if "game" not in ss:
        ss.game = MatchGame(config=config)
    if "celebrated" not in ss:
        ss.celebrated = 0  # generation whose win already got balloons
    return ss.game


# ---------------------- Rendering -----------------------

def render_stats(game: MatchGame) -> None:
    stats = game.stats()
    with st.container(border=True):
        c_time, c_score, c_moves, c_acc = st.columns(4)
        c_time.metric("Time", stats.time)
        c_score.metric("Score", stats.score)
        c_moves.metric("Moves", stats.moves)
        c_acc.metric("Accuracy", f"{stats.accuracy}%")


def render_board(game: MatchGame, columns: int) -> None:
    state = game.state
    for start in range(0, len(state.deck), columns):
        row = st.columns(columns)
        for offset, col in enumerate(row):
            idx = start + offset
            if idx >= len(state.deck):
                continue
            face = state.face(idx)
            col.button(
                HIDDEN_FACE if face is TileFace.HIDDEN else state.deck[idx].symbol,
                key=f"tile_{idx}",
                on_click=game.activate,
                args=(idx,),
                disabled=face is TileFace.MATCHED,
                type="primary" if face is TileFace.FACE_UP else "secondary",
                width="stretch",
            )


@st.dialog("You Win! 🎉")
def summary_dialog(game: MatchGame) -> None:
    stats = game.stats()
    st.markdown(f"Time: **{stats.time}**")
    st.markdown(f"Final Score: **{stats.score}**")
    st.markdown(f"Moves: **{stats.moves}**")
    st.markdown(f"Accuracy: **{stats.accuracy}%**")
    if st.button("Play Again", key="play_again", width="stretch"):
        game.restart()
        st.rerun()


def render_finish(game: MatchGame) -> None:
    if not game.state.complete:
        return
    if st.session_state.celebrated != game.generation:
        st.session_state.celebrated = game.generation
        st.balloons()
    summary_dialog(game)


def keep_clock_running(game: MatchGame, config: Config) -> None:
    """Sleep until the next timer is due, then rerun so it can fire."""
    if not config.live_refresh:
        return
    wait = game.seconds_until_next()
    if wait is None:
        return
    time.sleep(min(wait, config.refresh_step))
    st.rerun()


# ---------------------- Main App -----------------------

def main() -> None:
    st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout="centered")
    config = Config.from_env()
    configure_logging(config)
    st.markdown(TILE_CSS, unsafe_allow_html=True)

    game = init_state(config)
    game.pump()

    st.title(PAGE_TITLE)
    st.caption("Match the pairs to win!")

    render_stats(game)
    render_board(game, config.columns)

    st.button("Restart Game", key="restart", on_click=game.restart)

    render_finish(game)
    keep_clock_running(game, config)
