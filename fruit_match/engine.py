# engine.py - pure game-state transitions for Fruit Memory Match
#
# Every transition takes a SessionState and returns a SessionState. Nothing
# here mutates its input; a transition that changes nothing hands back the
# very same object, so callers can test `new is old` to spot an ignored click.

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional, Sequence, Tuple

from .config import FRUITS, MATCH_POINTS

logger = logging.getLogger(__name__)


class TileFace(Enum):
    HIDDEN = "hidden"
    FACE_UP = "face_up"
    MATCHED = "matched"


@dataclass(frozen=True)
class Tile:
    symbol: str
    matched: bool = False


@dataclass(frozen=True)
class SessionState:
    deck: Tuple[Tile, ...]
    selection: Tuple[int, ...] = ()
    score: int = 0
    moves: float = 0.0     # half a move per accepted activation
    elapsed: int = 0       # whole seconds
    running: bool = True
    complete: bool = False

    @property
    def move_count(self) -> int:
        """Moves as shown to the player (whole pairs only)."""
        return math.floor(self.moves)

    @property
    def pair_pending(self) -> bool:
        return len(self.selection) == 2

    @property
    def accuracy(self) -> int:
        return accuracy(self.score, self.moves)

    @property
    def formatted_time(self) -> str:
        return format_time(self.elapsed)

    def face(self, index: int) -> TileFace:
        if self.deck[index].matched:
            return TileFace.MATCHED
        if index in self.selection:
            return TileFace.FACE_UP
        return TileFace.HIDDEN


# ---------------------- Derived values ----------------------

def accuracy(score: int, moves: float) -> int:
    """Matched pairs per move, as a whole percentage (0 before the first move).

    Rounds half up, so 12.5 reads as 13.
    """
    if moves <= 0:
        return 0
    pairs = score / MATCH_POINTS
    return math.floor(pairs / moves * 100 + 0.5)


def format_time(seconds: int) -> str:
    mins, secs = divmod(int(seconds), 60)
    return f"{mins:02d}:{secs:02d}"


# ---------------------- Transitions ----------------------

def build_deck(alphabet: Sequence[str], rng: Optional[random.Random] = None) -> Tuple[Tile, ...]:
    if not alphabet:
        raise ValueError("alphabet must contain at least one symbol")
    if len(set(alphabet)) != len(alphabet):
        raise ValueError(f"alphabet has duplicate symbols: {list(alphabet)!r}")
    symbols = list(alphabet) * 2
    (rng or random).shuffle(symbols)
    return tuple(Tile(symbol) for symbol in symbols)


def new_session(alphabet: Sequence[str] = FRUITS,
                rng: Optional[random.Random] = None) -> SessionState:
    deck = build_deck(alphabet, rng)
    logger.debug("Dealt %d tiles", len(deck))
    return SessionState(deck=deck)


def from_symbols(symbols: Iterable[str], matched: Optional[Iterable[int]] = None) -> SessionState:
    """Start a session on a fixed, unshuffled layout.

    A layout with every tile already matched comes back complete.
    """
    done = set(matched or ())
    deck = tuple(Tile(s, i in done) for i, s in enumerate(symbols))
    complete = all(tile.matched for tile in deck)
    return SessionState(deck=deck, running=not complete, complete=complete)


def tick(state: SessionState) -> SessionState:
    if not state.running:
        return state
    return replace(state, elapsed=state.elapsed + 1)


def activate(state: SessionState, index: int) -> SessionState:
    if state.pair_pending:
        logger.debug("Ignored tile %s: pair still resolving", index)
        return state
    if not 0 <= index < len(state.deck):
        logger.debug("Ignored tile %s: out of range", index)
        return state
    if state.deck[index].matched or index in state.selection:
        logger.debug("Ignored tile %s: already face-up", index)
        return state

    selection = state.selection + (index,)
    deck = state.deck
    score = state.score

    if len(selection) == 2:
        first, second = selection
        if deck[first].symbol == deck[second].symbol:
            deck = tuple(
                replace(tile, matched=True) if i in selection else tile
                for i, tile in enumerate(deck)
            )
            score += MATCH_POINTS
            logger.info("Matched %s at %d and %d", deck[first].symbol, first, second)

    complete = all(tile.matched for tile in deck)
    return replace(
        state,
        deck=deck,
        selection=selection,
        score=score,
        moves=state.moves + 0.5,
        running=state.running and not complete,
        complete=complete,
    )


def clear_selection(state: SessionState) -> SessionState:
    if not state.selection:
        return state
    return replace(state, selection=())
