"""
Testing pure game-state transitions.
"""

import random
from collections import Counter

import pytest

from fruit_match.config import FRUITS
from fruit_match.engine import (
    TileFace,
    accuracy,
    activate,
    clear_selection,
    format_time,
    from_symbols,
    new_session,
    tick,
)

# tiles 0 and 5 share a symbol; 0 and 1 do not
LAYOUT = ["🍎", "🍌", "🍓", "🍒", "🍍", "🍎", "🍉", "🍇",
          "🥝", "🍌", "🍓", "🍒", "🍍", "🍉", "🍇", "🥝"]


def test_deck_pairs_every_symbol(rng):
    state = new_session(FRUITS, rng)
    assert len(state.deck) == 2 * len(FRUITS)
    assert len(state.deck) % 2 == 0
    counts = Counter(tile.symbol for tile in state.deck)
    assert set(counts) == set(FRUITS)
    assert all(n == 2 for n in counts.values())


def test_new_session_is_zeroed(rng):
    state = new_session(rng=rng)
    assert state.score == 0
    assert state.moves == 0
    assert state.selection == ()
    assert state.elapsed == 0
    assert state.complete is False
    assert state.running is True
    assert not any(tile.matched for tile in state.deck)


def test_shuffle_uses_rng():
    a = new_session(rng=random.Random(7))
    b = new_session(rng=random.Random(7))
    assert a.deck == b.deck


def test_new_session_rejects_bad_alphabet():
    with pytest.raises(ValueError):
        new_session([])
    with pytest.raises(ValueError):
        new_session(["🍎", "🍎"])


def test_same_tile_twice_is_ignored():
    state = activate(from_symbols(LAYOUT), 3)
    again = activate(state, 3)
    assert again is state
    assert again.moves == 0.5


def test_third_tile_is_ignored_while_pair_pending():
    state = activate(activate(from_symbols(LAYOUT), 0), 1)
    assert state.pair_pending
    assert activate(state, 2) is state


def test_out_of_range_is_ignored():
    state = from_symbols(LAYOUT)
    assert activate(state, 16) is state
    assert activate(state, -1) is state


def test_matched_tile_is_ignored():
    state = from_symbols(LAYOUT, matched=[0, 5])
    assert activate(state, 0) is state


def test_matching_pair_scores():
    state = activate(from_symbols(LAYOUT), 0)
    assert state.moves == 0.5
    assert state.face(0) is TileFace.FACE_UP

    state = activate(state, 5)
    assert state.score == 10
    assert state.deck[0].matched and state.deck[5].matched
    assert state.selection == (0, 5)
    assert state.moves == 1
    assert state.move_count == 1
    assert state.face(5) is TileFace.MATCHED

    state = clear_selection(state)
    assert state.selection == ()
    assert state.deck[0].matched


def test_non_matching_pair():
    state = activate(activate(from_symbols(LAYOUT), 0), 1)
    assert state.score == 0
    assert not state.deck[0].matched
    assert not state.deck[1].matched
    assert state.face(1) is TileFace.FACE_UP

    state = clear_selection(state)
    assert state.selection == ()
    assert state.face(0) is TileFace.HIDDEN
    assert state.face(1) is TileFace.HIDDEN


def test_transitions_do_not_mutate_input():
    start = from_symbols(LAYOUT)
    activate(activate(start, 0), 5)
    assert start.selection == ()
    assert not start.deck[0].matched


def test_last_pair_completes_session():
    state = from_symbols(LAYOUT, matched=[i for i in range(16) if i not in (8, 15)])
    state = activate(state, 8)
    assert not state.complete
    state = activate(state, 15)
    assert state.complete is True
    assert state.running is False
    assert all(tile.matched for tile in state.deck)


def test_tick_counts_only_while_running():
    state = tick(tick(from_symbols(LAYOUT)))
    assert state.elapsed == 2

    done = from_symbols(LAYOUT, matched=[i for i in range(16) if i not in (8, 15)])
    done = activate(activate(done, 8), 15)
    assert tick(done) is done
    assert tick(done).elapsed == 0


def test_accuracy():
    assert accuracy(0, 0) == 0
    assert accuracy(10, 1) == 100
    assert accuracy(10, 2) == 50
    assert accuracy(10, 1.5) == 67
    # half rounds up
    assert accuracy(10, 8) == 13


def test_accuracy_uses_fractional_moves():
    state = activate(from_symbols(LAYOUT), 1)
    assert state.moves == 0.5
    assert state.move_count == 0
    assert state.accuracy == 0


def test_format_time():
    assert format_time(65) == "01:05"
    assert format_time(5) == "00:05"
    assert format_time(0) == "00:00"
    assert format_time(600) == "10:00"


def test_clear_selection_when_empty_is_noop():
    state = from_symbols(LAYOUT)
    assert clear_selection(state) is state


def test_fully_matched_layout_is_complete():
    state = from_symbols(LAYOUT, matched=range(16))
    assert state.complete is True
    assert state.running is False
    assert tick(state) is state

    some = from_symbols(LAYOUT, matched=[0, 5])
    assert some.complete is False
    assert some.running is True
