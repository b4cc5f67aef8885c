from .config import FRUITS, Config
from .engine import (
    SessionState,
    Tile,
    TileFace,
    accuracy,
    activate,
    clear_selection,
    format_time,
    new_session,
    tick,
)
from .game import MatchGame, Stats
from .timers import Timer, TimerQueue

__version__ = "0.1.0"
