# config.py - game constants and runtime settings for Fruit Memory Match
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

# ---------------------- Game constants ----------------------
FRUITS: Tuple[str, ...] = ("🍎", "🍌", "🍓", "🍒", "🍍", "🍉", "🍇", "🥝")

MATCH_POINTS = 10
HIDDEN_FACE = "❓"

PAGE_TITLE = "Fruit Memory Match"
PAGE_ICON = "🍓"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_positive(name: str, raw: str, kind=float):
    try:
        value = kind(raw)
    except ValueError:
        raise ValueError(f"{name} must be a {kind.__name__}, got {raw!r}") from None
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {raw!r}")
    return value


# ---------------------- Runtime settings ----------------------
@dataclass(frozen=True)
class Config:
    """Timings and layout knobs. Defaults match the classic game; every field
    can be overridden with a ``FRUIT_MATCH_*`` environment variable."""

    resolve_delay: float = 0.8   # seconds both tiles of a pair stay face-up
    tick_interval: float = 1.0   # seconds per clock tick
    refresh_step: float = 0.1    # longest sleep between live reruns
    live_refresh: bool = True
    columns: int = 4
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            resolve_delay=_parse_positive(
                "FRUIT_MATCH_RESOLVE_DELAY",
                env.get("FRUIT_MATCH_RESOLVE_DELAY", str(defaults.resolve_delay)),
            ),
            tick_interval=_parse_positive(
                "FRUIT_MATCH_TICK_INTERVAL",
                env.get("FRUIT_MATCH_TICK_INTERVAL", str(defaults.tick_interval)),
            ),
            refresh_step=_parse_positive(
                "FRUIT_MATCH_REFRESH_STEP",
                env.get("FRUIT_MATCH_REFRESH_STEP", str(defaults.refresh_step)),
            ),
            live_refresh=_parse_bool(
                "FRUIT_MATCH_LIVE_REFRESH",
                env.get("FRUIT_MATCH_LIVE_REFRESH", str(defaults.live_refresh)),
            ),
            columns=_parse_positive(
                "FRUIT_MATCH_COLUMNS",
                env.get("FRUIT_MATCH_COLUMNS", str(defaults.columns)),
                kind=int,
            ),
            log_level=env.get("FRUIT_MATCH_LOG_LEVEL", defaults.log_level).upper(),
        )
