import pytest

from fruit_match.config import FRUITS, Config


def test_defaults():
    cfg = Config.from_env({})
    assert cfg == Config()
    assert cfg.resolve_delay == 0.8
    assert cfg.tick_interval == 1.0
    assert cfg.live_refresh is True
    assert cfg.columns == 4
    assert cfg.log_level == "INFO"


def test_env_overrides():
    cfg = Config.from_env({
        "FRUIT_MATCH_RESOLVE_DELAY": "1.5",
        "FRUIT_MATCH_LIVE_REFRESH": "off",
        "FRUIT_MATCH_COLUMNS": "8",
        "FRUIT_MATCH_LOG_LEVEL": "debug",
    })
    assert cfg.resolve_delay == 1.5
    assert cfg.live_refresh is False
    assert cfg.columns == 8
    assert cfg.log_level == "DEBUG"


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("FRUIT_MATCH_TICK_INTERVAL", "0.5")
    assert Config.from_env().tick_interval == 0.5


@pytest.mark.parametrize("name, value", [
    ("FRUIT_MATCH_RESOLVE_DELAY", "soon"),
    ("FRUIT_MATCH_TICK_INTERVAL", "0"),
    ("FRUIT_MATCH_COLUMNS", "2.5"),
    ("FRUIT_MATCH_LIVE_REFRESH", "maybe"),
])
def test_bad_values_raise(name, value):
    with pytest.raises(ValueError):
        Config.from_env({name: value})


def test_fruit_alphabet():
    assert len(FRUITS) == 8
    assert len(set(FRUITS)) == 8
