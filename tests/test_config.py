import logging
from pathlib import Path

import pytest

from roadtrip.config import (
    AppConfig,
    ObservabilityConfig,
    PlannerConfig,
    configure_logging,
    get_config,
    reset_config,
)
from roadtrip.domain.errors import ConfigurationError


def test_defaults():
    config = AppConfig()

    assert config.map.locations_path == config.map.data_dir / "locations.csv"
    assert config.map.roads_path.name == "roads.csv"
    assert config.map.trips_path.name == "trips.csv"
    assert config.planner.require_strongly_connected is True
    assert config.planner.cache_max_entries is None
    assert config.planner.default_metric == "distance"


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RTP_MAP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RTP_PLANNER_REQUIRE_STRONGLY_CONNECTED", "false")
    monkeypatch.setenv("RTP_PLANNER_CACHE_MAX_ENTRIES", "8")
    monkeypatch.setenv("RTP_LOG_LEVEL", "DEBUG")
    reset_config()

    config = get_config()

    assert config.map.data_dir == Path(tmp_path)
    assert config.planner.require_strongly_connected is False
    assert config.planner.cache_max_entries == 8
    assert config.observability.level == "DEBUG"


def test_get_config_is_cached():
    assert get_config() is get_config()
    first = get_config()
    reset_config()
    assert get_config() is not first


def test_invalid_cache_size_rejected(monkeypatch):
    monkeypatch.setenv("RTP_PLANNER_CACHE_MAX_ENTRIES", "0")
    with pytest.raises(ValueError):
        PlannerConfig()


def test_configure_logging_sets_root_level(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    configure_logging(ObservabilityConfig(level="debug", format="%(message)s"))

    assert calls == [{"level": logging.DEBUG, "format": "%(message)s", "force": True}]


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ConfigurationError) as excinfo:
        configure_logging(ObservabilityConfig(level="LOUD"))
    assert excinfo.value.setting_name == "RTP_LOG_LEVEL"
