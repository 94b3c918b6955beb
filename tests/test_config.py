from pathlib import Path

from transit_line.config import (
    AppConfig,
    NetworkConfig,
    ObservabilityConfig,
    get_config,
    reset_config,
)


def test_defaults():
    config = AppConfig()

    assert config.network.stations_file == "stations.csv"
    assert config.network.segments_path.name == "segments.csv"
    assert config.network.data_dir == config.project_root / "data"
    assert config.observability.level == "INFO"
    assert config.observability.structured is False


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TL_NETWORK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("TL_NETWORK_LINES_FILE", "routes.csv")
    monkeypatch.setenv("TL_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("TL_LOG_STRUCTURED", "true")

    network = NetworkConfig()
    observability = ObservabilityConfig()

    assert network.data_dir == Path(tmp_path)
    assert network.lines_path == Path(tmp_path) / "routes.csv"
    assert observability.level == "DEBUG"
    assert observability.structured is True


def test_get_config_is_cached_until_reset():
    reset_config()
    first = get_config()

    assert get_config() is first

    reset_config()
    assert get_config() is not first
    reset_config()
