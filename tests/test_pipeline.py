from pathlib import Path

from transit_line.config import AppConfig, NetworkConfig
from transit_line.container import Container
from transit_line.domain.line import Line
from transit_line.domain.models import Station
from transit_line.pipeline import describe_line, run_pipeline

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def test_describe_line():
    line = Line.create(1, "Bundang", "yellow", Station(11, "Giheung"), Station(12, "Singal"), 10)

    assert describe_line(line.view()) == (
        "Line: Bundang (yellow)\nStations: Giheung -> Singal\nTotal distance: 10"
    )


def test_describe_empty_line():
    assert describe_line(Line(1, "Everline", "").view()) == "Line: Everline\nNo segments yet."


def test_run_pipeline_prints_sample_network(capsys):
    container = Container.create_default(AppConfig(network=NetworkConfig(data_dir=DATA_DIR)))

    assert run_pipeline(container) == 0

    out = capsys.readouterr().out
    assert "Stations: Giheung -> Singal -> Guseong -> Jeongja -> Migeum" in out
    assert "Total distance: 23" in out
    assert "Line: Shinbundang (red)" in out


def test_run_pipeline_reports_rejected_network(capsys, tmp_path):
    container = Container.create_default(AppConfig(network=NetworkConfig(data_dir=tmp_path)))

    assert run_pipeline(container) == 1
    assert "Error [NETWORK_LOAD]" in capsys.readouterr().out
