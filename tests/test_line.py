import pytest

from transit_line.domain.errors import ChainTooShortError, InvalidSegmentError
from transit_line.domain.line import Line
from transit_line.domain.models import Segment, Station

GIHEUNG = Station(11, "Giheung")
SINGAL = Station(12, "Singal")
JEONGJA = Station(13, "Jeongja")


@pytest.fixture
def line() -> Line:
    line = Line.create(21, "Bundang", "yellow", GIHEUNG, SINGAL, 10)
    line.add_segment(SINGAL, JEONGJA, 9)
    return line


def test_new_line_starts_empty():
    line = Line(1, "Everline", "green")

    assert line.segments.is_empty()
    assert line.stations() == ()
    assert line.total_distance() == 0
    assert line.view().is_empty


def test_create_seeds_first_segment():
    line = Line.create(21, "Bundang", "yellow", GIHEUNG, SINGAL, 10)

    assert line.station_names() == ["Giheung", "Singal"]
    assert line.total_distance() == 10


def test_add_segment_binds_line_id(line):
    segment = line.add_segment(JEONGJA, Station(14, "Migeum"), 4)

    assert segment == Segment(21, JEONGJA, Station(14), 4)
    assert segment.line_id == 21
    assert line.station_names() == ["Giheung", "Singal", "Jeongja", "Migeum"]


def test_add_invalid_segment_leaves_line_unchanged(line):
    with pytest.raises(InvalidSegmentError):
        line.add_segment(JEONGJA, Station(14, "Migeum"), 0)

    assert line.total_distance() == 19


def test_remove_station(line):
    line.remove_station(SINGAL)

    assert line.station_names() == ["Giheung", "Jeongja"]
    assert line.total_distance() == 19


def test_remove_last_segment_is_rejected():
    line = Line.create(22, "Everline", "green", GIHEUNG, SINGAL, 10)

    with pytest.raises(ChainTooShortError):
        line.remove_station(SINGAL)


def test_update_changes_only_given_fields(line):
    line.update(color="orange")
    assert (line.name, line.color) == ("Bundang", "orange")

    line.update(name="Suin-Bundang")
    assert (line.name, line.color) == ("Suin-Bundang", "orange")


def test_has_all_stations_of(line):
    assert line.has_all_stations_of(GIHEUNG, JEONGJA)
    assert not line.has_all_stations_of(GIHEUNG, Station(99))


def test_lines_compare_by_id():
    assert Line(1, "A", "red") == Line(1, "B", "blue")
    assert Line(1, "A", "red") != Line(2, "A", "red")
    assert len({Line(1, "A", "red"), Line(1, "B", "blue")}) == 1


def test_view_snapshot(line):
    view = line.view()

    assert view.line_id == 21
    assert view.name == "Bundang"
    assert view.color == "yellow"
    assert view.station_names == ("Giheung", "Singal", "Jeongja")
    assert view.num_stations == 3
    assert [s.distance for s in view.segments] == [10, 9]
    assert view.total_distance == 19

    line.remove_station(JEONGJA)
    assert view.total_distance == 19
