import pytest

from transit_line.domain.errors import ErrorCode, InvalidSegmentError
from transit_line.domain.models import Segment, Station

GIHEUNG = Station(11, "Giheung")
SINGAL = Station(12, "Singal")


def test_station_equality_ignores_name():
    assert Station(11, "Giheung") == Station(11, "renamed")
    assert hash(Station(11, "Giheung")) == hash(Station(11, "other"))
    assert Station(11, "Giheung") != Station(12, "Giheung")


def test_segment_accessors():
    segment = Segment(1, GIHEUNG, SINGAL, 10)

    assert segment.has_same_up(GIHEUNG)
    assert not segment.has_same_up(SINGAL)
    assert segment.has_same_down(SINGAL)
    assert segment.has_station(GIHEUNG)
    assert segment.has_station(SINGAL)
    assert not segment.has_station(Station(99, "Elsewhere"))
    assert segment.endpoints() == (GIHEUNG, SINGAL)


def test_segment_equality_ignores_distance():
    assert Segment(1, GIHEUNG, SINGAL, 10) == Segment(1, GIHEUNG, SINGAL, 3)
    assert Segment(1, GIHEUNG, SINGAL, 10) != Segment(2, GIHEUNG, SINGAL, 10)
    # Direction matters
    assert Segment(1, GIHEUNG, SINGAL, 10) != Segment(1, SINGAL, GIHEUNG, 10)


@pytest.mark.parametrize("distance", [0, -1, -10])
def test_segment_rejects_non_positive_distance(distance):
    with pytest.raises(InvalidSegmentError) as exc_info:
        Segment(1, GIHEUNG, SINGAL, distance)

    assert exc_info.value.code == ErrorCode.INVALID_SEGMENT
    assert exc_info.value.distance == distance


@pytest.mark.parametrize("distance", [1.5, "10", True, None])
def test_segment_rejects_non_integer_distance(distance):
    with pytest.raises(InvalidSegmentError):
        Segment(1, GIHEUNG, SINGAL, distance)


def test_segment_rejects_same_station_twice():
    with pytest.raises(InvalidSegmentError) as exc_info:
        Segment(1, GIHEUNG, Station(11, "Giheung again"), 5)

    assert exc_info.value.up_station_id == 11
    assert exc_info.value.down_station_id == 11


def test_segment_is_immutable():
    segment = Segment(1, GIHEUNG, SINGAL, 10)

    with pytest.raises(AttributeError):
        segment.distance = 3  # type: ignore[misc]
