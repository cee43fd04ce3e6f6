import pytest

from roadtrip.domain.models import RoadSegment, Route, RouteLeg, Trip, TripMetric


def test_road_segment_hours_and_seconds():
    segment = RoadSegment(miles=30.0, miles_per_hour=60.0)
    assert segment.hours == pytest.approx(0.5)
    assert segment.seconds == pytest.approx(1800.0)


@pytest.mark.parametrize("miles, mph", [(-1.0, 60.0), (10.0, 0.0), (10.0, -5.0)])
def test_road_segment_rejects_invalid_values(miles, mph):
    with pytest.raises(ValueError):
        RoadSegment(miles=miles, miles_per_hour=mph)


def test_trip_metric_weights():
    segment = RoadSegment(miles=30.0, miles_per_hour=60.0)
    assert TripMetric.DISTANCE.weight(segment) == 30.0
    assert TripMetric.TIME.weight(segment) == pytest.approx(0.5)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("D", TripMetric.DISTANCE),
        ("t", TripMetric.TIME),
        (" distance ", TripMetric.DISTANCE),
        ("TIME", TripMetric.TIME),
    ],
)
def test_trip_metric_parse(text, expected):
    assert TripMetric.parse(text) is expected


def test_trip_metric_parse_rejects_unknown():
    with pytest.raises(ValueError):
        TripMetric.parse("fastest")


def test_route_totals():
    legs = (
        RouteLeg(0, 1, "A", "B", RoadSegment(miles=10.0, miles_per_hour=50.0)),
        RouteLeg(1, 2, "B", "C", RoadSegment(miles=20.0, miles_per_hour=40.0)),
    )
    route = Route(trip=Trip(0, 2), start_name="A", end_name="C", legs=legs)

    assert route.vertices == (0, 1, 2)
    assert route.total_miles == pytest.approx(30.0)
    assert route.total_seconds == pytest.approx(720.0 + 1800.0)
    assert not route.is_empty
