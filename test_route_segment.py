"""
Tests for route segments, segment collections and waypoint restrictions
"""
import logging

import pytest

from models.route_segment import (
    RestrictionQualifier,
    RouteSegment,
    RouteSegmentCollection,
    StandardWaypoint,
    build_segment_collection,
    parse_restriction
)


def test_parse_restriction_altitude():
    parsed = parse_restriction("A80+")

    assert parsed["altitude"] == 8000
    assert parsed["altitude_qualifier"] is RestrictionQualifier.AT_OR_ABOVE
    assert parsed["speed"] is None


def test_parse_restriction_speed():
    parsed = parse_restriction("S230")

    assert parsed["speed"] == 230
    assert parsed["speed_qualifier"] is RestrictionQualifier.AT
    assert parsed["altitude"] is None


def test_parse_restriction_combined():
    parsed = parse_restriction("A70-|S210")

    assert parsed["altitude"] == 7000
    assert parsed["altitude_qualifier"] is RestrictionQualifier.AT_OR_BELOW
    assert parsed["speed"] == 210
    assert parsed["speed_qualifier"] is RestrictionQualifier.AT


def test_parse_restriction_none():
    assert parse_restriction(None) == {
        "altitude": None,
        "altitude_qualifier": None,
        "speed": None,
        "speed_qualifier": None,
    }


def test_parse_restriction_invalid():
    with pytest.raises(ValueError):
        parse_restriction("X120")

    with pytest.raises(ValueError):
        parse_restriction("A80|FL")


def test_waypoint_from_bare_name():
    waypoint = StandardWaypoint.from_fix_entry("kenno")

    assert waypoint.name == "KENNO"
    assert waypoint.restriction is None
    assert not waypoint.has_restriction
    assert waypoint.position is None
    assert waypoint.fix_name_with_restrictions == ["KENNO", None]


def test_waypoint_from_pair():
    waypoint = StandardWaypoint.from_fix_entry(["MINEY", "A80+"])

    assert waypoint.altitude == 8000
    assert waypoint.has_restriction
    assert waypoint.fix_name_with_restrictions == ["MINEY", "A80+"]
    assert waypoint.distance_from_previous is None
    assert waypoint.previous_waypoint_name is None


def test_waypoint_from_invalid_entry():
    with pytest.raises(ValueError):
        StandardWaypoint.from_fix_entry(["MINEY"])

    with pytest.raises(ValueError):
        StandardWaypoint.from_fix_entry(42)


def test_route_segment():
    segment = RouteSegment("body", [["SHEAD", "A140+"], "KENNO"])

    assert len(segment) == 2
    assert segment.gather_fix_names() == ["SHEAD", "KENNO"]
    assert segment.find_waypoints_for_segment() == [["SHEAD", "A140+"], ["KENNO", None]]


def test_route_segment_items_are_copies():
    segment = RouteSegment("body", ["SHEAD"])

    segment.items[0].set_previous_waypoint("BESSY", 3.0)

    assert segment.items[0].distance_from_previous is None


def test_empty_route_segment():
    segment = RouteSegment("body", None)

    assert len(segment) == 0
    assert segment.find_waypoints_for_segment() == []


def test_collection_lookup_is_case_insensitive():
    collection = RouteSegmentCollection({"01L": ["A", "B"], "25r": ["C"]})

    assert collection.find_segment_by_name("01l").gather_fix_names() == ["A", "B"]
    assert collection.find_segment_by_name("25R").gather_fix_names() == ["C"]


def test_collection_lookup_miss():
    collection = RouteSegmentCollection({"01L": ["A", "B"]})

    assert collection.find_segment_by_name("19R") is None
    assert collection.find_segment_by_name("") is None
    assert collection.find_segment_by_name(None) is None
    assert collection.find_waypoints_for_segment_name("19R") == []


def test_collection_skips_empty_segments():
    collection = RouteSegmentCollection({"01L": ["A"], "07L": []})

    assert len(collection) == 1
    assert collection.find_segment_by_name("07L") is None
    assert collection.gather_segment_names() == ["01L"]


def test_collection_gathers_every_fix_once():
    collection = RouteSegmentCollection({
        "KENNO": [["DBIGE", "A210+"], "BIKKR", "KENNO"],
        "OAL": [["DBIGE", "A210+"], "BIKKR", "KENNO", "OAL"]
    })

    assert collection.gather_segment_names() == ["KENNO", "OAL"]
    assert collection.gather_fix_names() == ["DBIGE", "BIKKR", "KENNO", "OAL"]


def test_build_segment_collection_without_data():
    """Test missing or empty input gives no collection rather than an empty one"""
    assert build_segment_collection(None) is None
    assert build_segment_collection({}) is None
    assert isinstance(build_segment_collection({"01L": ["A"]}), RouteSegmentCollection)


def test_collection_warns_when_names_differ_only_by_case(caplog):
    with caplog.at_level(logging.WARNING, logger="models.route_segment"):
        collection = RouteSegmentCollection({"01l": ["A"], "01L": ["B"]})

    assert len(collection) == 1
    assert collection.find_segment_by_name("01L").gather_fix_names() == ["B"]
    assert "differ only by case" in caplog.text
