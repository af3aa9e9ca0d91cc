"""
Tests for SID/STAR fix list resolution
"""
import math

import pytest

from models.standard_route import ProcedureType, StandardRouteModel, detect_procedure_type
from utils.fix_database import FixDatabase
from utils.geo_utils import distance_2d, km_to_nm


def _names(fix_list):
    return [name for name, _restriction in fix_list]


@pytest.fixture
def simple_sid():
    return StandardRouteModel({
        "icao": "TEST1",
        "name": "Test One",
        "rwy": {"01L": ["A", "B"]},
        "body": ["C"],
        "exitPoints": {"X": ["D"]}
    })


def test_sid_runway_body_exit_order(simple_sid):
    fix_list = simple_sid.find_fixes_and_restrictions_for_runway_and_exit("01L", "X")

    assert _names(fix_list) == ["A", "B", "C", "D"]


def test_segment_names_are_case_insensitive(simple_sid):
    fix_list = simple_sid.find_fixes_and_restrictions_for_runway_and_exit("01l", "x")

    assert _names(fix_list) == ["A", "B", "C", "D"]


def test_missing_segments_contribute_nothing(simple_sid):
    """Test unknown or empty segment names are not an error"""
    assert _names(simple_sid.find_fixes_and_restrictions_for_runway_and_exit("01L", "Y")) == ["A", "B", "C"]
    assert _names(simple_sid.find_fixes_and_restrictions_for_runway_and_exit("", "X")) == ["C", "D"]
    assert _names(simple_sid.find_fixes_and_restrictions_for_runway_and_exit("19R", "")) == ["C"]


def test_resolution_is_deterministic(shead9):
    route = StandardRouteModel(shead9)

    first = route.find_fixes_and_restrictions_for_runway_and_exit("07L", "OAL")
    second = route.find_fixes_and_restrictions_for_runway_and_exit("07L", "OAL")

    assert first == second
    assert first == [
        ["WASTE", None], ["BAKRR", "A70"], ["MINEY", "A80+"], ["HITME", None],
        ["SHEAD", "A140+"],
        ["DBIGE", "A210+"], ["BIKKR", "A210+"], ["KENNO", None], ["OAL", None]
    ]


def test_star_entry_body_runway_order(kepec3):
    route = StandardRouteModel(kepec3)

    assert route.procedure_type is ProcedureType.STAR
    fix_list = route.find_fixes_and_restrictions_for_entry_and_runway("TNP", "25L")
    assert _names(fix_list) == ["TNP", "JOTNU", "SUNST", "KEPEC", "IPUMY", "NIPZO"]

    fix_list = route.find_fixes_and_restrictions_for_entry_and_runway("DAG")
    assert _names(fix_list) == ["DAG", "CLARR", "SUNST", "KEPEC"]


def test_procedure_type_detection(shead9, kepec3):
    assert detect_procedure_type(shead9) is ProcedureType.SID
    assert detect_procedure_type(kepec3) is ProcedureType.STAR
    assert detect_procedure_type({"rwy": {"01L": ["A"]}}) is None

    assert StandardRouteModel(shead9).is_sid
    assert StandardRouteModel(kepec3).is_star


def test_procedure_without_entry_or_exit_points():
    """Test a procedure with neither entryPoints nor exitPoints has no collections"""
    route = StandardRouteModel({"icao": "ODD1", "rwy": {"01L": ["A"]}, "body": ["B"]})

    assert route.procedure_type is None
    assert not route.has_entry_points()
    assert not route.has_exit_points()
    assert _names(route.find_fixes_and_restrictions_for_runway_and_exit("01L", "X")) == ["B"]


def test_procedure_without_body(kepec3):
    del kepec3["body"]
    route = StandardRouteModel(kepec3)

    assert _names(route.find_fixes_and_restrictions_for_entry_and_runway("DAG", "25R")) == ["DAG", "CLARR", "IPUMY", "SUNRS"]


def test_entry_and_exit_point_names(shead9):
    route = StandardRouteModel(shead9)

    assert route.gather_entry_point_names() == ["01L", "07L"]
    assert route.gather_exit_point_names() == ["KENNO", "OAL"]
    assert route.has_exit_points()


def test_empty_exit_points():
    route = StandardRouteModel({"icao": "T1", "rwy": {"01L": ["A"]}, "exitPoints": {}})

    assert route.is_sid
    assert not route.has_exit_points()
    assert route.gather_exit_point_names() == []


def test_has_fix_name_only_checks_entry_and_exit(shead9):
    route = StandardRouteModel(shead9)

    assert route.has_fix_name("KENNO")
    assert route.has_fix_name("01l")
    assert not route.has_fix_name("SHEAD")  # body fix
    assert not route.has_fix_name("BOGUS")


def test_reset(shead9):
    route = StandardRouteModel(shead9)

    assert route.reset() is route
    assert route.icao == ""
    assert route.name == ""
    assert route.procedure_type is None
    assert not route.has_exit_points()
    assert route.find_fixes_and_restrictions_for_runway_and_exit("01L", "KENNO") == []


def test_rejects_non_dict_input():
    with pytest.raises(TypeError):
        StandardRouteModel([["A", "B"]])

    with pytest.raises(TypeError):
        StandardRouteModel("SHEAD9")


@pytest.fixture
def fix_database():
    """Fixes one nm of latitude apart, heading north from the reference point"""
    fix_names = ["BESSY", "MDDOG", "TARRK", "SHEAD", "DBIGE", "BIKKR", "KENNO"]
    return FixDatabase({name: [i / 60.0, 0.0] for i, name in enumerate(fix_names)}, (0.0, 0.0))


def test_waypoints_without_pre_spawn(shead9, fix_database):
    route = StandardRouteModel(shead9, fix_database)

    waypoints = route.find_standard_waypoints_for_entry_and_exit("01L", "KENNO")

    assert [waypoint.name for waypoint in waypoints] == ["BESSY", "MDDOG", "TARRK", "SHEAD", "DBIGE", "BIKKR", "KENNO"]
    assert all(waypoint.distance_from_previous is None for waypoint in waypoints)
    assert waypoints[0].speed == 230


def test_pre_spawn_distances(shead9, fix_database):
    route = StandardRouteModel(shead9, fix_database)

    waypoints = route.find_standard_waypoints_for_entry_and_exit("01L", "KENNO", is_pre_spawn=True)

    for i, waypoint in enumerate(waypoints[1:], start=1):
        previous = waypoints[i - 1]
        assert waypoint.previous_waypoint_name == previous.name
        assert waypoint.distance_from_previous == pytest.approx(km_to_nm(distance_2d(previous.position, waypoint.position)))
        assert waypoint.distance_from_previous == pytest.approx(1.0, rel=1e-3)


def test_pre_spawn_first_waypoint_is_measured_against_itself(shead9, fix_database):
    """
    The first waypoint has no predecessor. It is given a distance of zero and
    its own name as the previous waypoint rather than a "no predecessor"
    value, which consumers already rely on.
    """
    route = StandardRouteModel(shead9, fix_database)

    first = route.find_standard_waypoints_for_entry_and_exit("01L", "KENNO", is_pre_spawn=True)[0]

    assert first.distance_from_previous == 0
    assert first.previous_waypoint_name == first.name == "BESSY"


def test_pre_spawn_does_not_change_the_model(shead9, fix_database):
    route = StandardRouteModel(shead9, fix_database)

    route.find_standard_waypoints_for_entry_and_exit("01L", "KENNO", is_pre_spawn=True)
    waypoints = route.find_standard_waypoints_for_entry_and_exit("01L", "KENNO")

    assert all(waypoint.previous_waypoint_name is None for waypoint in waypoints)


def test_pre_spawn_skips_waypoints_without_position(shead9, fix_database):
    """Test distance and previous name stay unset together when a position is unknown"""
    route = StandardRouteModel(shead9, fix_database)

    waypoints = route.find_standard_waypoints_for_entry_and_exit("01L", "OAL", is_pre_spawn=True)
    oal = waypoints[-1]

    assert oal.name == "OAL"
    assert oal.position is None
    assert oal.distance_from_previous is None
    assert oal.previous_waypoint_name is None
    assert waypoints[-2].distance_from_previous is not None


def test_pre_spawn_with_missing_segments(shead9, fix_database):
    route = StandardRouteModel(shead9, fix_database)

    waypoints = route.find_standard_waypoints_for_entry_and_exit("19R", "", is_pre_spawn=True)

    assert [waypoint.name for waypoint in waypoints] == ["SHEAD"]
    assert waypoints[0].distance_from_previous == 0


def test_calculate_distance_between_waypoints(simple_sid):
    distance = simple_sid.calculate_distance_between_waypoints((3.0, 4.0), (0.0, 0.0))

    assert distance == pytest.approx(5.0 / 1.852)
    assert math.isclose(simple_sid.calculate_distance_between_waypoints((1.0, 1.0), (1.0, 1.0)), 0.0)
