"""
Shared test fixtures
"""
import json
import pytest


SHEAD9 = {
    "icao": "SHEAD9",
    "name": "Shead Nine",
    "rwy": {
        "01L": [["BESSY", "S230"], ["MDDOG", "A90"], ["TARRK", "A110"]],
        "07L": ["WASTE", ["BAKRR", "A70"], ["MINEY", "A80+"], "HITME"]
    },
    "body": [["SHEAD", "A140+"]],
    "exitPoints": {
        "KENNO": [["DBIGE", "A210+"], ["BIKKR", "A210+"], "KENNO"],
        "OAL": [["DBIGE", "A210+"], ["BIKKR", "A210+"], "KENNO", "OAL"]
    }
}

KEPEC3 = {
    "icao": "KEPEC3",
    "name": "Kepec Three",
    "entryPoints": {
        "DAG": ["DAG", ["CLARR", "A130|S250"]],
        "TNP": ["TNP", ["JOTNU", "A150-"]]
    },
    "body": [["SUNST", "A120"], ["KEPEC", "A110+|S250"]],
    "rwy": {
        "25L": [["IPUMY", "A80"], "NIPZO"],
        "25R": [["IPUMY", "A80"], "SUNRS"]
    }
}


@pytest.fixture
def shead9():
    return json.loads(json.dumps(SHEAD9))


@pytest.fixture
def kepec3():
    return json.loads(json.dumps(KEPEC3))


@pytest.fixture
def airport_data(shead9, kepec3):
    """Small airport around a reference point on the equator, one fix per nm of latitude"""
    fix_names = ["BESSY", "MDDOG", "TARRK", "SHEAD", "DBIGE", "BIKKR", "KENNO"]
    fixes = {name: [i / 60.0, 0.0] for i, name in enumerate(fix_names)}
    fixes["OAL"] = ["N0d10m0", "E0d0m0"]
    fixes["BROKEN"] = ["somewhere"]

    return {
        "icao": "ktst",
        "name": "Test Field",
        "position": [0.0, 0.0],
        "fixes": fixes,
        "sids": {"SHEAD9": shead9},
        "stars": {"KEPEC3": kepec3}
    }


@pytest.fixture
def airport_path(tmp_path, airport_data):
    path = tmp_path / "ktst.json"
    path.write_text(json.dumps(airport_data))
    return path
