"""Shared fixtures: a small dataset mixing several historical sheet layouts."""

import pytest

from baja_scores.lookup.selection import TeamSelection


CORNELL_KEY = "Cornell University - Big Red Racing"
ETS_KEY = "Ecole de Technologie Superieure - Baja ETS"
RIT_KEY = "Rochester Institute of Technology - Main Campus - RIT Baja"


def _midwest_2023():
    """Per-event sections, with assorted score-field spellings."""
    return {
        "0": {
            "Overall": {
                "School": "Cornell University",
                "team_key": CORNELL_KEY,
                "Hill Climb (75)": 80,
                "Land Manuverability (75)": 40,
                "Overall (1000)": 812.5,
            },
            "Rock Crawl": {"Score": 60},
            "Accel": {"Acceleration Score (75)": 70.5, "Time": 3.9},
            "S&T": {"Raw Time": 41.2, "Final Score": 50},
            "Manv": {"Score": "DNF"},
            "Endurance": {"Laps": 48, "Points (400)": 300},
        },
        "1": {
            "Overall": {
                "School": "Ecole de Technologie Superieure",
                "team_key": ETS_KEY,
                "Overall (1000)": 901.0,
            },
            "Acceleration": {"Score": 75},
            "Hill Climb": {"Hill Climb Score (75)": 75},
            "Rock Crawl": {"Score": 82.5},
            "Endurance": {"Endurance Race Score (400)": 400},
        },
        "2": {
            "Overall": {
                "School": "Rochester Institute of Technology",
                "team_key": RIT_KEY + "  ",
                "Overall (1000)": 655,
            },
            "Hill": {"score": 30},
        },
        "3": {
            "Overall": {
                "School": "Dataless Tech",
                "team_key": "Dataless Tech - Empty",
            },
        },
    }


def _california_2019():
    """Overall-only layout from older seasons."""
    return {
        "a": {
            "Overall": {
                "School": "Cornell University",
                "team_key": CORNELL_KEY,
                "Acceleration (75)": 60,
                "Maneuverability (75)": 45,
                "Hill Climb (75)": 75,
                "Suspension & Traction (75)": 30,
                "Rock Crawl (75)": 15,
                "Endurance Race (400)": 200,
                "Overall (1000)": 700,
            },
        },
        "b": {
            "Overall": {
                "School": "Duplicate U",
                "team_key": "Duplicate U - First",
                "Acceleration (75)": 10,
                "Overall (1000)": 100,
            },
        },
        "c": {
            "Overall": {
                "School": "Duplicate U",
                "team_key": "Duplicate U - First",
                "Acceleration (75)": 20,
                "Overall (1000)": 200,
            },
        },
    }


@pytest.fixture
def dataset():
    return {
        "Midwest 2023": _midwest_2023(),
        "California 2019 ": _california_2019(),
    }


@pytest.fixture
def cornell_midwest():
    return TeamSelection.create("Midwest 2023", "Cornell University", CORNELL_KEY)


@pytest.fixture
def ets_midwest():
    return TeamSelection.create("Midwest 2023", "Ecole de Technologie Superieure", ETS_KEY)


@pytest.fixture
def cornell_california():
    return TeamSelection.create("california 2019", "Cornell University", CORNELL_KEY)
