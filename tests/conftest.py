import pytest

from hash_index import HashIndex


SCENARIO_LAYOUT = {
    "name": "Hall",
    "clue": None,
    "left": {"name": "Study", "clue": "Candlestick"},
    "right": {"name": "Library", "clue": "Rope"},
}

SCENARIO_SUSPECTS = {
    "Candlestick": "Col. Mustard",
    "Rope": "Mrs. White",
}


@pytest.fixture()
def scenario_layout():
    return SCENARIO_LAYOUT


@pytest.fixture()
def scenario_index():
    return HashIndex.from_pairs(SCENARIO_SUSPECTS)


@pytest.fixture()
def mansion_index():
    from case_data import CLUE_SUSPECTS

    return HashIndex.from_pairs(CLUE_SUSPECTS)
