from verdict import build_report, count_matches, judge


def test_single_matching_clue_is_insufficient(scenario_index):
    assert judge(["Candlestick"], scenario_index, "Col. Mustard") == (False, 1)


def test_two_matching_clues_confirm(mansion_index):
    assert judge(["Candlestick", "Poison"], mansion_index, "Col. Mustard") == (True, 2)


def test_zero_matches(mansion_index):
    assert judge(["Candlestick", "Poison"], mansion_index, "Prof. Plum") == (False, 0)


def test_names_compare_verbatim(mansion_index):
    assert count_matches(["Candlestick", "Poison"], mansion_index, "col. mustard") == 0
    assert count_matches(["Candlestick", "Poison"], mansion_index, "Col. Mustard ") == 0


def test_unknown_clues_count_for_nobody(mansion_index):
    assert count_matches(["Footprint", "Candlestick"], mansion_index, "Col. Mustard") == 1


def test_custom_threshold(mansion_index):
    assert judge(["Dagger"], mansion_index, "Prof. Plum", threshold=1) == (True, 1)


def test_report_for_empty_collection_ignores_name(mansion_index):
    for name in ["Col. Mustard", "", "Nobody"]:
        report = build_report([], mansion_index, name)
        assert report.outcome == "no_clues"
        assert report.match_count == 0
        assert not report.upheld


def test_report_outcomes(mansion_index):
    confirmed = build_report(["Candlestick", "Poison", "Rope"], mansion_index, "Col. Mustard")
    assert confirmed.outcome == "confirmed"
    assert confirmed.upheld
    assert confirmed.match_count == 2
    assert confirmed.clues == ["Candlestick", "Poison", "Rope"]

    rejected = build_report(["Rope"], mansion_index, "Col. Mustard")
    assert rejected.outcome == "insufficient_evidence"
    assert not rejected.upheld
