from widgetspec.services.suggest import levenshtein, suggest_kind


def test_levenshtein():
    assert levenshtein("kitten", "sitting") == 3
    assert levenshtein("", "abc") == 3
    assert levenshtein("abc", "") == 3
    assert levenshtein("same", "same") == 0


def test_suggests_close_kind():
    assert suggest_kind("chart.barr") == "chart.bar"
    assert suggest_kind("metirc") == "metric"
    assert suggest_kind("CHART.BARR") == "chart.bar"


def test_no_suggestion_for_exact_or_distant_names():
    assert suggest_kind("chart.bar") is None
    assert suggest_kind("zzzzzzzzzzzz") is None
    assert suggest_kind("") is None


def test_threshold_shrinks_for_short_names():
    # two edits on a three-letter name is too far
    assert suggest_kind("axx", ["abc"]) is None
    assert suggest_kind("abd", ["abc"]) == "abc"


def test_custom_candidates():
    assert suggest_kind("gauze", ["gauge", "image"]) == "gauge"
