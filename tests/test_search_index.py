from CILV.log_analysis.search_index import SearchIndex


def test_empty_query_matches_nothing(sample_log):
    assert SearchIndex(sample_log).search("") == []


def test_search_is_case_insensitive(sample_log):
    index = SearchIndex(sample_log)

    assert index.search("needle") == [2, 5, 9]
    assert index.search("NEEDLE") == index.search("needle")
    assert index.search("fail") == index.search("FAIL") == [5]


def test_results_are_in_line_order():
    index = SearchIndex(["b x", "a x", "c", "x"])
    assert index.search("x") == [0, 1, 3]


def test_regex_characters_are_literal():
    index = SearchIndex(["value [a-z]+ here", "value abc here", "a.*b"])

    assert index.search("[a-z]+") == [0]
    assert index.search(".*") == [2]
    assert index.search("(") == []


def test_no_match():
    assert SearchIndex(["one", "two"]).search("three") == []


def test_empty_log():
    index = SearchIndex([])
    assert len(index) == 0
    assert index.search("anything") == []
