import pytest

from CILV.log_analysis.hierarchy import Hierarchy, build_hierarchy, is_section_start


def test_suite_and_test_start_sections():
    lines = [
        "[a 1] SUITE-START run",
        "[a 2] TEST-START x",
        "[a 3] INFO - TEST-UNEXPECTED-FAIL x",
    ]
    hierarchy = build_hierarchy(lines)

    assert hierarchy.roots == [0, 1]
    assert hierarchy.parent_to_children == {1: [2]}
    assert hierarchy.child_to_parent == {2: 1}
    assert hierarchy.failing_sections == {1}
    assert hierarchy.skipped_sections == set()


def test_sample_log_structure(sample_log):
    hierarchy = build_hierarchy(sample_log)

    assert hierarchy.roots == [0, 1, 4, 6, 8]
    assert hierarchy.parent_to_children == {1: [2, 3], 4: [5], 6: [7], 8: [9]}
    assert hierarchy.child_to_parent == {2: 1, 3: 1, 5: 4, 7: 6, 9: 8}
    assert hierarchy.failing_sections == {4, 8}
    assert hierarchy.skipped_sections == {6}


def test_empty_log():
    hierarchy = build_hierarchy([])
    assert hierarchy == Hierarchy()
    assert hierarchy.roots == []


def test_without_markers_everything_nests_under_first_line():
    hierarchy = build_hierarchy(["setup", "download", "run", "teardown"])

    assert hierarchy.roots == [0]
    assert hierarchy.parent_to_children == {0: [1, 2, 3]}


def test_first_line_is_always_a_section():
    assert is_section_start(0, "anything at all")
    assert not is_section_start(1, "anything at all")
    assert is_section_start(5, "INFO - TEST-START | x")
    assert is_section_start(5, "INFO - SUITE-START | x")


def test_lines_before_any_marker_nest_under_first_line():
    lines = ["mozharness starting", "INFO - TEST-UNEXPECTED-FAIL | setup", "INFO - TEST-START | a"]
    hierarchy = build_hierarchy(lines)

    assert hierarchy.roots == [0, 2]
    assert hierarchy.failing_sections == {0}


def test_section_line_with_failure_marker_is_not_failing():
    lines = ["start", "INFO - TEST-START | TEST-UNEXPECTED-FAIL in name", "ok"]
    hierarchy = build_hierarchy(lines)

    assert hierarchy.roots == [0, 1]
    assert hierarchy.failing_sections == set()


def test_process_crash_marks_section_failing():
    lines = ["start", "INFO - TEST-START | a", "PROCESS-CRASH | a | segfault"]
    assert build_hierarchy(lines).failing_sections == {1}


def test_section_can_be_failing_and_skipped():
    lines = ["INFO - TEST-START | a", "INFO - TEST-SKIP | a", "INFO - TEST-UNEXPECTED-FAIL | a"]
    hierarchy = build_hierarchy(lines)

    assert hierarchy.failing_sections == {0}
    assert hierarchy.skipped_sections == {0}


@pytest.mark.parametrize("lines", [
    [],
    ["only line"],
    ["a", "b", "c"],
    ["TEST-START 1", "TEST-START 2", "TEST-START 3"],
    ["x", "SUITE-START", "y", "TEST-START", "TEST-SKIP", "z", "TEST-START", "PROCESS-CRASH"],
])
def test_every_line_is_exactly_one_of_root_or_child(lines):
    hierarchy = build_hierarchy(lines)
    roots = set(hierarchy.roots)
    children = set(hierarchy.child_to_parent)

    assert roots.isdisjoint(children)
    assert roots | children == set(range(len(lines)))
    assert len(hierarchy.roots) == len(roots)

    # Two levels only: every parent is a root
    assert set(hierarchy.child_to_parent.values()) <= roots
    assert set(hierarchy.parent_to_children) <= roots
    assert hierarchy.failing_sections <= roots
    assert hierarchy.skipped_sections <= roots


def test_rebuilding_gives_identical_hierarchy(sample_log):
    assert build_hierarchy(sample_log) == build_hierarchy(list(sample_log))
