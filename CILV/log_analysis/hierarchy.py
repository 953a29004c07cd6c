"""
Hierarchy Module - Two-level section structure of a test log

Handles:
- Splitting the log into sections (suite/test starts, plus the first line)
- Parent/child index maps instead of linked node objects
- Propagating failure and skip markers to the enclosing section
"""
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Set

# Raw substrings checked directly on the line text
SUITE_START_MARKER = "SUITE-START"
TEST_START_MARKER = "TEST-START"
UNEXPECTED_FAIL_MARKER = "TEST-UNEXPECTED-FAIL"
PROCESS_CRASH_MARKER = "PROCESS-CRASH"
SKIP_MARKER = "TEST-SKIP"

NO_PARENT = -1


@dataclass(frozen=True)
class Hierarchy:
    """Section structure derived once from a full line sequence"""
    roots: List[int] = field(default_factory=list)
    parent_to_children: Dict[int, List[int]] = field(default_factory=dict)
    child_to_parent: Dict[int, int] = field(default_factory=dict)
    failing_sections: Set[int] = field(default_factory=set)
    skipped_sections: Set[int] = field(default_factory=set)


def is_section_start(index: int, line: str) -> bool:
    """Check if a line opens a new section"""
    return index == 0 or SUITE_START_MARKER in line or TEST_START_MARKER in line


def build_hierarchy(lines: Sequence[str]) -> Hierarchy:
    """
    Build the section hierarchy in a single pass

    Every line is either a root (a section start, or a line seen while no
    section is open) or a direct child of the most recent section start.

    Args:
        lines: The full, ordered log lines

    Returns:
        Hierarchy for the lines
    """
    hierarchy = Hierarchy()
    current_parent = NO_PARENT

    for index, line in enumerate(lines):
        new_section = is_section_start(index, line)
        if new_section:
            # A section start is always placed as a root
            current_parent = NO_PARENT

        if current_parent == NO_PARENT:
            hierarchy.roots.append(index)
        else:
            hierarchy.parent_to_children.setdefault(current_parent, []).append(index)
            hierarchy.child_to_parent[index] = current_parent

            if UNEXPECTED_FAIL_MARKER in line or PROCESS_CRASH_MARKER in line:
                hierarchy.failing_sections.add(current_parent)
            if SKIP_MARKER in line:
                hierarchy.skipped_sections.add(current_parent)

        if new_section:
            # Nest the following lines under this section
            current_parent = index

    return hierarchy
