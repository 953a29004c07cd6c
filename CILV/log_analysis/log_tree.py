"""
Log Tree Module - Queryable structure built once from a loaded log

Handles:
- Bundling lines, section hierarchy and search index
- Timestamp/message extraction for display
- Category and failing/skipped flags per line
- Tree navigation (roots, children, parent, depth)
"""
import logging
import re
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from .classifier import LineCategory, classify_message
from .hierarchy import Hierarchy, build_hierarchy
from .search_index import SearchIndex

logger = logging.getLogger(__name__)

# Pass to get_children() to list the top-level sections
ROOT = -1

HAS_FAILING_CHILD = "has-failing-child"
HAS_SKIPPED_CHILD = "has-skipped-child"

# "   [taskcluster 2020-06-01 11:21:14.550Z] The rest of the message"
LINE_PATTERN = re.compile(
    r'^\s*\[(?P<task>\w+) (?P<time>[\d\w\- :.]+)\] (?P<message>.*)'
)


class DisplayData(BaseModel):
    """What a renderer needs to show one line"""
    time: Optional[str] = None
    message: str
    categories: List[str] = Field(default_factory=list)


def derive_display_data(line: str, index: int, hierarchy: Hierarchy) -> DisplayData:
    """
    Split a line into timestamp and message and attach its categories

    Lines without the bracketed "[task timestamp]" prefix are shown as-is,
    with no time and no categories.

    Args:
        line: Raw log line
        index: Position of the line in the log
        hierarchy: Hierarchy of the log the line belongs to

    Returns:
        DisplayData for the line
    """
    match = LINE_PATTERN.match(line)
    if not match:
        return DisplayData(time=None, message=line, categories=[])

    message = match.group('message')
    categories = []

    category = classify_message(message)
    if category is not LineCategory.NONE:
        categories.append(category.value)
    if index in hierarchy.failing_sections:
        categories.append(HAS_FAILING_CHILD)
    if index in hierarchy.skipped_sections:
        categories.append(HAS_SKIPPED_CHILD)

    return DisplayData(time=match.group('time'), message=message, categories=categories)


class LogTree:
    """
    Immutable view of one loaded log

    Lines are identified only by their index; a new log gets a new LogTree.
    """

    def __init__(self, lines: Sequence[str]):
        """
        Build hierarchy and search index for a log

        Args:
            lines: The full, ordered log lines
        """
        self._lines = tuple(lines)
        self.hierarchy = build_hierarchy(self._lines)
        self.search_index = SearchIndex(self._lines)

        logger.debug(
            "Built log tree: %d lines, %d sections, %d failing, %d skipped",
            len(self._lines),
            len(self.hierarchy.roots),
            len(self.hierarchy.failing_sections),
            len(self.hierarchy.skipped_sections),
        )

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def lines(self) -> Sequence[str]:
        return self._lines

    def line(self, index: int) -> str:
        """Get the raw text of a line"""
        return self._lines[index]

    def search(self, query: str) -> List[int]:
        """Indexes of lines containing the query, ignoring case"""
        return self.search_index.search(query)

    def display_data(self, index: int) -> DisplayData:
        """Display data for the line at index"""
        return derive_display_data(self._lines[index], index, self.hierarchy)

    def get_roots(self) -> List[int]:
        return list(self.hierarchy.roots)

    def get_children(self, index: Optional[int] = ROOT) -> List[int]:
        """
        Get the lines nested directly under a section

        Args:
            index: Section index, or ROOT/None for the top-level sections

        Returns:
            Ordered child indexes (empty for lines without children)
        """
        if index is None or index == ROOT:
            return self.get_roots()
        return list(self.hierarchy.parent_to_children.get(index, []))

    def has_children(self, index: int) -> bool:
        return index in self.hierarchy.parent_to_children

    def get_parent(self, index: int) -> Optional[int]:
        """Owning section of a line, or None for roots"""
        return self.hierarchy.child_to_parent.get(index)

    def get_depth(self, index: int) -> int:
        return 1 if index in self.hierarchy.child_to_parent else 0

    def first_failing_section(self) -> Optional[int]:
        """Smallest section index with a failing child, if any"""
        failing = self.hierarchy.failing_sections
        return min(failing) if failing else None
