"""
Log Session Module - Selection, expansion and find state for one opened log

Handles:
- Initial selection on the first failing section
- Selection changes (revealing the selected line)
- Live search with a match cursor
- Next/previous match with wraparound
- Expand/collapse of sections
"""
from typing import List, Optional, Set

from .log_tree import LogTree

NEXT = 1
PREVIOUS = -1


class LogSession:
    """
    Mutable interaction state bound to a single LogTree

    All state changes go through the named transitions below. A new log gets
    a new LogSession; nothing is carried over.
    """

    def __init__(self, tree: LogTree):
        """
        Initialize session state for a freshly built tree

        Args:
            tree: The LogTree this session navigates
        """
        self.tree = tree
        self._selection: Optional[int] = tree.first_failing_section()
        self._expanded: Set[int] = set()
        self._matches: List[int] = []
        self._match_cursor = 0
        self._query = ""

    # Read accessors

    @property
    def selection(self) -> Optional[int]:
        return self._selection

    @property
    def expanded(self) -> Set[int]:
        return set(self._expanded)

    @property
    def matches(self) -> List[int]:
        return list(self._matches)

    @property
    def match_cursor(self) -> int:
        return self._match_cursor

    @property
    def query(self) -> str:
        return self._query

    # Transitions

    def select_node(self, index: int) -> None:
        """
        Select a line and expand its section so it is visible

        Args:
            index: Line index to select

        Raises:
            IndexError: If index is not a line of the log
        """
        self._check_index(index)
        self._selection = index
        self._expand_to(index)

    def set_query(self, query: str) -> None:
        """
        Run a new search and jump to the first match at or after the selection

        When nothing matches, the previous matches and selection are kept.

        Args:
            query: Search text
        """
        self._query = query
        matches = self.tree.search(query)
        if not matches:
            return

        cursor = 0
        if self._selection is not None:
            for position, index in enumerate(matches):
                if index >= self._selection:
                    cursor = position
                    break

        self._matches = matches
        self._match_cursor = cursor
        self._selection = matches[cursor]
        self._expand_to(self._selection)

    def advance_match(self, direction: int = NEXT) -> None:
        """
        Move to the next or previous match, wrapping around at either end

        Args:
            direction: NEXT (+1) or PREVIOUS (-1)

        Raises:
            ValueError: If direction is neither +1 nor -1
        """
        if direction not in (NEXT, PREVIOUS):
            raise ValueError(f"direction must be {NEXT} or {PREVIOUS}, got {direction!r}")
        if not self._matches:
            return

        count = len(self._matches)
        self._match_cursor = (self._match_cursor + direction + count) % count
        self._selection = self._matches[self._match_cursor]
        self._expand_to(self._selection)

    def toggle_expanded(self, index: int) -> bool:
        """
        Expand a collapsed section or collapse an expanded one

        Args:
            index: Section index

        Returns:
            True if the section is expanded afterwards
        """
        self._check_index(index)
        if index in self._expanded:
            self._expanded.discard(index)
            return False
        self._expanded.add(index)
        return True

    # Derived views

    def visible_rows(self) -> List[int]:
        """Line indexes in display order: each root, then its children if expanded"""
        rows = []
        for root in self.tree.get_roots():
            rows.append(root)
            if root in self._expanded:
                rows.extend(self.tree.get_children(root))
        return rows

    def current_match_position(self) -> Optional[int]:
        """1-based position of the current match, or None without matches"""
        if not self._matches:
            return None
        return self._match_cursor + 1

    def _expand_to(self, index: int) -> None:
        parent = self.tree.get_parent(index)
        if parent is not None:
            self._expanded.add(parent)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.tree):
            raise IndexError(f"line index {index} out of range for a log of {len(self.tree)} lines")
