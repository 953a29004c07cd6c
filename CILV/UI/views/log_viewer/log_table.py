"""
Log Table Module - DataTable for displaying the log tree

Handles:
- One row per visible line (sections, plus children of expanded sections)
- Category colouring and failing/skipped section markers
- Expand markers and child indentation
- Search match highlighting
- Keeping the cursor on the selected line
"""
from typing import List, Optional

from rich.text import Text
from textual.widgets import DataTable

from CILV.log_analysis import LineCategory, LogSession, LogTree
from CILV.log_analysis.log_tree import HAS_FAILING_CHILD, HAS_SKIPPED_CHILD

EXPANDED_MARKER = "▾ "
COLLAPSED_MARKER = "▸ "
LEAF_MARKER = "  "
CHILD_INDENT = "    "

# Category value -> rich style
CATEGORY_STYLES = {category.value: category.style for category in LineCategory}


class LogTreeTable(DataTable):
    """
    DataTable for displaying a LogTree through a LogSession

    Row keys are the line indexes as strings.
    """

    def __init__(self, **kwargs):
        """Initialize the log tree table"""
        super().__init__(**kwargs)
        self.row_indexes: List[int] = []
        self.max_message_length = 300  # Truncate long messages

    def on_mount(self) -> None:
        """Initialize table columns when mounted"""
        self.cursor_type = "row"
        self.zebra_stripes = True

        self.add_columns(
            "#",      # Line number
            "Time",   # Timestamp from the "[task time]" prefix
            "Log"     # Message
        )

    def clear_rows(self) -> None:
        """Remove all rows, keeping the columns"""
        self.clear()
        self.row_indexes = []

    def show_rows(self, tree: LogTree, session: LogSession) -> None:
        """
        Rebuild the rows from the session's visible lines

        Args:
            tree: LogTree being displayed
            session: LogSession holding expansion, matches and selection
        """
        self.clear()
        self.row_indexes = session.visible_rows()
        expanded = session.expanded
        matches = set(session.matches)

        for index in self.row_indexes:
            row_data = self._format_row(tree, index, index in expanded, index in matches, session.query)
            self.add_row(*row_data, key=str(index))

        self.move_to_line(session.selection)

    def move_to_line(self, index: Optional[int]) -> None:
        """
        Put the cursor on a line if it is currently shown

        Args:
            index: Line index, or None to leave the cursor alone
        """
        if index is None or index not in self.row_indexes:
            return

        row = self.row_indexes.index(index)
        self.move_cursor(row=row)

    def _format_row(self, tree: LogTree, index: int, is_expanded: bool,
                    is_match: bool, query: str) -> tuple:
        """
        Format a line for table display

        Returns:
            Tuple of formatted cell values
        """
        data = tree.display_data(index)

        if tree.has_children(index):
            prefix = EXPANDED_MARKER if is_expanded else COLLAPSED_MARKER
        else:
            prefix = LEAF_MARKER
        if tree.get_depth(index):
            prefix = CHILD_INDENT + prefix

        message = data.message
        if len(message) > self.max_message_length:
            message = message[:self.max_message_length - 3] + "..."

        style = CATEGORY_STYLES.get(data.categories[0], "") if data.categories else ""
        message_text = Text(prefix)
        message_text.append(message, style=style)

        if HAS_FAILING_CHILD in data.categories:
            message_text.append(" ✗", style="bold red")
        if HAS_SKIPPED_CHILD in data.categories:
            message_text.append(" (skipped)", style="dim yellow")

        if is_match and query:
            message_text.highlight_words([query], style="black on yellow", case_sensitive=False)

        return (str(index + 1), data.time or "", message_text)
