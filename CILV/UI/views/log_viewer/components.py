"""
Log Viewer Components Module - UI widgets and panels

Handles:
- Find input with next/previous match keys
- Load status and match counter
- Details of the selected line
"""
from typing import Optional

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Input, Label, Static

from CILV.log_analysis import DisplayData


class FindInput(Input):
    """Search box: Enter jumps to the next match, Shift+Enter to the previous one"""

    BINDINGS = [
        Binding("shift+enter", "find_previous", "Previous match", show=False),
    ]

    class Previous(Message):
        """Posted when the previous match is requested"""

    def action_find_previous(self) -> None:
        self.post_message(self.Previous())


class LogSearchPanel(Horizontal):
    """Search controls for the log viewer"""

    def compose(self) -> ComposeResult:
        """Compose the search panel"""
        yield Label("[bold]Find:[/bold]", classes="control-label")
        yield FindInput(
            placeholder="search",
            id="log-search-input"
        )
        yield Label("", id="match-counter")

    def show_match_position(self, position: Optional[int], total: int) -> None:
        """
        Update the "current/total" match counter

        Args:
            position: 1-based position of the current match, or None
            total: Number of matches
        """
        text = f"{position}/{total}" if position is not None else ""
        try:
            counter = self.query_one("#match-counter", Label)
            counter.update(text)
        except NoMatches:
            pass


class LogStatusPanel(Static):
    """One-line status: loading, load error, or log summary"""

    def show_loading(self, source: str) -> None:
        self.update(f"Loading the log from {escape(source)}...")

    def show_error(self, message: str) -> None:
        self.update(f"[red]Unable to fetch the log.[/red] {escape(message)}")

    def show_summary(self, line_count: int, section_count: int, failing_count: int) -> None:
        """Summarize the loaded log"""
        summary = f"{line_count} lines | {section_count} sections"
        if failing_count:
            summary += f" | [red]{failing_count} failing[/red]"
        self.update(summary)


class LogLineDetailsPanel(Vertical):
    """Detailed view of the selected line"""

    def compose(self) -> ComposeResult:
        """Compose the details panel"""
        yield Label("[bold]Line Details[/bold]", classes="panel-title")
        yield Static(
            "Select a line to view details",
            id="line-details-content",
            markup=False
        )

    def show_line_details(self, index: int, data: DisplayData) -> None:
        """
        Display details for a line

        Args:
            index: Line index (shown 1-based)
            data: DisplayData of the line
        """
        details = (
            f"Line: {index + 1}\n"
            f"Time: {data.time or 'N/A'}\n"
            f"Categories: {', '.join(data.categories) or 'none'}\n"
            f"Message:\n{data.message}"
        )

        try:
            content = self.query_one("#line-details-content", Static)
            content.update(details)
        except NoMatches:
            pass

    def clear_details(self) -> None:
        """Clear the details display"""
        try:
            content = self.query_one("#line-details-content", Static)
            content.update("Select a line to view details")
        except NoMatches:
            pass
