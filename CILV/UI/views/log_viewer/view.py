"""
Log Viewer View Module - Main UI orchestration

Handles:
- Main view composition and layout
- Background loading of the log (one fetch per load, no retries)
- Discarding results of superseded loads
- Live search and next/previous match
- Selection and expand/collapse from the table
"""
import logging
from pathlib import Path
from typing import Optional, Union

from textual import on, work
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import DataTable, Input, Label

from CILV.log_analysis import (
    NEXT,
    PREVIOUS,
    LoadState,
    LogFetchError,
    LogReader,
    LogSession,
    LogTree,
    SessionSlot,
    build_log_tree,
)

from .components import FindInput, LogLineDetailsPanel, LogSearchPanel, LogStatusPanel
from .log_table import LogTreeTable

logger = logging.getLogger(__name__)


class LogViewerView(Vertical):
    """
    Log viewer for a single CI test log

    Features:
    - Sections collapsed under their suite/test start line
    - Opens on the first failing section
    - Incremental search with wraparound match navigation
    """

    def __init__(self, source: Union[str, Path], reader: Optional[LogReader] = None, **kwargs):
        """
        Initialize the log viewer

        Args:
            source: Path or URL of the log to show
            reader: LogReader used to fetch the log
        """
        super().__init__(**kwargs)
        self.source = str(source)
        self.reader = reader or LogReader()
        self.slot = SessionSlot()

    @property
    def tree(self) -> Optional[LogTree]:
        return self.slot.tree

    @property
    def session(self) -> Optional[LogSession]:
        return self.slot.session

    def compose(self) -> ComposeResult:
        """Compose the log viewer layout"""
        with Container(id="log-viewer-controls"):
            yield LogSearchPanel(id="log-search-panel")
            yield LogStatusPanel("", id="log-status-panel")

        # Main content area - split pane
        with Horizontal(id="log-viewer-content"):
            # Log tree (70%)
            with Vertical(classes="main-panel", id="log-main-panel"):
                yield Label("[bold]Log[/bold]", classes="section-title")
                yield LogTreeTable(id="log-tree-table")

            # Right sidebar (30%)
            with Vertical(classes="right-panel", id="log-sidebar"):
                yield LogLineDetailsPanel(id="log-line-details-panel")

    def on_mount(self) -> None:
        """Start loading the log when mounted"""
        self.load_log(self.source)

    def load_log(self, source: Union[str, Path]) -> None:
        """
        Load a log, replacing the current one

        Args:
            source: Path or URL of the log
        """
        self.source = str(source)
        token = self.slot.begin_load()

        self.query_one("#log-tree-table", LogTreeTable).clear_rows()
        self.query_one("#log-line-details-panel", LogLineDetailsPanel).clear_details()
        self.query_one("#log-search-input", FindInput).value = ""
        self.query_one("#log-search-panel", LogSearchPanel).show_match_position(None, 0)
        self.query_one("#log-status-panel", LogStatusPanel).show_loading(self.source)

        self._load_entries(self.source, token)

    def reload(self) -> None:
        """Fetch the current log again"""
        self.load_log(self.source)

    @work(exclusive=True, thread=True)
    def _load_entries(self, source: str, token: int) -> None:
        """
        Fetch the log and build its tree in a background thread

        Args:
            source: Path or URL of the log
            token: SessionSlot token of this load
        """
        try:
            tree = build_log_tree(self.reader, source)
        except LogFetchError as e:
            logger.error(f"Loading {source} failed: {e.reason}")
            self.app.call_from_thread(self._on_load_failed, token, e)
            return

        self.app.call_from_thread(self._on_load_complete, token, tree)

    def _on_load_complete(self, token: int, tree: LogTree) -> None:
        """Install a loaded tree (main thread)"""
        if not self.slot.complete_load(token, tree):
            return

        hierarchy = tree.hierarchy
        logger.info(
            f"Loaded {self.source}: {len(tree)} lines, {len(hierarchy.roots)} sections, "
            f"{len(hierarchy.failing_sections)} failing"
        )
        status = self.query_one("#log-status-panel", LogStatusPanel)
        status.show_summary(len(tree), len(hierarchy.roots), len(hierarchy.failing_sections))
        self._refresh_view()

    def _on_load_failed(self, token: int, error: LogFetchError) -> None:
        """Show a load failure (main thread)"""
        if not self.slot.fail_load(token, error):
            return

        status = self.query_one("#log-status-panel", LogStatusPanel)
        status.show_error(error.reason)

    def _refresh_view(self) -> None:
        """Redraw rows, match counter and details from the session"""
        session = self.session
        if session is None:
            return

        table = self.query_one("#log-tree-table", LogTreeTable)
        table.show_rows(session.tree, session)

        search_panel = self.query_one("#log-search-panel", LogSearchPanel)
        search_panel.show_match_position(session.current_match_position(), len(session.matches))

        self._show_selection_details()

    def _show_selection_details(self) -> None:
        session = self.session
        details = self.query_one("#log-line-details-panel", LogLineDetailsPanel)
        if session is None or session.selection is None:
            details.clear_details()
            return
        details.show_line_details(session.selection, session.tree.display_data(session.selection))

    # Search

    def find_next(self) -> None:
        self._advance_match(NEXT)

    def find_previous(self) -> None:
        self._advance_match(PREVIOUS)

    def _advance_match(self, direction: int) -> None:
        if self.slot.state is not LoadState.READY:
            return
        self.session.advance_match(direction)
        self._refresh_view()

    @on(Input.Changed, "#log-search-input")
    def handle_search_changed(self, event: Input.Changed) -> None:
        """Search as the query is typed"""
        if self.slot.state is not LoadState.READY:
            return
        self.session.set_query(event.value)
        self._refresh_view()

    @on(Input.Submitted, "#log-search-input")
    def handle_search_submitted(self, event: Input.Submitted) -> None:
        """Enter in the search box jumps to the next match"""
        self.find_next()

    @on(FindInput.Previous)
    def handle_find_previous(self) -> None:
        """Shift+Enter in the search box jumps to the previous match"""
        self.find_previous()

    def focus_search(self) -> None:
        search_input = self.query_one("#log-search-input", FindInput)
        search_input.focus()

    # Table interaction

    @on(DataTable.RowHighlighted, "#log-tree-table")
    def handle_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """Moving the table cursor selects the line under it"""
        table = event.data_table
        # Only user moves on the focused table count; rebuilds emit stale highlights
        if not table.has_focus or event.cursor_row != table.cursor_row:
            return
        if self.slot.state is not LoadState.READY or event.row_key.value is None:
            return

        index = int(event.row_key.value)
        if index == self.session.selection:
            return

        expanded_before = self.session.expanded
        self.session.select_node(index)
        if self.session.expanded != expanded_before:
            self._refresh_view()
        else:
            self._show_selection_details()

    @on(DataTable.RowSelected, "#log-tree-table")
    def handle_row_selected(self, event: DataTable.RowSelected) -> None:
        """Enter or click on a section row expands or collapses it"""
        if self.slot.state is not LoadState.READY or event.row_key.value is None:
            return

        index = int(event.row_key.value)
        if not self.session.tree.has_children(index):
            return

        self.session.select_node(index)
        self.session.toggle_expanded(index)
        self._refresh_view()
