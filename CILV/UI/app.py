"""
CILV Main Application - CI test log viewer using Textual
"""
from pathlib import Path
from typing import Optional, Union

from textual.app import App, ComposeResult
from textual.widgets import Footer, Header

from CILV.log_analysis import LogReader
from CILV.UI.views.log_viewer import LogViewerView


class CILVApp(App):
    """CI Log Viewer - Terminal UI Application"""

    TITLE = "CILV - CI Log Viewer"

    CSS = """
    #log-viewer-controls {
        height: auto;
    }
    #log-search-panel {
        height: auto;
    }
    #log-search-input {
        width: 1fr;
    }
    #match-counter {
        width: 12;
        padding: 1;
    }
    #log-status-panel {
        height: 1;
        padding: 0 1;
    }
    .main-panel {
        width: 70%;
    }
    .right-panel {
        width: 30%;
        border-left: solid $primary;
        padding: 0 1;
    }
    .control-label {
        padding: 1;
    }
    """

    BINDINGS = [
        ("q", "quit", "Quit"),
        ("ctrl+f", "focus_search", "Find"),
        ("f3", "find_next", "Next match"),
        ("shift+f3", "find_previous", "Previous match"),
        ("r", "reload", "Reload"),
    ]

    def __init__(self, source: Union[str, Path], reader: Optional[LogReader] = None, **kwargs):
        """
        Initialize the application

        Args:
            source: Path or URL of the log to show
            reader: LogReader used to fetch the log
        """
        super().__init__(**kwargs)
        self.source = source
        self.reader = reader

    def compose(self) -> ComposeResult:
        """Compose the main UI layout"""
        yield Header(show_clock=True)
        yield LogViewerView(self.source, self.reader, id="log-viewer-view")
        yield Footer()

    @property
    def log_view(self) -> LogViewerView:
        return self.query_one("#log-viewer-view", LogViewerView)

    def action_focus_search(self) -> None:
        """Move focus to the search box"""
        self.log_view.focus_search()

    def action_find_next(self) -> None:
        self.log_view.find_next()

    def action_find_previous(self) -> None:
        self.log_view.find_previous()

    def action_reload(self) -> None:
        """Fetch the log again"""
        self.log_view.reload()


def run_app(source: Union[str, Path], reader: Optional[LogReader] = None) -> None:
    """Entry point to run the CILV application"""
    app = CILVApp(source, reader)
    app.run()
