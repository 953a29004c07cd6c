"""
Log Viewer Package - Tree view of a CI test log

This package provides the log viewing interface with:
- Sections (suite and test starts) collapsed under their start line
- Failing and skipped sections marked, first failure selected on open
- Incremental search with next/previous match
- Background loading with stale results discarded

Package Structure:
- view: Main view orchestration (LogViewerView)
- components: UI panels and controls (LogSearchPanel, LogStatusPanel, LogLineDetailsPanel)
- log_table: Log tree table widget (LogTreeTable)
"""

from .view import LogViewerView

from .components import (
    FindInput,
    LogSearchPanel,
    LogStatusPanel,
    LogLineDetailsPanel
)
from .log_table import LogTreeTable

__all__ = [
    # Main view
    'LogViewerView',

    # UI components
    'FindInput',
    'LogSearchPanel',
    'LogStatusPanel',
    'LogLineDetailsPanel',
    'LogTreeTable',
]
