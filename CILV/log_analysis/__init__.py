"""
Log Analysis Package - Structure, classification and search for CI test logs

Package Structure:
- classifier: Semantic category of a message (LineCategory, classify_message)
- hierarchy: Two-level section structure (Hierarchy, build_hierarchy)
- search_index: Case-insensitive substring search (SearchIndex)
- log_tree: Aggregate queried by the UI (LogTree, DisplayData)
- session: Selection/expansion/find state (LogSession)
- log_reader: Fetching raw logs (LogReader, LogFetchError)
- loader: Loading with a stale-response guard (SessionSlot, build_log_tree)
"""

from .classifier import LineCategory, classify_message
from .hierarchy import Hierarchy, build_hierarchy
from .search_index import SearchIndex
from .log_tree import ROOT, DisplayData, LogTree, derive_display_data
from .session import NEXT, PREVIOUS, LogSession
from .log_reader import LogFetchError, LogReader, split_log_text
from .loader import LoadState, SessionSlot, build_log_tree

__all__ = [
    # Classification
    'LineCategory',
    'classify_message',

    # Structure
    'Hierarchy',
    'build_hierarchy',
    'SearchIndex',
    'ROOT',
    'DisplayData',
    'LogTree',
    'derive_display_data',

    # Interaction
    'NEXT',
    'PREVIOUS',
    'LogSession',

    # Loading
    'LogFetchError',
    'LogReader',
    'split_log_text',
    'LoadState',
    'SessionSlot',
    'build_log_tree',
]
