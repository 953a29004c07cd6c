"""
Loader Module - One-shot log loading with a stale-response guard

Handles:
- Fetching a log and building its LogTree in one step
- Tracking the newest load request
- Discarding results of superseded loads
"""
import logging
from enum import Enum
from typing import Optional, Union
from pathlib import Path

from .log_reader import LogReader
from .log_tree import LogTree
from .session import LogSession

logger = logging.getLogger(__name__)


class LoadState(Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


def build_log_tree(reader: LogReader, source: Union[str, Path]) -> LogTree:
    """
    Fetch a log and build its tree

    Raises:
        LogFetchError: If the log cannot be fetched
    """
    return LogTree(reader.read_lines(source))


class SessionSlot:
    """
    Holds the current LogTree/LogSession pair of a viewer

    Each begin_load() hands out a token. Only the result carrying the newest
    token is accepted, so a slow earlier load can never replace a newer one.
    """

    def __init__(self):
        self._generation = 0
        self.state = LoadState.IDLE
        self.tree: Optional[LogTree] = None
        self.session: Optional[LogSession] = None
        self.error: Optional[Exception] = None

    def begin_load(self) -> int:
        """
        Start a new load, dropping the current session

        Returns:
            Token to pass to complete_load() or fail_load()
        """
        self._generation += 1
        self.state = LoadState.LOADING
        self.tree = None
        self.session = None
        self.error = None
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    def complete_load(self, token: int, tree: LogTree) -> bool:
        """
        Install a built tree and start a fresh session on it

        Returns:
            False if the load was superseded and the tree discarded
        """
        if not self.is_current(token):
            logger.info(f"Discarding stale log load {token} (current is {self._generation})")
            return False

        self.tree = tree
        self.session = LogSession(tree)
        self.state = LoadState.READY
        return True

    def fail_load(self, token: int, error: Exception) -> bool:
        """
        Record a failed load

        Returns:
            False if the load was superseded and the error ignored
        """
        if not self.is_current(token):
            logger.info(f"Ignoring failure of stale log load {token}: {error}")
            return False

        self.error = error
        self.state = LoadState.FAILED
        return True
