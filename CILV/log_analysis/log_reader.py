"""
Log Reader Module - Fetching raw log text

Handles:
- Reading logs from local files
- Downloading logs over HTTP(S)
- Splitting the raw text into lines
- Reporting every transport failure as LogFetchError
"""
import logging
from pathlib import Path
from typing import List, Union

import requests

logger = logging.getLogger(__name__)


class LogFetchError(Exception):
    """The log could not be read or downloaded"""

    def __init__(self, source: str, reason: str):
        super().__init__(f"Unable to fetch the log from {source}: {reason}")
        self.source = source
        self.reason = reason


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def split_log_text(text: str) -> List[str]:
    """
    Split raw log text into lines

    Args:
        text: The whole log

    Returns:
        Lines without their newline characters; empty for blank logs
    """
    if not text.strip():
        return []

    lines = text.split("\n")
    # A trailing newline ends the last line, it does not start a new one
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class LogReader:
    """Reads a raw log from a file path or URL in a single attempt"""

    def __init__(self, timeout: float = 30.0, user_agent: str = "cilv-log-viewer"):
        """
        Initialize the reader

        Args:
            timeout: Seconds to wait for an HTTP response
            user_agent: User-Agent header sent with HTTP requests
        """
        self.timeout = timeout
        self.headers = {
            "accept": "text/plain",
            "User-Agent": user_agent,
        }

    def read_text(self, source: Union[str, Path]) -> str:
        """
        Get the raw text of a log

        Args:
            source: Local path or http(s) URL

        Returns:
            The log text

        Raises:
            LogFetchError: If the log cannot be read
        """
        source = str(source)
        logger.info(f"Fetching log from {source}")
        if is_url(source):
            return self._fetch_url(source)
        return self._read_file(Path(source))

    def read_lines(self, source: Union[str, Path]) -> List[str]:
        """Get a log as a list of lines"""
        return split_log_text(self.read_text(source))

    def _fetch_url(self, url: str) -> str:
        try:
            response = requests.get(url, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            logger.error(f"Request timeout for {url}")
            raise LogFetchError(url, "request timed out") from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error: {e}")
            raise LogFetchError(url, f"connection error: {e}") from e
        except requests.RequestException as e:
            logger.error(f"Request error: {e}")
            raise LogFetchError(url, f"error during request: {e}") from e

        return response.text

    def _read_file(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.error(f"Error reading log file {path}: {e}")
            raise LogFetchError(str(path), e.strerror or str(e)) from e
