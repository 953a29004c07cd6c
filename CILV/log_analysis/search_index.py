"""
Search Index Module - Case-insensitive substring search over log lines
"""
from typing import List, Sequence


class SearchIndex:
    """Lowercase copy of every line, keyed by line index"""

    def __init__(self, lines: Sequence[str]):
        self._lowered = tuple(line.lower() for line in lines)

    def __len__(self) -> int:
        return len(self._lowered)

    def search(self, query: str) -> List[int]:
        """
        Find lines containing the query, ignoring case

        Plain substring containment, so the query needs no escaping.

        Args:
            query: Search text

        Returns:
            Matching line indexes in ascending order (empty for an empty query)
        """
        if not query:
            return []

        needle = query.lower()
        return [index for index, line in enumerate(self._lowered) if needle in line]
