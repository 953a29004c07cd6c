"""
Line Classifier Module - Semantic categories for test log messages

Handles:
- Mapping a message to exactly one LineCategory
- Ordered rule evaluation (first matching rule wins)
- Display style lookup for each category
"""
import re
from enum import Enum
from typing import Callable, List, Tuple


class LineCategory(Enum):
    """Semantic category of a log message"""
    TEST_INFO = "test-info"
    TEST_START = "test-start"
    TEST_OK = "test-ok"
    TEST_PASS = "test-pass"
    SUITE_START = "suite-start"
    TEST_UNEXPECTED_FAIL = "test-unexpected-fail"
    PROCESS_CRASH = "process-crash"
    TEST_OTHER = "test-other"
    TEST_SUMMARY = "test-summary"
    NONE = "none"

    @property
    def style(self) -> str:
        """Get rich style representation for this category"""
        styles = {
            LineCategory.TEST_INFO: "cyan",
            LineCategory.TEST_START: "bold blue",
            LineCategory.TEST_OK: "green",
            LineCategory.TEST_PASS: "green",
            LineCategory.SUITE_START: "bold magenta",
            LineCategory.TEST_UNEXPECTED_FAIL: "bold red",
            LineCategory.PROCESS_CRASH: "bold white on red",
            LineCategory.TEST_OTHER: "yellow",
            LineCategory.TEST_SUMMARY: "bold",
        }
        return styles.get(self, "")


# "INFO -" prefix or leading whitespace, then a summary counter label
SUMMARY_COUNTER_PATTERN = re.compile(r'((INFO -)|(\s+))(Passed|Failed|Todo):')


def _contains(marker: str) -> Callable[[str], bool]:
    return lambda message: marker in message


# Order matters: "INFO - TEST-" must stay behind the specific TEST-* rules.
CLASSIFICATION_RULES: List[Tuple[Callable[[str], bool], LineCategory]] = [
    (_contains("TEST-INFO"), LineCategory.TEST_INFO),
    (_contains("INFO - TEST-START"), LineCategory.TEST_START),
    (_contains("INFO - TEST-OK"), LineCategory.TEST_OK),
    (_contains("INFO - TEST-PASS"), LineCategory.TEST_PASS),
    (_contains("INFO - SUITE-START"), LineCategory.SUITE_START),
    (_contains("INFO - TEST-UNEXPECTED-FAIL"), LineCategory.TEST_UNEXPECTED_FAIL),
    (_contains("PROCESS-CRASH"), LineCategory.PROCESS_CRASH),
    (_contains("INFO - TEST-"), LineCategory.TEST_OTHER),
    (_contains("Browser Chrome Test Summary"), LineCategory.TEST_SUMMARY),
    (lambda message: SUMMARY_COUNTER_PATTERN.search(message) is not None,
     LineCategory.TEST_SUMMARY),
]


def classify_message(message: str) -> LineCategory:
    """
    Classify a log message

    Args:
        message: Message text, without the bracketed timestamp prefix

    Returns:
        The category of the first matching rule, or LineCategory.NONE
    """
    for matches, category in CLASSIFICATION_RULES:
        if matches(message):
            return category
    return LineCategory.NONE
