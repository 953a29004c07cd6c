import pytest
import requests
from unittest.mock import MagicMock, patch

from CILV.log_analysis.log_reader import LogFetchError, LogReader, is_url, split_log_text


class TestSplitLogText:
    """Raw text to lines"""

    def test_empty_text(self):
        assert split_log_text("") == []

    def test_whitespace_only_text(self):
        assert split_log_text("  \n\t\n\n") == []

    def test_trailing_newline_does_not_add_a_line(self):
        assert split_log_text("a\nb\n") == ["a", "b"]

    def test_without_trailing_newline(self):
        assert split_log_text("a\nb") == ["a", "b"]

    def test_blank_lines_inside_are_kept(self):
        assert split_log_text("a\n\n b \n") == ["a", "", " b "]

    def test_crlf(self):
        assert split_log_text("a\r\nb\r\n") == ["a", "b"]


def test_is_url():
    assert is_url("https://example.com/log.txt")
    assert is_url("http://localhost:8000/log")
    assert not is_url("/tmp/live_backing.log")
    assert not is_url("ftp://example.com/log")


class TestReadFile:
    """Local files"""

    def test_read_lines(self, sample_log_file, sample_log):
        reader = LogReader()
        assert reader.read_lines(sample_log_file) == sample_log

    def test_read_text_accepts_str_path(self, tmp_path):
        path = tmp_path / "log.txt"
        path.write_text("one\ntwo\n", encoding="utf-8")

        assert LogReader().read_text(str(path)) == "one\ntwo\n"

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.log"

        with pytest.raises(LogFetchError) as excinfo:
            LogReader().read_text(missing)

        assert excinfo.value.source == str(missing)
        assert isinstance(excinfo.value.__cause__, OSError)
        assert "Unable to fetch the log" in str(excinfo.value)


@pytest.fixture
def mock_get():
    with patch('CILV.log_analysis.log_reader.requests.get') as mock_func:
        yield mock_func


class TestFetchUrl:
    """HTTP downloads"""

    URL = "https://firefox-ci-tc.services.mozilla.com/api/queue/v1/task/abc/runs/0/artifacts/public/logs/live_backing.log"

    def test_successful_fetch(self, mock_get):
        response = MagicMock()
        response.text = "line one\nline two\n"
        mock_get.return_value = response

        reader = LogReader(timeout=5, user_agent="tests")
        lines = reader.read_lines(self.URL)

        assert lines == ["line one", "line two"]
        mock_get.assert_called_once_with(self.URL, headers=reader.headers, timeout=5)
        assert reader.headers["User-Agent"] == "tests"
        response.raise_for_status.assert_called_once()

    def test_http_error_status(self, mock_get):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
        mock_get.return_value = response

        with pytest.raises(LogFetchError) as excinfo:
            LogReader().read_text(self.URL)

        assert "404" in excinfo.value.reason
        assert isinstance(excinfo.value.__cause__, requests.HTTPError)

    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(LogFetchError) as excinfo:
            LogReader().read_text(self.URL)

        assert excinfo.value.reason == "request timed out"
        assert excinfo.value.source == self.URL

    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(LogFetchError) as excinfo:
            LogReader().read_text(self.URL)

        assert excinfo.value.reason.startswith("connection error")

    def test_no_retry(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(LogFetchError):
            LogReader().read_text(self.URL)

        assert mock_get.call_count == 1
