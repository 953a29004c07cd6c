import pytest

# Small log exercising every section/marker kind.
#   roots: 0, 1, 4, 6, 8
#   children: 1 -> [2, 3], 4 -> [5], 6 -> [7], 8 -> [9]
#   failing: {4, 8}, skipped: {6}
SAMPLE_LOG = [
    "[task 2020-06-01T11:21:10.000Z] 11:21:10     INFO - SUITE-START | Running 4 tests",
    "[task 2020-06-01T11:21:11.000Z] 11:21:11     INFO - TEST-START | test_a.html",
    "[task 2020-06-01T11:21:12.000Z] needle one",
    "[task 2020-06-01T11:21:13.000Z] 11:21:13     INFO - TEST-OK | test_a.html | took 5ms",
    "[task 2020-06-01T11:21:14.000Z] 11:21:14     INFO - TEST-START | test_b.html",
    "[task 2020-06-01T11:21:15.000Z] 11:21:15     INFO - TEST-UNEXPECTED-FAIL | test_b.html | Needle two",
    "[task 2020-06-01T11:21:16.000Z] 11:21:16     INFO - TEST-START | test_c.html",
    "[task 2020-06-01T11:21:17.000Z] 11:21:17     INFO - TEST-SKIP | test_c.html",
    "[task 2020-06-01T11:21:18.000Z] 11:21:18     INFO - TEST-START | test_d.html",
    "[task 2020-06-01T11:21:19.000Z] PROCESS-CRASH | test_d.html | NEEDLE three",
]


@pytest.fixture
def sample_log():
    return list(SAMPLE_LOG)


@pytest.fixture
def sample_log_file(tmp_path):
    path = tmp_path / "live_backing.log"
    path.write_text("\n".join(SAMPLE_LOG) + "\n", encoding="utf-8")
    return path
