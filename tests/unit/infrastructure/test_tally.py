"""Tests for infrastructure/tally.py."""

import pytest

from tapconsole.domain.model.result_event import ResultEvent
from tapconsole.domain.model.run_statistics import RunStatistics
from tapconsole.infrastructure.tally import ResultTally
from tests.factories import make_test_event


def tally_of(*events: ResultEvent, planned: int | None = None) -> ResultTally:
    tally = ResultTally()
    if planned is not None:
        tally.plan(planned)
    for event in events:
        tally.observe(event)
    return tally


class TestResultTallyCounts:
    """Tests for counting observed events."""

    def test_empty(self) -> None:
        assert ResultTally().snapshot() == RunStatistics()

    def test_pass_and_fail(self) -> None:
        tally = tally_of(make_test_event(1), make_test_event(2, ok=False), planned=2)
        assert tally.tests_planned() == 2
        assert tally.tests_run() == 2
        assert tally.passed() == 1
        assert tally.failed() == 1

    def test_skip_counts_as_passed(self) -> None:
        tally = tally_of(make_test_event(1, skip=True))
        assert tally.skipped() == 1
        assert tally.passed() == 1

    def test_failing_todo_is_passed(self) -> None:
        tally = tally_of(make_test_event(1, ok=False, todo=True))
        assert tally.passed() == 1
        assert tally.failed() == 0
        assert tally.todo_passed() == 0

    def test_passing_todo_is_unexpected(self) -> None:
        tally = tally_of(make_test_event(1, todo=True))
        assert tally.todo_passed() == 1

    def test_non_test_lines_ignored(self) -> None:
        tally = tally_of(ResultEvent.plain("# comment"))
        assert tally.tests_run() == 0


class TestResultTallyProblems:
    """Tests for has_problems()."""

    def test_clean(self) -> None:
        tally = tally_of(make_test_event(1), planned=1)
        tally.finish()
        assert tally.has_problems() is False

    def test_bailout(self) -> None:
        tally = tally_of(make_test_event(1), ResultEvent.bailout("stop"), planned=1)
        assert tally.has_problems() is True
        assert tally.snapshot().bailed_out is True

    def test_second_plan_is_parse_error(self) -> None:
        tally = tally_of(make_test_event(1), planned=1)
        tally.plan(3)
        assert tally.tests_planned() == 1
        assert tally.snapshot().parse_errors == ("More than one plan found (1..1, 1..3)",)
        assert tally.has_problems() is True

    def test_negative_plan(self) -> None:
        with pytest.raises(ValueError, match="count"):
            ResultTally().plan(-1)

    def test_empty_parse_error(self) -> None:
        with pytest.raises(ValueError, match="message"):
            ResultTally().add_parse_error("")

    def test_exit_status(self) -> None:
        tally = tally_of(make_test_event(1), planned=1)
        tally.finish(exit_code=1, wait_status=256)
        assert tally.exit() == 1
        assert tally.wait() == 256
        assert tally.has_problems() is True


class TestResultTallyTiming:
    """Tests for start()/finish() timestamps."""

    def test_unstarted(self) -> None:
        tally = ResultTally()
        assert tally.start_time() is None
        assert tally.end_time() is None

    def test_start_and_finish(self) -> None:
        tally = ResultTally()
        tally.start()
        tally.finish()
        start, end = tally.start_time(), tally.end_time()
        assert start is not None
        assert end is not None
        assert end >= start
