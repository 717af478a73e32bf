"""Tests for application/reporting/summary.py."""

from tapconsole.application.reporting.summary import SummaryBuilder, format_elapsed
from tests.factories import FAILURE, NORMAL, RecordingSink, make_statistics


def build(**stats: object) -> RecordingSink:
    """Run SummaryBuilder on a fresh sink."""
    sink = RecordingSink()
    SummaryBuilder(sink).build(make_statistics(**stats))
    return sink


class TestSummaryTotals:
    """Tests for the subtest totals line."""

    def test_all_passed(self) -> None:
        sink = build(tests_planned=10, tests_run=10, passed=10, exit_code=1, wait_status=256)
        assert " All 10 subtests passed " in sink.text
        assert sink.text.count("subtests passed") == 1

    def test_missing_tests_count_as_failed(self) -> None:
        sink = build(tests_planned=5, tests_run=3, passed=2, failed=1)
        assert sink.text == " Failed 3/5 subtests \n"

    def test_no_plan_no_tests(self) -> None:
        sink = build(tests_planned=None, tests_run=0, failed=0)
        assert sink.text == " No subtests run \n"

    def test_total_from_tests_run_without_plan(self) -> None:
        sink = build(tests_run=4, passed=3, failed=1)
        assert " Failed 1/4 subtests " in sink.text

    def test_zero_plan_with_failures(self) -> None:
        sink = build(tests_planned=0, tests_run=0, failed=2)
        assert sink.text == " Failed 2/0 subtests \nNo tests run!\n"

    def test_more_run_than_planned_not_clamped(self) -> None:
        """failed_total may go negative when more tests ran than planned."""
        sink = build(tests_planned=2, tests_run=3, passed=3)
        assert " Failed -1/2 subtests " in sink.text

    def test_totals_on_failure_channel(self) -> None:
        sink = build(tests_planned=5, tests_run=3, failed=1)
        assert sink.calls[0] == (FAILURE, " Failed 3/5 subtests ", ())
        assert sink.calls[-1] == (NORMAL, "\n", ())


class TestSummaryDubious:
    """Tests for abnormal exit reporting."""

    def test_dubious_exit_first(self) -> None:
        sink = build(tests_planned=3, tests_run=3, passed=2, failed=1, exit_code=1, wait_status=256)
        assert sink.calls[0] == (
            FAILURE,
            " Dubious, test returned 1 (wstat 256, 0x100)\n",
            (),
        )
        assert sink.calls[1] == (FAILURE, " Failed 1/3 subtests ", ())

    def test_zero_exit_not_dubious(self) -> None:
        sink = build(tests_planned=3, tests_run=3, failed=1, exit_code=0, wait_status=0)
        assert "Dubious" not in sink.text

    def test_unknown_wait_rendered_as_zero(self) -> None:
        sink = build(tests_planned=1, tests_run=1, failed=1, exit_code=255)
        assert " Dubious, test returned 255 (wstat 0, 0x0)\n" in sink.text


class TestSummaryNotes:
    """Tests for skipped and TODO notes."""

    def test_one_skipped(self) -> None:
        sink = build(tests_planned=4, tests_run=4, passed=3, failed=1, skipped=1)
        assert (NORMAL, "\n\t(less 1 skipped subtest: 2 okay)", ()) in sink.calls

    def test_several_skipped(self) -> None:
        sink = build(tests_planned=6, tests_run=6, passed=5, failed=1, skipped=2)
        assert "\n\t(less 2 skipped subtests: 3 okay)" in sink.text

    def test_one_todo_passed(self) -> None:
        sink = build(tests_planned=2, tests_run=2, passed=1, failed=1, todo_passed=1)
        assert "\n\t(1 TODO test unexpectedly succeeded)" in sink.text

    def test_several_todo_passed(self) -> None:
        sink = build(tests_planned=3, tests_run=3, passed=2, failed=1, todo_passed=2)
        assert "\n\t(2 TODO tests unexpectedly succeeded)" in sink.text

    def test_full_order(self) -> None:
        sink = build(
            tests_planned=6,
            tests_run=5,
            passed=4,
            failed=1,
            skipped=1,
            todo_passed=1,
            exit_code=2,
            wait_status=512,
        )
        assert sink.text == (
            " Dubious, test returned 2 (wstat 512, 0x200)\n"
            " Failed 2/6 subtests "
            "\n\t(less 1 skipped subtest: 3 okay)"
            "\n\t(1 TODO test unexpectedly succeeded)"
            "\n"
        )


class TestSummaryReallyQuiet:
    """Tests for really quiet mode."""

    def test_no_output(self) -> None:
        sink = RecordingSink()
        SummaryBuilder(sink, really_quiet=True).build(
            make_statistics(tests_planned=5, tests_run=1, failed=1, exit_code=1, wait_status=256)
        )
        assert sink.calls == []


class TestFormatElapsed:
    """Tests for format_elapsed()."""

    def test_high_resolution(self) -> None:
        stats = make_statistics(start_time=0.0, end_time=1.234)
        assert format_elapsed(stats, timer_enabled=True, high_resolution=True) == " 1.234 s"

    def test_whole_seconds_below_one(self) -> None:
        stats = make_statistics(start_time=5.0, end_time=5.0)
        assert format_elapsed(stats, timer_enabled=True, high_resolution=False) == "       <1 s"

    def test_whole_seconds(self) -> None:
        stats = make_statistics(start_time=0.0, end_time=12.7)
        assert format_elapsed(stats, timer_enabled=True, high_resolution=False) == "       12 s"

    def test_timer_disabled(self) -> None:
        stats = make_statistics(start_time=0.0, end_time=1.0)
        assert format_elapsed(stats, timer_enabled=False, high_resolution=True) == ""

    def test_missing_timestamp(self) -> None:
        stats = make_statistics(start_time=0.0)
        assert format_elapsed(stats, timer_enabled=True, high_resolution=True) == ""
