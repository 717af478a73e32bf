"""End-of-run summary for sessions with problems."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tapconsole.domain.model.run_statistics import RunStatistics
    from tapconsole.domain.ports.output_sink import OutputSinkProtocol

logger = logging.getLogger(__name__)


def format_elapsed(
    stats: RunStatistics,
    *,
    timer_enabled: bool,
    high_resolution: bool,
) -> str:
    """Elapsed-time suffix for the "ok" line.

    Returns:
        " 1.234 s" with high resolution, " <seconds> s" right-aligned
        in 8 columns otherwise ("<1" below one second). Empty string
        when the timer is off or a timestamp is missing.
    """
    if not timer_enabled:
        return ""
    elapsed = stats.elapsed
    if elapsed is None:
        return ""
    if high_resolution:
        return f" {elapsed:5.3f} s"
    seconds: int | str = int(elapsed) or "<1"
    return f" {seconds:>8} s"


class SummaryBuilder:
    """Renders the failure summary of one run.

    Tests that were planned but never ran count as failures.
    Statistics are rendered as given, without validation.
    """

    def __init__(self, sink: OutputSinkProtocol, *, really_quiet: bool = False) -> None:
        """Initialize builder.

        Args:
            sink: Output sink to write to.
            really_quiet: Produce no output at all.
        """
        self._sink = sink
        self._really_quiet = really_quiet

    def build(self, stats: RunStatistics) -> None:
        """Write the summary for `stats`."""
        if self._really_quiet:
            return

        total = stats.tests_planned if stats.tests_planned is not None else stats.tests_run
        # no clamping: more tests run than planned lowers the count
        failed = stats.failed + total - stats.tests_run
        logger.debug("summary: failed %d of %d (run %d)", failed, total, stats.tests_run)

        if stats.exit_code:
            wait = stats.wait_status or 0
            self._sink.write_failure(
                f" Dubious, test returned {stats.exit_code} (wstat {wait}, 0x{wait:x})\n"
            )

        if failed == 0:
            self._sink.write_failure(
                f" All {total} subtests passed " if total else " No subtests run "
            )
        else:
            self._sink.write_failure(f" Failed {failed}/{total} subtests ")
            if not total:
                self._sink.write_failure("\nNo tests run!")

        if stats.skipped:
            okay = stats.passed - stats.skipped
            noun = "subtest" if stats.skipped == 1 else "subtests"
            self._sink.write(f"\n\t(less {stats.skipped} skipped {noun}: {okay} okay)")

        if stats.todo_passed:
            noun = "tests" if stats.todo_passed > 1 else "test"
            self._sink.write(f"\n\t({stats.todo_passed} TODO {noun} unexpectedly succeeded)")

        self._sink.write("\n")
