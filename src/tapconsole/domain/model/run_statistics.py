"""Run statistics snapshot exposed by the parser collaborator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tapconsole.domain.ports.parser import ParserProtocol


@dataclass(frozen=True, slots=True)
class RunStatistics:
    """Statistics of one test file's run.

    Counts are trusted from the parser collaborator and not validated:
    the reporter renders whatever it is given.

    Attributes:
        tests_planned: Declared plan. None = plan not seen (yet).
        tests_run: Test lines seen.
        passed: Tests that passed (TODO tests included).
        failed: Tests that failed.
        skipped: Tests with a SKIP directive.
        todo_passed: TODO tests that unexpectedly passed.
        exit_code: Process exit status. None = still running.
        wait_status: Raw wait status. None = still running.
        start_time: Run start timestamp in seconds.
        end_time: Run end timestamp in seconds.
        bailed_out: A "Bail out!" line was seen.
        parse_errors: Protocol errors reported by the parser.
    """

    tests_planned: int | None = None
    tests_run: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    todo_passed: int = 0
    exit_code: int | None = None
    wait_status: int | None = None
    start_time: float | None = None
    end_time: float | None = None
    bailed_out: bool = False
    parse_errors: tuple[str, ...] = ()

    @property
    def has_problems(self) -> bool:
        """Run failed, ran off-plan, bailed out or exited abnormally."""
        if self.failed or self.bailed_out or self.parse_errors:
            return True
        if self.tests_planned is not None and self.tests_planned != self.tests_run:
            return True
        return bool(self.exit_code or self.wait_status)

    @property
    def elapsed(self) -> float | None:
        """Seconds between start and end. None if either is unknown."""
        if self.start_time is None or self.end_time is None:
            return None
        return self.end_time - self.start_time

    @classmethod
    def from_parser(cls, parser: ParserProtocol) -> RunStatistics:
        """Snapshot the counters of a parser collaborator."""
        return cls(
            tests_planned=parser.tests_planned(),
            tests_run=parser.tests_run(),
            passed=parser.passed(),
            failed=parser.failed(),
            skipped=parser.skipped(),
            todo_passed=parser.todo_passed(),
            exit_code=parser.exit(),
            wait_status=parser.wait(),
            start_time=parser.start_time(),
            end_time=parser.end_time(),
        )
