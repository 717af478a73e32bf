"""Result tally: ParserProtocol built from already-parsed events.

Counts ResultEvents as they stream by. Line syntax is parsed
upstream; this only keeps the statistics a session asks for.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from tapconsole.domain.model.run_statistics import RunStatistics

if TYPE_CHECKING:
    from tapconsole.domain.model.result_event import ResultEvent


class ResultTally:
    """Running statistics of one test file.

    TODO tests never count as failed; a passing TODO test counts
    as passed and as todo_passed.
    """

    def __init__(self) -> None:
        self._planned: int | None = None
        self._run = 0
        self._passed = 0
        self._failed = 0
        self._skipped = 0
        self._todo_passed = 0
        self._bailed_out = False
        self._parse_errors: list[str] = []
        self._exit: int | None = None
        self._wait: int | None = None
        self._start: float | None = None
        self._end: float | None = None

    def plan(self, count: int) -> None:
        """Record the plan line ("1..count")."""
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if self._planned is not None:
            self.add_parse_error(f"More than one plan found (1..{self._planned}, 1..{count})")
            return
        self._planned = count

    def observe(self, event: ResultEvent) -> None:
        """Count one event."""
        if event.is_bailout:
            self._bailed_out = True
        if not event.is_test:
            return
        self._run += 1
        if event.has_skip:
            self._skipped += 1
        if event.is_ok:
            self._passed += 1
        else:
            self._failed += 1
        if event.has_todo and event.is_actual_ok:
            self._todo_passed += 1

    def add_parse_error(self, message: str) -> None:
        if not message:
            raise ValueError("message must be non-empty string")
        self._parse_errors.append(message)

    def start(self) -> None:
        """Mark the run as started (wall clock)."""
        self._start = time.time()

    def finish(self, exit_code: int = 0, wait_status: int = 0) -> None:
        """Mark the run as finished with the process status."""
        self._end = time.time()
        self._exit = exit_code
        self._wait = wait_status

    def tests_planned(self) -> int | None:
        return self._planned

    def tests_run(self) -> int:
        return self._run

    def passed(self) -> int:
        return self._passed

    def failed(self) -> int:
        return self._failed

    def skipped(self) -> int:
        return self._skipped

    def todo_passed(self) -> int:
        return self._todo_passed

    def exit(self) -> int | None:
        return self._exit

    def wait(self) -> int | None:
        return self._wait

    def start_time(self) -> float | None:
        return self._start

    def end_time(self) -> float | None:
        return self._end

    def has_problems(self) -> bool:
        return self.snapshot().has_problems

    def snapshot(self) -> RunStatistics:
        """Statistics as of now."""
        return RunStatistics(
            tests_planned=self._planned,
            tests_run=self._run,
            passed=self._passed,
            failed=self._failed,
            skipped=self._skipped,
            todo_passed=self._todo_passed,
            exit_code=self._exit,
            wait_status=self._wait,
            start_time=self._start,
            end_time=self._end,
            bailed_out=self._bailed_out,
            parse_errors=tuple(self._parse_errors),
        )
