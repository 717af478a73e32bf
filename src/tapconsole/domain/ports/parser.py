"""Parser protocol: run statistics of one test file."""

from __future__ import annotations

from typing import Protocol


class ParserProtocol(Protocol):
    """Contract for the parser collaborator.

    The session reads these at any point of the run. Values reflect
    everything parsed so far. Protocol line syntax is the parser's
    business, not the reporter's.

    tapconsole provides ResultTally, which counts already-parsed
    ResultEvents.
    """

    def tests_planned(self) -> int | None: ...

    def tests_run(self) -> int: ...

    def passed(self) -> int: ...

    def failed(self) -> int: ...

    def skipped(self) -> int: ...

    def todo_passed(self) -> int: ...

    def has_problems(self) -> bool: ...

    def exit(self) -> int | None: ...

    def wait(self) -> int | None: ...

    def start_time(self) -> float | None: ...

    def end_time(self) -> float | None: ...
