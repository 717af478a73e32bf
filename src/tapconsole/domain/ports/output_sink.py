"""Output sink protocol: where the session writes.

NOT rich-specific. RichConsoleSink is the built-in adapter; tests
use a recording sink with the same interface.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from tapconsole.domain.model.enums import ProgressChannel


class OutputSinkProtocol(Protocol):
    """Contract for output sinks.

    Writes are assumed to succeed. I/O errors propagate to the caller.

    Attributes:
        quiet: Suppress result lines.
        really_quiet: Suppress everything but bailouts.
        verbose: Print every result line.
        show_directives: Print results carrying SKIP/TODO.
        failures_only: Print failing results only.
        timer_enabled: Report elapsed time.
        high_resolution_time: Elapsed time has sub-second precision.
        color_enabled: Colors are supported and requested.
        is_interactive: Destination is a terminal.
    """

    quiet: bool
    really_quiet: bool
    verbose: bool
    show_directives: bool
    failures_only: bool
    timer_enabled: bool
    high_resolution_time: bool
    color_enabled: bool
    is_interactive: bool

    def write(self, text: str) -> None:
        """Write text as is (no newline added)."""
        ...

    def write_failure(self, text: str) -> None:
        """Write failure-oriented text on the failure channel."""
        ...

    def set_colors(self, *names: str) -> None:
        """Apply colors ("red", "white", "on_blue") to following writes."""
        ...

    def reset_colors(self) -> None:
        """Drop colors set by set_colors()."""
        ...

    def format_name(self, name: str) -> str:
        """Pad a test file name for display ("t/foo.t .. ")."""
        ...

    def progress_channel(self) -> ProgressChannel:
        """Channel progress lines should use for this destination."""
        ...
