"""Session configuration resolved once from the output sink."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tapconsole.domain.ports.output_sink import OutputSinkProtocol


@dataclass(frozen=True, slots=True)
class SessionConfig:
    """Immutable per-session configuration.

    Flags are copied from the sink at session start, so a sink
    reconfigured mid-run does not change a session already in flight.

    Attributes:
        session_display_name: Formatted name ("t/foo.t .. ").
        really_quiet: Print nothing but bailouts.
        quiet: Suppress result lines.
        verbose: Print every result line.
        show_directives: Print results carrying SKIP/TODO.
        show_failures_only: Print failing results only.
        timer_enabled: Append elapsed time to "ok".
        high_resolution_time: Elapsed time with millisecond precision.
        color_enabled: Colorize result lines.
        interactive: Output goes to a terminal. Injected, never probed here.
    """

    session_display_name: str
    really_quiet: bool = False
    quiet: bool = False
    verbose: bool = False
    show_directives: bool = False
    show_failures_only: bool = False
    timer_enabled: bool = False
    high_resolution_time: bool = False
    color_enabled: bool = False
    interactive: bool = False

    @property
    def show_count(self) -> bool:
        """Display the running N/M counter.

        Redirected output would be garbled by the carriage returns,
        and verbose output interleaves with the counter.
        """
        return not self.verbose and self.interactive

    @classmethod
    def resolve(
        cls,
        sink: OutputSinkProtocol,
        name: str,
        interactive: bool | None = None,
    ) -> SessionConfig:
        """Read sink flags once.

        Args:
            sink: Output sink collaborator.
            name: Raw session (test file) name.
            interactive: Terminal capability. None = ask the sink.
        """
        return cls(
            session_display_name=sink.format_name(name),
            really_quiet=sink.really_quiet,
            quiet=sink.quiet,
            verbose=sink.verbose,
            show_directives=sink.show_directives,
            show_failures_only=sink.failures_only,
            timer_enabled=sink.timer_enabled,
            high_resolution_time=sink.high_resolution_time,
            color_enabled=sink.color_enabled,
            interactive=sink.is_interactive if interactive is None else interactive,
        )
