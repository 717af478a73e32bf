"""Reporting session: console output for one test file's run.

Lifecycle: header() → result() per event → close().
Events arrive strictly in order; one session never serves two runs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from tapconsole.application.reporting.classifier import classify
from tapconsole.application.reporting.progress import ProgressTracker
from tapconsole.application.reporting.summary import SummaryBuilder, format_elapsed
from tapconsole.domain.exceptions import SessionClosedError, UnknownArgumentsError
from tapconsole.domain.model.enums import ProgressChannel, SessionPhase
from tapconsole.domain.model.run_statistics import RunStatistics
from tapconsole.domain.model.session_config import SessionConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tapconsole.domain.model.result_event import ResultEvent
    from tapconsole.domain.ports.output_sink import OutputSinkProtocol
    from tapconsole.domain.ports.parser import ParserProtocol

logger = logging.getLogger(__name__)

_ARGUMENTS = frozenset({"name", "formatter", "parser", "interactive"})


class ReportingSession:
    """Console reporter for a single run.

    Owns the mutable session state: the plan string (fixed on the
    first result), the progress tracker, the newline-pending flag and
    the progress channel (chosen once, on the first result).

    Example:
        session = ReportingSession("t/foo.t", sink, parser)
        session.header()
        for event in events:
            session.result(event)
        session.close()
    """

    def __init__(
        self,
        name: str,
        sink: OutputSinkProtocol,
        parser: ParserProtocol,
        *,
        interactive: bool | None = None,
    ) -> None:
        """Initialize session.

        Args:
            name: Test file name.
            sink: Output sink collaborator.
            parser: Parser collaborator for the same run.
            interactive: Output goes to a terminal. None = ask the sink.
                Also decides the progress channel when given.
        """
        self._name = name
        self._sink = sink
        self._parser = parser
        self._interactive = interactive
        self._config = SessionConfig.resolve(sink, name, interactive)
        self._summary = SummaryBuilder(sink, really_quiet=self._config.really_quiet)

        self._tracker = ProgressTracker()
        self._plan = ""
        self._newline_printed = False
        self._channel: ProgressChannel | None = None
        self._phase = SessionPhase.NEW

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> ReportingSession:
        """Build a session from a keyword mapping.

        Accepts `name`, `formatter` (the output sink), `parser` and
        `interactive`.

        Raises:
            UnknownArgumentsError: Mapping holds keys the session does not accept.
        """
        unknown = set(arguments) - _ARGUMENTS
        if unknown:
            raise UnknownArgumentsError(unknown)
        kwargs = dict(arguments)
        if "formatter" in kwargs:
            kwargs["sink"] = kwargs.pop("formatter")
        return cls(**kwargs)

    @property
    def name(self) -> str:
        return self._name

    @property
    def parser(self) -> ParserProtocol:
        return self._parser

    @property
    def config(self) -> SessionConfig:
        return self._config

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def plan(self) -> str:
        """Plan suffix ("/10 "). Empty until the first result."""
        return self._plan

    @property
    def print_step(self) -> int:
        return self._tracker.step

    @property
    def newline_printed(self) -> bool:
        return self._newline_printed

    @property
    def channel(self) -> ProgressChannel | None:
        """Progress channel. None until the first result."""
        return self._channel

    def header(self) -> None:
        """Write the session name."""
        self._check_open()
        if self._phase is SessionPhase.NEW:
            self._phase = SessionPhase.OPENED
        logger.debug("session %s opened (show_count=%s)", self._name, self._config.show_count)
        if not self._config.really_quiet:
            self._sink.write(self._config.session_display_name)

    def result(self, event: ResultEvent) -> None:
        """Handle one event of the stream.

        A bailout is reported, not enforced: the caller stops the stream.
        """
        self._check_open()
        self._phase = SessionPhase.REPORTING
        config = self._config

        if event.is_bailout:
            logger.debug("session %s bailout: %s", self._name, event.explanation)
            self._sink.write_failure(
                f"Bailout called.  Further testing stopped:  {event.explanation}\n"
            )

        if config.really_quiet:
            return

        # plan and channel feed close() too, which only reads them unless really quiet
        if not self._plan:
            self._plan = f"/{self._parser.tests_planned() or 0} "
        if self._channel is None:
            self._channel = self._resolve_channel()
            logger.debug("session %s progress channel: %s", self._name, self._channel.name)

        if config.show_count and event.is_test:
            number = event.number or 0
            if self._tracker.should_display(number):
                shown = "" if event.number is None else event.number
                self._write_progress(f"\r{config.session_display_name}{shown}{self._plan}")

        if self._should_render(event):
            if not self._newline_printed:
                self._sink.write("\n")
                self._newline_printed = True
            self._write_result(event)
            self._sink.write("\n")

    def close(self) -> None:
        """Clear the progress line and write "ok" or the failure summary."""
        self._check_open()
        self._phase = SessionPhase.CLOSED
        config = self._config
        pretty = config.session_display_name

        if config.show_count and not config.really_quiet:
            width = len(f".{pretty}{self._plan}{self._parser.tests_run()}")
            self._write_progress(f"\r{' ' * width}\r{pretty}")

        stats = RunStatistics.from_parser(self._parser)
        logger.debug(
            "session %s closed: %d/%s run, %d failed",
            self._name,
            stats.tests_run,
            stats.tests_planned,
            stats.failed,
        )

        if self._parser.has_problems():
            self._summary.build(stats)
        elif not config.really_quiet:
            time_report = format_elapsed(
                stats,
                timer_enabled=config.timer_enabled,
                high_resolution=config.high_resolution_time,
            )
            self._sink.write(f"ok{time_report}\n")

    def _should_render(self, event: ResultEvent) -> bool:
        """Full result line is written for this event."""
        config = self._config
        if config.quiet:
            return False
        return (
            (config.verbose and not config.show_failures_only)
            or (event.is_test and config.show_failures_only and not event.is_ok)
            or (event.has_directive and config.show_directives)
        )

    def _write_result(self, event: ResultEvent) -> None:
        if not self._config.color_enabled:
            self._sink.write(event.as_string())
            return
        style = classify(event)
        if style.colors:
            self._sink.set_colors(*style.colors)
        self._sink.write(event.as_string())
        self._sink.reset_colors()

    def _resolve_channel(self) -> ProgressChannel:
        """Injected interactivity wins over the sink's own detection."""
        if self._interactive is None:
            return self._sink.progress_channel()
        if self._interactive:
            return ProgressChannel.TERMINAL
        return ProgressChannel.REDIRECTED

    def _write_progress(self, text: str) -> None:
        match self._channel:
            case ProgressChannel.REDIRECTED:
                return
            case _:
                # no result yet: close() falls back to plain writes
                self._sink.write(text)

    def _check_open(self) -> None:
        if self._phase is SessionPhase.CLOSED:
            raise SessionClosedError(self._name)
