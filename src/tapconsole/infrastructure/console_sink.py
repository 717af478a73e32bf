"""Rich output sink: OutputSinkProtocol over a rich Console."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console, ConsoleOptions, RenderResult
from rich.segment import Segment
from rich.style import Style

from tapconsole.domain.model.enums import ProgressChannel

VERBOSE = 1
NORMAL = 0
QUIET = -1
REALLY_QUIET = -2


@dataclass(frozen=True, slots=True)
class SinkConfig:
    """Configuration for RichConsoleSink.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        verbosity: 1 verbose, 0 normal, -1 quiet, -2 really quiet.
        directives: Print results carrying SKIP/TODO.
        failures: Print failing results only.
        timer: Append elapsed time to "ok".
        color: Colorize output when the console supports it.
        high_resolution_time: Elapsed time with millisecond precision.
        name_width: Longest test file name of the run. Names are padded to it.
    """

    verbosity: int = NORMAL
    directives: bool = False
    failures: bool = False
    timer: bool = False
    color: bool = False
    high_resolution_time: bool = True
    name_width: int = 0

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not REALLY_QUIET <= self.verbosity <= VERBOSE:
            raise ValueError(
                f"verbosity must be in [{REALLY_QUIET}, {VERBOSE}], got {self.verbosity}"
            )
        if self.name_width < 0:
            raise ValueError(f"name_width must be >= 0, got {self.name_width}")


class _Raw:
    """Renderable emitting text as a single segment, untouched."""

    __slots__ = ("style", "text")

    def __init__(self, text: str, style: Style | None) -> None:
        self.text = text
        self.style = style

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        yield Segment(self.text, self.style)


def _style_for(names: tuple[str, ...]) -> Style | None:
    """Translate ANSI color names ("white", "on_blue") into a rich Style."""
    words = [name.replace("_", " ") for name in names if name != "reset"]
    if not words:
        return None
    return Style.parse(" ".join(words))


class RichConsoleSink:
    """Output sink writing through rich.

    Text bypasses rich's Text handling, which would strip carriage
    returns and expand tabs. Colors are still rendered by rich.
    Failure output goes to `failure_console` (default: the main console)
    in red, with the trailing newline written after the color reset.
    """

    def __init__(
        self,
        console: Console | None = None,
        config: SinkConfig | None = None,
        *,
        failure_console: Console | None = None,
    ) -> None:
        """Initialize sink.

        Args:
            console: Destination console. Default: rich Console on stdout.
            config: Sink configuration. Uses defaults if None.
            failure_console: Console for failure output. Default: `console`.
        """
        self._console = console if console is not None else Console(highlight=False)
        self._failure_console = failure_console if failure_console is not None else self._console
        self._config = config or SinkConfig()
        self._style: Style | None = None

    @property
    def config(self) -> SinkConfig:
        return self._config

    @property
    def console(self) -> Console:
        return self._console

    @property
    def quiet(self) -> bool:
        return self._config.verbosity <= QUIET

    @property
    def really_quiet(self) -> bool:
        return self._config.verbosity <= REALLY_QUIET

    @property
    def verbose(self) -> bool:
        return self._config.verbosity >= VERBOSE

    @property
    def show_directives(self) -> bool:
        return self._config.directives

    @property
    def failures_only(self) -> bool:
        return self._config.failures

    @property
    def timer_enabled(self) -> bool:
        return self._config.timer

    @property
    def high_resolution_time(self) -> bool:
        return self._config.high_resolution_time

    @property
    def color_enabled(self) -> bool:
        return self._config.color and self._console.color_system is not None

    @property
    def is_interactive(self) -> bool:
        return self._console.is_terminal

    def progress_channel(self) -> ProgressChannel:
        if self._console.is_terminal:
            return ProgressChannel.TERMINAL
        return ProgressChannel.REDIRECTED

    def format_name(self, name: str) -> str:
        """Pad name with dots: "t/foo.t .. " for the longest name."""
        dots = "." * max(self._config.name_width + 2 - len(name), 1)
        return f"{name} {dots} "

    def set_colors(self, *names: str) -> None:
        self._style = _style_for(names)

    def reset_colors(self) -> None:
        self._style = None

    def write(self, text: str) -> None:
        self._emit(self._console, text, self._style)

    def write_failure(self, text: str) -> None:
        """Write failure text in red, newline after the reset."""
        body, newline, _ = text.rpartition("\n") if text.endswith("\n") else (text, "", "")
        style = Style.parse("red") if self.color_enabled else None
        self._emit(self._failure_console, body, style)
        if newline:
            self._emit(self._failure_console, newline, None)

    @staticmethod
    def _emit(console: Console, text: str, style: Style | None) -> None:
        if text:
            console.print(_Raw(text, style), end="", crop=False)
