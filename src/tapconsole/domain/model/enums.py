"""Domain enumerations."""

from enum import Enum, auto


class DisplayStyle(Enum):
    """Display style of a rendered result line.

    Value is the color set handed to the output sink.
    """

    NORMAL = ()
    FAILED = ("red",)
    SKIPPED = ("white", "on_blue")
    TODO = ("white",)

    @property
    def colors(self) -> tuple[str, ...]:
        """Color names for OutputSinkProtocol.set_colors()."""
        return self.value


class ProgressChannel(Enum):
    """How progress lines reach the output sink."""

    TERMINAL = auto()  # carriage returns rewrite the current line
    REDIRECTED = auto()  # file or pipe: progress lines are dropped


class SessionPhase(Enum):
    """Lifecycle phase of a reporting session."""

    NEW = auto()
    OPENED = auto()  # header() called
    REPORTING = auto()  # at least one result()
    CLOSED = auto()
