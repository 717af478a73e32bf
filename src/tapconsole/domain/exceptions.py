"""Domain exceptions: all public errors of tapconsole.

Bailouts are NOT exceptions. A bailout is reported by the session
and the embedding harness decides whether to stop the stream.
"""

from __future__ import annotations

from collections.abc import Iterable


class TapConsoleError(Exception):
    """Base for all tapconsole error exceptions.

    Allows: except TapConsoleError to catch all library errors.
    """


class UnknownArgumentsError(TapConsoleError, TypeError):
    """Session constructed with arguments it does not accept.

    Inherits TypeError for semantic correctness (bad call signature).

    Attributes:
        names: Offending argument names, sorted.
    """

    def __init__(self, names: Iterable[str]) -> None:
        """Initialize with offending argument names."""
        self.names = tuple(sorted(names))
        if not self.names:
            raise ValueError("UnknownArgumentsError requires at least one name")
        super().__init__(f"Unknown arguments to ReportingSession ({' '.join(self.names)})")


class SessionClosedError(TapConsoleError, RuntimeError):
    """Session already closed, cannot accept more calls.

    Inherits RuntimeError for semantic correctness (invalid state).
    """

    def __init__(self, name: str) -> None:
        """Initialize with session name."""
        self.name = name
        super().__init__(f"Session {name!r} already closed")
