"""Progress counter throttling."""

from __future__ import annotations


class ProgressTracker:
    """Decides when the "N/M" counter is redrawn.

    The step doubles until it reaches a fifth of the current test
    number, and the counter is drawn only on multiples of the step.
    Early tests redraw often; a run of N tests redraws O(log N) times.
    """

    __slots__ = ("_step",)

    def __init__(self) -> None:
        self._step = 1

    @property
    def step(self) -> int:
        """Current print step. Starts at 1, only ever doubles."""
        return self._step

    def should_display(self, number: int) -> bool:
        """Advance the step for test `number` and report whether to draw it."""
        ceiling = number / 5
        while self._step < ceiling:
            self._step *= 2
        return number % self._step == 0
