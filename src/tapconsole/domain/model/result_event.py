"""Result event: one parsed line of a TAP stream.

Produced by the parser collaborator. The session only reads it.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResultEvent:
    """Immutable view of one protocol line.

    Attributes:
        number: Test number. None for non-test lines or unnumbered tests.
        is_test: Line is a test result (ok / not ok).
        is_ok: Test passed. A failing TODO test is ok.
        is_actual_ok: Raw "ok" / "not ok" regardless of TODO.
        has_skip: Test carries a SKIP directive.
        has_todo: Test carries a TODO directive.
        is_bailout: Line is a "Bail out!".
        explanation: Directive or bailout explanation text.
        text: Original line rendering.
    """

    number: int | None = None
    is_test: bool = False
    is_ok: bool = True
    is_actual_ok: bool = True
    has_skip: bool = False
    has_todo: bool = False
    is_bailout: bool = False
    explanation: str = ""
    text: str = ""

    @property
    def has_directive(self) -> bool:
        """Test carries a SKIP or TODO directive."""
        return self.has_skip or self.has_todo

    def as_string(self) -> str:
        """String rendering written for verbose output."""
        return self.text

    def __str__(self) -> str:
        return self.text

    @classmethod
    def test(
        cls,
        number: int | None,
        *,
        ok: bool = True,
        description: str = "",
        skip: bool = False,
        todo: bool = False,
        explanation: str = "",
    ) -> ResultEvent:
        """Build a test result with its canonical rendering."""
        parts = ["ok" if ok else "not ok"]
        if number is not None:
            parts.append(str(number))
        if description:
            parts.append(description)
        if skip or todo:
            directive = "SKIP" if skip else "TODO"
            parts.append(f"# {directive} {explanation}".rstrip())
        return cls(
            number=number,
            is_test=True,
            is_ok=ok or todo,
            is_actual_ok=ok,
            has_skip=skip,
            has_todo=todo,
            explanation=explanation,
            text=" ".join(parts),
        )

    @classmethod
    def bailout(cls, explanation: str = "") -> ResultEvent:
        """Build a "Bail out!" line."""
        text = f"Bail out!  {explanation}" if explanation else "Bail out!"
        return cls(is_bailout=True, explanation=explanation, text=text)

    @classmethod
    def plain(cls, text: str) -> ResultEvent:
        """Build a non-test line (plan, comment, unknown)."""
        return cls(text=text)
