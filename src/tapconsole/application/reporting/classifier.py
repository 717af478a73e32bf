"""Result classification: ResultEvent → DisplayStyle."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tapconsole.domain.model.enums import DisplayStyle

if TYPE_CHECKING:
    from tapconsole.domain.model.result_event import ResultEvent


def classify(event: ResultEvent) -> DisplayStyle:
    """Display style of a result line. First match wins.

    A failing test is FAILED even when it also carries SKIP or TODO.
    Non-test lines are always NORMAL.
    """
    if not event.is_test:
        return DisplayStyle.NORMAL
    if not event.is_ok:
        return DisplayStyle.FAILED
    if event.has_skip:
        return DisplayStyle.SKIPPED
    if event.has_todo:
        return DisplayStyle.TODO
    return DisplayStyle.NORMAL
