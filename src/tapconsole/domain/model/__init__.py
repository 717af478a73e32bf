"""Domain model: immutable value objects."""

from tapconsole.domain.model.enums import DisplayStyle, ProgressChannel, SessionPhase
from tapconsole.domain.model.result_event import ResultEvent
from tapconsole.domain.model.run_statistics import RunStatistics
from tapconsole.domain.model.session_config import SessionConfig

__all__ = [
    "DisplayStyle",
    "ProgressChannel",
    "ResultEvent",
    "RunStatistics",
    "SessionConfig",
    "SessionPhase",
]
