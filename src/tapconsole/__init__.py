"""tapconsole - incremental console reporting for TAP test runs."""

__version__ = "0.1.0"

from tapconsole.application.reporting.session import ReportingSession
from tapconsole.domain.model.result_event import ResultEvent
from tapconsole.domain.model.run_statistics import RunStatistics
from tapconsole.infrastructure.console_sink import RichConsoleSink, SinkConfig
from tapconsole.infrastructure.tally import ResultTally

__all__ = [
    "ReportingSession",
    "ResultEvent",
    "ResultTally",
    "RichConsoleSink",
    "RunStatistics",
    "SinkConfig",
    "__version__",
]
