"""Console reporting for one test file's run.

ReportingSession orchestrates classify(), ProgressTracker and
SummaryBuilder. All output goes through an OutputSinkProtocol.
"""

from tapconsole.application.reporting.classifier import classify
from tapconsole.application.reporting.progress import ProgressTracker
from tapconsole.application.reporting.session import ReportingSession
from tapconsole.application.reporting.summary import SummaryBuilder, format_elapsed

__all__ = [
    "ProgressTracker",
    "ReportingSession",
    "SummaryBuilder",
    "classify",
    "format_elapsed",
]
