"""Infrastructure adapters: rich output sink, result tally."""

from tapconsole.infrastructure.console_sink import RichConsoleSink, SinkConfig
from tapconsole.infrastructure.tally import ResultTally

__all__ = [
    "ResultTally",
    "RichConsoleSink",
    "SinkConfig",
]
