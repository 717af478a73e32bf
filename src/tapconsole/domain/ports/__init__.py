"""Domain ports: collaborators the reporting session depends on."""

from tapconsole.domain.ports.output_sink import OutputSinkProtocol
from tapconsole.domain.ports.parser import ParserProtocol

__all__ = [
    "OutputSinkProtocol",
    "ParserProtocol",
]
