"""Console audit sink for debugging and development."""

import sys
from typing import Any, TextIO

from atm_sim.audit.base import format_line


class ConsoleAuditSink:
    """Echo audit events to a stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream

    def record(self, event: str, message: str, **fields: Any) -> None:
        stream = self.stream or sys.stdout
        print(format_line(event, message), file=stream)

    def close(self) -> None:
        stream = self.stream or sys.stdout
        stream.flush()
