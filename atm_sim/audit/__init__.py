"""Audit sinks: the append-only log collaborator of the account engine."""

from atm_sim.audit.base import AuditSink, NullAuditSink, format_line
from atm_sim.audit.console import ConsoleAuditSink
from atm_sim.audit.logging_sink import LoggingAuditSink
from atm_sim.audit.text_file import TextFileAuditSink

__all__ = [
    "AuditSink",
    "ConsoleAuditSink",
    "LoggingAuditSink",
    "NullAuditSink",
    "TextFileAuditSink",
    "format_line",
]
