"""Audit sink contract and shared line formatting."""

import logging
from datetime import datetime
from typing import Any, Protocol

# Event names emitted by the account engine
INITIALIZED = "initialized"
LOGIN_SUCCESS = "login_success"
LOGIN_FAILED = "login_failed"
LOGIN_BLOCKED = "login_blocked"
ACCOUNT_BLOCKED = "account_blocked"
WITHDRAWAL = "withdrawal"
DEPOSIT = "deposit"
TRANSFER = "transfer"
PIN_CHANGED = "pin_changed"
PIN_CHANGE_FAILED = "pin_change_failed"

EVENT_LEVELS: dict[str, int] = {
    LOGIN_FAILED: logging.WARNING,
    LOGIN_BLOCKED: logging.WARNING,
    ACCOUNT_BLOCKED: logging.ERROR,
    PIN_CHANGE_FAILED: logging.ERROR,
}


def event_level(event: str) -> int:
    """Severity of an audit event; anything unlisted is INFO."""
    return EVENT_LEVELS.get(event, logging.INFO)


def format_line(event: str, message: str, when: datetime | None = None) -> str:
    """One human-readable audit line, without the trailing newline."""
    when = when or datetime.now()
    level = logging.getLevelName(event_level(event))
    return f"{when:%Y-%m-%d %H:%M:%S} | {level:<8} | {event} | {message}"


class AuditSink(Protocol):
    """Append-only, best-effort receiver of audit events."""

    def record(self, event: str, message: str, **fields: Any) -> None:
        ...

    def close(self) -> None:
        ...


class NullAuditSink:
    """Discard every event."""

    def record(self, event: str, message: str, **fields: Any) -> None:
        pass

    def close(self) -> None:
        pass
