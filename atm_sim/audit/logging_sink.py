"""Audit sink that forwards events to the stdlib logging tree."""

import logging
from typing import Any

from atm_sim.audit.base import event_level
from atm_sim.audit.serialization import serialize_value
from atm_sim.logging import get_logger


class LoggingAuditSink:
    """Forward audit events to a logger.

    Event fields are attached as ``record.extra`` so ``JsonFormatter``
    emits them as top-level keys.
    """

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger("atm_sim.audit")

    def record(self, event: str, message: str, **fields: Any) -> None:
        payload = {"event": event}
        payload.update({k: serialize_value(v) for k, v in fields.items()})
        self.logger.log(event_level(event), message, extra={"extra": payload})

    def close(self) -> None:
        for handler in self.logger.handlers:
            handler.flush()
