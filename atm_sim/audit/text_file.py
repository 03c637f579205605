"""Append-only text file audit sink."""

from pathlib import Path
from typing import Any

from atm_sim.audit.base import format_line
from atm_sim.exceptions import AuditSinkError


class TextFileAuditSink:
    """Append one line per audit event to a text file."""

    def __init__(self, path: str | Path = "atm_operations.log") -> None:
        """Initialize text file sink.

        Parameters
        ----------
        path : str | Path
            Log file. Created on first write; never truncated.

        Raises
        ------
        AuditSinkError
            If the parent directory cannot be created.
        """
        self.path = Path(path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise AuditSinkError(f"Cannot create audit log directory for {self.path}: {exc}") from exc
        self._count = 0

    def record(self, event: str, message: str, **fields: Any) -> None:
        """Append an event line to the log file."""
        line = format_line(event, message)
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as exc:
            raise AuditSinkError(f"Cannot write audit log {self.path}: {exc}") from exc
        self._count += 1

    def close(self) -> None:
        """Nothing is held open between writes."""

    @property
    def count(self) -> int:
        """Number of lines written by this sink."""
        return self._count
