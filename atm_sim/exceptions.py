"""Custom exception hierarchy for atm-sim."""


class AtmError(Exception):
    """Base exception for all atm-sim errors."""


class ValidationError(AtmError):
    """Raised when account or transaction data is malformed."""


class ConfigurationError(AtmError):
    """Raised when configuration is invalid or missing."""


class AuditSinkError(AtmError):
    """Raised when an audit sink fails to record an event."""
