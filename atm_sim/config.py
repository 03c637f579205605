"""Configuration management for atm-sim."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path

from atm_sim.exceptions import ConfigurationError

AUDIT_SINKS = ("file", "console", "logging", "none")


@dataclass(frozen=True)
class TransactionLimits:
    """Per-operation ceilings enforced by the account engine."""

    max_withdrawal: Decimal = Decimal("50000")
    max_deposit: Decimal = Decimal("200000")
    max_transfer: Decimal = Decimal("100000")
    max_failed_attempts: int = 3


@dataclass
class AuditConfig:
    """Audit log configuration."""

    log_file: Path = field(default_factory=lambda: Path("atm_operations.log"))
    sink: str = "file"


@dataclass
class SeedAccountConfig:
    """The account every run starts from."""

    balance: Decimal = Decimal("50000.00")
    pin: str = "1234"
    account_number: str = "ACC123456789"
    holder_name: str = "John Doe"


@dataclass
class AtmConfig:
    """Main configuration for atm-sim."""

    audit: AuditConfig = field(default_factory=AuditConfig)
    limits: TransactionLimits = field(default_factory=TransactionLimits)
    seed_account: SeedAccountConfig = field(default_factory=SeedAccountConfig)
    log_level: str = "INFO"
    log_format: str = "standard"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "AtmConfig":
        """Create config from environment variables."""
        import os

        sink = os.getenv("ATM_AUDIT_SINK", "file").lower()
        if sink not in AUDIT_SINKS:
            raise ConfigurationError(
                f"ATM_AUDIT_SINK must be one of {', '.join(AUDIT_SINKS)}, got {sink!r}"
            )

        audit = AuditConfig(
            log_file=Path(os.getenv("ATM_LOG_FILE", "atm_operations.log")),
            sink=sink,
        )

        defaults = TransactionLimits()
        limits = TransactionLimits(
            max_withdrawal=_env_decimal("ATM_MAX_WITHDRAWAL", defaults.max_withdrawal),
            max_deposit=_env_decimal("ATM_MAX_DEPOSIT", defaults.max_deposit),
            max_transfer=_env_decimal("ATM_MAX_TRANSFER", defaults.max_transfer),
            max_failed_attempts=_env_int(
                "ATM_MAX_FAILED_ATTEMPTS", defaults.max_failed_attempts
            ),
        )

        return cls(
            audit=audit,
            limits=limits,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
            seed=_env_int("SEED", None, minimum=0),
        )


def _env_decimal(name: str, default: Decimal) -> Decimal:
    import os

    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
    if not value.is_finite() or value < 0:
        raise ConfigurationError(f"{name} must be a non-negative number, got {raw!r}")
    return value


def _env_int(name: str, default: int | None, minimum: int = 1) -> int | None:
    import os

    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigurationError(f"{name} must be at least {minimum}, got {value}")
    return value
