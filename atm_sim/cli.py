"""Command-line entry point for the ATM simulation."""

import argparse
from pathlib import Path

from atm_sim.audit import (
    AuditSink,
    ConsoleAuditSink,
    LoggingAuditSink,
    NullAuditSink,
    TextFileAuditSink,
)
from atm_sim.config import AUDIT_SINKS, AtmConfig, AuditConfig
from atm_sim.engine import AccountEngine
from atm_sim.exceptions import AtmError, AuditSinkError
from atm_sim.generators import DemoAccountGenerator
from atm_sim.logging import get_logger, setup_logging
from atm_sim.shell import AtmSession

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="atm-sim",
        description="Interactive single-account ATM simulation",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Audit log file (default: atm_operations.log or $ATM_LOG_FILE)",
    )
    parser.add_argument(
        "--audit",
        choices=AUDIT_SINKS,
        default=None,
        help="Where audit events go (default: file or $ATM_AUDIT_SINK)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Diagnostic log level (default: INFO or $LOG_LEVEL)",
    )
    parser.add_argument(
        "--log-format",
        choices=["standard", "json"],
        default=None,
        help="Diagnostic log format (default: standard or $LOG_FORMAT)",
    )
    parser.add_argument(
        "--demo-account",
        action="store_true",
        help="Start from a generated account instead of the fixed seed account",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --demo-account (default: $SEED)",
    )
    return parser


def create_audit_sink(config: AuditConfig) -> AuditSink:
    """Instantiate the audit sink named in ``config.sink``."""
    if config.sink == "file":
        return TextFileAuditSink(config.log_file)
    elif config.sink == "console":
        return ConsoleAuditSink()
    elif config.sink == "logging":
        return LoggingAuditSink()
    return NullAuditSink()


def main(argv: list[str] | None = None) -> int:
    """Run an interactive session against the seed account.

    Returns
    -------
    int
        Process exit status: 0 on a normal exit, 1 when setup fails.
    """
    args = build_parser().parse_args(argv)

    try:
        config = AtmConfig.from_env()
    except AtmError as exc:
        print(f"Initialization failed: {exc}")
        return 1

    if args.log_file is not None:
        config.audit.log_file = args.log_file
    if args.audit is not None:
        config.audit.sink = args.audit
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.log_format is not None:
        config.log_format = args.log_format
    if args.seed is not None:
        config.seed = args.seed
    if args.demo_account:
        config.seed_account = DemoAccountGenerator(seed=config.seed).generate()
        print(
            f"Demo account {config.seed_account.account_number} "
            f"(PIN {config.seed_account.pin})"
        )

    setup_logging(level=config.log_level, format_type=config.log_format)

    try:
        audit = create_audit_sink(config.audit)
    except AuditSinkError as exc:
        # The ATM keeps running without an audit trail
        logger.warning("Audit log setup failed, continuing without it: %s", exc)
        print(f"Logging setup failed: {exc}")
        audit = NullAuditSink()

    try:
        engine = AccountEngine.seed(config.seed_account, limits=config.limits, audit=audit)
    except AtmError as exc:
        logger.error("ATM initialization failed: %s", exc)
        print(f"Initialization failed: {exc}")
        audit.close()
        return 1

    try:
        AtmSession(engine).run()
    finally:
        audit.close()
    return 0
