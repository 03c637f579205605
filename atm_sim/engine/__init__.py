"""Account engine owning balance, PIN, lockout and history."""

from atm_sim.engine.account import AccountEngine

__all__ = ["AccountEngine"]
