"""Check framework primitives: status levels, results, and the Check base."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import NamedTuple

from timecheck.constants import EXIT_FAILURE, EXIT_OK, EXIT_UNKNOWN


class CheckStatus(Enum):
    """Outcome level returned by a Check."""

    OK = "ok"
    FAILURE = "failure"
    UNKNOWN = "unknown"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES = {
    CheckStatus.OK: EXIT_OK,
    CheckStatus.FAILURE: EXIT_FAILURE,
    CheckStatus.UNKNOWN: EXIT_UNKNOWN,
}


class CheckResult(NamedTuple):
    """``(message, status, error)`` triple produced by a single check run.

    ``error`` is only set for UNKNOWN results, when the measurement itself
    could not be taken. FAILURE is a successfully determined outcome and
    carries no error.
    """

    message: str
    status: CheckStatus
    error: BaseException | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "message": self.message,
            "status": self.status.value,
            "exit_code": self.status.exit_code,
            "error": str(self.error) if self.error is not None else None,
        }


class Check(ABC):
    """Abstract base for a single on-demand check."""

    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    def description(self) -> str:
        """Human readable check title. Defaults to the name."""
        return self.name

    @abstractmethod
    def run(self) -> CheckResult:
        """Take one measurement and classify it."""

    def get_status(self) -> dict:
        """Return check-specific details for reporting. Optional."""
        return {"name": self.name}
