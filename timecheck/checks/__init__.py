"""Check framework for timecheck."""

from timecheck.checks.base_check import Check, CheckResult, CheckStatus
from timecheck.checks.check_runner import CheckRunner
from timecheck.checks.clock_sync_check import AcquisitionError, ClockSyncProbe

__all__ = ["AcquisitionError", "Check", "CheckResult", "CheckRunner", "CheckStatus", "ClockSyncProbe"]
