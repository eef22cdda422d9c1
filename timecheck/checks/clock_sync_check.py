"""Clock synchronization check backed by the kernel's ``adjtimex`` state.

The check reads one ``TimexSnapshot`` through an injected acquisition function
and classifies it:

  1. acquisition failed                      -> UNKNOWN
  2. estimated error above the threshold     -> FAILURE (quantitative message)
  3. kernel reports ``STA_UNSYNC``           -> FAILURE (fixed message)
  4. otherwise                               -> OK

The error magnitude is checked first and short-circuits the flag check, so a
host that trips both only reports the magnitude.
"""

from __future__ import annotations

from collections.abc import Callable

from timecheck.checks.base_check import Check, CheckResult, CheckStatus
from timecheck.constants import MAX_EST_ERROR_US
from timecheck.time.duration import format_duration_us
from timecheck.time.timex import TimexSnapshot, read_timex

SYNCED_MESSAGE = "Clock is synced"
UNSYNC_MESSAGE = "Clock is out of sync / in unsync state. Must be synchronized for proper operation."
UNSTABLE_MESSAGE = "Clock is less stable than allowed. Max estimated error exceeded by: {excess}"


class AcquisitionError(RuntimeError):
    """Kernel time synchronization state could not be read."""


class ClockSyncProbe(Check):
    """Classifies the host clock as synced, degraded, or indeterminate."""

    def __init__(
        self,
        acquire: Callable[[], TimexSnapshot] = read_timex,
        max_est_error_us: int = MAX_EST_ERROR_US,
        name: str = "time",
        description: str = "Check clock synchronization",
    ) -> None:
        self._acquire = acquire
        self._max_est_error_us = max_est_error_us
        self._name = name
        self._description = description

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @property
    def max_est_error_us(self) -> int:
        return self._max_est_error_us

    def evaluate(self) -> CheckResult:
        """Classify one snapshot.

        An acquisition failure is returned, not raised: the result carries an
        ``AcquisitionError`` whose ``__cause__`` is the original exception.
        """
        try:
            snapshot = self._acquire()
        except Exception as e:
            error = AcquisitionError(f"unable to make a system call adjtimex: {e}")
            error.__cause__ = e
            return CheckResult("", CheckStatus.UNKNOWN, error)

        diff = snapshot.est_error_us - self._max_est_error_us
        if diff > 0:
            return CheckResult(UNSTABLE_MESSAGE.format(excess=format_duration_us(diff)), CheckStatus.FAILURE)

        if snapshot.unsynchronized:
            return CheckResult(UNSYNC_MESSAGE, CheckStatus.FAILURE)

        return CheckResult(SYNCED_MESSAGE, CheckStatus.OK)

    def run(self) -> CheckResult:
        return self.evaluate()

    def get_status(self) -> dict:
        return {
            "name": self.name,
            "description": self._description,
            "max_est_error_us": self._max_est_error_us,
        }
