"""CheckRunner: explicit registry of named checks and single-shot execution.

Checks are handed to the runner by the composition root (the CLI); nothing
registers itself at import time.
"""

from __future__ import annotations

import logging

from timecheck.checks.base_check import Check, CheckResult, CheckStatus


class CheckRunner:
    """Looks up registered checks by name and runs them once."""

    def __init__(self, logger: logging.Logger, checks: list[Check]) -> None:
        self._logger = logger
        self._checks: dict[str, Check] = {}
        for chk in checks:
            self.register(chk)

    def register(self, check: Check) -> None:
        if check.name in self._checks:
            raise ValueError(f"Check {check.name!r} is already registered")
        self._checks[check.name] = check

    def names(self) -> list[str]:
        return list(self._checks)

    def get_check(self, name: str) -> Check | None:
        """Find a registered check by name."""
        return self._checks.get(name)

    def run(self, name: str) -> CheckResult:
        """Run the named check once and log its outcome.

        Fail-closed: a check that raises is reported as UNKNOWN with the
        exception attached, so callers always get a result.
        """
        chk = self._checks.get(name)
        if chk is None:
            raise KeyError(f"No check registered under {name!r}")

        try:
            result = chk.run()
        except Exception as e:
            self._logger.error("Check %r raised an exception, reporting UNKNOWN", name, exc_info=True)
            result = CheckResult("", CheckStatus.UNKNOWN, e)

        self._log_result(name, result)
        return result

    def _log_result(self, name: str, result: CheckResult) -> None:
        if result.status == CheckStatus.OK:
            self._logger.info("Check %r OK: %s", name, result.message)
        elif result.status == CheckStatus.FAILURE:
            self._logger.error("Check %r failed: %s", name, result.message)
        else:
            self._logger.warning("Check %r could not be evaluated: %s", name, result.error)

    def get_status(self) -> dict:
        """Return static details of every registered check."""
        statuses = []
        for chk in self._checks.values():
            try:
                statuses.append(chk.get_status())
            except Exception:
                statuses.append({"name": chk.name, "error": "status unavailable"})
        return {"checks": statuses}
