"""Tests for ClockSyncProbe — classifies adjtimex snapshots."""

import pytest

from timecheck.checks.base_check import CheckStatus
from timecheck.checks.clock_sync_check import (
    SYNCED_MESSAGE,
    UNSYNC_MESSAGE,
    AcquisitionError,
    ClockSyncProbe,
)
from timecheck.constants import MAX_EST_ERROR_US
from timecheck.time.timex import STA_UNSYNC, TimexSnapshot


def _probe(est_error_us: int = 0, status: int = 0, **kwargs) -> ClockSyncProbe:
    return ClockSyncProbe(acquire=lambda: TimexSnapshot(est_error_us=est_error_us, status=status), **kwargs)


def _failing_probe(exc: Exception) -> ClockSyncProbe:
    def acquire():
        raise exc

    return ClockSyncProbe(acquire=acquire)


class TestClockSyncProbe:
    def test_synced_clock_is_ok(self):
        message, status, error = _probe(0, 0).evaluate()
        assert message == "Clock is synced"
        assert status == CheckStatus.OK
        assert error is None

    def test_large_error_fails_with_excess(self):
        message, status, error = _probe(200_000, 0).evaluate()
        assert status == CheckStatus.FAILURE
        assert error is None
        assert message == "Clock is less stable than allowed. Max estimated error exceeded by: 100ms"

    def test_fractional_excess_is_readable(self):
        message, status, _ = _probe(200_500, 0).evaluate()
        assert status == CheckStatus.FAILURE
        assert message.endswith("100.5ms")

    def test_unsync_flag_fails(self):
        message, status, error = _probe(0, STA_UNSYNC).evaluate()
        assert status == CheckStatus.FAILURE
        assert message == UNSYNC_MESSAGE
        assert error is None

    def test_unsync_flag_among_other_bits(self):
        # STA_PLL | STA_UNSYNC | STA_NANO
        message, status, _ = _probe(0, 0x0001 | STA_UNSYNC | 0x2000).evaluate()
        assert status == CheckStatus.FAILURE
        assert message == UNSYNC_MESSAGE

    def test_other_status_bits_are_ignored(self):
        _, status, _ = _probe(0, 0x0001 | 0x2000).evaluate()
        assert status == CheckStatus.OK

    def test_magnitude_takes_precedence_over_unsync_flag(self):
        message, status, _ = _probe(MAX_EST_ERROR_US + 1, STA_UNSYNC).evaluate()
        assert status == CheckStatus.FAILURE
        assert message != UNSYNC_MESSAGE
        assert "Max estimated error exceeded by: 1µs" in message

    def test_error_exactly_at_threshold_is_ok(self):
        message, status, _ = _probe(MAX_EST_ERROR_US, 0).evaluate()
        assert status == CheckStatus.OK
        assert message == SYNCED_MESSAGE

    def test_error_at_threshold_with_unsync_reports_unsync(self):
        message, status, _ = _probe(MAX_EST_ERROR_US, STA_UNSYNC).evaluate()
        assert status == CheckStatus.FAILURE
        assert message == UNSYNC_MESSAGE

    def test_negative_error_falls_through_to_flag_check(self):
        assert _probe(-500, 0).evaluate().status == CheckStatus.OK
        assert _probe(-500, STA_UNSYNC).evaluate().message == UNSYNC_MESSAGE

    def test_custom_threshold(self):
        probe = _probe(1_500, 0, max_est_error_us=1_000)
        message, status, _ = probe.evaluate()
        assert status == CheckStatus.FAILURE
        assert message.endswith("500µs")
        assert probe.max_est_error_us == 1_000

    def test_acquisition_failure_is_unknown(self):
        message, status, error = _failing_probe(PermissionError("permission denied")).evaluate()
        assert message == ""
        assert status == CheckStatus.UNKNOWN
        assert isinstance(error, AcquisitionError)
        assert "permission denied" in str(error)
        assert "adjtimex" in str(error)

    def test_acquisition_failure_chains_cause(self):
        cause = OSError(1, "Operation not permitted")
        _, _, error = _failing_probe(cause).evaluate()
        assert error.__cause__ is cause

    def test_acquire_called_once_per_evaluation(self):
        calls = []

        def acquire():
            calls.append(1)
            return TimexSnapshot(est_error_us=0, status=0)

        probe = ClockSyncProbe(acquire=acquire)
        probe.evaluate()
        probe.evaluate()
        assert len(calls) == 2

    def test_run_matches_evaluate(self):
        probe = _probe(0, STA_UNSYNC)
        assert probe.run() == probe.evaluate()

    def test_name_and_status(self):
        probe = _probe()
        assert probe.name == "time"
        assert probe.description == "Check clock synchronization"
        assert probe.get_status() == {
            "name": "time",
            "description": "Check clock synchronization",
            "max_est_error_us": MAX_EST_ERROR_US,
        }


@pytest.mark.parametrize(
    "est_error_us,status,expected",
    [
        (0, 0, CheckStatus.OK),
        (MAX_EST_ERROR_US, 0, CheckStatus.OK),
        (MAX_EST_ERROR_US + 1, 0, CheckStatus.FAILURE),
        (0, STA_UNSYNC, CheckStatus.FAILURE),
    ],
)
def test_status_table(est_error_us, status, expected):
    assert _probe(est_error_us, status).evaluate().status == expected
