"""Kernel time synchronization state for timecheck."""

from timecheck.time.duration import format_duration_us
from timecheck.time.timex import STA_UNSYNC, TimexSnapshot, read_timex

__all__ = [
    "STA_UNSYNC",
    "TimexSnapshot",
    "format_duration_us",
    "read_timex",
]
