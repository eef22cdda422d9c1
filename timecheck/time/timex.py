"""Read-only access to the kernel clock discipline state via ``adjtimex(2)``."""

import ctypes
import ctypes.util
import os
import sys
from dataclasses import dataclass

# STA_UNSYNC from include/uapi/linux/timex.h: clock is not synchronized
STA_UNSYNC = 0x0040


class _Timeval(ctypes.Structure):
    _fields_ = [
        ("tv_sec", ctypes.c_long),
        ("tv_usec", ctypes.c_long),
    ]


class _Timex(ctypes.Structure):
    """``struct timex`` as laid out by glibc on 64-bit Linux."""

    _fields_ = [
        ("modes", ctypes.c_uint),
        ("offset", ctypes.c_long),
        ("freq", ctypes.c_long),
        ("maxerror", ctypes.c_long),
        ("esterror", ctypes.c_long),
        ("status", ctypes.c_int),
        ("constant", ctypes.c_long),
        ("precision", ctypes.c_long),
        ("tolerance", ctypes.c_long),
        ("time", _Timeval),
        ("tick", ctypes.c_long),
        ("ppsfreq", ctypes.c_long),
        ("jitter", ctypes.c_long),
        ("shift", ctypes.c_int),
        ("stabil", ctypes.c_long),
        ("jitcnt", ctypes.c_long),
        ("calcnt", ctypes.c_long),
        ("errcnt", ctypes.c_long),
        ("stbcnt", ctypes.c_long),
        ("tai", ctypes.c_int),
        ("_reserved", ctypes.c_int * 11),
    ]


@dataclass(frozen=True)
class TimexSnapshot:
    """Point-in-time copy of the kernel time synchronization status."""

    est_error_us: int
    """Kernel estimate of the current clock error in microseconds."""

    status: int
    """``STA_*`` status bitmask."""

    @property
    def unsynchronized(self) -> bool:
        return (self.status & STA_UNSYNC) != 0


def _load_libc() -> ctypes.CDLL:
    if not sys.platform.startswith("linux"):
        raise OSError(f"adjtimex is not supported on platform {sys.platform!r}")
    libc_name = ctypes.util.find_library("c") or "libc.so.6"
    return ctypes.CDLL(libc_name, use_errno=True)


def read_timex() -> TimexSnapshot:
    """
    Query the kernel clock state without modifying it.

    Returns:
        TimexSnapshot populated from ``struct timex``.

    Raises:
        OSError: If the system call is unavailable or fails.
    """
    libc = _load_libc()

    # modes == 0 makes this a pure read; the TIME_* return state is not used
    buf = _Timex()
    if libc.adjtimex(ctypes.byref(buf)) < 0:
        err = ctypes.get_errno()
        raise OSError(err, os.strerror(err))

    return TimexSnapshot(est_error_us=int(buf.esterror), status=int(buf.status))
