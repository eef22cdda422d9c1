"""Compact human readable durations (``100ms``, ``1.5s``, ``2m0s``)."""

_US_PER_MS = 1_000
_US_PER_S = 1_000_000
_US_PER_MIN = 60 * _US_PER_S
_US_PER_HOUR = 60 * _US_PER_MIN


def _fractional(value: int, unit: int) -> str:
    """Render ``value / unit`` exactly, trimming trailing zeros."""
    whole, part = divmod(value, unit)
    if not part:
        return str(whole)
    digits = len(str(unit)) - 1
    return f"{whole}.{part:0{digits}d}".rstrip("0")


def format_duration_us(us: int) -> str:
    """
    Format a microsecond count using the largest sensible unit.

    Sub-second values use a single unit (``µs`` or ``ms``) with a fractional
    part; longer values are split into hours, minutes and seconds.

    Args:
        us: Duration in microseconds (may be negative)

    Returns:
        Formatted duration, e.g. ``"100.5ms"`` or ``"1h2m3.5s"``
    """
    if us == 0:
        return "0s"

    sign = "-" if us < 0 else ""
    us = abs(us)

    if us < _US_PER_MS:
        return f"{sign}{us}µs"
    if us < _US_PER_S:
        return f"{sign}{_fractional(us, _US_PER_MS)}ms"

    hours, rem = divmod(us, _US_PER_HOUR)
    minutes, rem = divmod(rem, _US_PER_MIN)

    out = sign
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return out + f"{_fractional(rem, _US_PER_S)}s"
