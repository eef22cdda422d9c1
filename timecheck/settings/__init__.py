"""Runtime settings for timecheck."""

from timecheck.settings.timecheck_settings import TimeCheckSettings

__all__ = ["TimeCheckSettings"]
