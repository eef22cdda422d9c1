from timecheck.logging._timecheck_logger import TIMECHECK_LOGGER, ColoredFormatter, set_log_level

__all__ = ["TIMECHECK_LOGGER", "ColoredFormatter", "set_log_level"]
