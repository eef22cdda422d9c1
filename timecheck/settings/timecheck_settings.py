from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from timecheck.constants import MAX_EST_ERROR_US


class TimeCheckSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TIMECHECK_",
    )

    # Largest kernel estimated error (microseconds) still considered synced
    max_est_error_us: int = Field(default=MAX_EST_ERROR_US, ge=0)

    log_level: str = "INFO"
