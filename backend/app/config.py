from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Till Salary API"
    host: str = "0.0.0.0"
    port: int = 8080
    # Trailing segment of the pay-day list endpoint. Older clients call
    # /till-salary/pay-day/<n>/list-distinct.
    list_dates_suffix: Literal["list-dates", "list-distinct"] = "list-dates"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
