from __future__ import annotations

from datetime import date

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    service_name: str = Field(default="car-valuation-service", alias="SERVICE_NAME")
    # 0 means "ask the clock"; tests pin a year here.
    current_year_override: int = Field(default=0, alias="CURRENT_YEAR_OVERRIDE")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="json", alias="LOG_FORMAT")

    def current_year(self) -> int:
        return self.current_year_override or date.today().year
