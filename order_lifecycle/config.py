from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    service_name: str = "order-lifecycle"
    log_level: LogLevel = "INFO"
    metrics_enabled: bool = True  # expose /metrics on the HTTP app

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
