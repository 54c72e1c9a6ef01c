from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Mock Payment API"
    database_url: str = "sqlite:///db.sqlite"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    cors_origins: list[str] = ["*"]

    auth_enabled: bool = True
    auth_username: str = "Secret_Username"
    auth_password: str = "Secret_Password"

    success_weight: int = Field(default=8, ge=0)
    failure_weight: int = Field(default=1, ge=0)
    suspicious_weight: int = Field(default=1, ge=0)

    # Keep txnDetail as a JSON string inside the JSON body for existing clients.
    stringify_txn_detail: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PAYMENTS_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
