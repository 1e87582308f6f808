"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    artdxf_env: str = "development"
    artdxf_log_level: str = "info"

    # DXF output
    dxf_version: str = "AC1015"
    dxf_layer: str = "0"
    # None = shortest round-trip formatting; an int = fixed decimals
    dxf_precision: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def get_settings() -> Settings:
    return settings
