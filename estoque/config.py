# estoque/config.py
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ESTOQUE_", env_file=".env", extra="ignore"
    )

    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str = "public"
    log_level: str = "INFO"
    seed_demo: bool = False
    cors_origins: List[str] = ["*"]
