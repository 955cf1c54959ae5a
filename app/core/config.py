from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # -------------------------
    # App
    # -------------------------
    app_name: str = "Law Office Registry"
    api_prefix: str = "/api"
    cors_allow_origins: str = "*"

    # -------------------------
    # Logging
    # -------------------------
    log_level: str = "INFO"
    log_json: bool = True

    # -------------------------
    # Stores
    # -------------------------
    # "identity" removes the entity that matched the id,
    # "position" removes the element at index == id (legacy)
    delete_mode: Literal["identity", "position"] = "identity"
    seed_file: Optional[str] = None

    # -------------------------
    # Pydantic v2 config
    # -------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
