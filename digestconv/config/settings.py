from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DIGESTCONV_", env_file=".env", extra="ignore"
    )

    log_level: str = "WARNING"

    max_buffer_bytes: int = Field(default=16384, gt=0)
    read_chunk_size: int = Field(default=4096, gt=0)
