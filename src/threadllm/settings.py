"""Global settings loaded from environment variables via pydantic-settings."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from threadllm.statuses import RenderMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="THREADLLM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = "https://www.reddit.com"
    user_agent: str = "linux:threadllm:v0.1.0 (thread-to-text)"
    proxy_url: str = ""
    timeout: float = 30.0
    # Retries only apply to 429/503; 1 means a failed fetch is final
    max_attempts: int = 1
    retry_max_wait: float = 120.0
    default_format: RenderMode = RenderMode.TXT
    log_dir: str = ""  # empty disables the JSON log file
    log_level: str = "INFO"
