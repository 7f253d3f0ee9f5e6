"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    convexsplit_env: str = "development"
    convexsplit_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # World units (pixels) per physics meter
    convexsplit_scaling_factor: float = 100.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def scaling_factor(self) -> float:
        return self.convexsplit_scaling_factor


settings = Settings()
