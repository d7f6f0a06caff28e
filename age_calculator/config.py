"""Runtime configuration for the age_calculator package.

Settings are loaded in priority order:
  1. Environment variables (highest priority)
  2. .env file in the project root
  3. Field defaults

Usage::

    from age_calculator.config import settings

    print(settings.language)
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    model_arn: str | None = Field(
        None,
        alias="MODEL_ARN",
        description="AWS Bedrock application inference profile ARN. Required only by the agent.",
    )
    language: Literal["en", "id"] = Field(
        "en",
        alias="AGE_CALC_LANGUAGE",
        description="Language used for CLI labels and the text summary.",
    )
    countdown_interval_seconds: float = Field(
        1.0,
        gt=0,
        alias="COUNTDOWN_INTERVAL_SECONDS",
        description="Seconds between live birthday countdown refreshes.",
    )


settings = Settings()
