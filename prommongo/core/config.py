"""Settings for the prommongo collectors.

Values come from environment variables prefixed with ``PROMMONGO_`` (or a
local ``.env`` file).  Collectors read ``METRICS_NAMESPACE`` at construction
time, so changing it only affects collectors built afterwards.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Strongly-typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PROMMONGO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    METRICS_NAMESPACE: str = Field(
        default="go_mongo",
        pattern=r"^[a-zA-Z_][a-zA-Z0-9_]*$",
        description="Prefix joined to every exported metric family name.",
    )
    LOG_LEVEL: str = Field(default="INFO", description="Level for the prommongo logger.")
    MONGODB_URI: Optional[str] = Field(
        default=None,
        description="MongoDB URI used by the live integration test only.",
    )


settings = Settings()
