"""Mini README: Centralised runtime settings for Pennywise.

Structure:
    * PennywiseSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values come from ``PENNYWISE_*`` environment variables or a local
    ``.env`` file. Simulated network delays are configurable so tests and
    demos can run instantly by setting them to zero.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class PennywiseSettings(BaseSettings):
    """Runtime configuration for the Pennywise dashboard."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the local key-value preferences file.",
    )
    storage_filename: str = Field(
        "preferences.json",
        description="File name of the JSON key-value store inside the data directory.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the dashboard service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the dashboard service exposes.",
        ge=1,
        le=65535,
    )
    login_delay_seconds: float = Field(
        1.5,
        description="Simulated latency of the mock login call.",
        ge=0.0,
    )
    register_delay_seconds: float = Field(
        2.0,
        description="Simulated latency of the mock registration call.",
        ge=0.0,
    )
    chat_reply_delay_seconds: float = Field(
        1.5,
        description="Simulated typing delay before the assistant replies.",
        ge=0.0,
    )
    legacy_last_month_estimate: bool = Field(
        False,
        description=(
            "Report last month's spending as 90% of this month's instead of"
            " summing the previous calendar month."
        ),
    )

    class Config:
        env_prefix = "PENNYWISE_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def storage_path(self) -> Path:
        """Full path of the JSON key-value store."""

        return self.data_directory / self.storage_filename


@lru_cache()
def get_settings() -> PennywiseSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return PennywiseSettings()
