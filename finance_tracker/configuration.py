"""Mini README: Centralised configuration for the finance tracker.

Structure:
    * FinanceTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``FINANCE_TRACKER_*`` environment
    variables (or a local ``.env`` file). Settings are validated once per
    process and shared by the storage layer, the formatter and the CLI.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class FinanceTrackerSettings(BaseSettings):
    """Runtime configuration for the finance tracker."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the file-backed blob store.",
    )
    storage_backend: Literal["file", "memory"] = Field(
        "file",
        description="Blob store used for persistence; 'memory' keeps nothing between runs.",
    )
    storage_key: str = Field(
        "transactions",
        min_length=1,
        description="Key under which the serialised transaction list is stored.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web interface to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web interface exposes.",
        ge=1,
        le=65535,
    )
    currency_symbol: str = Field("R$", description="Symbol prefixed to formatted amounts.")
    thousands_separator: str = Field(".", description="Digit group separator.")
    decimal_separator: str = Field(",", description="Separator between units and cents.")

    class Config:
        env_prefix = "FINANCE_TRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path


@lru_cache()
def get_settings() -> FinanceTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return FinanceTrackerSettings()
