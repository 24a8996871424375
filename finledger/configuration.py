"""Mini README: Centralised configuration for finledger.

Structure:
    * LedgerSettings - Pydantic settings model read from the environment.
    * get_settings - cached accessor shared by the CLI and web surface.

Usage:
    Variables prefixed with ``FINLEDGER_`` (or entries in a local ``.env``)
    override the defaults, e.g. ``FINLEDGER_STORAGE_BACKEND=memory`` keeps
    everything in process memory. Currency defaults follow the Brazilian
    real (``R$ 1.500,00``).
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class LedgerSettings(BaseSettings):
    """Runtime configuration for the ledger and its interfaces."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the JSON key-value store.",
    )
    storage_backend: Literal["json", "memory"] = Field(
        "json",
        description="Persist to a JSON file on disk or keep state in memory only.",
    )
    storage_filename: str = Field(
        "ledger_store.json",
        description="File name of the JSON store inside ``data_directory``.",
    )
    transactions_key: str = Field(
        "transactions",
        description="Store key holding the serialised ledger.",
    )
    theme_key: str = Field("theme", description="Store key holding the theme preference.")
    currency_symbol: str = Field("R$", description="Symbol prefixed to amounts.")
    thousands_separator: str = Field(".", description="Digit grouping separator.")
    decimal_separator: str = Field(",", description="Separator before the cents.")
    allow_deletion: bool = Field(
        True,
        description="Expose a delete control per row and accept removals.",
    )
    seed_demo_data: bool = Field(
        True,
        description="Fall back to the demo dataset when nothing has been stored yet.",
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the web surface to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web surface exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "FINLEDGER_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def store_path(self) -> Path:
        """Location of the JSON key-value store."""

        return self.data_directory / self.storage_filename


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
