"""Configuration models for the design-code engine."""

from __future__ import annotations

from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SequenceStoreConfig(BaseModel):
    """Configuration for a sequence store backend.

    Args:
        backend: ``"memory"`` keeps counters in process memory; ``"sqlite"``
            persists them to a local SQLite file shared by all workers.
        db_path: Path to the SQLite database file. Required when ``backend="sqlite"``.
        enable_wal: Enable SQLite WAL journal mode for better concurrency.
        table: Name of the counters table.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    backend: Literal["memory", "sqlite"] = "memory"
    db_path: Path | None = None
    enable_wal: bool = True
    table: str = Field(default="sequence_counters", pattern=r"^[A-Za-z_][A-Za-z0-9_]*$")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string (ignored when structured=True)",
    )
    structured: bool = Field(default=False, description="Emit JSON log lines")
    filename: str | None = Field(default=None, description="Log file path (stdout if None)")

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, v: object) -> object:
        return v.upper() if isinstance(v, str) else v


class EngineConfig(BaseModel):
    """Top-level design-code engine configuration.

    Attributes:
        sequence: Sequence store backend selection.
        logging: Logging setup.
        sequence_width: Minimum digit count of rendered sequence numbers.
        date_format: strftime format used to auto-fill date fields.
        timezone: IANA timezone for "today"; local time when None.
        strict: Reject generation when required fields are missing.
        templates_path: Optional JSON/YAML file with extra templates.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    sequence: SequenceStoreConfig = Field(default_factory=SequenceStoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    sequence_width: int = Field(default=3, ge=1, le=12)
    date_format: str = "%d/%m/%Y"
    timezone: str | None = None
    strict: bool = True
    templates_path: Path | None = None

    @field_validator("timezone")
    @classmethod
    def _validate_timezone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    def tzinfo(self) -> ZoneInfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None
