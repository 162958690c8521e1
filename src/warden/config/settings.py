"""Application settings loaded from environment variables and config files."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from warden.config import CONFIG_ROOT

DEFAULT_DIAGNOSTIC_PREFIX = "Release during scope exit failed"


class FaultSettings(BaseModel):
    """Resource names that force a specific failure path."""

    faulty_names: List[str] = Field(default_factory=lambda: ["faulty"])
    failing_names: List[str] = Field(default_factory=lambda: ["failing"])

    model_config = ConfigDict(extra="forbid", frozen=True)

    def is_faulty(self, name: str) -> bool:
        return name in self.faulty_names

    def is_failing(self, name: str) -> bool:
        return name in self.failing_names


def load_fault_settings(faults_path: Path) -> FaultSettings:
    """Read fault sentinels from YAML, falling back to defaults when absent."""

    if not faults_path.exists():
        return FaultSettings()

    raw_data = yaml.safe_load(faults_path.read_text(encoding="utf-8")) or {}
    return FaultSettings(**raw_data)


class Settings(BaseSettings):
    """Primary application settings for the Warden CLI."""

    diagnostic_prefix: str = Field(default=DEFAULT_DIAGNOSTIC_PREFIX, alias="WARDEN_DIAGNOSTIC_PREFIX")
    no_color: bool = Field(default=False, alias="WARDEN_NO_COLOR")

    faults: FaultSettings = Field(default_factory=lambda: load_fault_settings(CONFIG_ROOT / "faults.yaml"))

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached instance of the application settings."""

    return Settings()


__all__ = ["DEFAULT_DIAGNOSTIC_PREFIX", "FaultSettings", "Settings", "get_settings", "load_fault_settings"]
