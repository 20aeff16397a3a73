"""Configuration loader for quickresponse."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING

import tomlkit
from pydantic import BaseModel, Field, ValidationError, field_validator

from quickresponse.atomic import atomic_write
from quickresponse.constants import CURRENT_COMPONENT, LEGACY_COMPONENT, SHARED_PREFERENCES_NAME
from quickresponse.paths import get_config_path

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(Exception):
    """Raised when config.toml cannot be read or fails validation."""


class GeneralConfig(BaseModel):
    """Which namespaces the migration reads and writes."""

    namespace: str = Field(
        default=SHARED_PREFERENCES_NAME, description="Preference namespace holding the responses"
    )
    current_component: str = Field(
        default=CURRENT_COMPONENT, description="Component that owns the responses after migration"
    )
    legacy_component: str = Field(
        default=LEGACY_COMPONENT, description="Component the responses are migrated from"
    )

    @field_validator("namespace", "current_component", "legacy_component")
    @classmethod
    def validate_identifier(cls, value: str) -> str:
        """Reject names that would escape the data directory."""
        value = value.strip()
        if not value or "/" in value or "\\" in value or value in {".", ".."}:
            raise ValueError(f"invalid storage identifier: {value!r}")
        return value


class QuickResponseConfig(BaseModel):
    """Root configuration model."""

    general: GeneralConfig = Field(default_factory=GeneralConfig)

    @classmethod
    def load(cls, config_path: Path | None = None) -> QuickResponseConfig:
        """Load configuration from TOML file or use defaults."""
        if config_path is None:
            config_path = get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
            return cls.model_validate(data)
        except (tomllib.TOMLDecodeError, ValidationError) as exc:
            raise ConfigError(f"Invalid config {config_path}: {exc}") from exc

    def save(self, path: Path) -> None:
        """Serialize current config to TOML file.

        Args:
            path: Path to write config file (created if missing)
        """
        doc = tomlkit.document()
        general_table = tomlkit.table()
        for key, value in self.general.model_dump().items():
            general_table[key] = value
        doc["general"] = general_table
        atomic_write(path, tomlkit.dumps(doc))
