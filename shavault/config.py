"""CLI configuration: settings schema and shavault.yaml loader"""

import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "shavault.yaml"
ENV_PREFIX = "SHAVAULT_"


class Settings(BaseModel):
    encoding:      str  = Field(default="utf-8",   description="Encoding applied to text arguments")
    separator:     str  = Field(default=" ",       description="Joiner between multiple arguments")
    require_input: bool = Field(default=False,     description="Fail instead of no-op when no arguments are given")
    log_level:     str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    trace:         bool = Field(default=False,     description="Dump padded buffer, schedules and states")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


def load_config(overrides: Optional[Dict[str, Any]] = None, path: Optional[Path] = None) -> Settings:
    """Load Settings from shavault.yaml, then SHAVAULT_<FIELD> env vars, then non-None CLI overrides."""
    config_path = path or Path(CONFIG_FILE)
    data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            data = yaml.safe_load(config_path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {config_path}: expected a mapping")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
