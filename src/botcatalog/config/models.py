"""
Pydantic configuration models with YAML loading.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from botcatalog.core.errors import ConfigError


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


class UseCaseConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # reduced schema, no domain objects
    simple: bool = False


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    use_case: UseCaseConfig = UseCaseConfig()
    raw: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "AppConfig":
        file_path = Path(path).expanduser()
        if not file_path.exists():
            raise ConfigError(message=f"Config file not found: {file_path}")
        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(message=f"Config file is not valid YAML: {file_path}", context={"error": str(exc)}) from exc
        if not isinstance(data, dict):
            raise ConfigError(message=f"Config file must contain a mapping: {file_path}")
        try:
            # keep the raw data around for debugging
            return cls(**{**data, "raw": data})
        except PydanticValidationError as exc:
            raise ConfigError(message=f"Invalid config in {file_path}", context={"errors": exc.errors()}) from exc


def load_config(path: Optional[str | Path] = None) -> AppConfig:
    """Load config from ``path``; defaults when no path is given."""
    if path is None:
        return AppConfig()
    return AppConfig.from_yaml(path)
