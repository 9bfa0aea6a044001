"""Configuration loading utilities for resxml."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .models import EncodingTarget
from .paths import runtime_config_dir
from .substitutions import DEFAULT_NON_POSITIONAL_LIMIT, UNLIMITED


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class SubstitutionConfig(BaseModel):
    non_positional_limit: int = Field(
        default=DEFAULT_NON_POSITIONAL_LIMIT,
        ge=UNLIMITED,
        description="Stop scanning after this many non-positional placeholders (-1 for no cap)",
    )

    @field_validator("non_positional_limit")
    @classmethod
    def _validate_limit(cls, value: int) -> int:
        if value == 0:
            raise ValueError("non_positional_limit must be positive or -1")
        return value


class EncodingConfig(BaseModel):
    default_target: EncodingTarget = Field(
        default=EncodingTarget.VALUE,
        description="Encoder used when none is requested explicitly",
    )


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    substitutions: SubstitutionConfig = Field(default_factory=SubstitutionConfig)
    encoding: EncodingConfig = Field(default_factory=EncodingConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".resxml" / "config.yaml"
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG",
    "EncodingConfig",
    "LoggingConfig",
    "SubstitutionConfig",
    "config_search_paths",
    "dump_default_config",
    "load_config",
]
