"""Configuration loading for shamir-recover."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .paths import local_config_path, runtime_config_dir

_LEVELS = {"critical", "error", "warning", "info", "debug"}


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING", description="Logging verbosity level")
    format: Literal["json", "console"] = Field(default="json", description="Renderer for log lines on stderr")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.lower() not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class ReconstructionConfig(BaseModel):
    max_combinations: Optional[int] = Field(
        default=1_000_000,
        ge=1,
        description="Refuse inputs with more k-subsets than this; null disables the check",
    )
    workers: int = Field(default=1, ge=1, le=256, description="Processes used to evaluate combinations")
    chunk_size: int = Field(default=64, ge=1, description="Combinations handed to a worker at a time")


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    reconstruction: ReconstructionConfig = Field(default_factory=ReconstructionConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield local_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    if path is not None and not path.is_file():
        raise ValueError(f"Configuration file not found: {path}")
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
    "LoggingConfig",
    "ReconstructionConfig",
    "DEFAULT_CONFIG",
    "config_search_paths",
    "load_config",
    "dump_default_config",
]
