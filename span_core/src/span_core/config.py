"""Configuration loading utilities for span-core."""
from __future__ import annotations

from pathlib import Path
from typing import Iterable, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .converter import ConverterConfig
from .models import IndexSpace
from .paths import local_config_path, runtime_config_dir
from .utils.validation import resolve_and_check_path


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return self.level.upper()


class ConverterSettings(BaseModel):
    alignment: Literal["strict", "floor"] = Field(
        default="strict",
        description="How offsets inside a code point are handled: strict|floor",
    )
    default_source: IndexSpace = Field(default=IndexSpace.BMP)
    default_target: IndexSpace = Field(default=IndexSpace.UTF8)

    @field_validator("alignment", mode="before")
    @classmethod
    def _lower_alignment(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    def to_converter_config(self) -> ConverterConfig:
        return ConverterConfig(alignment=self.alignment)


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    converter: ConverterSettings = Field(default_factory=ConverterSettings)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield resolve_and_check_path(explicit, must_exist=True, require_file=True)
    yield local_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)
