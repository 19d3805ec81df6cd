from __future__ import annotations

"""Configuration loading and validation for the scale quiz.

This module loads the packaged YAML defaults, merges an optional user file
over them, and validates the result with Pydantic.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from ..theory.note import Note
from ..theory.note_utils import TheoryError

logger = logging.getLogger(__name__)

DEFAULTS_PATH = Path(__file__).with_name("defaults.yml")

ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or is invalid."""


class QuizSettings(BaseModel):
    tonic_pool: List[str] = Field(min_length=1)

    @field_validator("tonic_pool")
    @classmethod
    def _names_parse(cls, v: List[str]) -> List[str]:
        for name in v:
            try:
                Note.parse(str(name))
            except TheoryError as e:
                raise ValueError(f"tonic_pool entry {name!r}: {e}") from e
        return [str(name) for name in v]


class ScreenSettings(BaseModel):
    text_col: int = Field(4, ge=1)
    text_row: int = Field(2, ge=1)


class RandomSettings(BaseModel):
    seed: Optional[int] = None


class LoggingSettings(BaseModel):
    level: str = "WARNING"
    file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ALLOWED_LOG_LEVELS:
            raise ValueError(f"unsupported log level {v!r}")
        return level


class QuizConfig(BaseModel):
    """Validated settings for one run.

    - quiz.tonic_pool: note names questions may start from
    - screen.text_col / text_row: interior offset of page text
    - random.seed: fixed seed for reproducible questions
    - logging.level / file: log destination (never stdout)
    """

    quiz: QuizSettings
    screen: ScreenSettings = Field(default_factory=ScreenSettings)
    random: RandomSettings = Field(default_factory=RandomSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    def tonic_notes(self) -> List[Note]:
        return [Note.parse(name) for name in self.quiz.tonic_pool]


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping at top level")
    return data


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from YAML on top of the packaged defaults.

    Args:
        path: Optional path to a YAML config. If None, only defaults are used.

    Returns:
        A dictionary with the merged configuration values.
    """
    cfg = _load_yaml(DEFAULTS_PATH)
    if path:
        logger.debug("Loading config overrides from %s", path)
        cfg = _merge(cfg, _load_yaml(Path(path)))
    return cfg


def validate_config(cfg: Dict[str, Any]) -> QuizConfig:
    """Validate a merged configuration dictionary.

    Raises:
        ConfigError: with every validation problem in the message.
    """
    try:
        return QuizConfig.model_validate(cfg)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigError(f"Invalid configuration: {problems}") from e
