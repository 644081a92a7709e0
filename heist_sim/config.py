"""Configuration management."""

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class SimulationConfig(BaseModel):
    """Simulation configuration."""

    model_config = ConfigDict(validate_assignment=True)

    num_games: int = Field(default=1_000_000, ge=0)
    max_plies: int = Field(default=16, gt=0)  # Games still running are stalemates
    progress_interval: int = Field(default=100_000, ge=0)  # 0 disables progress
    seed: int | None = None


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_moves: bool = False

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown logging level {value!r}")
        return level


class GameLogConfig(BaseModel):
    """Configuration for the JSONL game log."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    simulation: SimulationConfig = Field(default_factory=SimulationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    game_log: GameLogConfig = Field(default_factory=GameLogConfig)


class ConfigError(ValueError):
    """Raised when a config file cannot be parsed or validated."""


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None or missing, uses default config.

    Returns:
        Config object.

    Raises:
        ConfigError: If the file is not valid YAML, is not a mapping,
            or holds out-of-range values.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{config_path}: invalid YAML: {e}") from e

    if not data:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: expected a mapping at top level")

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{config_path}: {e}") from e
