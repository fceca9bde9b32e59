from __future__ import annotations

import logging
import os
import pathlib
from dataclasses import dataclass, field
from importlib import resources
from typing import Any, Dict, Optional

import tomli

from .engine.search import ALGORITHMS, SearchLimits
from .players import PLAYER_KINDS

CONFIG_HOME = pathlib.Path(os.path.expanduser("~/.morris_ai"))
CONFIG_PATH = CONFIG_HOME / "config.toml"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    pass


@dataclass
class EngineConfig:
    depth: int = 6
    algorithm: str = "alphabeta"

    def limits(self) -> SearchLimits:
        return SearchLimits(max_depth=self.depth, algorithm=self.algorithm)


@dataclass
class GameConfig:
    white: str = "human"
    black: str = "ai"
    max_plies: int = 400
    seed: Optional[int] = None


@dataclass
class LoggingConfig:
    level: str = "INFO"
    overwrite: bool = True

    @property
    def level_no(self) -> int:
        return getattr(logging, self.level)


@dataclass
class Config:
    engine: EngineConfig = field(default_factory=EngineConfig)
    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_defaults() -> Dict[str, Any]:
    pkg = resources.files("morris_ai").joinpath("config/defaults.toml")
    with pkg.open("rb") as f:
        return tomli.load(f)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = {name: dict(table) for name, table in base.items()}
    for name, table in override.items():
        if not isinstance(table, dict):
            raise ConfigError(f"[{name}] must be a table")
        merged.setdefault(name, {}).update(table)
    return merged


def validate_config(cfg: Config) -> Config:
    if not isinstance(cfg.engine.depth, int) or cfg.engine.depth < 1:
        raise ConfigError(f"engine.depth must be a positive integer, got {cfg.engine.depth!r}")
    if cfg.engine.algorithm not in ALGORITHMS:
        raise ConfigError(f"engine.algorithm must be one of {ALGORITHMS}, got {cfg.engine.algorithm!r}")
    for side in ("white", "black"):
        kind = getattr(cfg.game, side)
        if kind not in PLAYER_KINDS:
            raise ConfigError(f"game.{side} must be one of {PLAYER_KINDS}, got {kind!r}")
    if not isinstance(cfg.game.max_plies, int) or cfg.game.max_plies < 1:
        raise ConfigError(f"game.max_plies must be a positive integer, got {cfg.game.max_plies!r}")
    cfg.logging.level = str(cfg.logging.level).upper()
    if cfg.logging.level not in LOG_LEVELS:
        raise ConfigError(f"logging.level must be one of {LOG_LEVELS}, got {cfg.logging.level!r}")
    return cfg


def config_from_dict(data: Dict[str, Any]) -> Config:
    try:
        cfg = Config(
            engine=EngineConfig(**data.get("engine", {})),
            game=GameConfig(**data.get("game", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )
    except TypeError as e:
        raise ConfigError(f"unknown configuration key: {e}") from e
    return validate_config(cfg)


def load_config(config_path: str | os.PathLike | None = None) -> Config:
    """Load the packaged defaults, overridden by `config_path` or ~/.morris_ai/config.toml."""
    data = load_defaults()
    if config_path is not None:
        path = pathlib.Path(config_path)
        if not path.exists():
            raise ConfigError(f"config file not found: {path}")
    else:
        path = CONFIG_PATH
    if path.exists():
        try:
            with open(path, "rb") as f:
                data = _merge(data, tomli.load(f))
        except tomli.TOMLDecodeError as e:
            raise ConfigError(f"cannot parse {path}: {e}") from e
        logging.getLogger(__name__).debug("Loaded configuration from %s", path)
    return config_from_dict(data)
