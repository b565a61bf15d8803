"""Configuration Management Package"""

import json
import os
import sys
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from gai import DEFAULT_MODEL, DEFAULT_TEMPERATURE
from gai.llm.base import LLMError, validate_model, validate_temperature

ENV_MODEL = "GAI_MODEL"
ENV_TEMPERATURE = "GAI_TEMPERATURE"


@dataclass
class Config:
    """User configuration with the same defaults as the CLI."""
    model: str = DEFAULT_MODEL
    temperature: float = DEFAULT_TEMPERATURE
    max_file_display: int = 8  # Max staged files listed before collapsing

    def to_dict(self) -> dict:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def validate(self) -> list[str]:
        """Validate config values and return list of warnings.

        Invalid values are replaced with defaults after warning.
        """
        warnings = []
        defaults = Config()

        try:
            self.model = validate_model(self.model)
        except LLMError as e:
            warnings.append(f"{e} Using '{defaults.model}'")
            self.model = defaults.model

        # Strings like "0.7" are not accepted from the rc file; JSON has numbers
        try:
            if isinstance(self.temperature, str):
                raise LLMError(f"Invalid temperature '{self.temperature}': must be a number.")
            self.temperature = validate_temperature(self.temperature)
        except LLMError as e:
            warnings.append(f"{e} Using {defaults.temperature}")
            self.temperature = defaults.temperature

        if isinstance(self.max_file_display, bool) or not isinstance(self.max_file_display, int) or self.max_file_display <= 0:
            warnings.append(f"Invalid max_file_display '{self.max_file_display}', using {defaults.max_file_display}")
            self.max_file_display = defaults.max_file_display

        return warnings

    @classmethod
    def from_dict(cls, data: dict) -> 'Config':
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        config = cls(**filtered)
        for warning in config.validate():
            print(f"Config warning: {warning}", file=sys.stderr)
        return config


class ConfigManager:
    """Loads and saves the .gairc file (current directory first, then home)."""

    CONFIG_FILENAME = ".gairc"

    def __init__(self):
        self._config: Optional[Config] = None
        self._config_path: Optional[Path] = None

    def load(self) -> Config:
        if self._config is not None:
            return self._config

        for path in (Path.cwd() / self.CONFIG_FILENAME, Path.home() / self.CONFIG_FILENAME):
            if path.exists():
                self._config = self._load_from_file(path)
                self._config_path = path
                return self._config

        self._config = Config()
        return self._config

    def _load_from_file(self, path: Path) -> Config:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
            print(f"Warning: Could not load {path}: {e}", file=sys.stderr)
            return Config()
        if not isinstance(data, dict):
            print(f"Warning: Could not load {path}: expected a JSON object", file=sys.stderr)
            return Config()
        return Config.from_dict(data)

    def save(self, config: Config, global_config: bool = True) -> Path:
        path = Path.home() / self.CONFIG_FILENAME if global_config else Path.cwd() / self.CONFIG_FILENAME
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(config.to_dict(), f, indent=2)
        self._config = config
        self._config_path = path
        return path

    def get_config_path(self) -> Optional[Path]:
        return self._config_path


_manager = ConfigManager()


def load_config() -> Config:
    return _manager.load()


def save_config(config: Config, global_config: bool = True) -> Path:
    return _manager.save(config, global_config)


def get_config_path() -> Optional[Path]:
    return _manager.get_config_path()


def load_env() -> Optional[str]:
    """Load a .env file found from the current directory upwards.

    Variables already set in the process environment take precedence.
    Returns the path that was loaded, or None. Raises ValueError when the
    file is not valid UTF-8.
    """
    path = find_dotenv(usecwd=True)
    if not path:
        return None
    try:
        load_dotenv(path, override=False)
    except UnicodeDecodeError:
        raise ValueError(f"Could not read {path}: not valid UTF-8")
    return path


def resolve_settings(config: Config, model: Optional[str] = None,
                     temperature: Optional[float] = None) -> tuple[str, float]:
    """Resolve model and temperature.

    Precedence: CLI args > environment variables > config file.
    An unparseable GAI_TEMPERATURE raises ValueError.
    """
    resolved_model = model or os.environ.get(ENV_MODEL) or config.model

    if temperature is not None:
        resolved_temp = temperature
    elif os.environ.get(ENV_TEMPERATURE):
        raw = os.environ[ENV_TEMPERATURE]
        try:
            resolved_temp = float(raw)
        except ValueError:
            raise ValueError(f"{ENV_TEMPERATURE} must be a number, got '{raw}'")
    else:
        resolved_temp = config.temperature

    return resolved_model, resolved_temp


__all__ = [
    "Config",
    "ConfigManager",
    "load_config",
    "save_config",
    "get_config_path",
    "load_env",
    "resolve_settings",
    "ENV_MODEL",
    "ENV_TEMPERATURE",
]
