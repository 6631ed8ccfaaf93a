"""
Configuration management for callwrap.

Loads config.yaml from the callwrap home directory:
- $CALLWRAP_HOME if set
- ~/.config/callwrap otherwise

Only the command line and logging read this file. wrap() and describe()
take no configuration: canonical names never depend on it.
"""

import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from callwrap.errors import ConfigError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("pretty", "structured")


def get_callwrap_home() -> Path:
    """Get the callwrap home directory."""
    home = os.environ.get("CALLWRAP_HOME")
    if home:
        return Path(home)
    return Path("~/.config/callwrap").expanduser()


@dataclass
class CallwrapConfig:
    """
    callwrap configuration.

    Attributes:
        log_level: Logging level name
        log_format: "pretty" (rich console) or "structured" (JSON lines)
        log_file: Optional file to also write logs to
        env_file: Optional .env file loaded into the environment
    """
    log_level: str = "WARNING"
    log_format: str = "pretty"
    log_file: Optional[str] = None
    env_file: Optional[str] = None

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"Invalid log_level '{self.log_level}'. Expected one of: {', '.join(LOG_LEVELS)}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ConfigError(
                f"Invalid log_format '{self.log_format}'. Expected one of: {', '.join(LOG_FORMATS)}"
            )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CallwrapConfig":
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        unknown = sorted(set(data) - set(known))
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**known)

    def get_log_file_path(self) -> Optional[Path]:
        if not self.log_file:
            return None
        return Path(self.log_file).expanduser()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_config(config_path: Optional[Path] = None) -> CallwrapConfig:
    """
    Load callwrap configuration from YAML file.

    Args:
        config_path: Path to config file. Defaults to <home>/config.yaml

    Returns:
        CallwrapConfig instance

    Raises:
        FileNotFoundError: If the config file does not exist
        ConfigError: If the config is invalid
    """
    if config_path is None:
        config_path = get_callwrap_home() / "config.yaml"

    if not config_path.exists():
        raise FileNotFoundError(f"callwrap config.yaml not found at {config_path}")

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")

    config = CallwrapConfig.from_dict(data)

    if config.env_file:
        env_path = Path(config.env_file).expanduser()
        if env_path.exists():
            load_dotenv(env_path)

    return config


def load_config_or_default(config_path: Optional[Path] = None) -> CallwrapConfig:
    """Load configuration, falling back to defaults when no file exists."""
    try:
        return load_config(config_path)
    except FileNotFoundError:
        return CallwrapConfig()
