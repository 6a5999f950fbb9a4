"""
Configuration Loader - Load and validate configuration from YAML.

Only presentation, timing and logging settings are configurable; the arena
geometry is fixed in invaders.game.constants.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Any
from dataclasses import dataclass, field, asdict

from ..game.constants import TICK_INTERVAL_MS

logger = logging.getLogger(__name__)


@dataclass
class DisplayConfig:
    """Window settings."""
    title: str = "Invaders"
    scale: float = 1.0
    fps: int = 60
    key_repeat_delay: int = 200  # ms before a held key repeats, 0 disables
    key_repeat_interval: int = 50


@dataclass
class TimingConfig:
    """Simulation clock settings."""
    tick_interval_ms: float = TICK_INTERVAL_MS
    max_ticks_per_update: int = 5


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_file: str = ""


@dataclass
class Config:
    """Complete application configuration."""
    display: DisplayConfig = field(default_factory=DisplayConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _dict_to_dataclass(data: dict, cls: type) -> Any:
    """Convert a dictionary to a dataclass instance."""
    if not data:
        return cls()

    # Get the fields that the dataclass expects
    field_names = {f.name for f in cls.__dataclass_fields__.values()}

    # Filter to only include valid fields
    filtered_data = {k: v for k, v in data.items() if k in field_names}

    return cls(**filtered_data)


def _find_config_file() -> Optional[Path]:
    """Look for config.yaml in the usual places."""
    possible_paths = [
        Path("config.yaml"),
        Path(__file__).parent.parent.parent / "config.yaml",
    ]

    for path in possible_paths:
        if path.exists():
            return path
    return None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file (defaults to project root config.yaml)

    Returns:
        Config object with all settings
    """
    path = Path(config_path) if config_path else _find_config_file()

    if path is None or not path.exists():
        logger.info("No config file found, using defaults")
        return Config()

    with open(path, 'r') as f:
        data = yaml.safe_load(f)

    logger.info("Loaded config from %s", path)

    if data is None:
        return Config()

    config = Config()

    if 'display' in data:
        config.display = _dict_to_dataclass(data['display'], DisplayConfig)

    if 'timing' in data:
        config.timing = _dict_to_dataclass(data['timing'], TimingConfig)

    if 'logging' in data:
        config.logging = _dict_to_dataclass(data['logging'], LoggingConfig)

    return config


def save_config(config: Config, config_path: str):
    """
    Save configuration to a YAML file.

    Args:
        config: Config object to save
        config_path: Path to save to
    """
    data = asdict(config)

    with open(config_path, 'w') as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
