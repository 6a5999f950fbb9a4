"""
Configuration and logging utilities.
"""

from .config_loader import Config, DisplayConfig, TimingConfig, LoggingConfig, load_config, save_config
from .logger import setup_logging

__all__ = [
    'Config',
    'DisplayConfig',
    'TimingConfig',
    'LoggingConfig',
    'load_config',
    'save_config',
    'setup_logging',
]
