"""Configuration module for wslconv"""

from .settings import (
    ConverterConfig,
    LoggingConfig,
    OutputConfig,
    get_config,
    set_config,
    reset_config
)

__all__ = [
    "ConverterConfig",
    "LoggingConfig",
    "OutputConfig",
    "get_config",
    "set_config",
    "reset_config",
]
