"""
Configuration management for wslconv
Centralizes CLI settings and provides multiple loading methods
"""

import os
import json
import logging
from dataclasses import dataclass, field, asdict
from typing import Optional

logger = logging.getLogger(__name__)

DIRECTIONS = ("auto", "to-wsl", "to-windows")
OUTPUT_FORMATS = ("text", "json")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LoggingConfig:
    """Configuration for log output"""
    level: str = "WARNING"
    log_file: Optional[str] = None
    format: str = "%(asctime)s - %(levelname)s - %(message)s"


@dataclass
class OutputConfig:
    """Configuration for how results are printed"""
    format: str = "text"
    copy_to_clipboard: bool = False
    show_source: bool = False


def _env_flag(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


@dataclass
class ConverterConfig:
    """Main configuration container"""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    # Global settings
    direction: str = "auto"
    fail_fast: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls) -> 'ConverterConfig':
        """Load configuration from environment variables"""
        config = cls()

        # Override with environment variables
        if direction := os.getenv("WSLCONV_DIRECTION"):
            config.direction = direction.lower()

        if output_format := os.getenv("WSLCONV_OUTPUT_FORMAT"):
            config.output.format = output_format.lower()

        if copy := os.getenv("WSLCONV_COPY"):
            config.output.copy_to_clipboard = _env_flag(copy)

        if level := os.getenv("WSLCONV_LOG_LEVEL"):
            config.logging.level = level.upper()

        if log_file := os.getenv("WSLCONV_LOG_FILE"):
            config.logging.log_file = log_file

        if debug := os.getenv("WSLCONV_DEBUG"):
            config.debug = _env_flag(debug)

        return config

    @classmethod
    def from_file(cls, path: str) -> 'ConverterConfig':
        """Load configuration from JSON file"""
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Configuration must be a JSON object: {path}")

        config = cls()

        # Update nested configs
        try:
            if 'logging' in data:
                config.logging = LoggingConfig(**data['logging'])
            if 'output' in data:
                config.output = OutputConfig(**data['output'])
        except TypeError as e:
            raise ValueError(f"Invalid configuration in {path}: {e}") from e

        # Update global settings
        if 'direction' in data:
            config.direction = data['direction']
        if 'fail_fast' in data:
            config.fail_fast = data['fail_fast']
        if 'debug' in data:
            config.debug = data['debug']

        return config

    @classmethod
    def default(cls) -> 'ConverterConfig':
        """Get default configuration"""
        return cls()

    def save(self, path: str):
        """Save configuration to JSON file"""
        data = {
            'logging': asdict(self.logging),
            'output': asdict(self.output),
            'direction': self.direction,
            'fail_fast': self.fail_fast,
            'debug': self.debug,
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    def validate(self) -> bool:
        """Validate configuration settings"""
        errors = []

        if self.direction not in DIRECTIONS:
            errors.append(f"Direction must be one of {', '.join(DIRECTIONS)}: {self.direction}")

        if self.output.format not in OUTPUT_FORMATS:
            errors.append(f"Output format must be one of {', '.join(OUTPUT_FORMATS)}: {self.output.format}")

        if not isinstance(self.logging.level, str) or self.logging.level.upper() not in LOG_LEVELS:
            errors.append(f"Unknown log level: {self.logging.level}")

        if errors:
            for error in errors:
                logger.error(f"Configuration error: {error}")
            return False

        return True


# Singleton pattern for global config
_global_config: Optional[ConverterConfig] = None


def get_config() -> ConverterConfig:
    """Get the global configuration instance"""
    global _global_config
    if _global_config is None:
        # Try loading from file first, then env
        config_file = os.getenv("WSLCONV_CONFIG_FILE", "wslconv_config.json")
        if os.path.exists(config_file):
            _global_config = ConverterConfig.from_file(config_file)
        else:
            _global_config = ConverterConfig.from_env()
    return _global_config


def set_config(config: ConverterConfig):
    """Set the global configuration instance"""
    global _global_config
    _global_config = config


def reset_config():
    """Reset to default configuration"""
    global _global_config
    _global_config = ConverterConfig.default()
