"""Configuration management for charsetkit."""

import json
from dataclasses import dataclass
from typing import Dict, Any, Optional
from pathlib import Path


@dataclass
class ServiceConfig:
    """File service configuration."""
    offload_threshold_bytes: int = 1024 * 1024  # transform larger buffers off the event loop
    default_save_encoding: str = "UTF-8"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_dir: str = "logs"
    backup_count: int = 7
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class CharsetKitConfig:
    """Main configuration class for charsetkit."""

    def __init__(self, config_file: Optional[Path] = None):
        self.service = ServiceConfig()
        self.logging = LoggingConfig()

        if config_file and config_file.exists():
            self._load_from_file(config_file)

    def _load_from_file(self, config_file: Path):
        """Load configuration from a JSON file."""
        with open(config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
        loaded = self.from_dict(data)
        self.service = loaded.service
        self.logging = loaded.logging

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "service": self.service.__dict__,
            "logging": self.logging.__dict__
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CharsetKitConfig':
        """Create configuration from dictionary."""
        config = cls()

        try:
            if "service" in data:
                config.service = ServiceConfig(**data["service"])
            if "logging" in data:
                config.logging = LoggingConfig(**data["logging"])
        except TypeError as e:
            raise ValueError(f"Invalid configuration: {e}") from e

        return config


# Global configuration instance
_config: Optional[CharsetKitConfig] = None


def get_config() -> CharsetKitConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = CharsetKitConfig()
    return _config


def set_config(config: CharsetKitConfig):
    """Set the global configuration instance."""
    global _config
    _config = config


def load_config_from_file(config_file: Path) -> CharsetKitConfig:
    """Load configuration from file and set as global."""
    config = CharsetKitConfig(config_file)
    set_config(config)
    return config
