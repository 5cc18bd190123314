"""
Configuration management for ipv4calc.

Loads CLI defaults from environment variables or a .env file.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

OUTPUT_FORMATS = ("plain", "table", "json")


def load_env_file() -> Path | None:
    """Load the first .env found in the usual locations."""
    env_locations = [
        Path.home() / ".ipv4calc" / ".env",
        Path.home() / ".config" / "ipv4calc" / ".env",
        Path.cwd() / ".env",
    ]
    for env_path in env_locations:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


@dataclass
class CalcConfig:
    """CLI configuration."""

    output_format: str = "plain"
    log_level: str = "WARNING"
    log_file: str | None = None

    def __post_init__(self):
        self.output_format = self.output_format.lower()
        if self.output_format not in OUTPUT_FORMATS:
            self.output_format = "plain"
        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> "CalcConfig":
        """Load configuration from environment variables."""
        load_env_file()
        return cls(
            output_format=os.getenv("IPV4CALC_OUTPUT", "plain"),
            log_level=os.getenv("IPV4CALC_LOG_LEVEL", "WARNING"),
            log_file=os.getenv("IPV4CALC_LOG_FILE") or None,
        )


# Global config instance
_config: CalcConfig | None = None


def get_config() -> CalcConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = CalcConfig.from_env()
    return _config


def set_config(config: CalcConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def reset_config() -> None:
    """Drop the global configuration so the next get_config() reloads it."""
    global _config
    _config = None
