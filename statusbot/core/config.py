"""
Configuration management for the Better Stack status bot.

Loads configuration from:
1. .env file (secrets - never committed)
2. config.yaml (runtime settings)
"""

from dataclasses import dataclass
from typing import List, Optional
import logging
import os
import yaml
from dotenv import load_dotenv


logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://uptime.betterstack.com/api/v2"


@dataclass
class BetterStackConfig:
    """Better Stack Uptime API configuration."""

    api_key: str
    base_url: str = DEFAULT_API_URL
    timeout_seconds: int = 30

    def __post_init__(self):
        """Normalize base URL so endpoints can always start with '/'."""
        self.base_url = (self.base_url or DEFAULT_API_URL).rstrip("/")


@dataclass
class DiscordConfig:
    """Discord bot configuration."""

    token: str


@dataclass
class AppConfig:
    """Runtime application configuration (from config.yaml)."""

    # Reply sizes
    incident_limit: int = 5
    heartbeat_limit: int = 5

    # HTTP
    request_timeout_seconds: int = 30


class ConfigManager:
    """Central configuration manager.

    Loads configuration from:
    - .env file for secrets (Better Stack API key, Discord token)
    - config.yaml for runtime settings
    """

    def __init__(self, env_file: Optional[str] = None, config_file: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            env_file: Path to .env file (default: .env in working directory)
            config_file: Path to config.yaml file (default: config.yaml in working directory)
        """
        if env_file is None:
            env_file = ".env"
        load_dotenv(env_file)

        if config_file is None:
            config_file = "config.yaml"
        self.config_file = config_file

        # YAML first: the API timeout lives there
        self._load_yaml_config()
        self._load_env_config()

    def _load_env_config(self):
        """Load secrets from .env file."""
        self.better_stack = BetterStackConfig(
            api_key=os.getenv("BETTER_STACK_API_KEY", ""),
            base_url=os.getenv("BETTER_STACK_API_URL", DEFAULT_API_URL),
            timeout_seconds=self.app.request_timeout_seconds,
        )

        self.discord = DiscordConfig(
            token=os.getenv("DISCORD_TOKEN", ""),
        )

        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_file = os.getenv("LOG_FILE") or None

    def _load_yaml_config(self):
        """Load runtime configuration from config.yaml."""
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                    self.app = AppConfig(**data)
            except Exception as e:
                logger.warning(f"Failed to load {self.config_file}: {e}. Using default configuration")
                self.app = AppConfig()
        else:
            # Use defaults if config file doesn't exist
            self.app = AppConfig()

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.better_stack.api_key:
            errors.append("BETTER_STACK_API_KEY not set in .env")
        if not self.discord.token:
            errors.append("DISCORD_TOKEN not set in .env")

        # config.yaml values arrive untyped
        for name in ("incident_limit", "heartbeat_limit", "request_timeout_seconds"):
            value = getattr(self.app, name)
            if isinstance(value, bool) or not isinstance(value, int):
                errors.append(f"{name} must be an integer (got {value!r})")
            elif value < 1:
                errors.append(f"{name} must be >= 1")

        return errors


# Global singleton instance
_config: Optional[ConfigManager] = None


def get_config(env_file: Optional[str] = None, config_file: Optional[str] = None) -> ConfigManager:
    """
    Get global configuration manager instance (singleton).

    Args:
        env_file: Path to .env file (only used on first call)
        config_file: Path to config.yaml file (only used on first call)

    Returns:
        ConfigManager instance
    """
    global _config
    if _config is None:
        _config = ConfigManager(env_file=env_file, config_file=config_file)
    return _config


def reset_config():
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
