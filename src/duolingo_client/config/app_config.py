"""Client configuration loader.

Loads connection settings from configs/duolingo.yaml, falling back to
built-in defaults when the file is missing or a key is omitted.

Usage:
    from duolingo_client.config.app_config import load_client_config

    config = load_client_config()
    username, password = config.get_credentials()
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("configs/duolingo.yaml")

DEFAULT_HOST = "https://www.duolingo.com"
DEFAULT_DICTIONARY_HOST = "https://d2.duolingo.com"
DEFAULT_USER_AGENT = "Mozilla/5.0"


@dataclass
class ClientConfig:
    """Settings for a Duolingo account client."""

    host: str = DEFAULT_HOST
    dictionary_host: str = DEFAULT_DICTIONARY_HOST
    user_agent: str = DEFAULT_USER_AGENT
    timeout: int = 30
    username_env: str = "DUOLINGO_USERNAME"
    password_env: str = "DUOLINGO_PASSWORD"

    def get_credentials(self) -> tuple[str | None, str | None]:
        """Get username and password from environment variables."""
        return (
            os.environ.get(self.username_env),
            os.environ.get(self.password_env),
        )

    @classmethod
    def from_yaml(cls, config_path: Path | None = None) -> ClientConfig:
        """Load configuration from YAML file.

        Accepts either a top-level ``duolingo:`` section or a flat mapping.
        """
        if config_path is None:
            config_path = CONFIG_FILE

        if not config_path.exists():
            logger.debug("config_not_found", path=str(config_path))
            return cls()

        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        return _parse_config(data.get("duolingo", data))


# Module-level cache
_cached_config: ClientConfig | None = None


def _parse_config(data: dict[str, Any]) -> ClientConfig:
    """Parse configuration dictionary into ClientConfig object."""
    defaults = ClientConfig()
    return ClientConfig(
        host=str(data.get("host", defaults.host)).rstrip("/"),
        dictionary_host=str(
            data.get("dictionary_host", defaults.dictionary_host)
        ).rstrip("/"),
        user_agent=data.get("user_agent", defaults.user_agent),
        timeout=int(data.get("timeout", defaults.timeout)),
        username_env=data.get("username_env", defaults.username_env),
        password_env=data.get("password_env", defaults.password_env),
    )


def load_client_config(force_reload: bool = False) -> ClientConfig:
    """Load client config, cached after the first call.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        ClientConfig with all settings.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    if CONFIG_FILE.exists():
        logger.debug("loading_client_config", source=str(CONFIG_FILE))
    else:
        logger.info("using_default_config")

    _cached_config = ClientConfig.from_yaml(CONFIG_FILE)
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
