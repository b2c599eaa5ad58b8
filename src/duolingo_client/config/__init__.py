"""Configuration package for the Duolingo client."""

from duolingo_client.config.app_config import (
    ClientConfig,
    clear_config_cache,
    load_client_config,
)

__all__ = [
    "ClientConfig",
    "clear_config_cache",
    "load_client_config",
]
