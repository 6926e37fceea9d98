from __future__ import annotations

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

from shimmer.protocol.constants import DEFAULT_READ_SIZE, DEFAULT_TICK_INTERVAL

ENV_PREFIX = "SHIMMER_"

DEFAULT_CONFIG: Dict[str, Any] = {
    "server_host": "127.0.0.1",
    "server_port": 8080,
    "username": "Shimmer",
    "verbose": False,
    "tick_interval": DEFAULT_TICK_INTERVAL,
    "read_size": DEFAULT_READ_SIZE,
    "log_level": "INFO",
}

# value type of each key; environment strings are converted to these
CONFIG_TYPES: Dict[str, type] = {
    "server_host": str,
    "server_port": int,
    "username": str,
    "verbose": bool,
    "tick_interval": float,
    "read_size": int,
    "log_level": str,
}

CLIENT_CONFIG: Dict[str, Any] = DEFAULT_CONFIG.copy()


class ConfigError(Exception):
    """Raised when configuration values are invalid."""

    pass


def load_config(env_path: str = ".env") -> Dict[str, Any]:
    """Load client configuration from env file/environment variables (``SHIMMER_<KEY>``)."""
    if os.path.exists(env_path):
        load_dotenv(env_path)

    for key, target_type in CONFIG_TYPES.items():
        value = os.getenv(f"{ENV_PREFIX}{key.upper()}")
        CLIENT_CONFIG[key] = DEFAULT_CONFIG[key] if value is None else _coerce_type(value, target_type)

    _validate_config()
    logging.getLogger().setLevel(CLIENT_CONFIG["log_level"])
    return CLIENT_CONFIG


def _coerce_type(value: Any, target_type: type) -> Any:
    if isinstance(value, target_type):
        return value
    try:
        if target_type is bool:
            return str(value).lower() in ("1", "true", "yes", "on")
        return target_type(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Cannot convert {value} to {target_type}") from exc


def _validate_config() -> None:
    if not (1 <= int(CLIENT_CONFIG["server_port"]) <= 65535):
        raise ConfigError("server_port must be between 1 and 65535")
    if not str(CLIENT_CONFIG["username"]).strip():
        raise ConfigError("username must not be empty")
    if CLIENT_CONFIG["tick_interval"] <= 0:
        raise ConfigError("tick_interval must be positive")
    if CLIENT_CONFIG["read_size"] <= 0:
        raise ConfigError("read_size must be positive")
    if str(CLIENT_CONFIG["log_level"]).upper() not in logging.getLevelNamesMapping():
        raise ConfigError(f"Unknown log_level {CLIENT_CONFIG['log_level']}")
    CLIENT_CONFIG["log_level"] = str(CLIENT_CONFIG["log_level"]).upper()


def get(key: str, default: Any = None) -> Any:
    return CLIENT_CONFIG.get(key, default)


__all__ = ["CLIENT_CONFIG", "CONFIG_TYPES", "DEFAULT_CONFIG", "ConfigError", "get", "load_config"]
