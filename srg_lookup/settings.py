"""
Configuration loading for the SRG20 token lookup tool.

Endpoints, timeouts and chart styling come from a YAML file; API keys come
from the environment (optionally populated from a ``.env`` file).
"""

import copy
import logging
import os
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "networks": {
        "BNB": {
            "explorer_url": "https://api.bscscan.com/api",
            "explorer_params": {},
            "api_key_env": "BSCSCAN_API_KEY",
            "chain_id": "bnb",
        },
        "ETH": {
            "explorer_url": "https://api.etherscan.io/v2/api",
            "explorer_params": {"chainid": 1},
            "api_key_env": "ETHERSCAN_API_KEY",
            "chain_id": "eth",
        },
        "ARB": {
            "explorer_url": "https://api.arbiscan.io/api",
            "explorer_params": {},
            "api_key_env": "ARBISCAN_API_KEY",
            "chain_id": "arbitrum",
        },
    },
    "mobula": {
        "base_url": "https://api.mobula.io/api/1",
        "api_key_env": "MOBULA_API_KEY",
    },
    "http": {
        "timeout_seconds": 10,
    },
    "visualization": {
        "theme": "plotly_dark",
        "line_color": "rgba(75,192,192,1)",
        "fill_color": "rgba(75,192,192,0.2)",
        "default_height": 500,
        "export": {
            "format": "html",
        },
    },
    "web_interface": {
        "host": "127.0.0.1",
        "port": 8050,
    },
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_config(config_path: Optional[str] = "config.yaml") -> Dict[str, Any]:
    """
    Load configuration from a YAML file, layered over the built-in defaults.

    Args:
        config_path: Path to the configuration file. ``None`` skips the file.

    Returns:
        Configuration dictionary
    """
    if config_path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_path, "r") as f:
            user_config = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning(f"Config file not found at {config_path}, using defaults")
        return copy.deepcopy(DEFAULT_CONFIG)

    return _merge(DEFAULT_CONFIG, user_config)


def load_environment(dotenv_path: Optional[str] = None) -> None:
    """Populate ``os.environ`` from a ``.env`` file without overriding it."""
    if load_dotenv(dotenv_path):
        logger.debug("Loaded environment from .env file")


def get_api_key(env_name: str) -> str:
    """Return the credential stored in ``env_name``; empty when unset."""
    return os.environ.get(env_name, "")
