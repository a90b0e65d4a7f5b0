"""
Configuration loader for the payments client
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError

from payments_client import __version__

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.stripe.com"

# env var -> config field
_ENV_OVERRIDES = {
    "PAYMENTS_API_KEY": "api_key",
    "PAYMENTS_API_BASE": "api_base",
    "PAYMENTS_API_VERSION": "api_version",
    "PAYMENTS_TIMEOUT_SECONDS": "timeout_seconds",
    "PAYMENTS_USER_AGENT": "user_agent",
}


class ClientConfig(BaseModel):
    """Connection settings shared by every resource client"""

    api_key: Optional[str] = None
    api_base: str = Field(default=DEFAULT_API_BASE, min_length=8)
    api_version: Optional[str] = None
    timeout_seconds: float = Field(default=80.0, gt=0)
    user_agent: str = Field(default=f"payments-client/{__version__}", min_length=1)

    def masked_key(self) -> str:
        """API key safe for log output"""
        if not self.api_key:
            return "<unset>"
        return f"{self.api_key[:7]}...{self.api_key[-4:]}"


def _env_overrides() -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for env_name, field_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value is not None and value.strip():
            values[field_name] = value.strip()
    return values


def config_from_env() -> ClientConfig:
    """
    Build a ClientConfig from PAYMENTS_* environment variables.

    A `.env` file in the working directory is loaded first (existing
    environment variables win).
    """
    load_dotenv(find_dotenv(usecwd=True))
    try:
        return ClientConfig(**_env_overrides())
    except ValidationError as e:
        logger.error(f"Client config from environment is invalid: {e}")
        raise


def load_client_config(config_path: Optional[Path] = None) -> ClientConfig:
    """
    Load and validate client configuration from a YAML file

    Environment variables (PAYMENTS_*) override values from the file.

    Args:
        config_path: Path to config file. Defaults to config/client_config.yml

    Returns:
        Validated ClientConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent / "config" / "client_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    load_dotenv(find_dotenv(usecwd=True))
    config_data.update(_env_overrides())

    try:
        config = ClientConfig(**config_data)
        logger.info(f"Successfully loaded client config from {config_path}")
        return config
    except ValidationError as e:
        logger.error(f"Client config validation failed: {e}")
        raise
