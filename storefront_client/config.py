"""
Client configuration loader (API base URL, timeouts, credential backend).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .credentials.interfaces import TOKEN_KEY
from .transport import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "client_config.yml"

# environment variable -> settings field
_ENV_OVERRIDES = {
    "STOREFRONT_API_BASE_URL": "base_url",
    "STOREFRONT_TIMEOUT_SECONDS": "timeout_seconds",
    "STOREFRONT_CREDENTIAL_BACKEND": "credential_backend",
    "STOREFRONT_CREDENTIAL_FILE": "credential_file",
    "REDIS_URL": "redis_url",
}


class ClientSettings(BaseModel):
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = Field(default=20.0, gt=0, le=300)
    credential_key: str = TOKEN_KEY
    credential_backend: Literal["memory", "file", "redis"] = "memory"
    credential_file: str = ".storefront/credentials.json"
    redis_url: Optional[str] = None


def _env_overrides() -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for env_name, field_name in _ENV_OVERRIDES.items():
        value = os.getenv(env_name, "").strip()
        # Empty values behave like unset ones.
        if value:
            out[field_name] = value
    return out


def load_client_settings(config_path: Optional[Path] = None) -> ClientSettings:
    """
    Load client settings from YAML, then apply environment overrides

    Args:
        config_path: Path to config file. Defaults to config/client_config.yml,
            which may be absent.

    Returns:
        Validated ClientSettings object

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValidationError: If the merged values don't match the schema
    """
    load_dotenv()

    data: Dict[str, Any] = {}
    if config_path is not None and not Path(config_path).exists():
        raise FileNotFoundError(f"Client config file not found: {config_path}")

    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
        section = raw.get("client", raw) if isinstance(raw, dict) else {}
        data = dict(section) if isinstance(section, dict) else {}

    data.update(_env_overrides())

    try:
        settings = ClientSettings(**data)
    except ValidationError as e:
        logger.error(f"Client config validation failed: {e}")
        raise
    logger.info("Storefront API base URL: %s", settings.base_url)
    return settings
