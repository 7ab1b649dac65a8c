"""YAML configuration loading and API key lookup."""

import os
from pathlib import Path

import pydantic
import yaml

from newsapi_client.config.models import DEFAULT_API_KEY_ENV, ClientConfig
from newsapi_client.errors import ConfigurationError


def load_config(path: Path | str) -> ClientConfig:
    """Load client configuration from a YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated ClientConfig. An empty file yields the defaults.

    Raises:
        ConfigurationError: If the file is missing, not YAML, or invalid.
    """
    path = Path(path)
    try:
        with path.open() as f:
            raw = yaml.safe_load(f)
    except FileNotFoundError as e:
        msg = f"Config file not found: {path}"
        raise ConfigurationError(msg) from e
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in config file {path}: {e}"
        raise ConfigurationError(msg) from e

    try:
        return ClientConfig.model_validate(raw or {})
    except pydantic.ValidationError as e:
        msg = f"Invalid config file {path}: {e}"
        raise ConfigurationError(msg) from e


def get_api_key(env_var: str = DEFAULT_API_KEY_ENV) -> str:
    """Read the API key from the environment.

    Raises:
        ConfigurationError: If the variable is unset or empty.
    """
    api_key = os.environ.get(env_var)
    if not api_key:
        msg = f"{env_var} environment variable not set. Set it with: export {env_var}=your_api_key"
        raise ConfigurationError(msg)
    return api_key
