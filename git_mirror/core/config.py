"""
Configuration module for the git mirror project.

This module provides the provider configuration and its validation.
It uses Pydantic for configuration validation and dotenv for loading
environment variables.
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, SecretStr, field_validator

from git_mirror.core.exceptions import ConfigError

# Configure logging
logger = logging.getLogger(__name__)

# Load environment variables from .env file
load_dotenv()

DEFAULT_GITLAB_URL = "https://gitlab.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_PAGES = 10000


class GitLabProviderConfig(BaseModel):
    """Configuration of a GitLab provider, immutable once built."""

    model_config = ConfigDict(frozen=True)

    url: str
    group: str
    use_http: bool = False
    private_token: Optional[SecretStr] = None
    timeout: Optional[float] = DEFAULT_TIMEOUT
    ssl_verify: bool = True
    max_pages: int = DEFAULT_MAX_PAGES

    @field_validator("url")
    @classmethod
    def validate_url(cls, v):
        """Validates URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("group")
    @classmethod
    def validate_group(cls, v):
        """Validates the group identifier."""
        v = v.strip().strip("/")
        if not v:
            raise ValueError("Group must not be empty")
        return v

    @field_validator("max_pages")
    @classmethod
    def validate_max_pages(cls, v):
        if v < 1:
            raise ValueError("max_pages must be at least 1")
        return v

    @property
    def token(self) -> Optional[str]:
        """Plain text private token, or None when unauthenticated."""
        if self.private_token is None:
            return None
        return self.private_token.get_secret_value() or None


def get_env_variable(name: str, required: bool = False) -> Optional[str]:
    """
    Retrieve environment variable. Exit if required and missing.

    Args:
        name: Name of the environment variable
        required: Whether the variable is required

    Returns:
        Value of the environment variable or None if not required and not found

    Raises:
        ConfigError: If the variable is required but not found
    """
    value = os.getenv(name)

    if required and not value:
        logger.error("Missing required environment variable: %s", name)
        raise ConfigError(f"Missing required environment variable: {name}")

    return value


def parse_bool(value: Optional[str]) -> bool:
    """Interpret an environment flag such as ``true``, ``yes`` or ``1``."""
    if not value:
        return False
    return value.strip().lower() in ("true", "yes", "1")


def build_config(
    url: Optional[str],
    group: Optional[str],
    use_http: bool = False,
    private_token: Optional[str] = None,
    timeout: Optional[float] = DEFAULT_TIMEOUT,
) -> GitLabProviderConfig:
    """
    Build a validated provider configuration.

    Raises:
        ConfigError: If a value is missing or invalid
    """
    try:
        return GitLabProviderConfig(
            url=url or DEFAULT_GITLAB_URL,
            group=group or "",
            use_http=use_http,
            private_token=SecretStr(private_token) if private_token else None,
            timeout=timeout,
        )
    except ValueError as e:
        logger.error("Configuration validation error: %s", e)
        raise ConfigError(f"Configuration validation error: {e}") from e


def load_config_from_env() -> GitLabProviderConfig:
    """
    Load configuration from environment variables.

    Returns:
        GitLabProviderConfig object with validated configuration

    Raises:
        ConfigError: If any required configuration is missing or invalid
    """
    group = get_env_variable("GITLAB_GROUP", required=True)
    timeout_str = get_env_variable("GITLAB_TIMEOUT")

    timeout = DEFAULT_TIMEOUT
    if timeout_str:
        try:
            timeout = float(timeout_str)
        except ValueError as e:
            raise ConfigError(f"GITLAB_TIMEOUT is not a number: {timeout_str}") from e

    return build_config(
        url=get_env_variable("GITLAB_URL"),
        group=group,
        use_http=parse_bool(get_env_variable("GITLAB_USE_HTTP")),
        private_token=get_env_variable("GITLAB_PRIVATE_TOKEN"),
        timeout=timeout,
    )
