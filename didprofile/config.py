"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import AliasChoices, Field, ValidationError
from pydantic_settings import BaseSettings

from didprofile.exceptions import ConfigError


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class ServiceConfig(BaseSettings):
    """Configuration for the profile service."""

    # Identity service
    atproto_base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("atproto_base_url", "didprofile_atproto_base_url"),
    )

    # Utility account secret
    util_account_secret_name: str | None = Field(
        default=None,
        validation_alias=AliasChoices("util_account_secret_name", "pds_util_account_creds"),
    )
    aws_region: str = Field(
        default="us-east-1",
        validation_alias=AliasChoices("aws_region", "didprofile_aws_region"),
    )

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.JSON

    model_config = {
        "env_prefix": "DIDPROFILE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


def load_settings(**overrides) -> ServiceConfig:
    """Build ServiceConfig, reporting invalid settings as ConfigError."""
    try:
        return ServiceConfig(**overrides)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise ConfigError(f"Invalid configuration: {fields}") from e


def load_config(**overrides) -> ServiceConfig:
    """
    Load service configuration from the environment.

    Args:
        **overrides: Explicit field values taking precedence over the environment

    Returns:
        ServiceConfig with a non-empty base URL

    Raises:
        ConfigError: If settings are invalid or ATPROTO_BASE_URL is unset
    """
    config = load_settings(**overrides)
    base_url = (config.atproto_base_url or "").strip().rstrip("/")
    if not base_url:
        raise ConfigError("ATPROTO_BASE_URL environment variable is required")
    config.atproto_base_url = base_url
    return config
