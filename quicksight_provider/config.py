# Copyright (c) 2026 The quicksight-group-provider authors.
# Licensed under the Apache License, Version 2.0.

"""Configuration management for the QuickSight Group resource provider.

This module handles loading and validating configuration from environment
variables with sensible defaults.
"""

from typing import Optional

from botocore.config import Config
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Provider settings loaded from environment variables.

    All settings have sensible defaults for local use. Credentials are
    never configured here; boto3 resolves them through its usual chain
    (environment, shared config, instance profile).
    """

    # AWS Configuration
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region for QuickSight API calls",
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION"),
    )
    aws_profile: Optional[str] = Field(
        default=None,
        description="Named profile from the shared AWS config (optional)",
        validation_alias="AWS_PROFILE",
    )
    aws_account_id: Optional[str] = Field(
        default=None,
        description="Account used when a group does not set aws_account_id "
        "(resolved through STS if not set)",
        validation_alias="QUICKSIGHT_ACCOUNT_ID",
    )
    endpoint_url: Optional[str] = Field(
        default=None,
        description="Custom QuickSight endpoint, e.g. for a local emulator",
        validation_alias=AliasChoices("QUICKSIGHT_ENDPOINT_URL", "AWS_ENDPOINT_URL"),
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Maximum attempts per API call, handled by botocore",
        validation_alias="AWS_MAX_ATTEMPTS",
    )
    retry_mode: str = Field(
        default="adaptive",
        description="botocore retry mode (legacy, standard, adaptive)",
        validation_alias="AWS_RETRY_MODE",
    )

    # State Configuration
    state_path: str = Field(
        default="terraform-quicksight.state.json",
        description="Path to the JSON state file",
        validation_alias="QUICKSIGHT_STATE_PATH",
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="LOG_LEVEL",
    )
    cloudwatch_enabled: bool = Field(
        default=False,
        description="Enable CloudWatch logging",
        validation_alias="CLOUDWATCH_ENABLED",
    )
    cloudwatch_log_group: str = Field(
        default="/quicksight-provider/operations",
        description="CloudWatch log group name",
        validation_alias="CLOUDWATCH_LOG_GROUP",
    )
    cloudwatch_log_stream: Optional[str] = Field(
        default=None,
        description="CloudWatch log stream name (auto-generated if not set)",
        validation_alias="CLOUDWATCH_LOG_STREAM",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def boto_config(self) -> Config:
        """Build the botocore client configuration for these settings."""
        return Config(
            region_name=self.aws_region,
            retries={
                "max_attempts": self.max_attempts,
                "mode": self.retry_mode,
            },
        )


def get_settings() -> Settings:
    """
    Get provider settings.

    Loads settings from environment variables and .env file.

    Returns:
        Settings instance with all configuration values
    """
    return Settings()


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def settings() -> Settings:
    """
    Get the global settings instance.

    Creates the settings instance on first call and caches it.

    Returns:
        Global Settings instance
    """
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached global settings so the next call reloads them."""
    global _settings
    _settings = None
