"""Configuration management for the WxWork webhook bot.

This module provides configuration models and loading functionality using Pydantic
for validation and type safety.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_WEBHOOK_URL = "https://qyapi.weixin.qq.com/cgi-bin/webhook/send"

_DOTENV_LOADED = False


def _load_env_once() -> None:
    """Load environment variables from a .env file exactly once."""

    global _DOTENV_LOADED
    if not _DOTENV_LOADED:
        load_dotenv()
        _DOTENV_LOADED = True


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in configuration data."""

    if isinstance(data, str):
        return os.path.expandvars(data)
    if isinstance(data, dict):
        return {key: _expand_env_vars(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    return data


class WebhookConfig(BaseModel):
    """Configuration for a WxWork group webhook."""

    key: str = Field(..., description="Webhook key issued for the group robot")
    base_url: str = Field(default=DEFAULT_WEBHOOK_URL, description="Webhook send endpoint")
    timeout: float = Field(default=10.0, ge=0.0, description="Request timeout in seconds")
    headers: dict[str, str] = Field(
        default_factory=dict, description="Extra HTTP headers sent with requests"
    )

    @field_validator("key")
    @classmethod
    def validate_key(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Webhook key cannot be empty")
        return value.strip()

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Webhook URL cannot be empty")
        if not value.startswith("http"):
            raise ValueError("Webhook URL must start with http:// or https://")
        return value.strip()


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    log_file: str | None = Field(default=None, description="Log file path")
    max_bytes: int = Field(default=10485760, description="Max log file size (10MB)")
    backup_count: int = Field(default=5, description="Number of backup files")

    @field_validator("level")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        level = (value or "INFO").strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level


class BotConfig(BaseSettings):
    """Top-level configuration for the WxWork webhook bot.

    The webhook key may come from a config file, from ``WXWORK_BOT_KEY`` or from
    nested variables such as ``WXWORK_BOT_WEBHOOK__TIMEOUT``.
    """

    model_config = SettingsConfigDict(
        env_prefix="WXWORK_BOT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    key: str | None = Field(default=None, description="Shorthand for webhook.key")
    webhook: WebhookConfig | None = Field(default=None, description="Webhook configuration")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> BotConfig:
        """Load configuration from a YAML file."""

        _load_env_once()
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, encoding="utf-8") as handle:
            try:
                config_data = yaml.safe_load(handle)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in config file: {exc}") from exc

        if not config_data:
            config_data = {}

        config_data = _expand_env_vars(config_data)
        return cls(**config_data)

    @classmethod
    def from_json(cls, path: str | Path) -> BotConfig:
        """Load configuration from a JSON file."""

        import json

        _load_env_once()
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, encoding="utf-8") as handle:
            try:
                config_data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON in config file: {exc}") from exc

        config_data = _expand_env_vars(config_data)
        return cls(**config_data)

    def get_webhook_config(self) -> WebhookConfig:
        """Resolve the webhook configuration.

        An explicit ``webhook`` section wins over the ``key`` shorthand.

        Raises:
            ValueError: If neither ``webhook`` nor ``key`` is configured
        """
        if self.webhook is not None:
            return self.webhook
        if self.key:
            return WebhookConfig(key=self.key)
        raise ValueError("No webhook key configured (set WXWORK_BOT_KEY or 'webhook.key')")
