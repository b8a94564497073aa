"""Core modules for the WxWork webhook bot.

This package contains:
- Message models and the JSON envelope serializer
- Webhook client for sending messages
- Configuration management
- Logging utilities
"""

from .client import WebhookResponse, WxWorkBot
from .config import DEFAULT_WEBHOOK_URL, BotConfig, LoggingConfig, WebhookConfig
from .exceptions import (
    APIError,
    ProtocolError,
    TransportError,
    UnsupportedMessageError,
    WxWorkBotError,
)
from .logger import get_logger, log_exception, setup_logging
from .messages import (
    MENTION_ALL,
    Image,
    Markdown,
    Message,
    MessageType,
    News,
    NewsArticle,
    Text,
)
from .serializer import marshal_message

__all__ = [
    # Client
    "WxWorkBot",
    "WebhookResponse",
    # Messages
    "Text",
    "Markdown",
    "Image",
    "News",
    "NewsArticle",
    "Message",
    "MessageType",
    "MENTION_ALL",
    "marshal_message",
    # Errors
    "WxWorkBotError",
    "UnsupportedMessageError",
    "TransportError",
    "ProtocolError",
    "APIError",
    # Config
    "BotConfig",
    "WebhookConfig",
    "LoggingConfig",
    "DEFAULT_WEBHOOK_URL",
    # Logging
    "get_logger",
    "setup_logging",
    "log_exception",
]
