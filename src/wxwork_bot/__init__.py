"""WxWork Webhook Bot.

A small client for posting notifications to a WeChat Work (WxWork) group
through its robot webhook:
- Text messages with @mentions
- Markdown messages
- Image messages
- News (article card) messages

Example:
    ```python
    from wxwork_bot import Markdown, Text, WxWorkBot

    bot = WxWorkBot("your-webhook-key")
    bot.send(Text(content="Hello", mentioned_list=["@all"]))
    bot.send(Markdown(content='Status: <font color="info">OK</font>'))

    # Or from configuration (reads WXWORK_BOT_KEY)
    from wxwork_bot import BotConfig

    bot = WxWorkBot.from_config(BotConfig().get_webhook_config())
    ```
"""

from importlib.metadata import PackageNotFoundError, version

from .core import (
    APIError,
    BotConfig,
    Image,
    LoggingConfig,
    Markdown,
    News,
    NewsArticle,
    ProtocolError,
    Text,
    TransportError,
    UnsupportedMessageError,
    WebhookConfig,
    WebhookResponse,
    WxWorkBot,
    WxWorkBotError,
    get_logger,
    marshal_message,
    setup_logging,
)

__all__ = [
    "__version__",
    "WxWorkBot",
    "WebhookResponse",
    "Text",
    "Markdown",
    "Image",
    "News",
    "NewsArticle",
    "marshal_message",
    "WxWorkBotError",
    "UnsupportedMessageError",
    "TransportError",
    "ProtocolError",
    "APIError",
    "BotConfig",
    "WebhookConfig",
    "LoggingConfig",
    "get_logger",
    "setup_logging",
]

try:  # pragma: no cover - best-effort during development
    __version__ = version("wxwork-webhook-bot")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
