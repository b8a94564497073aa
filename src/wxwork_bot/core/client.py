"""WxWork (WeChat Work) group robot webhook client.

This module implements the webhook client with support for:
- Text messages with user / mobile mentions
- Markdown messages
- Image messages (base64 + md5)
- News (article card) messages

A send is a single best-effort POST. There is no retry or queuing.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import httpx
from pydantic import BaseModel, Field, ValidationError

from .config import DEFAULT_WEBHOOK_URL, WebhookConfig
from .exceptions import APIError, ProtocolError, TransportError
from .logger import get_logger
from .messages import Image, Markdown, Message, News, NewsArticle, Text
from .serializer import marshal_message, to_envelope

logger = get_logger("client")


class WebhookResponse(BaseModel):
    """Response body returned by the webhook.

    Attributes:
        errcode: Provider error code, 0 means success.
        errmsg: Human-readable status message.
    """

    model_config = {"extra": "allow"}

    errcode: int = Field(..., strict=True)
    errmsg: str = Field(..., strict=True)


def _mask_key(key: str) -> str:
    return f"{key[:4]}***" if len(key) > 4 else "***"


class WxWorkBot:
    """Client for sending messages to a WxWork group via its robot webhook.

    The bot holds only the webhook key and an ``httpx.Client``. It can be shared
    between threads.

    Example:
        ```python
        from wxwork_bot import Text, WxWorkBot

        with WxWorkBot("your-webhook-key") as bot:
            bot.send(Text(content="Deploy finished", mentioned_list=["@all"]))
            bot.send_markdown('<font color="info">OK</font>')
        ```

        A custom client controls timeout, proxy and TLS settings:

        ```python
        bot = WxWorkBot("your-webhook-key", client=httpx.Client(timeout=1.0))
        ```
    """

    def __init__(
        self,
        key: str,
        client: httpx.Client | None = None,
        *,
        base_url: str = DEFAULT_WEBHOOK_URL,
        timeout: float = 10.0,
        headers: dict[str, str] | None = None,
    ):
        """Initialize the bot.

        Args:
            key: Webhook key issued for the group robot
            client: Optional HTTP client. When omitted the bot creates and
                owns one with the given timeout.
            base_url: Webhook send endpoint
            timeout: Request timeout in seconds for the owned client
            headers: Extra HTTP headers sent with every request

        Raises:
            ValueError: If the key is empty
        """
        if not key or not key.strip():
            raise ValueError("Webhook key cannot be empty")

        self.key = key.strip()
        self.base_url = base_url
        self._headers = {**(headers or {}), "Content-Type": "application/json"}
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    @classmethod
    def from_config(cls, config: WebhookConfig, client: httpx.Client | None = None) -> WxWorkBot:
        """Create a bot from a :class:`WebhookConfig`."""
        return cls(
            config.key,
            client,
            base_url=config.base_url,
            timeout=config.timeout,
            headers=config.headers,
        )

    @classmethod
    def from_webhook_url(cls, url: str, client: httpx.Client | None = None) -> WxWorkBot:
        """Create a bot from a full webhook URL as shown in the group settings.

        Args:
            url: URL of the form ``https://.../cgi-bin/webhook/send?key=KEY``
            client: Optional HTTP client

        Raises:
            ValueError: If the URL has no ``key`` parameter
        """
        parsed = httpx.URL(url.strip())
        key = parsed.params.get("key")
        if not key:
            raise ValueError("Webhook URL does not contain a 'key' parameter")
        return cls(key, client, base_url=str(parsed.copy_with(query=None)))

    def __enter__(self) -> WxWorkBot:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client if the bot created it."""
        if self._owns_client:
            self._client.close()

    @property
    def webhook_url(self) -> str:
        """Full webhook URL including the key."""
        return str(httpx.URL(self.base_url, params={"key": self.key}))

    def send(self, message: Message) -> WebhookResponse:
        """Send a message to the group.

        Args:
            message: ``Text``, ``Markdown``, ``Image`` or ``News``, bare or
                wrapped in its envelope

        Returns:
            Parsed webhook response (``errcode`` is 0)

        Raises:
            UnsupportedMessageError: If the message type is not supported.
                Nothing is sent in this case.
            TransportError: If the request could not be completed
            ProtocolError: If the response body is not the expected JSON
            APIError: If the webhook returned a non-zero ``errcode``
        """
        envelope = to_envelope(message)
        body = marshal_message(envelope)

        logger.debug(
            "Sending %s message (%d bytes) with key %s",
            envelope.msgtype.value,
            len(body),
            _mask_key(self.key),
        )

        request = self._client.build_request(
            "POST",
            self.base_url,
            params={"key": self.key},
            content=body,
            headers=self._headers,
        )
        try:
            response = self._client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise TransportError(
                f"Request to WxWork webhook failed: {exc!r}", original_error=exc
            ) from exc

        try:
            response.read()
        except httpx.DecodingError as exc:
            raise ProtocolError(
                f"Webhook response body could not be decoded (HTTP {response.status_code})",
                status_code=response.status_code,
            ) from exc
        except httpx.RequestError as exc:
            raise TransportError(
                f"Reading WxWork webhook response failed: {exc!r}", original_error=exc
            ) from exc
        finally:
            response.close()

        result = self._parse_response(response)
        if result.errcode != 0:
            raise APIError(result.errcode, result.errmsg)

        logger.info("Message sent successfully (msgtype=%s)", envelope.msgtype.value)
        return result

    @staticmethod
    def _parse_response(response: httpx.Response) -> WebhookResponse:
        """Parse the webhook response body.

        The HTTP status is not checked on its own; the provider reports
        failures through ``errcode``.
        """
        try:
            data = response.json()
        except ValueError as exc:
            raise ProtocolError(
                f"Webhook response is not valid JSON (HTTP {response.status_code})",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        try:
            return WebhookResponse.model_validate(data)
        except ValidationError as exc:
            raise ProtocolError(
                f"Unexpected webhook response shape (HTTP {response.status_code})",
                status_code=response.status_code,
                body=response.text,
            ) from exc

    def send_text(
        self,
        content: str,
        mentioned_list: Sequence[str] | None = None,
        mentioned_mobile_list: Sequence[str] | None = None,
    ) -> WebhookResponse:
        """Send a text message.

        Example:
            ```python
            bot.send_text("Build failed", mentioned_list=["@all"])
            ```
        """
        return self.send(
            Text(
                content=content,
                mentioned_list=mentioned_list or [],
                mentioned_mobile_list=mentioned_mobile_list or [],
            )
        )

    def send_markdown(self, content: str) -> WebhookResponse:
        """Send a markdown message."""
        return self.send(Markdown(content=content))

    def send_image(self, data: bytes) -> WebhookResponse:
        """Send raw image bytes as an image message."""
        return self.send(Image.from_bytes(data))

    def send_image_file(self, path: str | Path) -> WebhookResponse:
        """Send an image file as an image message."""
        return self.send(Image.from_file(path))

    def send_news(self, articles: Sequence[NewsArticle]) -> WebhookResponse:
        """Send a news message with the given article cards."""
        return self.send(News(articles=list(articles)))
