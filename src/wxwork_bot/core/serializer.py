"""Serialization of messages into the WxWork webhook JSON envelope.

Every message is sent as::

    {"msgtype": "<kind>", "<kind>": {...payload...}}

Both bare payloads (``Text``) and envelopes (``TextMessage``) are accepted and
produce identical bytes. Anything else raises ``UnsupportedMessageError``.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from typing import Any

from .exceptions import UnsupportedMessageError
from .messages import (
    Envelope,
    Image,
    ImageMessage,
    Markdown,
    MarkdownMessage,
    Message,
    MessageType,
    News,
    NewsArticle,
    NewsMessage,
    Text,
    TextMessage,
)


def _string_list(values: Sequence[str] | None) -> list[str] | None:
    # None is sent as null, an empty sequence as []
    if values is None:
        return None
    return list(values)


def _encode_text(text: Text) -> dict[str, Any]:
    return {
        "content": text.content,
        "mentioned_list": _string_list(text.mentioned_list),
        "mentioned_mobile_list": _string_list(text.mentioned_mobile_list),
    }


def _encode_markdown(markdown: Markdown) -> dict[str, Any]:
    return {"content": markdown.content}


def _encode_image(image: Image) -> dict[str, Any]:
    return {"base64": image.base64, "md5": image.md5}


def _encode_article(article: NewsArticle) -> dict[str, Any]:
    if type(article) is not NewsArticle:
        raise UnsupportedMessageError(type(article))
    return {
        "title": article.title,
        "description": article.description,
        "url": article.url,
        "picurl": article.pic_url,
    }


def _encode_news(news: News) -> dict[str, Any]:
    return {"articles": [_encode_article(article) for article in news.articles]}


# Bare payload type -> envelope type
_ENVELOPES: dict[type, type] = {
    Text: TextMessage,
    Markdown: MarkdownMessage,
    Image: ImageMessage,
    News: NewsMessage,
}

# Discriminator -> (payload type, payload encoder)
_ENCODERS: dict[MessageType, tuple[type, Callable[[Any], dict[str, Any]]]] = {
    MessageType.TEXT: (Text, _encode_text),
    MessageType.MARKDOWN: (Markdown, _encode_markdown),
    MessageType.IMAGE: (Image, _encode_image),
    MessageType.NEWS: (News, _encode_news),
}

_missing = (set(MessageType) - set(_ENCODERS)) | (
    set(MessageType) - {env.msgtype for env in _ENVELOPES.values()}
)
if _missing:
    raise RuntimeError(
        f"Message types without a serializer: {sorted(kind.value for kind in _missing)}"
    )


def to_envelope(message: Message) -> Envelope:
    """Return the envelope for a bare payload or an already wrapped message.

    Args:
        message: A payload (``Text``, ``Markdown``, ``Image``, ``News``) or an
            envelope (``TextMessage`` etc.)

    Returns:
        The matching envelope

    Raises:
        UnsupportedMessageError: If the value is neither
    """
    message_type = type(message)
    if message_type in _ENVELOPES:
        return _ENVELOPES[message_type](message)
    if message_type in _ENVELOPES.values():
        return message  # type: ignore[return-value]
    raise UnsupportedMessageError(message_type)


def marshal_message(message: Message) -> bytes:
    """Serialize a message into the webhook JSON body.

    The output is UTF-8 with compact separators. Non-ASCII text is kept as is
    and ``<``, ``>``, ``&`` are not escaped, so markdown and ``<font>`` tags
    reach the group unchanged.

    Args:
        message: A payload or an envelope

    Returns:
        JSON document as UTF-8 bytes

    Raises:
        UnsupportedMessageError: If the value is not a supported message

    Example:
        ```python
        marshal_message(Markdown(content="**hi**"))
        # b'{"msgtype":"markdown","markdown":{"content":"**hi**"}}'
        ```
    """
    envelope = to_envelope(message)
    kind = envelope.msgtype
    payload_type, encode = _ENCODERS[kind]

    payload = getattr(envelope, kind.value)
    if type(payload) is not payload_type:
        raise UnsupportedMessageError(type(payload))

    document = {"msgtype": kind.value, kind.value: encode(payload)}
    return json.dumps(document, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
