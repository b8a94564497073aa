"""Message models for WxWork group webhooks.

The webhook accepts four message kinds. Each kind has a bare payload class
(what callers normally build) and an envelope class that pairs the payload
with its ``msgtype`` discriminator. The serializer accepts either form.
"""

from __future__ import annotations

import base64
import hashlib
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar

# Special mention target that notifies everyone in the group
MENTION_ALL = "@all"


class MessageType(str, Enum):
    """WxWork webhook message types."""

    TEXT = "text"
    MARKDOWN = "markdown"
    IMAGE = "image"
    NEWS = "news"


def _freeze_mentions(name: str, values: Sequence[str] | None) -> tuple[str, ...] | None:
    # A bare str is a Sequence[str] too and would be split into characters
    if values is None:
        return None
    if isinstance(values, str):
        raise TypeError(f"{name} must be a sequence of strings, not str")
    return tuple(values)


@dataclass(frozen=True)
class Text:
    """Plain text message.

    Attributes:
        content: Message text.
        mentioned_list: User ids to mention, or ``"@all"``.
        mentioned_mobile_list: Mobile numbers to mention, or ``"@all"``.
    """

    content: str
    mentioned_list: Sequence[str] | None = ()
    mentioned_mobile_list: Sequence[str] | None = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "mentioned_list", _freeze_mentions("mentioned_list", self.mentioned_list)
        )
        object.__setattr__(
            self,
            "mentioned_mobile_list",
            _freeze_mentions("mentioned_mobile_list", self.mentioned_mobile_list),
        )


@dataclass(frozen=True)
class Markdown:
    """Markdown message.

    WxWork markdown supports a small subset of syntax plus
    ``<font color="info|comment|warning">`` spans.
    """

    content: str


@dataclass(frozen=True)
class Image:
    """Image message.

    ``md5`` must be the hex digest of the raw bytes that ``base64`` encodes,
    otherwise the server rejects the message. This is not checked locally;
    use :meth:`from_bytes` or :meth:`from_file` to build a consistent pair.
    """

    base64: str
    md5: str

    @classmethod
    def from_bytes(cls, data: bytes) -> Image:
        """Build an image message from raw image bytes."""
        return cls(
            base64=base64.b64encode(data).decode("ascii"),
            md5=hashlib.md5(data).hexdigest(),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> Image:
        """Build an image message from an image file on disk.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        image_path = Path(path)
        if not image_path.is_file():
            raise FileNotFoundError(f"Image file not found: {image_path}")
        return cls.from_bytes(image_path.read_bytes())


@dataclass(frozen=True)
class NewsArticle:
    """A single article card inside a news message."""

    title: str
    description: str
    url: str
    pic_url: str


@dataclass(frozen=True)
class News:
    """News message made of one or more article cards."""

    articles: Sequence[NewsArticle]

    def __post_init__(self) -> None:
        object.__setattr__(self, "articles", tuple(self.articles))


@dataclass(frozen=True)
class TextMessage:
    """Envelope for a :class:`Text` payload."""

    text: Text
    msgtype: ClassVar[MessageType] = MessageType.TEXT


@dataclass(frozen=True)
class MarkdownMessage:
    """Envelope for a :class:`Markdown` payload."""

    markdown: Markdown
    msgtype: ClassVar[MessageType] = MessageType.MARKDOWN


@dataclass(frozen=True)
class ImageMessage:
    """Envelope for an :class:`Image` payload."""

    image: Image
    msgtype: ClassVar[MessageType] = MessageType.IMAGE


@dataclass(frozen=True)
class NewsMessage:
    """Envelope for a :class:`News` payload."""

    news: News
    msgtype: ClassVar[MessageType] = MessageType.NEWS


Payload = Text | Markdown | Image | News
Envelope = TextMessage | MarkdownMessage | ImageMessage | NewsMessage
Message = Payload | Envelope
