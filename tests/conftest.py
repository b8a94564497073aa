"""Shared fixtures: sample messages of every kind and the live webhook key."""

import os

import pytest

from wxwork_bot.core.messages import Image, Markdown, News, NewsArticle, Text


@pytest.fixture
def live_bot_key():
    """Webhook key for live tests; skips when WXWORK_BOT_KEY is unset."""
    key = os.environ.get("WXWORK_BOT_KEY")
    if not key:
        pytest.skip("WXWORK_BOT_KEY not set")
    return key


@pytest.fixture
def text():
    return Text(
        content="广州今日天气：29度，大部分多云，降雨概率：60%",
        mentioned_list=["wangqing", "@all"],
        mentioned_mobile_list=["13800001111", "@all"],
    )


@pytest.fixture
def markdown():
    return Markdown(content='<font color="warning">233</font>')


@pytest.fixture
def image():
    return Image(base64="DATA", md5="MD5")


@pytest.fixture
def news():
    return News(
        articles=[
            NewsArticle(
                title="中秋节礼品领取",
                description="今年中秋节公司有豪礼相送",
                url="URL",
                pic_url="http://res.mail.qq.com/node/ww/wwopenmng/images/independent/doc/test_pic_msg1.png",
            )
        ]
    )
