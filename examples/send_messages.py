#!/usr/bin/env python3
"""Message Sending Example.

This example sends one message of every supported kind:
- Text with @mentions
- Markdown with colored spans
- Image from a file
- News article card

Set WXWORK_BOT_KEY (or put it in a .env file) before running. Pass an image
path as the first argument to also send an image.
"""

import sys

from wxwork_bot import (
    BotConfig,
    Markdown,
    NewsArticle,
    Text,
    WxWorkBot,
    WxWorkBotError,
    get_logger,
    setup_logging,
)

config = BotConfig()
setup_logging(config.logging)
logger = get_logger(__name__)


def main() -> int:
    try:
        webhook = config.get_webhook_config()
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    with WxWorkBot.from_config(webhook) as bot:
        try:
            bot.send(
                Text(
                    content="广州今日天气：29度，大部分多云，降雨概率：60%",
                    mentioned_list=["@all"],
                )
            )
            bot.send(
                Markdown(
                    content=(
                        '实时新增用户反馈<font color="warning">132例</font>，请相关同事注意。\n'
                        '> 类型:<font color="comment">用户反馈</font>'
                    )
                )
            )
            if len(sys.argv) > 1:
                bot.send_image_file(sys.argv[1])
            bot.send_news(
                [
                    NewsArticle(
                        title="中秋节礼品领取",
                        description="今年中秋节公司有豪礼相送",
                        url="https://work.weixin.qq.com/",
                        pic_url="http://res.mail.qq.com/node/ww/wwopenmng/images/independent/doc/test_pic_msg1.png",
                    )
                ]
            )
        except WxWorkBotError as exc:
            logger.error("Sending failed: %s", exc)
            return 1

    logger.info("All messages sent")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
