"""
Telegram transport.

Sends newsletter messages through the Bot API using python-telegram-bot.
"""

import logging

from telegram import Bot, InlineKeyboardButton, InlineKeyboardMarkup

from newsroom.adapters.base import ChannelTransport

logger = logging.getLogger(__name__)


class TelegramTransport(ChannelTransport):
    """Telegram transport implementation."""

    def __init__(self, token: str) -> None:
        self.token = token
        self.bot: Bot | None = None

    @property
    def platform_name(self) -> str:
        return "telegram"

    async def start(self) -> None:
        """Initialize the Bot API client."""
        if self.bot is not None:
            return
        self.bot = Bot(self.token)
        await self.bot.initialize()
        logger.info("Telegram transport started")

    async def stop(self) -> None:
        """Shut down the Bot API client."""
        if self.bot is None:
            return
        await self.bot.shutdown()
        self.bot = None
        logger.info("Telegram transport stopped")

    async def send(
        self,
        destination: str,
        text: str,
        action_label: str,
        action_url: str,
        format_mode: str,
    ) -> None:
        """Send a message with one inline URL button to a Telegram chat."""
        if self.bot is None:
            raise RuntimeError("Telegram transport is not started")

        keyboard = InlineKeyboardMarkup(
            [[InlineKeyboardButton(action_label, url=action_url)]]
        )
        await self.bot.send_message(
            chat_id=destination,
            text=text,
            parse_mode=format_mode,
            reply_markup=keyboard,
        )
