"""
Channel registry - the list of channels newsletters are sent to.
"""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from newsroom.exceptions import NotFoundError
from newsroom.models.channel import Channel
from newsroom.repositories.channel_repository import ChannelRepository

logger = logging.getLogger(__name__)


class ChannelRegistry:
    """
    Service for newsletter channel management.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.repo = ChannelRepository(session)

    async def add(self, channel_id: str) -> Channel:
        """Register a channel by its numeric id."""
        channel = await self.repo.create_channel(channel_id)
        logger.info(f"Added newsletter channel {channel.id} ({channel_id})")
        return channel

    async def remove(self, channel_pk: int) -> None:
        """
        Remove a channel.

        Raises:
            NotFoundError: No channel with that id
        """
        deleted = await self.repo.delete_channel(channel_pk)
        if not deleted:
            raise NotFoundError(f"Channel {channel_pk} not found")
        logger.info(f"Removed newsletter channel {channel_pk}")

    async def list(self) -> Sequence[Channel]:
        """Get all channels in registration order."""
        return await self.repo.get_all_channels()
